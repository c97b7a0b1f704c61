"""
Per-user dashboard bundle and platform-wide analytics.
"""
from datetime import timedelta
from typing import List

from sqlalchemy import desc, func, or_, select, union
from sqlalchemy.orm import Session

from app.ai.models import ChatMessage
from app.auth.handlers import require_user
from app.auth.models import User
from app.challenges.handlers import get_user_certificates, get_user_rank
from app.challenges.models import UserPoints
from app.db.base import utcnow
from app.projects.models import Project
from app.resources.models import Resource, UserDownload
from app.roadmaps.handlers import get_user_progress
from app.tutorials.models import Tutorial

RECENT_CHAT_WINDOW = timedelta(days=7)
ACTIVE_USER_WINDOW = timedelta(hours=24)
DOWNLOAD_HISTORY_LIMIT = 20
POPULAR_LIMIT = 5


def get_download_history(db: Session, user_id: int) -> List[dict]:
    rows = (
        db.query(UserDownload, Resource.title, Project.title)
        .outerjoin(Resource, UserDownload.resource_id == Resource.id)
        .outerjoin(Project, UserDownload.project_id == Project.id)
        .filter(UserDownload.user_id == user_id)
        .order_by(desc(UserDownload.downloaded_at), desc(UserDownload.id))
        .limit(DOWNLOAD_HISTORY_LIMIT)
        .all()
    )

    history = []
    for download, resource_title, project_title in rows:
        if download.resource_id is not None:
            item_id, title, kind = download.resource_id, resource_title, "resource"
        else:
            item_id, title, kind = download.project_id, project_title, "project"
        history.append({
            "id": item_id,
            "title": title or "",
            "type": kind,
            "downloadedAt": download.downloaded_at,
        })
    return history


def get_dashboard_data(db: Session, user_id: int) -> dict:
    user = require_user(db, user_id)
    since = utcnow() - RECENT_CHAT_WINDOW

    recent_chats = (
        db.query(func.count(ChatMessage.id))
        .filter(ChatMessage.user_id == user_id, ChatMessage.created_at >= since)
        .scalar()
    )

    return {
        "user": user,
        "progress": get_user_progress(db, user_id),
        "recentChatMessages": int(recent_chats or 0),
        "downloadHistory": get_download_history(db, user_id),
        "userRank": get_user_rank(db, user_id),
        "certificates": get_user_certificates(db, user_id),
    }


def _daily_active_users(db: Session) -> int:
    """Distinct users who chatted, downloaded or earned points in the last 24h."""
    since = utcnow() - ACTIVE_USER_WINDOW
    active = union(
        select(ChatMessage.user_id.label("user_id")).where(ChatMessage.created_at >= since),
        select(UserDownload.user_id.label("user_id")).where(UserDownload.downloaded_at >= since),
        select(UserPoints.user_id.label("user_id")).where(UserPoints.earned_at >= since),
    ).subquery()
    return int(db.query(func.count()).select_from(active).scalar() or 0)


def pro_user_filter(now):
    return (User.subscription_plan == "pro") & or_(
        User.subscription_expires_at.is_(None),
        User.subscription_expires_at > now,
    )


def _ai_queries_today(db: Session, today) -> int:
    """Counters still stamped with an earlier day belong to that day."""
    total = (
        db.query(func.coalesce(func.sum(User.ai_queries_used_today), 0))
        .filter(User.ai_queries_reset_on == today)
        .scalar()
    )
    return int(total or 0)


def get_analytics(db: Session) -> dict:
    now = utcnow()

    popular_tutorials = (
        db.query(Tutorial.id, Tutorial.title, Tutorial.views_count)
        .filter(Tutorial.moderation_status == "approved")
        .order_by(desc(Tutorial.views_count), desc(Tutorial.id))
        .limit(POPULAR_LIMIT)
        .all()
    )
    popular_projects = (
        db.query(Project.id, Project.title, Project.download_count)
        .filter(Project.moderation_status == "approved")
        .order_by(desc(Project.download_count), desc(Project.id))
        .limit(POPULAR_LIMIT)
        .all()
    )

    return {
        "total_users": db.query(func.count(User.id)).scalar() or 0,
        "pro_users": db.query(func.count(User.id)).filter(pro_user_filter(now)).scalar() or 0,
        "total_downloads": db.query(func.count(UserDownload.id)).scalar() or 0,
        "total_ai_queries": _ai_queries_today(db, now.date()),
        "daily_active_users": _daily_active_users(db),
        "popular_tutorials": [{"id": t.id, "title": t.title, "views": t.views_count} for t in popular_tutorials],
        "popular_projects": [{"id": p.id, "title": p.title, "downloads": p.download_count} for p in popular_projects],
    }
