"""
Admin operations: manual pro grants, content moderation, detailed analytics.

revenueData is an estimate, not booked revenue: no payment gateway exists, so
each month counts pro users registered by month end at PRO_MONTHLY_PRICE.
"""
import logging
from datetime import datetime, time, timedelta

from dateutil.relativedelta import relativedelta
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.auth.handlers import require_user
from app.auth.models import User
from app.challenges.models import Challenge
from app.core.config import PRO_MONTHLY_PRICE
from app.core.errors import NotFoundError, ValidationError
from app.dashboard.handlers import get_analytics
from app.db.base import utcnow
from app.db.session import atomic
from app.projects.models import Project
from app.resources.models import Resource
from app.subscriptions.handlers import set_free, set_pro
from app.tutorials.models import Tutorial

logger = logging.getLogger(__name__)

GROWTH_DAYS = 30
REVENUE_MONTHS = 6

MODERATED_MODELS = {
    "tutorial": Tutorial,
    "project": Project,
    "resource": Resource,
}
STATUS_BY_ACTION = {
    "approve": "approved",
    "reject": "rejected",
}


def grant_pro_access(db: Session, user_id: int, days: int) -> dict:
    if days <= 0:
        raise ValidationError("days must be positive", details={"days": days})
    user = require_user(db, user_id)
    set_pro(db, user, utcnow() + timedelta(days=days))
    logger.info("[ADMIN] granted pro user=%s days=%s", user_id, days)
    return {"success": True}


def revoke_pro_access(db: Session, user_id: int) -> dict:
    user = require_user(db, user_id)
    set_free(db, user)
    logger.info("[ADMIN] revoked pro user=%s", user_id)
    return {"success": True}


def moderate_content(db: Session, content_id: int, content_type: str, action: str) -> dict:
    model = MODERATED_MODELS.get(content_type)
    if model is None:
        raise ValidationError(f"Unknown content type: {content_type}")
    status = STATUS_BY_ACTION.get(action)
    if status is None:
        raise ValidationError(f"Unknown moderation action: {action}")

    row = db.get(model, content_id)
    if not row:
        raise NotFoundError(content_type.capitalize(), content_id)

    with atomic(db):
        row.moderation_status = status
        row.updated_at = utcnow()

    logger.info("[ADMIN] moderated %s=%s status=%s", content_type, content_id, status)
    return {"success": True}


def _user_growth(db: Session) -> list:
    """Cumulative user count at the end of each of the last 30 UTC days."""
    today = utcnow().date()
    series = []
    for offset in range(GROWTH_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        day_end = datetime.combine(day + timedelta(days=1), time.min)
        users = db.query(func.count(User.id)).filter(User.created_at < day_end).scalar() or 0
        series.append({"date": day.isoformat(), "users": users})
    return series


def _revenue_data(db: Session) -> list:
    this_month = utcnow().date().replace(day=1)
    series = []
    for offset in range(REVENUE_MONTHS - 1, -1, -1):
        month_start = this_month - relativedelta(months=offset)
        month_end = datetime.combine(month_start + relativedelta(months=1), time.min)
        pro_users = (
            db.query(func.count(User.id))
            .filter(User.subscription_plan == "pro", User.created_at < month_end)
            .scalar()
            or 0
        )
        series.append({"month": month_start.strftime("%B"), "revenue": pro_users * PRO_MONTHLY_PRICE})
    return series


def get_detailed_analytics(db: Session) -> dict:
    analytics = get_analytics(db)
    analytics.update({
        "userGrowth": _user_growth(db),
        "revenueData": _revenue_data(db),
        "contentStats": {
            "totalTutorials": db.query(func.count(Tutorial.id)).scalar() or 0,
            "totalProjects": db.query(func.count(Project.id)).scalar() or 0,
            "totalResources": db.query(func.count(Resource.id)).scalar() or 0,
            "totalChallenges": db.query(func.count(Challenge.id)).scalar() or 0,
        },
    })
    return analytics
