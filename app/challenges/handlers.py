"""
Challenges, points ledger, leaderboard and certificates.

Participation per (user, challenge) goes one way: not participated ->
participated with points recorded. The UserPoints row copies the reward at
that instant, so later edits to a challenge never change earned points.
The unique constraint on (user_id, challenge_id) backs the at-most-once rule
for concurrent requests.
"""
import logging
from datetime import datetime, timedelta
from typing import Any, List, Optional

from sqlalchemy import case, desc, func
from sqlalchemy.orm import Session

from app.auth.handlers import require_user
from app.auth.models import User
from app.challenges.badges import badges_for
from app.challenges.models import Certificate, Challenge, UserPoints
from app.core.config import CERTIFICATE_BASE_URL
from app.core.errors import ConflictError, NotFoundError, StorageConstraintError
from app.db.base import utcnow
from app.db.session import atomic
from app.projects.models import Project
from app.tutorials.models import Tutorial

logger = logging.getLogger(__name__)

LEADERBOARD_LIMIT = 100
WEEKLY_WINDOW = timedelta(days=7)


def certificate_url(challenge_id: int, user_id: int) -> str:
    return f"{CERTIFICATE_BASE_URL}/challenge-{challenge_id}-user-{user_id}.pdf"


def require_challenge(db: Session, challenge_id: int) -> Challenge:
    challenge = db.get(Challenge, challenge_id)
    if not challenge:
        raise NotFoundError("Challenge", challenge_id)
    return challenge


def is_open(challenge: Challenge, now: Optional[datetime] = None) -> bool:
    now = now or utcnow()
    return bool(challenge.is_active) and challenge.start_date <= now <= challenge.end_date


def create_challenge(
    db: Session,
    title: str,
    description: str,
    type: str,
    points_reward: int,
    start_date: datetime,
    end_date: datetime,
    tutorial_id: Optional[int] = None,
    project_id: Optional[int] = None,
    quiz_data: Any = None,
) -> Challenge:
    if tutorial_id is not None and not db.get(Tutorial, tutorial_id):
        raise NotFoundError("Tutorial", tutorial_id, message=f"Tutorial with id {tutorial_id} does not exist")
    if project_id is not None and not db.get(Project, project_id):
        raise NotFoundError("Project", project_id, message=f"Project with id {project_id} does not exist")

    challenge = Challenge(
        title=title,
        description=description,
        type=type,
        points_reward=points_reward,
        tutorial_id=tutorial_id,
        project_id=project_id,
        quiz_data=quiz_data,
        start_date=start_date,
        end_date=end_date,
        is_active=True,
    )
    with atomic(db):
        db.add(challenge)
    db.refresh(challenge)
    logger.info("[CHALLENGE] created id=%s type=%s reward=%s", challenge.id, type, points_reward)
    return challenge


def get_active_challenges(db: Session) -> List[Challenge]:
    now = utcnow()
    return (
        db.query(Challenge)
        .filter(
            Challenge.is_active.is_(True),
            Challenge.start_date <= now,
            Challenge.end_date >= now,
        )
        .order_by(desc(Challenge.created_at), desc(Challenge.id))
        .all()
    )


def participate_in_challenge(db: Session, user_id: int, challenge_id: int) -> dict:
    require_user(db, user_id)
    challenge = require_challenge(db, challenge_id)

    if not is_open(challenge):
        logger.warning("[CHALLENGE] participation rejected, challenge=%s not open", challenge_id)
        raise ConflictError("Challenge is not currently active", details={"challenge_id": challenge_id})

    already = db.query(UserPoints).filter_by(user_id=user_id, challenge_id=challenge_id).first()
    if already:
        logger.warning("[CHALLENGE] duplicate participation user=%s challenge=%s", user_id, challenge_id)
        raise ConflictError(
            "User has already participated in this challenge",
            details={"user_id": user_id, "challenge_id": challenge_id},
        )

    points = challenge.points_reward
    try:
        with atomic(db):
            db.add(UserPoints(user_id=user_id, challenge_id=challenge_id, points_earned=points))
    except StorageConstraintError as exc:
        raise ConflictError(
            "User has already participated in this challenge",
            details={"user_id": user_id, "challenge_id": challenge_id},
        ) from exc

    logger.info("[CHALLENGE] user=%s challenge=%s earned=%s", user_id, challenge_id, points)
    return {"success": True, "pointsEarned": points}


def _weekly_sum(cutoff: datetime):
    return func.coalesce(
        func.sum(case((UserPoints.earned_at >= cutoff, UserPoints.points_earned), else_=0)),
        0,
    )


def get_leaderboard(db: Session) -> List[dict]:
    """Users with points, highest total first; rank is the 1-based position."""
    cutoff = utcnow() - WEEKLY_WINDOW
    total = func.sum(UserPoints.points_earned)

    rows = (
        db.query(
            User.id,
            User.full_name,
            User.avatar_url,
            total.label("total_points"),
            _weekly_sum(cutoff).label("weekly_points"),
            func.max(UserPoints.earned_at).label("updated_at"),
        )
        .join(UserPoints, UserPoints.user_id == User.id)
        .group_by(User.id, User.full_name, User.avatar_url)
        .having(total > 0)
        .order_by(desc(total), User.id)
        .limit(LEADERBOARD_LIMIT)
        .all()
    )

    entries = []
    for position, row in enumerate(rows, start=1):
        total_points = int(row.total_points or 0)
        entries.append({
            "id": row.id,
            "user_id": row.id,
            "user_name": row.full_name,
            "user_avatar": row.avatar_url,
            "total_points": total_points,
            "weekly_points": int(row.weekly_points or 0),
            "rank": position,
            "badges": badges_for(total_points),
            "updated_at": row.updated_at,
        })
    return entries


def get_user_rank(db: Session, user_id: int) -> dict:
    """Rank = 1 + number of users with a strictly higher total."""
    require_user(db, user_id)
    cutoff = utcnow() - WEEKLY_WINDOW

    mine = (
        db.query(
            func.coalesce(func.sum(UserPoints.points_earned), 0),
            _weekly_sum(cutoff),
        )
        .filter(UserPoints.user_id == user_id)
        .one()
    )
    total_points, weekly_points = int(mine[0] or 0), int(mine[1] or 0)

    totals = (
        db.query(UserPoints.user_id, func.sum(UserPoints.points_earned).label("total"))
        .group_by(UserPoints.user_id)
        .subquery()
    )
    ahead = db.query(func.count()).select_from(totals).filter(totals.c.total > total_points).scalar()

    return {"rank": int(ahead or 0) + 1, "totalPoints": total_points, "weeklyPoints": weekly_points}


def issue_certificate(db: Session, user_id: int, challenge_id: int) -> Certificate:
    """Issue once per (user, challenge); later calls return the same row."""
    require_user(db, user_id)
    require_challenge(db, challenge_id)

    existing = db.query(Certificate).filter_by(user_id=user_id, challenge_id=challenge_id).first()
    if existing:
        return existing

    participated = db.query(UserPoints).filter_by(user_id=user_id, challenge_id=challenge_id).first()
    if not participated:
        logger.warning("[CHALLENGE] certificate refused user=%s challenge=%s", user_id, challenge_id)
        raise ConflictError(
            "User has not participated in this challenge",
            details={"user_id": user_id, "challenge_id": challenge_id},
        )

    certificate = Certificate(
        user_id=user_id,
        challenge_id=challenge_id,
        certificate_url=certificate_url(challenge_id, user_id),
    )
    try:
        with atomic(db):
            db.add(certificate)
    except StorageConstraintError:
        # Issued concurrently; return the winner's row
        return db.query(Certificate).filter_by(user_id=user_id, challenge_id=challenge_id).one()

    db.refresh(certificate)
    logger.info("[CHALLENGE] certificate issued id=%s user=%s challenge=%s", certificate.id, user_id, challenge_id)
    return certificate


def get_user_certificates(db: Session, user_id: int) -> List[Certificate]:
    return (
        db.query(Certificate)
        .filter(Certificate.user_id == user_id)
        .order_by(desc(Certificate.issued_at), desc(Certificate.id))
        .all()
    )
