"""
Roadmaps and per-user progress.

Progress is an upsert: a user holds at most one row per tutorial and one per
roadmap, and an update rewrites the row matching any id it names instead of
adding rows.
"""
import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.auth.handlers import require_user
from app.core.errors import ValidationError
from app.db.session import atomic
from app.roadmaps.models import Roadmap, UserProgress

logger = logging.getLogger(__name__)


def create_roadmap(db: Session, title: str, description: str, category: str, nodes: List[dict]) -> Roadmap:
    roadmap = Roadmap(
        title=title,
        description=description,
        category=category,
        nodes=list(nodes),
    )
    with atomic(db):
        db.add(roadmap)
    db.refresh(roadmap)
    logger.info("[ROADMAP] created id=%s nodes=%s", roadmap.id, len(roadmap.nodes))
    return roadmap


def get_roadmaps(db: Session) -> List[Roadmap]:
    return db.query(Roadmap).order_by(Roadmap.id.asc()).all()


def get_roadmap_by_id(db: Session, roadmap_id: int) -> Optional[Roadmap]:
    return db.get(Roadmap, roadmap_id)


def update_user_progress(
    db: Session,
    user_id: int,
    progress_percentage: float,
    tutorial_id: Optional[int] = None,
    roadmap_id: Optional[int] = None,
    completed_nodes: Optional[List[str]] = None,
) -> UserProgress:
    require_user(db, user_id)
    if tutorial_id is None and roadmap_id is None:
        raise ValidationError("Either tutorial_id or roadmap_id is required")
    if not 0 <= progress_percentage <= 100:
        raise ValidationError("progress_percentage must be between 0 and 100")

    nodes = list(completed_nodes or [])

    keys = []
    if tutorial_id is not None:
        keys.append(UserProgress.tutorial_id == tutorial_id)
    if roadmap_id is not None:
        keys.append(UserProgress.roadmap_id == roadmap_id)

    matches = (
        db.query(UserProgress)
        .filter(UserProgress.user_id == user_id, or_(*keys))
        .order_by(UserProgress.id.asc())
        .all()
    )
    progress = matches[0] if matches else None

    with atomic(db):
        if progress:
            progress.progress_percentage = progress_percentage
            progress.completed_nodes = nodes
            # A lone match can take the id it lacks; no other row holds that key.
            if len(matches) == 1:
                if progress.tutorial_id is None and tutorial_id is not None:
                    progress.tutorial_id = tutorial_id
                if progress.roadmap_id is None and roadmap_id is not None:
                    progress.roadmap_id = roadmap_id
        else:
            progress = UserProgress(
                user_id=user_id,
                tutorial_id=tutorial_id,
                roadmap_id=roadmap_id,
                progress_percentage=progress_percentage,
                completed_nodes=nodes,
            )
            db.add(progress)

    db.refresh(progress)
    logger.info(
        "[PROGRESS] user=%s tutorial=%s roadmap=%s pct=%s",
        user_id, tutorial_id, roadmap_id, progress_percentage,
    )
    return progress


def get_user_progress(db: Session, user_id: int) -> List[UserProgress]:
    require_user(db, user_id)
    return (
        db.query(UserProgress)
        .filter(UserProgress.user_id == user_id)
        .order_by(UserProgress.updated_at.desc(), UserProgress.id.desc())
        .all()
    )
