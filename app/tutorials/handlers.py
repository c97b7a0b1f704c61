"""
Tutorial catalogue: create, list, view counting, like toggling, search.
"""
import logging
from typing import List, Optional

from sqlalchemy import and_, desc, or_
from sqlalchemy.orm import Session

from app.auth.handlers import require_user
from app.core.errors import NotFoundError
from app.core.text import slugify
from app.db.session import atomic
from app.search.filters import contains_ci, tech_stack_any
from app.search.schemas import SearchFilters
from app.tutorials.models import Tutorial, UserLike

logger = logging.getLogger(__name__)

FEATURED_LIMIT = 6


def _visible(db: Session):
    return db.query(Tutorial).filter(Tutorial.moderation_status == "approved")


def _newest_first(query):
    return query.order_by(desc(Tutorial.created_at), desc(Tutorial.id))


def create_tutorial(
    db: Session,
    title: str,
    description: str,
    content: str,
    tech_stack: List[str],
    difficulty: str,
    estimated_time: int,
    thumbnail_url: Optional[str] = None,
    is_pro: bool = False,
) -> Tutorial:
    tutorial = Tutorial(
        title=title,
        slug=slugify(title),
        description=description,
        content=content,
        tech_stack=list(tech_stack),
        difficulty=difficulty,
        estimated_time=estimated_time,
        thumbnail_url=thumbnail_url,
        is_pro=is_pro,
    )
    # A slug collision surfaces as StorageConstraintError
    with atomic(db):
        db.add(tutorial)
    db.refresh(tutorial)
    logger.info("[TUTORIAL] created id=%s slug=%s", tutorial.id, tutorial.slug)
    return tutorial


def get_tutorials(db: Session) -> List[Tutorial]:
    return _newest_first(_visible(db)).all()


def get_tutorial_by_slug(db: Session, slug: str) -> Optional[Tutorial]:
    """Fetch a tutorial and count the view. Every call counts."""
    tutorial = _visible(db).filter(Tutorial.slug == slug).first()
    if not tutorial:
        return None

    with atomic(db):
        db.query(Tutorial).filter(Tutorial.id == tutorial.id).update(
            {Tutorial.views_count: Tutorial.views_count + 1},
            synchronize_session=False,
        )
    db.refresh(tutorial)
    return tutorial


def like_tutorial(db: Session, tutorial_id: int, user_id: int) -> dict:
    """
    Toggle the user's like on a tutorial.

    The like row and the denormalized likes_count change in one transaction;
    the returned count is read after the change.
    """
    tutorial = _visible(db).filter(Tutorial.id == tutorial_id).first()
    if not tutorial:
        raise NotFoundError("Tutorial", tutorial_id)
    require_user(db, user_id)

    existing = db.query(UserLike).filter_by(user_id=user_id, tutorial_id=tutorial_id).first()

    with atomic(db):
        if existing:
            db.delete(existing)
            db.query(Tutorial).filter(Tutorial.id == tutorial_id, Tutorial.likes_count > 0).update(
                {Tutorial.likes_count: Tutorial.likes_count - 1},
                synchronize_session=False,
            )
            liked = False
        else:
            db.add(UserLike(user_id=user_id, tutorial_id=tutorial_id))
            db.query(Tutorial).filter(Tutorial.id == tutorial_id).update(
                {Tutorial.likes_count: Tutorial.likes_count + 1},
                synchronize_session=False,
            )
            liked = True

    db.refresh(tutorial)
    logger.info("[TUTORIAL] like toggle tutorial=%s user=%s liked=%s", tutorial_id, user_id, liked)
    return {"liked": liked, "likesCount": tutorial.likes_count}


def search_tutorials(
    db: Session,
    query: str,
    type: str = "all",
    filters: Optional[SearchFilters] = None,
) -> List[Tutorial]:
    """Substring match on title, description or content, ANDed with the filters."""
    conditions = []

    if query:
        conditions.append(
            or_(
                contains_ci(Tutorial.title, query),
                contains_ci(Tutorial.description, query),
                contains_ci(Tutorial.content, query),
            )
        )

    if filters:
        if filters.difficulty:
            conditions.append(Tutorial.difficulty == filters.difficulty)
        if filters.tech_stack:
            tech = tech_stack_any(Tutorial.tech_stack, filters.tech_stack)
            if tech is not None:
                conditions.append(tech)
        if filters.is_pro is not None:
            conditions.append(Tutorial.is_pro == filters.is_pro)

    q = _visible(db)
    if conditions:
        q = q.filter(and_(*conditions))
    return _newest_first(q).all()


def get_featured_tutorials(db: Session) -> List[Tutorial]:
    """Top tutorials by views + likes, newest first on ties."""
    return (
        _visible(db)
        .order_by(
            desc(Tutorial.views_count + Tutorial.likes_count),
            desc(Tutorial.created_at),
            desc(Tutorial.id),
        )
        .limit(FEATURED_LIMIT)
        .all()
    )
