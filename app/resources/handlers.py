import logging
from typing import List, Optional

from sqlalchemy import and_, desc
from sqlalchemy.orm import Session

from app.auth.handlers import require_user
from app.core.errors import NotFoundError
from app.db.session import atomic
from app.resources.models import Resource, UserDownload
from app.search.filters import contains_ci
from app.search.schemas import SearchFilters

logger = logging.getLogger(__name__)


def _visible(db: Session):
    return db.query(Resource).filter(Resource.moderation_status == "approved")


def _newest_first(query):
    return query.order_by(desc(Resource.created_at), desc(Resource.id))


def create_resource(
    db: Session,
    title: str,
    description: str,
    category: str,
    file_url: str,
    file_size: int,
    file_type: str,
    thumbnail_url: Optional[str] = None,
    is_pro: bool = False,
) -> Resource:
    resource = Resource(
        title=title,
        description=description,
        category=category.strip(),
        file_url=file_url,
        file_size=file_size,
        file_type=file_type,
        thumbnail_url=thumbnail_url,
        is_pro=is_pro,
    )
    with atomic(db):
        db.add(resource)
    db.refresh(resource)
    logger.info("[RESOURCE] created id=%s category=%s", resource.id, resource.category)
    return resource


def get_resources(db: Session) -> List[Resource]:
    return _newest_first(_visible(db)).all()


def get_resources_by_category(db: Session, category: str) -> List[Resource]:
    return _newest_first(_visible(db).filter(Resource.category == category.strip())).all()


def download_resource(db: Session, resource_id: int, user_id: int) -> dict:
    resource = _visible(db).filter(Resource.id == resource_id).first()
    if not resource:
        raise NotFoundError("Resource", resource_id)
    require_user(db, user_id)

    with atomic(db):
        db.add(UserDownload(user_id=user_id, resource_id=resource_id))
        db.query(Resource).filter(Resource.id == resource_id).update(
            {Resource.download_count: Resource.download_count + 1},
            synchronize_session=False,
        )

    logger.info("[RESOURCE] download resource=%s user=%s", resource_id, user_id)
    return {"downloadUrl": resource.file_url}


def search_resources(
    db: Session,
    query: str,
    type: str = "all",
    filters: Optional[SearchFilters] = None,
) -> List[Resource]:
    """Title substring match; only the is_pro filter applies to resources."""
    conditions = []
    if query:
        conditions.append(contains_ci(Resource.title, query))
    if filters and filters.is_pro is not None:
        conditions.append(Resource.is_pro == filters.is_pro)

    q = _visible(db)
    if conditions:
        q = q.filter(and_(*conditions))
    return _newest_first(q).all()
