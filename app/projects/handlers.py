import logging
from typing import List, Optional

from sqlalchemy import and_, desc
from sqlalchemy.orm import Session

from app.auth.handlers import require_user
from app.core.config import DOWNLOAD_BASE_URL
from app.core.errors import NotFoundError
from app.core.text import slugify
from app.db.session import atomic
from app.projects.models import Project
from app.resources.models import UserDownload
from app.search.filters import contains_ci, tech_stack_any
from app.search.schemas import SearchFilters

logger = logging.getLogger(__name__)

FEATURED_LIMIT = 6


def _visible(db: Session):
    return db.query(Project).filter(Project.moderation_status == "approved")


def _newest_first(query):
    return query.order_by(desc(Project.created_at), desc(Project.id))


def project_download_url(project_id: int) -> str:
    return f"{DOWNLOAD_BASE_URL}/project-{project_id}.zip"


def create_project(
    db: Session,
    title: str,
    description: str,
    tech_stack: List[str],
    difficulty: str,
    preview_image_url: Optional[str] = None,
    demo_url: Optional[str] = None,
    github_url: Optional[str] = None,
    guide_pdf_url: Optional[str] = None,
    is_pro: bool = False,
) -> Project:
    project = Project(
        title=title,
        slug=slugify(title),
        description=description,
        tech_stack=list(tech_stack),
        difficulty=difficulty,
        preview_image_url=preview_image_url,
        demo_url=demo_url,
        github_url=github_url,
        guide_pdf_url=guide_pdf_url,
        is_pro=is_pro,
    )
    with atomic(db):
        db.add(project)
    db.refresh(project)
    logger.info("[PROJECT] created id=%s slug=%s", project.id, project.slug)
    return project


def get_projects(db: Session) -> List[Project]:
    return _newest_first(_visible(db)).all()


def get_project_by_slug(db: Session, slug: str) -> Optional[Project]:
    return _visible(db).filter(Project.slug == slug).first()


def download_project(db: Session, project_id: int, user_id: int) -> dict:
    """Log the download, bump download_count, hand back the archive URL."""
    project = _visible(db).filter(Project.id == project_id).first()
    if not project:
        raise NotFoundError("Project", project_id)
    require_user(db, user_id)

    with atomic(db):
        db.add(UserDownload(user_id=user_id, project_id=project_id))
        db.query(Project).filter(Project.id == project_id).update(
            {Project.download_count: Project.download_count + 1},
            synchronize_session=False,
        )

    logger.info("[PROJECT] download project=%s user=%s", project_id, user_id)
    return {"downloadUrl": project_download_url(project_id)}


def search_projects(
    db: Session,
    query: str,
    type: str = "all",
    filters: Optional[SearchFilters] = None,
) -> List[Project]:
    """Title substring match; every tech_stack term is ORed, not just the first."""
    conditions = []

    if query:
        conditions.append(contains_ci(Project.title, query))

    if filters:
        if filters.difficulty:
            conditions.append(Project.difficulty == filters.difficulty)
        if filters.is_pro is not None:
            conditions.append(Project.is_pro == filters.is_pro)
        if filters.tech_stack:
            tech = tech_stack_any(Project.tech_stack, filters.tech_stack)
            if tech is not None:
                conditions.append(tech)

    q = _visible(db)
    if conditions:
        q = q.filter(and_(*conditions))
    return _newest_first(q).all()


def get_featured_projects(db: Session) -> List[Project]:
    return (
        _visible(db)
        .order_by(desc(Project.download_count), desc(Project.created_at), desc(Project.id))
        .limit(FEATURED_LIMIT)
        .all()
    )
