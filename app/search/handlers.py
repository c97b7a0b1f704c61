from typing import Optional

from sqlalchemy.orm import Session

from app.projects.handlers import search_projects
from app.resources.handlers import search_resources
from app.search.schemas import SearchFilters
from app.tutorials.handlers import search_tutorials


def search(db: Session, query: str, type: str = "all", filters: Optional[SearchFilters] = None) -> dict:
    """Run the per-collection searches selected by ``type``; unselected ones come back empty."""
    wanted = {"tutorials", "projects", "resources"} if type == "all" else {type}
    return {
        "tutorials": search_tutorials(db, query, type, filters) if "tutorials" in wanted else [],
        "projects": search_projects(db, query, type, filters) if "projects" in wanted else [],
        "resources": search_resources(db, query, type, filters) if "resources" in wanted else [],
    }
