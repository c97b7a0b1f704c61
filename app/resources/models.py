from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String, Text

from app.db.base import Base, utcnow
from app.tutorials.models import MODERATION_STATUSES


class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False, index=True)

    file_url = Column(String, nullable=False)
    file_size = Column(Integer, nullable=False)  # bytes
    file_type = Column(String, nullable=False)  # MIME type
    thumbnail_url = Column(String, nullable=True)

    is_pro = Column(Boolean, nullable=False, default=False)
    download_count = Column(Integer, nullable=False, default=0)

    moderation_status = Column(
        Enum(*MODERATION_STATUSES, name="moderation_status"),
        nullable=False,
        default="approved",
    )

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)


# ======================================================
# DOWNLOAD LOG (resources and projects)
# ======================================================
class UserDownload(Base):
    """Append-only: one row per download of a resource or a project."""

    __tablename__ = "user_downloads"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Exactly one of these is set
    resource_id = Column(Integer, ForeignKey("resources.id"), nullable=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True)

    downloaded_at = Column(DateTime, nullable=False, default=utcnow)
