from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, JSON, String, Text

from app.db.base import Base, utcnow
from app.tutorials.models import DIFFICULTIES, MODERATION_STATUSES


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=False)

    tech_stack = Column(JSON, nullable=False, default=list)
    difficulty = Column(Enum(*DIFFICULTIES, name="difficulty"), nullable=False)

    preview_image_url = Column(String, nullable=True)
    demo_url = Column(String, nullable=True)
    github_url = Column(String, nullable=True)
    guide_pdf_url = Column(String, nullable=True)

    is_pro = Column(Boolean, nullable=False, default=False)
    download_count = Column(Integer, nullable=False, default=0)

    moderation_status = Column(
        Enum(*MODERATION_STATUSES, name="moderation_status"),
        nullable=False,
        default="approved",
    )

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
