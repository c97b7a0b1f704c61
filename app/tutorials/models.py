from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    JSON,
    String,
    Text,
    UniqueConstraint,
)

from app.db.base import Base, utcnow

DIFFICULTIES = ("beginner", "intermediate", "advanced")
MODERATION_STATUSES = ("approved", "rejected")


class Tutorial(Base):
    __tablename__ = "tutorials"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=False)
    content = Column(Text, nullable=False)

    # e.g. ["react", "typescript"]
    tech_stack = Column(JSON, nullable=False, default=list)
    difficulty = Column(Enum(*DIFFICULTIES, name="difficulty"), nullable=False)
    estimated_time = Column(Integer, nullable=False)  # minutes
    thumbnail_url = Column(String, nullable=True)
    is_pro = Column(Boolean, nullable=False, default=False)

    # Denormalized from user_likes / view hits
    likes_count = Column(Integer, nullable=False, default=0)
    views_count = Column(Integer, nullable=False, default=0)

    moderation_status = Column(
        Enum(*MODERATION_STATUSES, name="moderation_status"),
        nullable=False,
        default="approved",
    )

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)


class UserLike(Base):
    __tablename__ = "user_likes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    tutorial_id = Column(Integer, ForeignKey("tutorials.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        UniqueConstraint("user_id", "tutorial_id", name="uq_user_like_user_tutorial"),
    )
