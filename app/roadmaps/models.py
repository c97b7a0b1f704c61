from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, JSON, String, Text, UniqueConstraint

from app.db.base import Base, utcnow


class Roadmap(Base):
    __tablename__ = "roadmaps"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False)

    # Ordered list of {id, title, description, tutorial_id, project_id, position{x, y}}
    nodes = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)


class UserProgress(Base):
    """
    Completion state of one user on one tutorial or one roadmap.
    Written only through an upsert; one row per (user, tutorial) and per (user, roadmap).
    """
    __tablename__ = "user_progress"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    tutorial_id = Column(Integer, ForeignKey("tutorials.id"), nullable=True)
    roadmap_id = Column(Integer, ForeignKey("roadmaps.id"), nullable=True)

    progress_percentage = Column(Float, nullable=False, default=0)
    completed_nodes = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        UniqueConstraint("user_id", "tutorial_id", name="uq_progress_user_tutorial"),
        UniqueConstraint("user_id", "roadmap_id", name="uq_progress_user_roadmap"),
    )
