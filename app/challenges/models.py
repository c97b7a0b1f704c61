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
    true,
)

from app.db.base import Base, utcnow

CHALLENGE_TYPES = ("tutorial", "quiz", "project")


class Challenge(Base):
    __tablename__ = "challenges"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    type = Column(Enum(*CHALLENGE_TYPES, name="challenge_type"), nullable=False)
    points_reward = Column(Integer, nullable=False)

    tutorial_id = Column(Integer, ForeignKey("tutorials.id"), nullable=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True)

    # Opaque quiz payload, passed through as-is
    quiz_data = Column(JSON, nullable=True)

    # Participation window (naive UTC, inclusive on both ends)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)


# ======================================================
# POINTS LEDGER (one row per participation)
# ======================================================
class UserPoints(Base):
    __tablename__ = "user_points"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    challenge_id = Column(Integer, ForeignKey("challenges.id"), nullable=False)

    # Copied from challenge.points_reward at participation time
    points_earned = Column(Integer, nullable=False)
    earned_at = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        UniqueConstraint("user_id", "challenge_id", name="uq_user_points_user_challenge"),
    )


class Certificate(Base):
    __tablename__ = "certificates"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    challenge_id = Column(Integer, ForeignKey("challenges.id"), nullable=False)
    certificate_url = Column(String, nullable=False)
    issued_at = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        UniqueConstraint("user_id", "challenge_id", name="uq_certificate_user_challenge"),
    )
