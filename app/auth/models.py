from sqlalchemy import Column, Integer, String, Date, DateTime, Enum

from app.db.base import Base, utcnow

SUBSCRIPTION_PLANS = ("free", "pro")


def _today():
    return utcnow().date()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    full_name = Column(String, nullable=False)
    avatar_url = Column(String, nullable=True)

    # "free" | "pro"; a pro plan with a past expiry still reads as "pro"
    subscription_plan = Column(
        Enum(*SUBSCRIPTION_PLANS, name="subscription_plan"),
        nullable=False,
        default="free",
    )
    # NULL on a pro plan means lifetime access
    subscription_expires_at = Column(DateTime, nullable=True)

    ai_queries_used_today = Column(Integer, nullable=False, default=0)
    # UTC day the counter above belongs to; older days read as zero
    ai_queries_reset_on = Column(Date, nullable=False, default=_today)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
