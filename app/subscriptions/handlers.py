"""
Subscription lifecycle: free <-> pro(expires_at).

No payment gateway is called; payment_method_id is accepted but never charged.
"""
import logging
import time
from datetime import timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta
from sqlalchemy.orm import Session

from app.auth.handlers import require_user
from app.auth.models import User
from app.core.config import WINNER_PRO_DAYS
from app.db.base import utcnow
from app.db.session import atomic
from app.subscriptions.access import has_pro_access

logger = logging.getLogger(__name__)

DURATIONS = {
    "monthly": relativedelta(months=1),
    "annual": relativedelta(years=1),
}


def set_pro(db: Session, user: User, expires_at) -> User:
    with atomic(db):
        user.subscription_plan = "pro"
        user.subscription_expires_at = expires_at
    db.refresh(user)
    return user


def set_free(db: Session, user: User) -> User:
    with atomic(db):
        user.subscription_plan = "free"
        user.subscription_expires_at = None
    db.refresh(user)
    return user


def create_subscription(
    db: Session,
    user_id: int,
    duration: str,
    payment_method_id: Optional[str] = None,
    plan: str = "pro",
) -> dict:
    user = require_user(db, user_id)
    now = utcnow()
    set_pro(db, user, now + DURATIONS[duration])

    subscription_id = f"sub_{int(time.time() * 1000)}_{user_id}"
    logger.info(
        "[SUBSCRIPTION] user=%s plan=%s duration=%s expires=%s sub=%s",
        user_id, plan, duration, user.subscription_expires_at, subscription_id,
    )
    return {"success": True, "subscriptionId": subscription_id}


def cancel_subscription(db: Session, user_id: int) -> dict:
    user = require_user(db, user_id)
    set_free(db, user)
    logger.info("[SUBSCRIPTION] cancelled user=%s", user_id)
    return {"success": True}


def upgrade_winner(db: Session, user_id: int) -> User:
    """Reward a challenge winner with a fixed-length pro grant."""
    user = require_user(db, user_id)
    set_pro(db, user, utcnow() + timedelta(days=WINNER_PRO_DAYS))
    logger.info("[SUBSCRIPTION] winner upgrade user=%s expires=%s", user_id, user.subscription_expires_at)
    return user


def check_pro_access(db: Session, user_id: int) -> dict:
    user = require_user(db, user_id)
    return {
        "hasProAccess": has_pro_access(user),
        "expiresAt": user.subscription_expires_at,
    }
