from datetime import datetime
from typing import Optional

from app.auth.models import User
from app.db.base import utcnow


def has_pro_access(user: User, now: Optional[datetime] = None) -> bool:
    """
    Pro plan and either no expiry (lifetime) or an expiry still in the future.

    An expired pro row keeps plan="pro"; access is decided here on every call.
    """
    if user.subscription_plan != "pro":
        return False
    if user.subscription_expires_at is None:
        return True
    return user.subscription_expires_at > (now or utcnow())
