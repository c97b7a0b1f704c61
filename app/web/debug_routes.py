from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.ai.handlers import daily_limit_for
from app.ai.openai_client import get_last_error, key_fingerprint, key_present
from app.auth.models import User
from app.core.config import OPENAI_MODEL
from app.db.base import utcnow
from app.db.session import get_db

router = APIRouter(prefix="/debug", tags=["debug"])


@router.get("/ai-usage")
def debug_ai_usage(db: Session = Depends(get_db)):
    """
    Raw AI quota state per user, stale counters included.

    Only mounted when ENABLE_DEBUG_ROUTES=1.
    """
    today = utcnow().date()
    users = db.query(User).order_by(User.id.asc()).all()
    return [
        {
            "id": u.id,
            "email": u.email,
            "plan": u.subscription_plan,
            "limit": daily_limit_for(u),
            "used": u.ai_queries_used_today,
            "reset_on": u.ai_queries_reset_on.isoformat(),
            "stale": u.ai_queries_reset_on != today,
        }
        for u in users
    ]


@router.get("/diagnostics/ai")
def ai_diagnostics():
    return {
        "key_present": key_present(),
        "key_fingerprint": key_fingerprint(),
        "model": OPENAI_MODEL,
        "last_error": get_last_error(),
    }
