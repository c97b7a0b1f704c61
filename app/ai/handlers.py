"""
AI tutor: chat, per-user daily query quota, tutorial summaries.

The quota counter (users.ai_queries_used_today) belongs to the UTC day in
users.ai_queries_reset_on. The first read on a later day zeroes it, so no
background job is required; scripts/reset_ai_usage.py does the same in bulk.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.ai import tutor
from app.ai.models import ChatMessage
from app.auth.handlers import require_user
from app.auth.models import User
from app.core.config import FREE_DAILY_AI_LIMIT, PRO_DAILY_AI_LIMIT
from app.core.errors import LimitExceededError, NotFoundError
from app.db.base import utcnow
from app.db.session import atomic
from app.projects.models import Project
from app.subscriptions.access import has_pro_access
from app.tutorials.models import Tutorial

logger = logging.getLogger(__name__)

CHAT_HISTORY_LIMIT = 50


def daily_limit_for(user: User) -> int:
    return PRO_DAILY_AI_LIMIT if has_pro_access(user) else FREE_DAILY_AI_LIMIT


def _roll_over_if_new_day(db: Session, user: User) -> None:
    today = utcnow().date()
    if user.ai_queries_reset_on == today:
        return
    with atomic(db):
        user.ai_queries_used_today = 0
        user.ai_queries_reset_on = today
    db.refresh(user)
    logger.info("[AI] daily counter reset user=%s", user.id)


def check_ai_usage_limit(db: Session, user_id: int) -> dict:
    user = require_user(db, user_id)
    _roll_over_if_new_day(db, user)

    limit = daily_limit_for(user)
    used = user.ai_queries_used_today
    return {"canUse": used < limit, "queriesUsed": used, "limit": limit}


def _context_title(db: Session, context_type: Optional[str], context_id: Optional[int]) -> Optional[str]:
    if not context_id:
        return None
    model = {"tutorial": Tutorial, "project": Project}.get(context_type or "")
    if model is None:
        return None
    row = db.get(model, context_id)
    return row.title if row else None


def send_message(
    db: Session,
    user_id: int,
    message: str,
    context_type: Optional[str] = None,
    context_id: Optional[int] = None,
) -> ChatMessage:
    usage = check_ai_usage_limit(db, user_id)
    if not usage["canUse"]:
        logger.warning("[AI] limit reached user=%s used=%s limit=%s", user_id, usage["queriesUsed"], usage["limit"])
        raise LimitExceededError(usage["limit"], usage["queriesUsed"])

    reply = tutor.generate_reply(message, context_type, _context_title(db, context_type, context_id))

    chat = ChatMessage(
        user_id=user_id,
        message=message,
        response=reply,
        context_type=context_type,
        context_id=context_id,
    )
    with atomic(db):
        # Conditional increment: a concurrent send that used the last slot wins
        updated = (
            db.query(User)
            .filter(User.id == user_id, User.ai_queries_used_today < usage["limit"])
            .update(
                {User.ai_queries_used_today: User.ai_queries_used_today + 1},
                synchronize_session=False,
            )
        )
        if not updated:
            raise LimitExceededError(usage["limit"], usage["limit"])
        db.add(chat)

    db.refresh(chat)
    logger.info("[AI] message stored id=%s user=%s context=%s", chat.id, user_id, context_type)
    return chat


def get_chat_history(db: Session, user_id: int) -> List[ChatMessage]:
    require_user(db, user_id)
    return (
        db.query(ChatMessage)
        .filter(ChatMessage.user_id == user_id)
        .order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc())
        .limit(CHAT_HISTORY_LIMIT)
        .all()
    )


def generate_tutorial_summary(db: Session, tutorial_id: int) -> dict:
    tutorial = db.get(Tutorial, tutorial_id)
    if not tutorial:
        raise NotFoundError("Tutorial", tutorial_id)
    return tutor.build_tutorial_summary(tutorial.title, tutorial.description, tutorial.content)
