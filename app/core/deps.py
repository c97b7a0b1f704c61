import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from app.auth.models import User
from app.core.security import decode_access_token
from app.db.session import get_db

logger = logging.getLogger(__name__)


def _extract_token(request: Request) -> Optional[str]:
    """Bearer header first, then the access_token cookie."""
    auth_header = request.headers.get("authorization")
    token = auth_header or request.cookies.get("access_token")
    if not token:
        return None

    # Support both "Bearer <token>" and raw token values.
    if token.lower().startswith("bearer "):
        token = token[7:].strip()
    return token or None


def get_current_user(
    request: Request,
    db: Session = Depends(get_db)
) -> User:
    token = _extract_token(request)

    if not token:
        logger.info("[AUTH] reject reason=missing_token path=%s", request.url.path)
        raise HTTPException(status_code=401, detail="Not authenticated")

    payload = decode_access_token(token)
    if not payload:
        logger.info("[AUTH] reject reason=invalid_token path=%s", request.url.path)
        raise HTTPException(status_code=401, detail="Invalid token")

    subject = payload.get("sub")
    if not subject or not str(subject).isdigit():
        logger.info("[AUTH] reject reason=bad_subject path=%s", request.url.path)
        raise HTTPException(status_code=401, detail="Invalid token payload")

    user = db.get(User, int(subject))

    if not user:
        logger.info("[AUTH] reject reason=user_not_found user=%s path=%s", subject, request.url.path)
        raise HTTPException(status_code=401, detail="User not found")

    return user
