"""
Account operations: register, login, lookup.

Other subjects import require_user() to resolve a user id or fail with
NotFoundError("User").
"""
import logging

from sqlalchemy.orm import Session

from app.auth.models import User
from app.core.errors import AuthenticationError, ConflictError, NotFoundError, StorageConstraintError
from app.core.security import create_access_token, hash_password, verify_password
from app.db.session import atomic

logger = logging.getLogger(__name__)


def require_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFoundError("User", user_id)
    return user


def register(db: Session, email: str, password: str, full_name: str) -> User:
    email = email.strip().lower()
    if db.query(User).filter(User.email == email).first():
        logger.warning("[AUTH] register rejected, email already registered")
        raise ConflictError("User with this email already exists", details={"email": email})

    user = User(
        email=email,
        password_hash=hash_password(password),
        full_name=full_name.strip(),
        subscription_plan="free",
        subscription_expires_at=None,
        ai_queries_used_today=0,
    )
    try:
        with atomic(db):
            db.add(user)
    except StorageConstraintError as exc:
        # Lost a race against a concurrent signup with the same email
        raise ConflictError("User with this email already exists", details={"email": email}) from exc

    db.refresh(user)
    logger.info("[AUTH] registered user=%s", user.id)
    return user


def login(db: Session, email: str, password: str) -> dict:
    user = db.query(User).filter(User.email == email.strip().lower()).first()

    if not user or not verify_password(password, user.password_hash):
        logger.warning("[AUTH] invalid credentials")
        raise AuthenticationError("Invalid email or password")

    token = create_access_token({"sub": str(user.id)})
    logger.info("[AUTH] login successful for user=%s", user.id)
    return {"user": user, "token": token}


def get_current_user(db: Session, user_id: int) -> User:
    return require_user(db, user_id)
