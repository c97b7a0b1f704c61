from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth import handlers
from app.auth.models import User
from app.auth.schemas import LoginRequest, LoginResponse, RegisterRequest, UserOut
from app.core.deps import get_current_user
from app.db.session import get_db

router = APIRouter(prefix="/auth", tags=["auth"])


# =========================
# REGISTER
# =========================
@router.post("/register", response_model=UserOut, status_code=201)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    return handlers.register(db, payload.email, payload.password, payload.full_name)


# =========================
# LOGIN
# =========================
@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    return handlers.login(db, payload.email, payload.password)


@router.get("/users/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return handlers.get_current_user(db, user_id)


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
    """Resolve the caller from a bearer token or the access_token cookie."""
    return user
