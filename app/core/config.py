"""
Configuration constants for the application.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else default


# Database URL; app.db.base normalizes legacy postgres:// URLs.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./local.db").strip()

ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()

# JWT lifetime for tokens returned by /auth/login
ACCESS_TOKEN_EXPIRE_MINUTES = _int_env("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24)

# OpenAI API Key for the AI tutor
# IMPORTANT: Do NOT hardcode keys in code or commit them to git.
# Set OPENAI_API_KEY in your environment (or hosting provider env vars).
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

# AI tutor daily query ceilings per plan
FREE_DAILY_AI_LIMIT = _int_env("FREE_DAILY_AI_LIMIT", 10)
PRO_DAILY_AI_LIMIT = _int_env("PRO_DAILY_AI_LIMIT", 100)

# Uploads
MAX_UPLOAD_BYTES = 100 * 1024 * 1024
ALLOWED_UPLOAD_TYPES = (
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "application/pdf",
    "text/plain",
    "application/zip",
    "video/mp4",
    "video/webm",
)
UPLOAD_BASE_URL = os.getenv("UPLOAD_BASE_URL", "https://s3.amazonaws.com/thinkhub-uploads").rstrip("/")
CDN_BASE_URL = os.getenv("CDN_BASE_URL", "https://cdn.thinkhub.dev").rstrip("/")

# Download / certificate links handed back to the client
DOWNLOAD_BASE_URL = os.getenv("DOWNLOAD_BASE_URL", "https://downloads.thinkhub.dev").rstrip("/")
CERTIFICATE_BASE_URL = os.getenv("CERTIFICATE_BASE_URL", "https://certificates.thinkhub.dev").rstrip("/")

# Subscriptions
WINNER_PRO_DAYS = _int_env("WINNER_PRO_DAYS", 30)
PRO_MONTHLY_PRICE = _int_env("PRO_MONTHLY_PRICE", 15)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ENABLE_DEBUG_ROUTES = os.getenv("ENABLE_DEBUG_ROUTES", "0") == "1"

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
