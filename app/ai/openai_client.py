"""
Unified OpenAI client.

All modules that need OpenAI should import from here:
    from app.ai.openai_client import get_client, key_present, key_fingerprint

This ensures:
- The API key is read ONCE and stripped of whitespace.
- A single client instance is reused.
- The last failure is kept for the admin diagnostics endpoint.
"""
import logging
from typing import Optional

import openai

from app.core.config import OPENAI_API_KEY

logger = logging.getLogger(__name__)

_KEY: str = OPENAI_API_KEY.strip()

# Track last error for diagnostics
_last_error: Optional[str] = None

# Lazily-created singleton
_client: Optional[openai.OpenAI] = None


def key_present() -> bool:
    return bool(_KEY)


def key_fingerprint() -> str:
    """Return masked key for safe logging: sk-xxxx...1234"""
    if not _KEY:
        return "(not set)"
    if len(_KEY) <= 10:
        return _KEY[:2] + "***"
    return _KEY[:6] + "..." + _KEY[-4:]


def get_client() -> Optional[openai.OpenAI]:
    """
    Return the shared OpenAI client, or None if no key is configured.
    """
    global _client
    if not _KEY:
        return None
    if _client is None:
        _client = openai.OpenAI(api_key=_KEY, timeout=12)
    return _client


def set_last_error(msg: str):
    global _last_error
    _last_error = msg


def get_last_error() -> Optional[str]:
    return _last_error


def log_startup():
    """Log one-time startup diagnostics."""
    logger.info("[AI] OPENAI_API_KEY present: %s", key_present())
    logger.info("[AI] key fingerprint: %s", key_fingerprint())
