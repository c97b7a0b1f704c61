"""
Domain errors raised by handlers.

Handlers never raise HTTPException. Each error carries a closed ErrorKind;
app.main maps the kind to an HTTP status at the boundary.
"""
import enum
from typing import Any, Optional


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    LIMIT_EXCEEDED = "limit_exceeded"
    STORAGE_CONSTRAINT = "storage_constraint"
    UNAUTHORIZED = "unauthorized"


HTTP_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.LIMIT_EXCEEDED: 429,
    ErrorKind.STORAGE_CONSTRAINT: 409,
    ErrorKind.UNAUTHORIZED: 401,
}


class ThinkHubError(Exception):
    """Base exception for all ThinkHub domain errors."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]

    def to_dict(self) -> dict:
        return {"error": self.kind.value, "detail": self.message, "details": self.details}


class NotFoundError(ThinkHubError):
    """Raised when a referenced row does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, identifier: Any = None, message: Optional[str] = None):
        super().__init__(
            message or f"{entity} not found",
            details={"entity": entity, "id": identifier},
        )


class ValidationError(ThinkHubError):
    """Raised when input passes schema validation but breaks a business rule."""

    kind = ErrorKind.VALIDATION


class ConflictError(ThinkHubError):
    """Raised when the requested transition clashes with current state."""

    kind = ErrorKind.CONFLICT


class LimitExceededError(ThinkHubError):
    """Raised when a per-user quota is used up."""

    kind = ErrorKind.LIMIT_EXCEEDED

    def __init__(self, limit: int, used: int, message: str = "Daily AI query limit exceeded"):
        super().__init__(message, details={"limit": limit, "used": used})


class StorageConstraintError(ThinkHubError):
    """Raised when the store rejects a write on a unique/foreign key."""

    kind = ErrorKind.STORAGE_CONSTRAINT


class AuthenticationError(ThinkHubError):
    """Raised on bad credentials."""

    kind = ErrorKind.UNAUTHORIZED
