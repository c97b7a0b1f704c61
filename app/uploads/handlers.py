"""
Upload URL issuance for client-side uploads.

No object store is contacted: the returned URLs follow the S3 pre-signed
shape, and confirm/delete only validate the file id format.
"""
import logging
import secrets
import string
import time

from app.core.config import ALLOWED_UPLOAD_TYPES, CDN_BASE_URL, MAX_UPLOAD_BYTES, UPLOAD_BASE_URL
from app.core.errors import ValidationError
from app.core.text import sanitize_filename

logger = logging.getLogger(__name__)

FILE_ID_PREFIX = "file_"
_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
_SUFFIX_LENGTH = 11
UPLOAD_URL_TTL_SECONDS = 3600


def new_file_id() -> str:
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(_SUFFIX_LENGTH))
    return f"{FILE_ID_PREFIX}{int(time.time() * 1000)}_{suffix}"


def _require_file_id(file_id: str) -> None:
    if not file_id or not file_id.startswith(FILE_ID_PREFIX):
        logger.warning("[UPLOAD] rejected file id %r", file_id)
        raise ValidationError("Invalid file ID format", details={"file_id": file_id})


def generate_upload_url(file_name: str, file_type: str, file_size: int) -> dict:
    if file_size <= 0:
        raise ValidationError("File size must be positive", details={"file_size": file_size})
    if file_size > MAX_UPLOAD_BYTES:
        raise ValidationError(
            "File size exceeds maximum allowed size",
            details={"file_size": file_size, "max_bytes": MAX_UPLOAD_BYTES},
        )
    if file_type not in ALLOWED_UPLOAD_TYPES:
        raise ValidationError(f"File type {file_type} is not allowed", details={"file_type": file_type})

    file_id = new_file_id()
    upload_url = (
        f"{UPLOAD_BASE_URL}/{file_id}/{sanitize_filename(file_name)}"
        f"?X-Amz-Algorithm=AWS4-HMAC-SHA256"
        f"&X-Amz-Expires={UPLOAD_URL_TTL_SECONDS}"
        f"&X-Amz-SignedHeaders=host"
    )
    logger.info("[UPLOAD] issued url file=%s type=%s size=%s", file_id, file_type, file_size)
    return {"uploadUrl": upload_url, "fileId": file_id}


def confirm_file_upload(file_id: str) -> dict:
    _require_file_id(file_id)
    return {"success": True, "fileUrl": f"{CDN_BASE_URL}/files/{file_id}"}


def delete_file(file_id: str) -> dict:
    _require_file_id(file_id)
    logger.info("[UPLOAD] deleted file=%s", file_id)
    return {"success": True}
