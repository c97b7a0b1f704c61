from fastapi import APIRouter

from app.subscriptions.schemas import SuccessResponse
from app.uploads import handlers
from app.uploads.schemas import ConfirmUploadResponse, FileIdRequest, UploadUrlRequest, UploadUrlResponse

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.post("/url", response_model=UploadUrlResponse)
def generate_upload_url(payload: UploadUrlRequest):
    return handlers.generate_upload_url(payload.file_name, payload.file_type, payload.file_size)


@router.post("/confirm", response_model=ConfirmUploadResponse)
def confirm_file_upload(payload: FileIdRequest):
    return handlers.confirm_file_upload(payload.file_id)


@router.post("/delete", response_model=SuccessResponse)
def delete_file(payload: FileIdRequest):
    return handlers.delete_file(payload.file_id)
