from pydantic import BaseModel, Field


class UploadUrlRequest(BaseModel):
    file_name: str = Field(..., min_length=1)
    file_type: str
    file_size: int = Field(..., gt=0)


class UploadUrlResponse(BaseModel):
    uploadUrl: str
    fileId: str


class FileIdRequest(BaseModel):
    file_id: str


class ConfirmUploadResponse(BaseModel):
    success: bool
    fileUrl: str
