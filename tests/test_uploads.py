import re

import pytest

from app.core.errors import ValidationError
from app.uploads import handlers


def test_upload_url_shape():
    result = handlers.generate_upload_url("test-document.pdf", "application/pdf", 1024 * 1024)

    assert re.fullmatch(r"file_\d+_[a-z0-9]{11}", result["fileId"])
    assert result["uploadUrl"].startswith("https://")
    assert f"/{result['fileId']}/test-document.pdf?" in result["uploadUrl"]
    assert "X-Amz-Expires=3600" in result["uploadUrl"]


def test_upload_ids_are_unique():
    first = handlers.generate_upload_url("a.png", "image/png", 10)
    second = handlers.generate_upload_url("a.png", "image/png", 10)

    assert first["fileId"] != second["fileId"]


def test_upload_url_sanitizes_name():
    result = handlers.generate_upload_url("my file with spaces & symbols!.pdf", "application/pdf", 1024)

    assert "my_file_with_spaces___symbols_.pdf" in result["uploadUrl"]


def test_upload_rejects_large_files():
    with pytest.raises(ValidationError, match="File size exceeds maximum"):
        handlers.generate_upload_url("huge-file.zip", "application/zip", 200 * 1024 * 1024)


def test_upload_accepts_exactly_max_size():
    assert handlers.generate_upload_url("max.zip", "application/zip", 100 * 1024 * 1024)["fileId"]


def test_upload_rejects_unknown_type():
    with pytest.raises(ValidationError, match="File type application/x-executable is not allowed"):
        handlers.generate_upload_url("script.exe", "application/x-executable", 1024)


def test_confirm_and_delete():
    file_id = handlers.generate_upload_url("notes.txt", "text/plain", 12)["fileId"]

    confirmed = handlers.confirm_file_upload(file_id)

    assert confirmed == {"success": True, "fileUrl": f"https://cdn.thinkhub.dev/files/{file_id}"}
    assert handlers.delete_file(file_id) == {"success": True}


@pytest.mark.parametrize("file_id", ["invalid-id", ""])
def test_bad_file_ids_rejected(file_id):
    with pytest.raises(ValidationError, match="Invalid file ID format"):
        handlers.confirm_file_upload(file_id)
    with pytest.raises(ValidationError, match="Invalid file ID format"):
        handlers.delete_file(file_id)


def test_upload_routes(client):
    issued = client.post("/uploads/url", json={"file_name": "pic.jpg", "file_type": "image/jpeg", "file_size": 500})
    assert issued.status_code == 200
    file_id = issued.json()["fileId"]

    assert client.post("/uploads/confirm", json={"file_id": file_id}).json()["success"] is True

    bad = client.post("/uploads/url", json={"file_name": "x.exe", "file_type": "application/x-msdownload", "file_size": 5})
    assert bad.status_code == 400
    assert bad.json()["error"] == "validation"

    assert client.post("/uploads/delete", json={"file_id": "nope"}).status_code == 400
