"""
Tests for the media upload store.
"""
import os
from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from brandsbridge.core.exceptions import NotFoundError
from brandsbridge.services import uploads as uploads_service


def image_bytes(size=(3000, 1500), mode="RGB", fmt="JPEG") -> bytes:
    buffer = BytesIO()
    Image.new(mode, size, color=(200, 30, 30) if mode == "RGB" else (200, 30, 30, 0)).save(buffer, format=fmt)
    return buffer.getvalue()


def test_upload_image_is_normalized(client: TestClient, admin_headers, upload_dir):
    response = client.post(
        "/api/uploads",
        files={"file": ("photo.jpg", image_bytes(), "image/jpeg")},
        headers=admin_headers,
    )
    assert response.status_code == 201
    data = response.json()
    assert data["originalName"] == "photo.jpg"
    assert data["filename"].endswith(".jpg")
    assert data["url"] == f"/uploads/{data['filename']}"

    with Image.open(os.path.join(upload_dir, data["filename"])) as stored:
        assert max(stored.size) == 2000
        assert stored.format == "JPEG"


def test_transparent_png_keeps_alpha(upload_dir):
    result = uploads_service.save_upload(
        upload_dir,
        image_bytes(size=(100, 100), mode="RGBA", fmt="PNG"),
        original_name="logo.png",
        content_type="image/png",
    )
    assert result.filename.endswith(".png")


def test_upload_rejects_unsupported_type(client: TestClient, admin_headers):
    response = client.post(
        "/api/uploads",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_upload_rejects_broken_image(client: TestClient, admin_headers):
    response = client.post(
        "/api/uploads",
        files={"file": ("fake.jpg", b"not really a jpeg", "image/jpeg")},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid image file"


def test_upload_requires_auth(client: TestClient):
    response = client.post("/api/uploads", files={"file": ("photo.jpg", image_bytes((10, 10)), "image/jpeg")})
    assert response.status_code == 401


def test_upload_multiple_then_list_info_delete(client: TestClient, admin_headers):
    response = client.post(
        "/api/uploads/multiple",
        files=[
            ("files", ("a.jpg", image_bytes((20, 20)), "image/jpeg")),
            ("files", ("b.gif", image_bytes((20, 20), fmt="GIF"), "image/gif")),
        ],
        headers=admin_headers,
    )
    assert response.status_code == 201
    uploaded = response.json()
    assert len(uploaded) == 2

    names = client.get("/api/uploads", headers=admin_headers).json()
    assert sorted(names) == sorted(u["filename"] for u in uploaded)

    filename = uploaded[1]["filename"]
    info = client.get(f"/api/uploads/{filename}", headers=admin_headers).json()
    assert info["filename"] == filename
    assert info["size"] > 0

    deleted = client.delete(f"/api/uploads/{filename}", headers=admin_headers)
    assert deleted.json() == {"message": "File deleted successfully"}
    assert client.get(f"/api/uploads/{filename}", headers=admin_headers).status_code == 404


def test_list_missing_directory_is_empty(client: TestClient, admin_headers):
    assert client.get("/api/uploads", headers=admin_headers).json() == []


def test_hidden_or_missing_files_are_not_found(upload_dir):
    os.makedirs(upload_dir, exist_ok=True)
    with open(os.path.join(upload_dir, ".keep"), "w") as handle:
        handle.write("")

    for name in (".keep", "missing.jpg", "../etc/passwd"):
        with pytest.raises(NotFoundError):
            uploads_service.get_file_info(upload_dir, name)
