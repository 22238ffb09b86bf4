"""
Flat-directory file store for uploaded media.

Files are addressed by their generated filename only; there is no metadata
table. Raster images are normalized on the way in: EXIF orientation applied,
longest edge capped, re-encoded as JPEG (or PNG when the image has
transparency, so logos keep their alpha channel).
"""
import os
import uuid
from datetime import datetime, timezone
from io import BytesIO
from typing import List, Tuple
from PIL import Image, ImageOps, UnidentifiedImageError
from brandsbridge.core.exceptions import NotFoundError, ServiceError
from brandsbridge.core.logging import get_logger
from brandsbridge.schemas.upload import UploadResponse, FileInfo

logger = get_logger(__name__)

URL_PREFIX = "/uploads"

RASTER_TYPES = {"image/jpeg", "image/png", "image/webp"}
PASSTHROUGH_TYPES = {
    "image/gif": ".gif",
    "image/svg+xml": ".svg",
    "application/pdf": ".pdf",
}


def file_url(filename: str) -> str:
    return f"{URL_PREFIX}/{filename}"


def _has_alpha(image: Image.Image) -> bool:
    return image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info)


def process_image(content: bytes, max_size: int = 2000, quality: int = 85) -> Tuple[bytes, str]:
    """Returns the re-encoded bytes and the extension to store them under."""
    try:
        image = Image.open(BytesIO(content))
        image = ImageOps.exif_transpose(image)
        image.thumbnail((max_size, max_size), Image.Resampling.LANCZOS)
    except (UnidentifiedImageError, OSError) as e:
        logger.warning("Rejected image upload", error=str(e))
        raise ServiceError("Invalid image file", 400)

    output = BytesIO()
    if _has_alpha(image):
        image.convert("RGBA").save(output, format="PNG", optimize=True)
        return output.getvalue(), ".png"

    if image.mode != "RGB":
        image = image.convert("RGB")
    image.save(output, format="JPEG", quality=quality, optimize=True)
    return output.getvalue(), ".jpg"


def save_upload(
    upload_dir: str,
    content: bytes,
    original_name: str,
    content_type: str,
    max_size: int = 2000,
) -> UploadResponse:
    if content_type in RASTER_TYPES:
        data, ext = process_image(content, max_size=max_size)
    elif content_type in PASSTHROUGH_TYPES:
        data, ext = content, PASSTHROUGH_TYPES[content_type]
    else:
        raise ServiceError(f"Unsupported file type: {content_type}", 400)

    os.makedirs(upload_dir, exist_ok=True)
    filename = f"{uuid.uuid4().hex}{ext}"
    with open(os.path.join(upload_dir, filename), "wb") as buffer:
        buffer.write(data)

    logger.info("File uploaded", filename=filename, original_name=original_name, size=len(data))
    return UploadResponse(
        filename=filename,
        original_name=original_name,
        size=len(data),
        url=file_url(filename),
    )


def _resolve(upload_dir: str, filename: str) -> str:
    # Only bare names inside the upload directory are addressable
    if not filename or os.path.basename(filename) != filename or filename.startswith("."):
        raise NotFoundError("File not found")
    path = os.path.join(upload_dir, filename)
    if not os.path.isfile(path):
        raise NotFoundError("File not found")
    return path


def list_files(upload_dir: str) -> List[str]:
    """Stored filenames; a missing directory simply means nothing was uploaded yet."""
    try:
        names = os.listdir(upload_dir)
    except FileNotFoundError:
        return []
    return sorted(name for name in names if not name.startswith("."))


def get_file_info(upload_dir: str, filename: str) -> FileInfo:
    stats = os.stat(_resolve(upload_dir, filename))
    return FileInfo(
        filename=filename,
        size=stats.st_size,
        created_at=datetime.fromtimestamp(stats.st_ctime, tz=timezone.utc),
        url=file_url(filename),
    )


def delete_file(upload_dir: str, filename: str) -> dict:
    os.remove(_resolve(upload_dir, filename))
    logger.info("File deleted", filename=filename)
    return {"message": "File deleted successfully"}
