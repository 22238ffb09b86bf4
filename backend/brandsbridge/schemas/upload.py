from datetime import datetime
from .common import CamelModel


class UploadResponse(CamelModel):
    filename: str
    original_name: str
    size: int
    url: str


class FileInfo(CamelModel):
    filename: str
    size: int
    created_at: datetime
    url: str
