from fastapi import APIRouter, Depends, File, UploadFile
from typing import List
from brandsbridge.api.deps import get_upload_dir, staff_required
from brandsbridge.core.config import settings
from brandsbridge.models.user import User
from brandsbridge.schemas.common import MessageResponse
from brandsbridge.schemas.upload import UploadResponse, FileInfo
from brandsbridge.services import uploads as uploads_service

router = APIRouter(prefix="/api/uploads", tags=["uploads"])


async def _store(file: UploadFile, upload_dir: str) -> UploadResponse:
    content = await file.read()
    return uploads_service.save_upload(
        upload_dir,
        content,
        original_name=file.filename or "",
        content_type=file.content_type or "",
        max_size=settings.UPLOAD_MAX_SIZE,
    )


@router.post("", response_model=UploadResponse, status_code=201)
async def upload_file(
    file: UploadFile = File(...),
    upload_dir: str = Depends(get_upload_dir),
    _: User = Depends(staff_required)
):
    """Загрузка одного файла"""
    return await _store(file, upload_dir)


@router.post("/multiple", response_model=List[UploadResponse], status_code=201)
async def upload_files(
    files: List[UploadFile] = File(...),
    upload_dir: str = Depends(get_upload_dir),
    _: User = Depends(staff_required)
):
    """Загрузка нескольких файлов"""
    return [await _store(file, upload_dir) for file in files]


@router.get("", response_model=List[str])
def list_files(
    upload_dir: str = Depends(get_upload_dir),
    _: User = Depends(staff_required)
):
    return uploads_service.list_files(upload_dir)


@router.get("/{filename}", response_model=FileInfo)
def get_file_info(
    filename: str,
    upload_dir: str = Depends(get_upload_dir),
    _: User = Depends(staff_required)
):
    return uploads_service.get_file_info(upload_dir, filename)


@router.delete("/{filename}", response_model=MessageResponse)
def delete_file(
    filename: str,
    upload_dir: str = Depends(get_upload_dir),
    _: User = Depends(staff_required)
):
    return uploads_service.delete_file(upload_dir, filename)
