# wonderland/services/upload_service.py
"""
갤러리 업로드 파일 저장소 (로컬 디스크)
"""

import os
import random
import re
import time
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from wonderland.exceptions import UpstreamError, ValidationError
from wonderland.utils.logger import logger

ALLOWED_IMAGE_TYPES = re.compile(r"jpeg|jpg|png|gif|webp")
PUBLIC_PREFIX = "/uploads"


class UploadStore:
    def __init__(self, upload_dir: str, max_file_size: int):
        self.upload_dir = Path(upload_dir)
        self.max_file_size = max_file_size

    @property
    def max_file_size_mb(self) -> int:
        return round(self.max_file_size / (1024 * 1024))

    def ensure_dir(self):
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def _validate_type(self, upload: UploadFile) -> str:
        ext = os.path.splitext(upload.filename or "")[1].lower()
        content_type = upload.content_type or ""
        if not (ALLOWED_IMAGE_TYPES.search(ext) and ALLOWED_IMAGE_TYPES.search(content_type)):
            raise ValidationError("Only image files are allowed (jpeg, jpg, png, gif, webp)")
        return ext

    async def save_image(self, upload: Optional[UploadFile]) -> str:
        """이미지를 저장하고 공개 URL(/uploads/<파일명>) 반환"""
        if upload is None or not upload.filename:
            raise ValidationError("Image file is required")
        ext = self._validate_type(upload)

        content = await upload.read(self.max_file_size + 1)
        if len(content) > self.max_file_size:
            raise ValidationError(f"File too large. Maximum size is {self.max_file_size_mb}MB.")

        filename = f"image-{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"
        try:
            self.ensure_dir()
            (self.upload_dir / filename).write_bytes(content)
        except OSError as e:
            logger.error(f" 업로드 파일 저장 실패: {e}")
            raise UpstreamError("Failed to store uploaded file") from e

        logger.info(f" 업로드 저장 완료: {filename} ({len(content)} bytes)")
        return f"{PUBLIC_PREFIX}/{filename}"

    def delete_image(self, image_url: Optional[str]):
        """로컬 업로드 파일만 삭제 (외부 URL은 무시)"""
        if not image_url or not image_url.startswith(f"{PUBLIC_PREFIX}/"):
            return
        filename = os.path.basename(image_url)
        try:
            (self.upload_dir / filename).unlink(missing_ok=True)
        except OSError as e:
            logger.error(f" 업로드 파일 삭제 실패: {e}")
            raise UpstreamError("Failed to remove uploaded file") from e
