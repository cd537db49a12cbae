import logging
import os
import secrets
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from fastapi import Request, UploadFile

from shared.core.config import Settings
from shared.core.errors import ErrorCode, UploadError, ValidationError

logger = logging.getLogger(__name__)

READ_CHUNK = 64 * 1024


@dataclass(frozen=True)
class StagedUpload:
    """An accepted upload held in memory until the owning record is written."""

    field_name: str
    original_name: str
    content_type: str
    data: bytes
    stored_name: str
    url: str


class UploadStore:
    """Validates uploads and stores them under a random-suffix filename.

    Nothing touches the disk until ``persisted`` is entered, and a failure
    inside that block removes the file again.
    """

    def __init__(
        self,
        directory: str,
        url_prefix: str = "/uploads",
        max_bytes: int = 5 * 1024 * 1024,
        allowed_extensions: Iterable[str] = (),
        allowed_content_types: Iterable[str] = (),
    ):
        self.directory = Path(directory)
        self.url_prefix = url_prefix.rstrip("/")
        self.max_bytes = max_bytes
        self.allowed_extensions = {ext.lower() for ext in allowed_extensions}
        self.allowed_content_types = {ct.lower() for ct in allowed_content_types}
        self.directory.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_settings(cls, settings: Settings) -> "UploadStore":
        return cls(
            directory=settings.UPLOAD_DIR,
            url_prefix=settings.UPLOAD_URL_PREFIX,
            max_bytes=settings.MAX_UPLOAD_BYTES,
            allowed_extensions=settings.allowed_upload_extensions,
            allowed_content_types=settings.allowed_upload_content_types,
        )

    def stage(
        self,
        file: Optional[UploadFile],
        field_name: str,
        required: bool = False
    ) -> Optional[StagedUpload]:
        if file is None or not file.filename:
            if required:
                raise ValidationError("No file uploaded", code=ErrorCode.MISSING_FILE)
            return None

        extension = os.path.splitext(file.filename)[1].lower()
        content_type = (file.content_type or "application/octet-stream").lower()
        if self.allowed_extensions and extension not in self.allowed_extensions:
            raise UploadError(
                code=ErrorCode.UPLOAD_TYPE_NOT_ALLOWED,
                message=f"File type '{extension or file.filename}' is not allowed"
            )
        if self.allowed_content_types and content_type not in self.allowed_content_types:
            raise UploadError(
                code=ErrorCode.UPLOAD_TYPE_NOT_ALLOWED,
                message=f"Content type '{content_type}' is not allowed"
            )

        data = self._read_limited(file)
        stored_name = self.generate_name(field_name, extension)
        return StagedUpload(
            field_name=field_name,
            original_name=file.filename[:255],
            content_type=content_type,
            data=data,
            stored_name=stored_name,
            url=f"{self.url_prefix}/{stored_name}",
        )

    def _read_limited(self, file: UploadFile) -> bytes:
        chunks = []
        total = 0
        while True:
            chunk = file.file.read(READ_CHUNK)
            if not chunk:
                break
            total += len(chunk)
            if total > self.max_bytes:
                raise UploadError(
                    code=ErrorCode.UPLOAD_TOO_LARGE,
                    message=f"File exceeds the {self.max_bytes} byte limit"
                )
            chunks.append(chunk)
        return b"".join(chunks)

    @staticmethod
    def generate_name(field_name: str, extension: str) -> str:
        unique_suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10 ** 9)}"
        return f"{field_name}-{unique_suffix}{extension}"

    def path_for(self, staged: StagedUpload) -> Path:
        return self.directory / staged.stored_name

    def write(self, staged: StagedUpload) -> Path:
        path = self.path_for(staged)
        path.write_bytes(staged.data)
        logger.info(f"📷 Stored upload {staged.stored_name} ({len(staged.data)} bytes)")
        return path

    def discard(self, staged: StagedUpload):
        path = self.path_for(staged)
        if path.exists():
            path.unlink()
            logger.info(f"Removed orphaned upload {staged.stored_name}")

    @contextmanager
    def persisted(self, staged: Optional[StagedUpload]):
        if staged is None:
            yield None
            return
        self.write(staged)
        try:
            yield staged
        except BaseException:
            self.discard(staged)
            raise


# Dependency


def get_upload_store(request: Request) -> UploadStore:
    return request.app.state.upload_store
