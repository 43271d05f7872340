"""
Image ingestion adapter.

Receives an uploaded image stream, validates it and writes it to a temporary
file that the fact-check pipeline can read. The adapter owns that file: it is
deleted by release(), or automatically when acquire() exits.
"""

import asyncio
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional, Protocol, Union

from factlens.config.settings import MAX_UPLOAD_BYTES
from factlens.models import ImageTooLarge, UnsupportedImageType
from factlens.observability.logger import get_logger, PipelineStep
from factlens.utils.id_generator import generate_upload_id

logger = get_logger(__name__, PipelineStep.IMAGE_INGESTION)

CHUNK_SIZE = 64 * 1024


class AsyncReadable(Protocol):
    """anything with an async read(size), e.g. fastapi.UploadFile"""
    async def read(self, size: int = -1) -> bytes: ...


class ImageIngestionAdapter:
    """
    writes validated uploads into upload_dir.

    args:
        upload_dir: directory for temporary files, created on demand
        max_bytes: size ceiling; larger uploads are rejected
    """

    def __init__(self, upload_dir: Union[str, Path], max_bytes: int = MAX_UPLOAD_BYTES):
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes

    def _target_path(self, filename: Optional[str]) -> Path:
        suffix = Path(filename or "").suffix
        return self.upload_dir / f"image-{int(time.time() * 1000)}-{generate_upload_id()}{suffix}"

    async def ingest(
        self,
        stream: AsyncReadable,
        filename: Optional[str],
        content_type: Optional[str],
    ) -> Path:
        """
        validate and persist one upload.

        raises:
            UnsupportedImageType: content type does not start with image/
            ImageTooLarge: more than max_bytes were received

        the partial file is removed whenever ingest does not return a path.
        """
        if not content_type or not content_type.startswith("image/"):
            raise UnsupportedImageType("Only image files are allowed!")

        await asyncio.to_thread(self.upload_dir.mkdir, parents=True, exist_ok=True)
        path = self._target_path(filename)

        written = 0
        out = await asyncio.to_thread(open, path, "wb")
        try:
            try:
                while True:
                    chunk = await stream.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self.max_bytes:
                        raise ImageTooLarge(
                            f"Image is too large. Maximum size is {self.max_bytes // (1024 * 1024)} MB."
                        )
                    await asyncio.to_thread(out.write, chunk)
            finally:
                await asyncio.to_thread(out.close)
        except BaseException:
            # partial file never outlives a failed ingest
            self.release(path)
            raise

        logger.info(f"stored upload {path.name} ({written} bytes, {content_type})")
        return path

    def release(self, path: Optional[Path]) -> None:
        """delete the file if present; a failed deletion is only logged"""
        if path is None:
            return
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"error deleting temporary file {path}: {e}")
            return
        logger.debug(f"deleted temporary file {path.name}")

    @asynccontextmanager
    async def acquire(
        self,
        stream: AsyncReadable,
        filename: Optional[str],
        content_type: Optional[str],
    ) -> AsyncIterator[Path]:
        """ingest an upload and delete it on every exit path"""
        path = await self.ingest(stream, filename, content_type)
        try:
            yield path
        finally:
            self.release(path)
