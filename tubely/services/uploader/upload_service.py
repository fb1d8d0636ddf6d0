import logging
import os
import secrets

import aiofiles
from starlette.concurrency import run_in_threadpool

from tubely.services.uploader.interfaces import FileUploader

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8 * 1024 * 1024  # 8MB


class UploadFailedError(Exception):
    """Raised when the object store rejects or fails a transfer"""


class FileUploadService:
    """Orchestrates file uploads with dependency injection"""

    def __init__(self,
                 uploader: FileUploader,
                 temp_dir: str,
                 object_prefix: str = ""):
        self.uploader = uploader
        self.temp_dir = temp_dir
        self.object_prefix = object_prefix

    async def _write_temp_file(self, source, temp_path: str) -> int:
        written = 0
        async with aiofiles.open(temp_path, "wb") as f:
            while True:
                chunk = await source.read(CHUNK_SIZE)
                if not chunk:
                    break
                await f.write(chunk)
                written += len(chunk)
        return written

    def _remove_temp_file(self, temp_path: str) -> None:
        try:
            os.remove(temp_path)
        except FileNotFoundError:
            pass
        except OSError as cleanup_error:
            logger.warning(f"Could not remove temp file {temp_path}: {cleanup_error}")

    async def execute_upload(self, source, extension: str, content_type: str) -> str:
        """
        Stage an uploaded payload on local disk and transfer it to the object store.

        Args:
            source: async readable (an UploadFile) holding the payload
            extension: file extension used for both the temp file and the key
            content_type: media type recorded on the stored object

        Returns:
            The object key the payload was stored under

        Raises:
            UploadFailedError: if the object store transfer fails
        """
        filename = f"{secrets.token_hex(32)}.{extension}"
        temp_path = os.path.join(self.temp_dir, filename)
        object_key = self.object_prefix + filename

        try:
            size = await self._write_temp_file(source, temp_path)
            logger.info(f"Staged {size} bytes at {temp_path}")

            uploaded = await run_in_threadpool(
                self.uploader.upload, temp_path, object_key, content_type
            )
            if not uploaded:
                raise UploadFailedError(f"Failed to upload {object_key}")
        finally:
            self._remove_temp_file(temp_path)

        return object_key

    def public_url(self, object_key: str) -> str:
        return self.uploader.public_url(object_key)
