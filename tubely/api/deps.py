"""
Shared FastAPI dependencies
"""

from functools import lru_cache

from tubely.core.config import settings
from tubely.services.thumbnail_store import ThumbnailStore
from tubely.services.uploader import FileUploadService, UploadServiceBuilder


@lru_cache(maxsize=1)
def get_upload_service() -> FileUploadService:
    return UploadServiceBuilder.build()


def get_thumbnail_store() -> ThumbnailStore:
    return ThumbnailStore(settings.assets_root)
