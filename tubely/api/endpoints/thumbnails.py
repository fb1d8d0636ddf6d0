"""
Thumbnail upload and retrieval endpoints
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from tubely.api.deps import get_thumbnail_store
from tubely.api.errors import BadRequestError, NotFoundError, UserForbiddenError
from tubely.api.schemas import VideoResponse
from tubely.core.auth import get_current_user_id
from tubely.core.config import settings
from tubely.core.database import get_db
from tubely.services.thumbnail_store import ThumbnailStore, extension_for
from tubely.services.videos import get_video, update_video

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_UPLOAD_SIZE = 10 << 20  # 10 MiB


def thumbnail_url_for(video_id: str) -> str:
    return f"{settings.base_url}/api/thumbnails/{video_id}"


@router.get("/{video_id}")
def get_thumbnail(
    video_id: str,
    db: Session = Depends(get_db),
    store: ThumbnailStore = Depends(get_thumbnail_store),
):
    """Serve the stored thumbnail for a video"""
    video = get_video(db, video_id)
    if video is None:
        raise NotFoundError("Couldn't find video")

    thumbnail = store.load(video_id)
    if thumbnail is None:
        raise NotFoundError("Thumbnail not found")

    return Response(
        content=thumbnail.data,
        media_type=thumbnail.media_type,
        headers={"Cache-Control": "no-store"},
    )


@router.post("/{video_id}", response_model=VideoResponse)
async def upload_thumbnail(
    video_id: str,
    request: Request,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    store: ThumbnailStore = Depends(get_thumbnail_store),
):
    """
    Upload a thumbnail image for a video owned by the caller.

    The multipart form must carry the image in a ``thumbnail`` field.
    """
    logger.info(f"Uploading thumbnail for video {video_id} by user {user_id}")

    form = await request.form()
    try:
        file = form.get("thumbnail")
        if not isinstance(file, UploadFile):
            raise BadRequestError("Thumbnail file missing")

        if file.size is not None and file.size > MAX_UPLOAD_SIZE:
            raise BadRequestError("Thumbnail file too large")

        media_type = file.content_type or ""
        if not media_type.startswith("image/"):
            raise BadRequestError("Thumbnail must be an image")
        try:
            extension_for(media_type)
        except ValueError:
            raise BadRequestError("Thumbnail must be an image")

        data = await file.read()
        if len(data) > MAX_UPLOAD_SIZE:
            raise BadRequestError("Thumbnail file too large")
    finally:
        await form.close()

    video = await run_in_threadpool(get_video, db, video_id)
    if video is None:
        raise NotFoundError("Couldn't find video")

    if video.user_id != user_id:
        raise UserForbiddenError("You are not allowed to upload a thumbnail for this video")

    await run_in_threadpool(store.save, video_id, data, media_type)
    video.thumbnail_url = thumbnail_url_for(video_id)
    return await run_in_threadpool(update_video, db, video)
