"""
Video endpoints
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from tubely.api.deps import get_upload_service
from tubely.api.errors import BadRequestError, NotFoundError, UserForbiddenError
from tubely.api.schemas import VideoResponse
from tubely.core.auth import get_current_user_id
from tubely.core.database import get_db
from tubely.services.uploader import FileUploadService, UploadFailedError
from tubely.services.videos import get_video, get_videos, update_video

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_UPLOAD_SIZE = 1 << 30  # 1 GiB
ALLOWED_MEDIA_TYPE = "video/mp4"


@router.get("", response_model=List[VideoResponse])
def list_videos(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """List the caller's videos"""
    return get_videos(db, user_id)


@router.get("/{video_id}", response_model=VideoResponse)
def read_video(video_id: str, db: Session = Depends(get_db)):
    video = get_video(db, video_id)
    if video is None:
        raise NotFoundError("Couldn't find video")
    return video


@router.post("/{video_id}", response_model=VideoResponse)
async def upload_video(
    video_id: str,
    request: Request,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    upload_service: FileUploadService = Depends(get_upload_service),
):
    """
    Upload the MP4 file for a video owned by the caller.

    The payload is staged in a temp file, transferred to the object store,
    and the record's video URL is pointed at the stored object.
    """
    video = await run_in_threadpool(get_video, db, video_id)
    if video is None:
        raise BadRequestError("Couldn't find video")

    if video.user_id != user_id:
        raise UserForbiddenError("You are not allowed to upload a video for this user")

    form = await request.form()
    try:
        file = form.get("video")
        if not isinstance(file, UploadFile):
            raise BadRequestError("Video file missing")

        if file.size is not None and file.size > MAX_UPLOAD_SIZE:
            raise BadRequestError("Video file too large")

        if file.content_type != ALLOWED_MEDIA_TYPE:
            raise BadRequestError("Video file must be in MP4 format")

        logger.info(f"Uploading video for {video_id} by user {user_id}")

        extension = ALLOWED_MEDIA_TYPE.split("/")[1]
        try:
            object_key = await upload_service.execute_upload(file, extension, ALLOWED_MEDIA_TYPE)
        except UploadFailedError as e:
            logger.error(f"Video upload for {video_id} failed: {e}")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Couldn't upload video"
            )
    finally:
        await form.close()

    video.video_url = upload_service.public_url(object_key)
    return await run_in_threadpool(update_video, db, video)
