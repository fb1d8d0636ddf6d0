"""
Record store accessors for video rows
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from tubely.models.video import Video


def get_video(db: Session, video_id: str) -> Optional[Video]:
    return db.get(Video, video_id)


def get_videos(db: Session, user_id: str) -> List[Video]:
    """All videos owned by a user, newest first"""
    return (
        db.query(Video)
        .filter(Video.user_id == user_id)
        .order_by(Video.created_at.desc())
        .all()
    )


def create_video(db: Session, user_id: str, title: str, description: str = "") -> Video:
    video = Video(user_id=user_id, title=title, description=description)
    db.add(video)
    db.commit()
    db.refresh(video)
    return video


def update_video(db: Session, video: Video) -> Video:
    """Persist changes made to a loaded video and reload it"""
    db.add(video)
    db.commit()
    db.refresh(video)
    return video
