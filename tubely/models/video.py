"""
Video model
"""

from sqlalchemy import Column, String, Text
from tubely.models.base import BaseModel

class Video(BaseModel):
    __tablename__ = "videos"

    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    thumbnail_url = Column(String, nullable=True)
    video_url = Column(String, nullable=True)
    user_id = Column(String(36), index=True, nullable=False)

    def __repr__(self):
        return f"<Video id={self.id} user_id={self.user_id}>"
