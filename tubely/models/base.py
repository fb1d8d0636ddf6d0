"""
Base model classes
"""

import uuid

from sqlalchemy import Column, String, DateTime, func
from tubely.core.database import Base

def new_id() -> str:
    return str(uuid.uuid4())

class BaseModel(Base):
    __abstract__ = True

    id = Column(String(36), primary_key=True, index=True, default=new_id)
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)
