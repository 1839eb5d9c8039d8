import uuid
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime

from .base import Base


class VideoRow(Base):
    __tablename__ = "videos"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    player_id = Column(String(36), nullable=False, index=True)
    title = Column(Text, nullable=False)
    competition = Column(Text)
    minutes_played = Column(Integer)
    upload_date = Column(DateTime, default=datetime.utcnow)


class VideoInsightsRow(Base):
    __tablename__ = "video_insights"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    video_id = Column(String(36), nullable=False, index=True)
    player_id = Column(String(36), nullable=False, index=True)
    minutes_played = Column(Integer, default=0)
    ai_analysis = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)
