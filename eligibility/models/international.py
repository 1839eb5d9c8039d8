import uuid
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime

from .base import Base


class PlayerInternationalRecordRow(Base):
    __tablename__ = "player_international_records"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    player_id = Column(String(36), nullable=False, index=True)
    national_team = Column(Text, nullable=False)
    team_level = Column(Text, default="senior")
    caps = Column(Integer, default=0)
    goals = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)


class InvitationLetterRow(Base):
    __tablename__ = "invitation_letters"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    player_id = Column(String(36), nullable=False, index=True)
    target_club_name = Column(Text, nullable=False)
    target_league = Column(Text, nullable=False)
    target_league_band = Column(Integer, nullable=False)
    target_country = Column(Text, nullable=False)
    status = Column(String(32), default="pending")
    uploaded_at = Column(DateTime, default=datetime.utcnow)
