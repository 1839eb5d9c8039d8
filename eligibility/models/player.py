import uuid
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, Float, DateTime

from .base import Base


class PlayerRow(Base):
    __tablename__ = "players"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    nationality = Column(Text)
    position = Column(Text)
    current_club_name = Column(Text)

    # Manually entered minutes
    club_minutes_current_season = Column(Integer, default=0)
    club_minutes_last_12_months = Column(Integer, default=0)
    international_minutes_current_season = Column(Integer, default=0)
    international_minutes_last_12_months = Column(Integer, default=0)

    continental_games = Column(Integer, default=0)
    market_value = Column(Float)
    agent_name = Column(Text)
    contract_end_date = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow)


class PlayerMetricsRow(Base):
    __tablename__ = "player_metrics"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    player_id = Column(String(36), nullable=False, index=True)
    season = Column(Text, nullable=False)
    current_season_minutes = Column(Integer, default=0)
    games_played = Column(Integer, default=0)
    goals = Column(Integer, default=0)
    assists = Column(Integer, default=0)
    updated_at = Column(DateTime, default=datetime.utcnow)
