import uuid
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, Float, Boolean, DateTime, JSON

from .base import Base


class TransferEligibilityAssessment(Base):
    __tablename__ = "transfer_eligibility_assessments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    player_id = Column(String(36), nullable=False, unique=True, index=True)

    # Reconciled totals
    total_minutes_verified = Column(Integer, default=0)
    club_minutes = Column(Integer, default=0)
    international_minutes = Column(Integer, default=0)
    video_minutes = Column(Integer, default=0)
    total_caps = Column(Integer, default=0)
    senior_caps = Column(Integer, default=0)
    continental_appearances = Column(Integer, default=0)
    overall_status = Column(Text, nullable=False, default="red")

    # Per-visa scores
    schengen_score = Column(Float, default=0)
    schengen_status = Column(Text, default="red")
    o1_score = Column(Float, default=0)
    o1_status = Column(Text, default="red")
    p1_score = Column(Float, default=0)
    p1_status = Column(Text, default="red")
    uk_gbe_score = Column(Float, default=0)
    uk_gbe_status = Column(Text, default="red")
    esc_score = Column(Float, default=0)
    esc_status = Column(Text, default="red")
    esc_eligible = Column(Boolean, default=False)

    # Shortfalls & explainability
    minutes_needed = Column(Integer, default=0)
    caps_needed = Column(Integer, default=0)
    recommendations = Column(JSON)
    visa_breakdown = Column(JSON)

    calculated_at = Column(DateTime, default=datetime.utcnow)
    valid_until = Column(DateTime)

    def to_dict(self) -> dict:
        return {
            column.name: (
                value.isoformat() if isinstance(value, datetime) else value
            )
            for column in self.__table__.columns
            for value in [getattr(self, column.name)]
        }
