# Export all eligibility models for easy imports
from .base import Base
from .player import PlayerRow, PlayerMetricsRow
from .media import VideoRow, VideoInsightsRow
from .international import PlayerInternationalRecordRow, InvitationLetterRow
from .assessment import TransferEligibilityAssessment

__all__ = [
    "Base",
    "PlayerRow",
    "PlayerMetricsRow",
    "VideoRow",
    "VideoInsightsRow",
    "PlayerInternationalRecordRow",
    "InvitationLetterRow",
    "TransferEligibilityAssessment",
]
