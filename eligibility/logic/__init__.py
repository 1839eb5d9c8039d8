"""
Eligibility Logic Module

Provides the deterministic scoring engine for multi-jurisdiction transfer
visa eligibility.
"""

from .contracts import (
    ScoringData,
    ScoringThresholds,
    Player,
    PlayerMetrics,
    Video,
    VideoInsights,
    PlayerInternationalRecord,
    InvitationLetter,
    AggregatedMetrics,
    VisaScoreResult,
    TransferEligibilityResult,
    SchengenBreakdown,
    O1Breakdown,
    P1Breakdown,
    GBEBreakdown,
    ESCBreakdown,
)
from .engine import EligibilityEngine, get_transfer_eligibility
from .aggregator import calculate_transfer_eligibility
from .visa_scorers import (
    calculate_schengen_score,
    calculate_o1_score,
    calculate_p1_score,
    calculate_uk_gbe_score,
    calculate_esc_score,
)
from .constants import AmberStatus, VisaType

__all__ = [
    # Main engine
    "EligibilityEngine",
    "get_transfer_eligibility",
    "calculate_transfer_eligibility",

    # Calculators
    "calculate_schengen_score",
    "calculate_o1_score",
    "calculate_p1_score",
    "calculate_uk_gbe_score",
    "calculate_esc_score",

    # Contracts
    "ScoringData",
    "ScoringThresholds",
    "Player",
    "PlayerMetrics",
    "Video",
    "VideoInsights",
    "PlayerInternationalRecord",
    "InvitationLetter",
    "AggregatedMetrics",
    "VisaScoreResult",
    "TransferEligibilityResult",
    "SchengenBreakdown",
    "O1Breakdown",
    "P1Breakdown",
    "GBEBreakdown",
    "ESCBreakdown",

    # Enums
    "AmberStatus",
    "VisaType",
]
