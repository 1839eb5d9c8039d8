"""
Data Contracts for the Transfer Eligibility Engine

Defines Pydantic models for the player data the engine reads (input) and the
visa scores it produces (output).
These contracts are the API boundary for the scoring engine.
"""

from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    AmberStatus,
    VisaType,
    VISA_ORDER,
    DEFAULT_LEAGUE_BAND,
    MINIMUM_MINUTES_REQUIRED,
    GREEN_MINUTES_THRESHOLD,
    YELLOW_MINUTES_THRESHOLD,
    GREEN_SCORE_THRESHOLD,
    YELLOW_SCORE_THRESHOLD,
    GBE_GREEN_POINTS,
    GBE_YELLOW_POINTS,
    MINUTES_PER_CAP,
    MAX_AGGREGATE_RECOMMENDATIONS,
)


# =============================================================================
# CONFIGURATION
# =============================================================================

class ScoringThresholds(BaseModel):
    """
    Thresholds the engine decides against.
    Pass a custom instance to any calculator to override the defaults.
    """
    # Calculators divide by the minimum
    minimum_minutes: int = Field(MINIMUM_MINUTES_REQUIRED, gt=0)
    green_minutes: int = Field(GREEN_MINUTES_THRESHOLD, ge=0)
    yellow_minutes: int = Field(YELLOW_MINUTES_THRESHOLD, ge=0)
    green_score: int = Field(GREEN_SCORE_THRESHOLD, ge=0, le=100)
    yellow_score: int = Field(YELLOW_SCORE_THRESHOLD, ge=0, le=100)
    gbe_green_points: int = Field(GBE_GREEN_POINTS, ge=0)
    gbe_yellow_points: int = Field(GBE_YELLOW_POINTS, ge=0)
    minutes_per_cap: int = Field(MINUTES_PER_CAP, ge=0)
    max_recommendations: int = Field(MAX_AGGREGATE_RECOMMENDATIONS, ge=0)

    model_config = ConfigDict(frozen=True)


DEFAULT_THRESHOLDS = ScoringThresholds()


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class Player(BaseModel):
    """
    Biographical / contract record.
    Only the fields the calculators read are modelled; all are optional.
    """
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    # Manually entered minutes
    club_minutes_current_season: Optional[int] = 0
    club_minutes_last_12_months: Optional[int] = 0
    international_minutes_current_season: Optional[int] = 0
    international_minutes_last_12_months: Optional[int] = 0

    continental_games: Optional[int] = 0
    market_value: Optional[float] = None
    agent_name: Optional[str] = None
    contract_end_date: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class PlayerMetrics(BaseModel):
    """Season-level performance snapshot."""
    season: Optional[str] = None
    current_season_minutes: Optional[int] = 0
    goals: Optional[int] = 0
    assists: Optional[int] = 0

    model_config = ConfigDict(frozen=True)


class Video(BaseModel):
    """Uploaded match video."""
    id: Optional[str] = None
    title: Optional[str] = None
    minutes_played: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class VideoInsights(BaseModel):
    """AI-derived analytics for one video."""
    video_id: Optional[str] = None
    minutes_played: Optional[int] = 0
    ai_analysis: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class PlayerInternationalRecord(BaseModel):
    """One row per (player, national team, level)."""
    national_team: Optional[str] = None
    team_level: Optional[str] = "senior"  # senior / u23 / u21 / u19 / ...
    caps: Optional[int] = 0

    model_config = ConfigDict(frozen=True)


class InvitationLetter(BaseModel):
    """Trial / transfer invitation. Not read by the calculators."""
    target_club_name: Optional[str] = None
    target_league: Optional[str] = None
    target_league_band: Optional[int] = None
    target_country: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ScoringData(BaseModel):
    """
    Input bundle for the scoring engine.
    Built by the caller from already-loaded rows.
    """
    player: Player = Field(default_factory=Player)
    metrics: List[PlayerMetrics] = Field(default_factory=list)
    videos: List[Video] = Field(default_factory=list)
    video_insights: List[VideoInsights] = Field(default_factory=list)
    international_records: List[PlayerInternationalRecord] = Field(default_factory=list)
    invitation_letters: List[InvitationLetter] = Field(default_factory=list)
    league_band: int = DEFAULT_LEAGUE_BAND  # 1 = strongest, 5 = weakest

    model_config = ConfigDict(frozen=True)


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class AggregatedMetrics(BaseModel):
    """
    Reconciled minutes and caps shared by every calculator.
    Computed once per evaluation by metrics.aggregate_metrics.
    """
    club_minutes: int = 0
    international_minutes: int = 0
    video_minutes: int = 0
    total_caps: int = 0
    senior_caps: int = 0
    continental_games: int = 0

    model_config = ConfigDict(frozen=True)

    @property
    def total_minutes(self) -> int:
        return self.club_minutes + self.international_minutes + self.video_minutes


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class SchengenBreakdown(BaseModel):
    visa_type: Literal["schengen"] = "schengen"
    minutes_score: float = 0.0
    international_score: float = 0.0
    league_score: float = 0.0
    performance_score: float = 0.0


class O1Breakdown(BaseModel):
    visa_type: Literal["o1"] = "o1"
    recognition_score: float = 0.0
    international_score: float = 0.0
    market_score: float = 0.0
    performance_score: float = 0.0


class P1Breakdown(BaseModel):
    visa_type: Literal["p1"] = "p1"
    minutes_score: float = 0.0
    league_score: float = 0.0
    video_score: float = 0.0
    validation_score: float = 0.0


class GBEBreakdown(BaseModel):
    """Raw points-table values; gbe_points is their sum (0-50)."""
    visa_type: Literal["uk_gbe"] = "uk_gbe"
    national_team_points: int = 0
    club_league_points: int = 0
    continental_points: int = 0
    minutes_points: int = 0
    gbe_points: int = 0


class ESCBreakdown(BaseModel):
    """
    ESC bonuses on top of the base score.
    All zero when GBE status alone decided the outcome.
    """
    visa_type: Literal["esc"] = "esc"
    gbe: GBEBreakdown = Field(default_factory=GBEBreakdown)
    base_score: int = 0
    caps_bonus: int = 0
    minutes_bonus: int = 0
    video_bonus: int = 0
    performance_bonus: int = 0


VisaBreakdown = Annotated[
    Union[SchengenBreakdown, O1Breakdown, P1Breakdown, GBEBreakdown, ESCBreakdown],
    Field(discriminator="visa_type"),
]


class VisaScoreResult(BaseModel):
    """Score, verdict and explanation for a single visa category."""
    score: int = Field(ge=0, le=100)
    status: AmberStatus
    breakdown: VisaBreakdown
    recommendations: List[str] = Field(default_factory=list)

    model_config = ConfigDict(use_enum_values=True, frozen=True)

    @property
    def visa_type(self) -> VisaType:
        return VisaType(self.breakdown.visa_type)


class TransferEligibilityResult(BaseModel):
    """
    Output contract for the scoring engine.
    All five visa results plus reconciled totals and merged recommendations.
    """
    # Reconciled totals
    total_minutes_verified: int = 0
    club_minutes: int = 0
    international_minutes: int = 0
    video_minutes: int = 0
    total_caps: int = 0
    senior_caps: int = 0
    continental_appearances: int = 0

    overall_status: AmberStatus

    # Per-visa results
    schengen: VisaScoreResult
    o1: VisaScoreResult
    p1: VisaScoreResult
    uk_gbe: VisaScoreResult
    esc: VisaScoreResult

    esc_eligible: bool = False
    minutes_needed: int = 0
    caps_needed: int = 0
    recommendations: List[str] = Field(default_factory=list)

    model_config = ConfigDict(use_enum_values=True, frozen=True)

    def visa_results(self) -> List[VisaScoreResult]:
        """Visa results in calculator order."""
        return [getattr(self, visa.value) for visa in VISA_ORDER]
