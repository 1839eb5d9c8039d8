"""
Visa Scorers

Individual scoring functions for each visa / endorsement category.
Each scorer produces an integer score between 0 and 100 with a status and
explanatory recommendations.
All logic is deterministic - no AI/ML components.
"""

import math
from typing import List, Optional, Sequence, Tuple

from .contracts import (
    AggregatedMetrics,
    ScoringData,
    ScoringThresholds,
    DEFAULT_THRESHOLDS,
    VisaScoreResult,
    SchengenBreakdown,
    O1Breakdown,
    P1Breakdown,
    GBEBreakdown,
    ESCBreakdown,
    PlayerMetrics,
)
from .metrics import aggregate_metrics, league_band_multiplier
from .constants import (
    AmberStatus,
    GBE_MAX_POINTS,
    GBE_NATIONAL_TEAM_POINTS,
    GBE_CLUB_LEAGUE_POINTS,
    GBE_DEFAULT_CLUB_LEAGUE_POINTS,
    GBE_CONTINENTAL_POINTS,
    GBE_MINUTES_POINTS,
    GBE_TARGET_SENIOR_CAPS,
    GBE_TARGET_DOMESTIC_MINUTES,
    ESC_BASE_SCORE,
    ESC_MAX_SCORE,
    ESC_CAPS_BONUS,
    ESC_PARTIAL_MINUTES,
    ESC_FULL_MINUTES_BONUS,
    ESC_PARTIAL_MINUTES_BONUS,
    ESC_VIDEO_BONUS,
    ESC_GOAL_CONTRIBUTION_BONUS,
    ESC_TARGET_SENIOR_CAPS,
    ESC_TARGET_VIDEOS,
    SCHENGEN_MINUTES_MAX,
    SCHENGEN_INTERNATIONAL_MAX,
    SCHENGEN_POINTS_PER_CAP,
    SCHENGEN_LEAGUE_WEIGHT,
    SCHENGEN_PERFORMANCE_MAX,
    SCHENGEN_POINTS_PER_GOAL_CONTRIBUTION,
    SCHENGEN_TARGET_CAPS,
    O1_RECOGNITION_MAX,
    O1_RECOGNITION_MARKET_VALUE,
    O1_RECOGNITION_VALUE_PER_POINT,
    O1_INTERNATIONAL_MAX,
    O1_POINTS_PER_SENIOR_CAP,
    O1_POINTS_PER_CONTINENTAL_GAME,
    O1_MARKET_MAX,
    O1_MARKET_VALUE_CEILING,
    O1_PERFORMANCE_MAX,
    O1_POINTS_PER_ANALYZED_VIDEO,
    O1_MINUTES_BONUS,
    O1_TARGET_SENIOR_CAPS,
    P1_MINUTES_MAX,
    P1_LEAGUE_WEIGHT,
    P1_VIDEO_MAX,
    P1_POINTS_PER_VIDEO,
    P1_AGENT_POINTS,
    P1_CONTRACT_POINTS,
    P1_TARGET_VIDEOS,
)


# =============================================================================
# SHARED HELPERS
# =============================================================================

def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 always rounding up."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round and keep a score within 0-100."""
    return max(0, min(100, round_half_up(value)))


def status_for_score(
    score: float,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS
) -> AmberStatus:
    """Standard verdict used by Schengen, O-1, P-1 and ESC."""
    if score >= thresholds.green_score:
        return AmberStatus.GREEN
    if score >= thresholds.yellow_score:
        return AmberStatus.YELLOW
    return AmberStatus.RED


def status_for_gbe_points(
    gbe_points: int,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS
) -> AmberStatus:
    """GBE verdict, decided on raw points rather than the normalized score."""
    if gbe_points >= thresholds.gbe_green_points:
        return AmberStatus.GREEN
    if gbe_points >= thresholds.gbe_yellow_points:
        return AmberStatus.YELLOW
    return AmberStatus.RED


def points_from_table(value: float, table: Sequence[Tuple[int, int]]) -> int:
    """Look up points in a (minimum, points) table ordered highest first."""
    for minimum, points in table:
        if value >= minimum:
            return points
    return 0


def goal_contributions(metrics: Sequence[PlayerMetrics]) -> int:
    """Goals + assists from the first (representative) metrics row."""
    if not metrics:
        return 0
    first = metrics[0]
    return (first.goals or 0) + (first.assists or 0)


def _resolve_metrics(
    data: ScoringData,
    thresholds: ScoringThresholds,
    aggregated: Optional[AggregatedMetrics]
) -> AggregatedMetrics:
    if aggregated is not None:
        return aggregated
    return aggregate_metrics(data, thresholds)


# =============================================================================
# SCHENGEN
# =============================================================================

def calculate_schengen_score(
    data: ScoringData,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
    aggregated: Optional[AggregatedMetrics] = None
) -> VisaScoreResult:
    """
    Score Schengen work-permit eligibility.

    Weighted sum of:
    - Minutes played (linear ramp to the minimum-minutes threshold)
    - International caps (all levels)
    - League strength
    - Goal contributions
    """
    agg = _resolve_metrics(data, thresholds, aggregated)
    total_minutes = agg.total_minutes
    minimum = thresholds.minimum_minutes

    minutes_score = min(SCHENGEN_MINUTES_MAX, total_minutes / minimum * SCHENGEN_MINUTES_MAX)
    international_score = min(SCHENGEN_INTERNATIONAL_MAX, agg.total_caps * SCHENGEN_POINTS_PER_CAP)
    league_score = SCHENGEN_LEAGUE_WEIGHT * league_band_multiplier(data.league_band)
    performance_score = min(
        SCHENGEN_PERFORMANCE_MAX,
        goal_contributions(data.metrics) * SCHENGEN_POINTS_PER_GOAL_CONTRIBUTION,
    )

    score = clamp_score(minutes_score + international_score + league_score + performance_score)

    recommendations: List[str] = []
    if total_minutes < minimum:
        recommendations.append(
            f"Play {minimum - total_minutes} more minutes to reach minimum threshold"
        )
    if agg.total_caps < SCHENGEN_TARGET_CAPS:
        recommendations.append(
            f"Earn {SCHENGEN_TARGET_CAPS - agg.total_caps} more international caps to strengthen application"
        )

    return VisaScoreResult(
        score=score,
        status=status_for_score(score, thresholds),
        breakdown=SchengenBreakdown(
            minutes_score=minutes_score,
            international_score=international_score,
            league_score=league_score,
            performance_score=performance_score,
        ),
        recommendations=recommendations,
    )


# =============================================================================
# US O-1
# =============================================================================

def calculate_o1_score(
    data: ScoringData,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
    aggregated: Optional[AggregatedMetrics] = None
) -> VisaScoreResult:
    """
    Score US O-1 (extraordinary ability) eligibility.

    Weighted towards recognition rather than raw playing time:
    - Recognition (market value as proxy)
    - Senior caps and continental games
    - Market value percentile
    - Analyzed video evidence plus a minutes bonus
    """
    agg = _resolve_metrics(data, thresholds, aggregated)
    total_minutes = agg.total_minutes
    minimum = thresholds.minimum_minutes
    market_value = data.player.market_value or 0

    has_recognition = market_value > O1_RECOGNITION_MARKET_VALUE
    if has_recognition:
        recognition_score = O1_RECOGNITION_MAX
    else:
        recognition_score = min(O1_RECOGNITION_MAX, market_value / O1_RECOGNITION_VALUE_PER_POINT)

    international_score = min(
        O1_INTERNATIONAL_MAX,
        agg.senior_caps * O1_POINTS_PER_SENIOR_CAP
        + agg.continental_games * O1_POINTS_PER_CONTINENTAL_GAME,
    )

    market_score = min(O1_MARKET_MAX, market_value / O1_MARKET_VALUE_CEILING * O1_MARKET_MAX)

    analyzed_videos = sum(1 for i in data.video_insights if i.ai_analysis)
    minutes_bonus = O1_MINUTES_BONUS if total_minutes >= minimum else 0
    performance_score = min(
        O1_PERFORMANCE_MAX,
        analyzed_videos * O1_POINTS_PER_ANALYZED_VIDEO + minutes_bonus,
    )

    score = clamp_score(recognition_score + international_score + market_score + performance_score)

    recommendations: List[str] = []
    if not has_recognition:
        recommendations.append(
            "Increase market value or obtain recognition/awards for extraordinary ability"
        )
    if agg.senior_caps < O1_TARGET_SENIOR_CAPS:
        recommendations.append(
            f"Earn {O1_TARGET_SENIOR_CAPS - agg.senior_caps} more senior international caps"
        )
    if total_minutes < minimum:
        recommendations.append(f"Record {minimum - total_minutes} more verified minutes")

    return VisaScoreResult(
        score=score,
        status=status_for_score(score, thresholds),
        breakdown=O1Breakdown(
            recognition_score=recognition_score,
            international_score=international_score,
            market_score=market_score,
            performance_score=performance_score,
        ),
        recommendations=recommendations,
    )


# =============================================================================
# US P-1
# =============================================================================

def calculate_p1_score(
    data: ScoringData,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
    aggregated: Optional[AggregatedMetrics] = None
) -> VisaScoreResult:
    """
    Score US P-1 (internationally recognized athlete) eligibility.

    Considers minutes, league strength, uploaded video volume and whether
    agent and contract details are on file.
    """
    agg = _resolve_metrics(data, thresholds, aggregated)
    total_minutes = agg.total_minutes
    minimum = thresholds.minimum_minutes
    video_count = len(data.videos)

    minutes_score = min(P1_MINUTES_MAX, total_minutes / minimum * P1_MINUTES_MAX)
    league_score = P1_LEAGUE_WEIGHT * league_band_multiplier(data.league_band)
    video_score = min(P1_VIDEO_MAX, video_count * P1_POINTS_PER_VIDEO)

    has_agent = bool(data.player.agent_name)
    has_contract = bool(data.player.contract_end_date)
    validation_score = (P1_AGENT_POINTS if has_agent else 0) + (P1_CONTRACT_POINTS if has_contract else 0)

    score = clamp_score(minutes_score + league_score + video_score + validation_score)

    recommendations: List[str] = []
    if total_minutes < minimum:
        recommendations.append(f"Record {minimum - total_minutes} more professional minutes")
    if not has_agent:
        recommendations.append("Register an agent contact for validation")
    if video_count < P1_TARGET_VIDEOS:
        recommendations.append(f"Upload {P1_TARGET_VIDEOS - video_count} more performance videos")

    return VisaScoreResult(
        score=score,
        status=status_for_score(score, thresholds),
        breakdown=P1Breakdown(
            minutes_score=minutes_score,
            league_score=league_score,
            video_score=video_score,
            validation_score=validation_score,
        ),
        recommendations=recommendations,
    )


# =============================================================================
# UK GBE
# =============================================================================

def calculate_uk_gbe_score(
    data: ScoringData,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
    aggregated: Optional[AggregatedMetrics] = None
) -> VisaScoreResult:
    """
    Score the UK Governing Body Endorsement with a discrete points table.

    Four tables (national team, club league, continental games, domestic
    minutes) sum to at most 50 raw points. Status is decided on the raw
    points; the returned score is the points normalized to 0-100.
    """
    agg = _resolve_metrics(data, thresholds, aggregated)
    total_minutes = agg.total_minutes
    domestic_minutes = agg.club_minutes
    minimum = thresholds.minimum_minutes

    national_team_points = points_from_table(agg.senior_caps, GBE_NATIONAL_TEAM_POINTS)
    club_league_points = GBE_CLUB_LEAGUE_POINTS.get(data.league_band, GBE_DEFAULT_CLUB_LEAGUE_POINTS)
    continental_points = points_from_table(agg.continental_games, GBE_CONTINENTAL_POINTS)
    minutes_points = points_from_table(domestic_minutes, GBE_MINUTES_POINTS)

    gbe_points = national_team_points + club_league_points + continental_points + minutes_points
    status = status_for_gbe_points(gbe_points, thresholds)

    recommendations: List[str] = []
    if gbe_points < thresholds.gbe_green_points:
        recommendations.append(
            f"Need {thresholds.gbe_green_points - gbe_points} more GBE points to qualify automatically"
        )
        if agg.senior_caps < GBE_TARGET_SENIOR_CAPS:
            gain = points_from_table(GBE_TARGET_SENIOR_CAPS, GBE_NATIONAL_TEAM_POINTS) - national_team_points
            recommendations.append(
                f"Earn {GBE_TARGET_SENIOR_CAPS - agg.senior_caps} senior international caps (+{gain} points)"
            )
        if domestic_minutes < GBE_TARGET_DOMESTIC_MINUTES:
            gain = points_from_table(GBE_TARGET_DOMESTIC_MINUTES, GBE_MINUTES_POINTS) - minutes_points
            recommendations.append(
                f"Play {GBE_TARGET_DOMESTIC_MINUTES - domestic_minutes} more domestic league minutes "
                f"(+{gain} points at {GBE_TARGET_DOMESTIC_MINUTES} mins)"
            )
        if total_minutes < minimum:
            recommendations.append(f"Record {minimum - total_minutes} more verified minutes")

    return VisaScoreResult(
        score=clamp_score(gbe_points / GBE_MAX_POINTS * 100),
        status=status,
        breakdown=GBEBreakdown(
            national_team_points=national_team_points,
            club_league_points=club_league_points,
            continental_points=continental_points,
            minutes_points=minutes_points,
            gbe_points=gbe_points,
        ),
        recommendations=recommendations,
    )


# =============================================================================
# UK ESC
# =============================================================================

def calculate_esc_score(
    data: ScoringData,
    gbe_result: VisaScoreResult,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
    aggregated: Optional[AggregatedMetrics] = None
) -> VisaScoreResult:
    """
    Score the UK ESC route, gated on an already computed GBE result.

    - GBE green: ESC is moot, player qualifies through GBE (score 100)
    - GBE red: ESC is out of reach (score 0)
    - GBE yellow: independent ESC score from a base of 50 plus bonuses
    """
    gbe_breakdown = gbe_result.breakdown
    if not isinstance(gbe_breakdown, GBEBreakdown):
        raise TypeError("calculate_esc_score expects a UK GBE result")

    if gbe_result.status == AmberStatus.GREEN:
        return VisaScoreResult(
            score=ESC_MAX_SCORE,
            status=AmberStatus.GREEN,
            breakdown=ESCBreakdown(gbe=gbe_breakdown),
            recommendations=["Player qualifies via standard GBE route"],
        )
    if gbe_result.status != AmberStatus.YELLOW:
        return VisaScoreResult(
            score=0,
            status=AmberStatus.RED,
            breakdown=ESCBreakdown(gbe=gbe_breakdown),
            recommendations=[
                f"Player must first reach GBE yellow zone ({thresholds.gbe_yellow_points}+ points) "
                "for ESC consideration"
            ],
        )

    agg = _resolve_metrics(data, thresholds, aggregated)
    total_minutes = agg.total_minutes
    minimum = thresholds.minimum_minutes
    video_count = len(data.videos)

    caps_bonus = points_from_table(agg.senior_caps, ESC_CAPS_BONUS)
    if total_minutes >= minimum:
        minutes_bonus = ESC_FULL_MINUTES_BONUS
    elif total_minutes >= ESC_PARTIAL_MINUTES:
        minutes_bonus = ESC_PARTIAL_MINUTES_BONUS
    else:
        minutes_bonus = 0
    video_bonus = points_from_table(video_count, ESC_VIDEO_BONUS)
    performance_bonus = points_from_table(goal_contributions(data.metrics), ESC_GOAL_CONTRIBUTION_BONUS)

    score = min(
        ESC_MAX_SCORE,
        ESC_BASE_SCORE + caps_bonus + minutes_bonus + video_bonus + performance_bonus,
    )

    recommendations: List[str] = []
    if agg.senior_caps < ESC_TARGET_SENIOR_CAPS:
        recommendations.append(
            f"Earn {ESC_TARGET_SENIOR_CAPS - agg.senior_caps} more senior caps to strengthen ESC case"
        )
    if total_minutes < minimum:
        recommendations.append(f"Record {minimum - total_minutes} more verified minutes")
    if video_count < ESC_TARGET_VIDEOS:
        recommendations.append(f"Upload {ESC_TARGET_VIDEOS - video_count} more video evidence clips")

    return VisaScoreResult(
        score=score,
        status=status_for_score(score, thresholds),
        breakdown=ESCBreakdown(
            gbe=gbe_breakdown,
            base_score=ESC_BASE_SCORE,
            caps_bonus=caps_bonus,
            minutes_bonus=minutes_bonus,
            video_bonus=video_bonus,
            performance_bonus=performance_bonus,
        ),
        recommendations=recommendations,
    )
