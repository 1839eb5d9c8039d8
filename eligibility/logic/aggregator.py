"""
Eligibility Aggregator

Runs metrics aggregation once, invokes every visa scorer and combines the
results into an overall verdict with merged recommendations.
"""

from typing import Iterable, List

from .contracts import (
    ScoringData,
    ScoringThresholds,
    DEFAULT_THRESHOLDS,
    TransferEligibilityResult,
)
from .metrics import aggregate_metrics
from .visa_scorers import (
    calculate_schengen_score,
    calculate_o1_score,
    calculate_p1_score,
    calculate_uk_gbe_score,
    calculate_esc_score,
)
from .constants import AmberStatus, GBE_TARGET_SENIOR_CAPS


def determine_overall_status(
    total_minutes: int,
    max_score: int,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS
) -> AmberStatus:
    """
    Overall verdict across all visa types.

    Green needs BOTH enough minutes and a green-level best score;
    yellow needs EITHER yellow-level minutes or a yellow-level best score.
    """
    if total_minutes >= thresholds.green_minutes and max_score >= thresholds.green_score:
        return AmberStatus.GREEN
    if total_minutes >= thresholds.yellow_minutes or max_score >= thresholds.yellow_score:
        return AmberStatus.YELLOW
    return AmberStatus.RED


def minutes_status(
    minutes: int,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS
) -> AmberStatus:
    """Verdict on verified minutes alone."""
    if minutes >= thresholds.green_minutes:
        return AmberStatus.GREEN
    if minutes >= thresholds.yellow_minutes:
        return AmberStatus.YELLOW
    return AmberStatus.RED


def merge_recommendations(
    leading: Iterable[str],
    per_visa: Iterable[Iterable[str]],
    limit: int
) -> List[str]:
    """
    Concatenate recommendation lists, first occurrence wins, capped at limit.
    """
    merged: List[str] = []
    for recommendation in leading:
        if recommendation not in merged:
            merged.append(recommendation)
    for recommendations in per_visa:
        for recommendation in recommendations:
            if recommendation not in merged:
                merged.append(recommendation)
    return merged[:limit]


def calculate_transfer_eligibility(
    data: ScoringData,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS
) -> TransferEligibilityResult:
    """
    Compute all five visa scores and the overall verdict.

    Args:
        data: Scoring input bundle
        thresholds: Thresholds to decide against

    Returns:
        TransferEligibilityResult
    """
    agg = aggregate_metrics(data, thresholds)
    total_minutes = agg.total_minutes

    schengen = calculate_schengen_score(data, thresholds, agg)
    o1 = calculate_o1_score(data, thresholds, agg)
    p1 = calculate_p1_score(data, thresholds, agg)
    uk_gbe = calculate_uk_gbe_score(data, thresholds, agg)
    esc = calculate_esc_score(data, uk_gbe, thresholds, agg)
    visa_results = [schengen, o1, p1, uk_gbe, esc]

    max_score = max(result.score for result in visa_results)
    overall_status = determine_overall_status(total_minutes, max_score, thresholds)

    minutes_needed = max(0, thresholds.minimum_minutes - total_minutes)

    caps_needed = 0
    if uk_gbe.status != AmberStatus.GREEN and agg.senior_caps < GBE_TARGET_SENIOR_CAPS:
        caps_needed = GBE_TARGET_SENIOR_CAPS - agg.senior_caps

    leading: List[str] = []
    if minutes_needed > 0:
        leading.append(
            f"Play {minutes_needed} more minutes to reach minimum {thresholds.minimum_minutes} minutes"
        )
    if caps_needed > 0:
        leading.append(f"Earn {caps_needed} more senior international caps for UK GBE eligibility")

    recommendations = merge_recommendations(
        leading,
        (result.recommendations for result in visa_results),
        thresholds.max_recommendations,
    )

    return TransferEligibilityResult(
        total_minutes_verified=total_minutes,
        club_minutes=agg.club_minutes,
        international_minutes=agg.international_minutes,
        video_minutes=agg.video_minutes,
        total_caps=agg.total_caps,
        senior_caps=agg.senior_caps,
        continental_appearances=agg.continental_games,
        overall_status=overall_status,
        schengen=schengen,
        o1=o1,
        p1=p1,
        uk_gbe=uk_gbe,
        esc=esc,
        esc_eligible=uk_gbe.status == AmberStatus.YELLOW,
        minutes_needed=minutes_needed,
        caps_needed=caps_needed,
        recommendations=recommendations,
    )
