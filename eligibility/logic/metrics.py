"""
Metrics Aggregation

Reconciles minutes and caps entered through more than one data path
(manual player fields vs. derived rows) into single numbers.
Each figure is the larger of two independent sources, never their sum,
so double data entry does not inflate totals.
"""

from typing import Iterable, Tuple

from .contracts import (
    AggregatedMetrics,
    Player,
    PlayerInternationalRecord,
    PlayerMetrics,
    ScoringData,
    ScoringThresholds,
    DEFAULT_THRESHOLDS,
    Video,
    VideoInsights,
)
from .constants import (
    LEAGUE_BAND_MULTIPLIER_MAP,
    DEFAULT_LEAGUE_BAND_MULTIPLIER,
    MINUTES_PER_CAP,
)

SENIOR_TEAM_LEVEL = "senior"


def club_minutes(player: Player, metrics: Iterable[PlayerMetrics]) -> int:
    """Manual club minutes vs. summed season minutes."""
    player_minutes = (player.club_minutes_current_season or 0) + (player.club_minutes_last_12_months or 0)
    metrics_minutes = sum(m.current_season_minutes or 0 for m in metrics)
    return max(player_minutes, metrics_minutes)


def international_minutes(
    player: Player,
    records: Iterable[PlayerInternationalRecord],
    minutes_per_cap: int = MINUTES_PER_CAP
) -> int:
    """Manual international minutes vs. an estimate from recorded caps."""
    player_minutes = (
        (player.international_minutes_current_season or 0)
        + (player.international_minutes_last_12_months or 0)
    )
    estimated_from_caps = sum(r.caps or 0 for r in records) * minutes_per_cap
    return max(player_minutes, estimated_from_caps)


def video_minutes(videos: Iterable[Video], insights: Iterable[VideoInsights]) -> int:
    from_videos = sum(v.minutes_played or 0 for v in videos)
    from_insights = sum(i.minutes_played or 0 for i in insights)
    return max(from_videos, from_insights)


def total_caps(records: Iterable[PlayerInternationalRecord]) -> Tuple[int, int]:
    """
    Sum caps across all records.

    Returns:
        (total, senior) - youth levels count towards total only
    """
    total = 0
    senior = 0
    for record in records:
        caps = record.caps or 0
        total += caps
        if record.team_level == SENIOR_TEAM_LEVEL:
            senior += caps
    return total, senior


def league_band_multiplier(band: int) -> float:
    """Multiplier used by the weighted-sum calculators (Schengen, O-1, P-1)."""
    return LEAGUE_BAND_MULTIPLIER_MAP.get(band, DEFAULT_LEAGUE_BAND_MULTIPLIER)


def aggregate_metrics(
    data: ScoringData,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS
) -> AggregatedMetrics:
    """
    Run every reconciliation once for an input bundle.

    Args:
        data: Scoring input bundle
        thresholds: Supplies the minutes-per-cap estimate

    Returns:
        AggregatedMetrics shared by all calculators
    """
    total, senior = total_caps(data.international_records)
    return AggregatedMetrics(
        club_minutes=club_minutes(data.player, data.metrics),
        international_minutes=international_minutes(
            data.player, data.international_records, thresholds.minutes_per_cap
        ),
        video_minutes=video_minutes(data.videos, data.video_insights),
        total_caps=total,
        senior_caps=senior,
        continental_games=data.player.continental_games or 0,
    )
