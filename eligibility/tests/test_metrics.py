"""
Tests for minutes / caps reconciliation.
"""

import pytest

from eligibility.logic.contracts import (
    Player,
    PlayerMetrics,
    Video,
    VideoInsights,
    PlayerInternationalRecord,
    ScoringData,
    ScoringThresholds,
)
from eligibility.logic.metrics import (
    club_minutes,
    international_minutes,
    video_minutes,
    total_caps,
    league_band_multiplier,
    aggregate_metrics,
)


def test_club_minutes_takes_max_not_sum():
    player = Player(club_minutes_current_season=500, club_minutes_last_12_months=0)
    metrics = [PlayerMetrics(current_season_minutes=900)]

    assert club_minutes(player, metrics) == 900


def test_club_minutes_prefers_manual_fields_when_larger():
    player = Player(club_minutes_current_season=600, club_minutes_last_12_months=400)
    metrics = [PlayerMetrics(current_season_minutes=300), PlayerMetrics(current_season_minutes=200)]

    assert club_minutes(player, metrics) == 1000


def test_missing_numeric_fields_count_as_zero():
    player = Player(club_minutes_current_season=None, club_minutes_last_12_months=None)
    metrics = [PlayerMetrics(current_season_minutes=None)]

    assert club_minutes(player, metrics) == 0
    assert club_minutes(Player(), []) == 0


def test_international_minutes_estimated_from_caps():
    records = [PlayerInternationalRecord(caps=10, team_level="senior")]

    assert international_minutes(Player(), records) == 450


def test_international_minutes_manual_fields_win_when_larger():
    player = Player(
        international_minutes_current_season=300,
        international_minutes_last_12_months=300,
    )
    records = [PlayerInternationalRecord(caps=10, team_level="senior")]

    assert international_minutes(player, records) == 600


def test_video_minutes_takes_larger_source():
    videos = [Video(minutes_played=90), Video(minutes_played=45), Video(minutes_played=None)]

    assert video_minutes(videos, [VideoInsights(minutes_played=90)]) == 135
    assert video_minutes(videos, [VideoInsights(minutes_played=200)]) == 200
    assert video_minutes([], []) == 0


def test_total_caps_splits_senior_from_youth():
    records = [
        PlayerInternationalRecord(caps=10, team_level="senior"),
        PlayerInternationalRecord(caps=4, team_level="u21"),
        PlayerInternationalRecord(caps=2, team_level="Senior"),
        PlayerInternationalRecord(caps=None, team_level="senior"),
    ]

    total, senior = total_caps(records)

    assert total == 16
    assert senior == 10


@pytest.mark.parametrize(
    "band, expected",
    [(1, 1.0), (2, 0.9), (3, 0.75), (4, 0.5), (5, 0.25), (0, 0.5), (7, 0.5)],
)
def test_league_band_multiplier(band, expected):
    assert league_band_multiplier(band) == expected


def test_aggregate_metrics_on_empty_bundle():
    agg = aggregate_metrics(ScoringData())

    assert agg.club_minutes == 0
    assert agg.international_minutes == 0
    assert agg.video_minutes == 0
    assert agg.total_minutes == 0
    assert agg.total_caps == 0
    assert agg.senior_caps == 0
    assert agg.continental_games == 0


def test_aggregate_metrics_sums_categories():
    data = ScoringData(
        player=Player(club_minutes_current_season=700, continental_games=4),
        international_records=[PlayerInternationalRecord(caps=2, team_level="senior")],
        videos=[Video(minutes_played=90)],
    )

    agg = aggregate_metrics(data)

    assert agg.total_minutes == 700 + 90 + 90
    assert agg.continental_games == 4


def test_minutes_per_cap_is_configurable():
    data = ScoringData(international_records=[PlayerInternationalRecord(caps=10)])

    agg = aggregate_metrics(data, ScoringThresholds(minutes_per_cap=90))

    assert agg.international_minutes == 900
