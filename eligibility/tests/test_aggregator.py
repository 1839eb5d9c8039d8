"""
Tests for the transfer eligibility aggregator.
"""

import pytest

from eligibility.logic.contracts import (
    Player,
    PlayerMetrics,
    Video,
    PlayerInternationalRecord,
    InvitationLetter,
    ScoringData,
    ScoringThresholds,
)
from eligibility.logic.aggregator import (
    calculate_transfer_eligibility,
    determine_overall_status,
    merge_recommendations,
    minutes_status,
)


def _strong_player_data():
    return ScoringData(
        player=Player(
            club_minutes_current_season=1000,
            market_value=2_000_000,
            agent_name="K. Mensah",
            contract_end_date="2027-06-30",
        ),
        metrics=[PlayerMetrics(goals=10, assists=5)],
        videos=[Video(title=f"Match {i}") for i in range(6)],
        international_records=[PlayerInternationalRecord(team_level="senior", caps=10)],
        league_band=1,
    )


@pytest.mark.parametrize(
    "minutes, max_score, expected",
    [
        (850, 70, "green"),
        (800, 60, "green"),
        (650, 20, "yellow"),
        (500, 40, "yellow"),
        (900, 50, "yellow"),
        (500, 20, "red"),
    ],
)
def test_overall_status_green_needs_both_yellow_needs_either(minutes, max_score, expected):
    assert determine_overall_status(minutes, max_score) == expected


@pytest.mark.parametrize("minutes, expected", [(800, "green"), (600, "yellow"), (599, "red")])
def test_minutes_status(minutes, expected):
    assert minutes_status(minutes) == expected


def test_merge_recommendations_dedups_and_caps():
    merged = merge_recommendations(
        ["a", "b"],
        [["b", "c"], ["c", "d"], ["e", "f"]],
        limit=5,
    )

    assert merged == ["a", "b", "c", "d", "e"]


def test_empty_profile_end_to_end():
    data = ScoringData(league_band=5, player=Player(market_value=0))

    result = calculate_transfer_eligibility(data)

    assert result.schengen.score == 5
    assert result.o1.score == 0
    assert result.p1.score == 6
    assert result.uk_gbe.breakdown.gbe_points == 2
    assert result.uk_gbe.status == "red"
    assert result.esc.score == 0
    assert result.esc.status == "red"
    assert result.esc_eligible is False
    assert result.overall_status == "red"
    assert result.minutes_needed == 800
    assert result.caps_needed == 5
    assert result.recommendations == [
        "Play 800 more minutes to reach minimum 800 minutes",
        "Earn 5 more senior international caps for UK GBE eligibility",
        "Play 800 more minutes to reach minimum threshold",
        "Earn 5 more international caps to strengthen application",
        "Increase market value or obtain recognition/awards for extraordinary ability",
    ]


def test_recommendations_deduplicated_across_visas():
    data = ScoringData(league_band=5)

    result = calculate_transfer_eligibility(data, ScoringThresholds(max_recommendations=50))

    assert len(result.recommendations) == 14
    assert len(set(result.recommendations)) == len(result.recommendations)
    assert result.recommendations.count("Record 800 more verified minutes") == 1


def test_recommendations_never_exceed_five():
    result = calculate_transfer_eligibility(ScoringData(league_band=4))

    assert len(result.recommendations) == 5


def test_strong_profile_is_green():
    result = calculate_transfer_eligibility(_strong_player_data())

    assert result.club_minutes == 1000
    assert result.international_minutes == 450
    assert result.video_minutes == 0
    assert result.total_minutes_verified == 1450
    assert result.total_caps == 10
    assert result.senior_caps == 10
    assert result.schengen.score == 98
    assert result.uk_gbe.status == "green"
    assert result.esc.score == 100
    assert result.overall_status == "green"
    assert result.esc_eligible is False
    assert result.minutes_needed == 0
    assert result.caps_needed == 0
    assert result.recommendations == ["Player qualifies via standard GBE route"]


def test_esc_eligible_mirrors_gbe_yellow():
    data = ScoringData(
        videos=[Video(title=f"Match {i}", minutes_played=90) for i in range(6)],
        international_records=[PlayerInternationalRecord(team_level="senior", caps=3)],
        league_band=3,
    )

    result = calculate_transfer_eligibility(data)

    assert result.uk_gbe.status == "yellow"
    assert result.esc_eligible is True
    assert result.caps_needed == 2
    assert result.recommendations[:2] == [
        "Play 125 more minutes to reach minimum 800 minutes",
        "Earn 2 more senior international caps for UK GBE eligibility",
    ]


def test_caps_needed_zero_when_gbe_green_with_few_caps():
    data = ScoringData(
        player=Player(club_minutes_current_season=1800, continental_games=5),
        league_band=3,
    )

    result = calculate_transfer_eligibility(data)

    assert result.senior_caps == 0
    assert result.uk_gbe.status == "green"
    assert result.caps_needed == 0


def test_minimum_minutes_is_configurable():
    data = ScoringData(player=Player(club_minutes_current_season=300))

    result = calculate_transfer_eligibility(data, ScoringThresholds(minimum_minutes=400))

    assert result.minutes_needed == 100
    assert result.recommendations[0] == "Play 100 more minutes to reach minimum 400 minutes"


def test_input_is_not_mutated():
    data = _strong_player_data()
    before = data.model_dump()

    calculate_transfer_eligibility(data)

    assert data.model_dump() == before


def test_invitation_letters_do_not_affect_scores():
    base = _strong_player_data()
    with_letters = base.model_copy(
        update={"invitation_letters": [InvitationLetter(target_league_band=5)]}
    )

    assert calculate_transfer_eligibility(base) == calculate_transfer_eligibility(with_letters)
