"""
Tests for the eligibility API routes.
"""

from eligibility import routes
from eligibility.tests.test_runner import seed_player
from eligibility.models import TransferEligibilityAssessment


CALCULATE_PAYLOAD = {
    "player": {"club_minutes_current_season": 1000, "market_value": 2000000},
    "international_records": [{"national_team": "Ghana", "team_level": "senior", "caps": 10}],
    "league_band": 1,
}


def test_health(client):
    response = client.get("/eligibility/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_calculate(client):
    response = client.post("/eligibility/calculate", json=CALCULATE_PAYLOAD)

    assert response.status_code == 200
    body = response.json()
    assert body["total_minutes_verified"] == 1450
    assert body["overall_status"] == "green"
    assert body["uk_gbe"]["status"] == "green"
    assert body["esc"]["score"] == 100
    assert len(body["recommendations"]) <= 5


def test_calculate_empty_body_uses_defaults(client):
    response = client.post("/eligibility/calculate", json={})

    assert response.status_code == 200
    body = response.json()
    assert body["overall_status"] == "red"
    assert body["minutes_needed"] == 800


def test_calculate_rejects_malformed_body(client):
    response = client.post("/eligibility/calculate", json={"videos": "not a list"})

    assert response.status_code == 422


def test_calculate_single_visa(client):
    response = client.post("/eligibility/calculate/uk_gbe", json=CALCULATE_PAYLOAD)

    assert response.status_code == 200
    body = response.json()
    assert body["breakdown"]["visa_type"] == "uk_gbe"
    assert body["breakdown"]["gbe_points"] == 24


def test_calculate_unknown_visa(client):
    response = client.post("/eligibility/calculate/h1b", json=CALCULATE_PAYLOAD)

    assert response.status_code == 404


def test_assess_stored_player(client, db_session):
    seed_player(db_session)

    response = client.get("/eligibility/players/player-1")

    assert response.status_code == 200
    body = response.json()
    assert body["player"]["name"] == "Kwame Boateng"
    assert body["minutes_breakdown"] == {
        "club": 900,
        "international": 675,
        "video": 170,
        "total": 1745,
        "minimum": 800,
        "needed": 0,
        "status": "green",
    }
    assert set(body["visa_scores"]) == {"schengen", "o1", "p1", "uk_gbe", "esc"}
    assert body["visa_scores"]["uk_gbe"]["breakdown"]["club_league_points"] == 15
    assert body["assessment"]["player_id"] == "player-1"
    assert body["assessment"]["overall_status"] == body["overall_status"]


def test_assess_stored_player_twice_keeps_one_snapshot(client, db_session):
    seed_player(db_session)

    client.get("/eligibility/players/player-1")
    client.get("/eligibility/players/player-1")

    assert db_session.query(TransferEligibilityAssessment).count() == 1


def test_assess_unknown_player(client):
    response = client.get("/eligibility/players/nobody")

    assert response.status_code == 404


def test_visa_scores_listed_in_calculator_order(client, db_session):
    seed_player(db_session)

    response = client.get("/eligibility/players/player-1")

    assert list(response.json()["visa_scores"]) == ["schengen", "o1", "p1", "uk_gbe", "esc"]


def _boom(*args, **kwargs):
    raise RuntimeError("scoring backend down")


def test_calculate_unexpected_error_returns_500(client, monkeypatch):
    monkeypatch.setattr(routes.engine, "evaluate", _boom)

    response = client.post("/eligibility/calculate", json=CALCULATE_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "scoring backend down"}


def test_calculate_visa_unexpected_error_returns_500(client, monkeypatch):
    monkeypatch.setattr(routes.engine, "score_visa", _boom)

    response = client.post("/eligibility/calculate/o1", json=CALCULATE_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "scoring backend down"}
