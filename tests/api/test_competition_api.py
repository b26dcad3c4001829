"""End-to-end tests through the HTTP API (SQLite-backed)."""

import datetime

import pytest
from sqlalchemy.exc import OperationalError

from app.competition.standings import previous_week_window
from app.db.session import get_db
from app.main import app

API = "/api/v1"

# Monday, so the week being settled is Sun 2026-10-11 .. Sat 2026-10-17
NOW = datetime.datetime(2026, 10, 19, 9, 0)


def _partner(client, name: str, **profile) -> dict:
    response = client.post(f"{API}/partners", json={ "name": name, **profile })
    assert response.status_code == 201, response.text
    return response.json()


def _workout(client, partner_id: int, calories: int, minutes: int, logged_at: datetime.datetime) -> dict:
    response = client.post(f"{API}/workouts", json={
        "partner_id": partner_id,
        "activity_name": "Bike Ride",
        "calories_burned": calories,
        "duration_minutes": minutes,
        "logged_at": logged_at.isoformat(),
    })
    assert response.status_code == 201, response.text
    return response.json()


# ======================================================================
# Root
# ======================================================================


class TestRoot:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


# ======================================================================
# Partners and workouts
# ======================================================================


class TestPartnersAndWorkouts:
    def test_log_workout_freezes_effort(self, client):
        obed = _partner(client, "Obed", weight=181, weight_unit="lb", sex="male", age=28,
                        fitness_level="intermediate")

        entry = _workout(client, obed["id"], 350, 45, datetime.datetime(2026, 10, 14, 18))
        assert entry["effort_score"] == 378

        # Profile change leaves the stored score alone
        patched = client.patch(f"{API}/partners/{obed['id']}", json={ "weight": 60, "weight_unit": "kg" })
        assert patched.status_code == 200
        assert client.get(f"{API}/workouts/{entry['id']}").json()["effort_score"] == 378

        # Streak went up by one
        assert client.get(f"{API}/partners/{obed['id']}").json()["streak"] == 1

    def test_effort_score_is_not_client_writable(self, client):
        p = _partner(client, "A", weight=75, sex="male")
        response = client.post(f"{API}/workouts", json={
            "partner_id": p["id"], "activity_name": "Run", "calories_burned": 300, "duration_minutes": 1,
            "logged_at": "2026-10-14T18:00:00", "effort_score": 99999,
        })
        assert response.json()["effort_score"] == 300

    def test_negative_calories_rejected(self, client):
        p = _partner(client, "A")
        response = client.post(f"{API}/workouts", json={
            "partner_id": p["id"], "activity_name": "Run", "calories_burned": -5, "duration_minutes": 30,
        })
        assert response.status_code == 422
        assert client.get(f"{API}/workouts").json() == []

    @pytest.mark.parametrize("calories, minutes", [(10 ** 20, 30), (100_001, 30), (300, 1441), (300, 10 ** 12)])
    def test_oversized_workout_rejected(self, client, calories, minutes):
        p = _partner(client, "A")
        response = client.post(f"{API}/workouts", json={
            "partner_id": p["id"], "activity_name": "Run", "calories_burned": calories, "duration_minutes": minutes,
        })
        assert response.status_code == 422
        assert client.get(f"{API}/workouts").json() == []
        assert client.get(f"{API}/partners/{p['id']}").json()["streak"] == 0

    def test_oversized_edit_rejected(self, client):
        p = _partner(client, "A", weight=75, sex="male", age=20)
        entry = _workout(client, p["id"], 300, 1, datetime.datetime(2026, 10, 14, 18))

        response = client.patch(f"{API}/workouts/{entry['id']}", json={ "calories_burned": 10 ** 20 })

        assert response.status_code == 422
        assert client.get(f"{API}/workouts/{entry['id']}").json()["effort_score"] == 300

    def test_null_name_rejected(self, client):
        p = _partner(client, "Obed")
        response = client.patch(f"{API}/partners/{p['id']}", json={ "name": None })
        assert response.status_code == 422
        assert client.get(f"{API}/partners/{p['id']}").json()["name"] == "Obed"

    def test_null_clears_optional_profile_field(self, client):
        p = _partner(client, "Obed", weight=80)
        response = client.patch(f"{API}/partners/{p['id']}", json={ "weight": None })
        assert response.status_code == 200
        assert response.json()["weight"] is None

    def test_unknown_partner(self, client):
        response = client.post(f"{API}/workouts", json={
            "partner_id": 77, "activity_name": "Run", "calories_burned": 100, "duration_minutes": 30,
        })
        assert response.status_code == 404
        assert client.get(f"{API}/partners/77").status_code == 404

    def test_edit_and_delete(self, client):
        p = _partner(client, "A", weight=75, sex="male", age=20)
        entry = _workout(client, p["id"], 300, 1, datetime.datetime(2026, 10, 14, 18))

        edited = client.patch(f"{API}/workouts/{entry['id']}", json={ "calories_burned": 150 })
        assert edited.status_code == 200
        assert edited.json()["effort_score"] == 150

        assert client.delete(f"{API}/workouts/{entry['id']}").status_code == 204
        assert client.get(f"{API}/workouts/{entry['id']}").status_code == 404


# ======================================================================
# Competition
# ======================================================================


class TestCompetition:
    def test_standings_with_reference_moment(self, client):
        a = _partner(client, "A", weight=75, sex="male")
        b = _partner(client, "B", weight=75, sex="male")
        _workout(client, a["id"], 300, 1, datetime.datetime(2026, 10, 17, 23, 59, 59))
        _workout(client, b["id"], 200, 1, datetime.datetime(2026, 10, 18, 0, 0, 0))

        response = client.get(f"{API}/competition/standings", params={ "as_of": "2026-10-16T12:00:00" })
        body = response.json()

        assert response.status_code == 200
        assert body["week_start"] == "2026-10-11T00:00:00"
        assert body["week_end"] == "2026-10-18T00:00:00"
        assert body["standings"][0] == { "partner_id": a["id"], "total_score": 300, "workout_count": 1 }
        assert body["standings"][1]["total_score"] == 0
        assert body["leader_ids"] == [a["id"]]
        assert body["is_tie"] is False

    def test_finalize_flow(self, client, monkeypatch):
        monkeypatch.setattr("app.competition.settlement.local_now", lambda: NOW)
        a = _partner(client, "A", weight=75, sex="male")
        b = _partner(client, "B", weight=75, sex="male")

        last_week_start, _ = previous_week_window(NOW)
        assert last_week_start == datetime.datetime(2026, 10, 11)
        _workout(client, a["id"], 500, 1, last_week_start + datetime.timedelta(days=2))
        _workout(client, b["id"], 300, 1, last_week_start + datetime.timedelta(days=3))
        # Current week, not part of the settlement
        _workout(client, b["id"], 900, 1, NOW - datetime.timedelta(hours=1))

        first = client.post(f"{API}/competition/finalize")
        assert first.status_code == 200
        assert first.json()["status"] == "settled"
        result = first.json()["result"]
        assert result["winner_id"] == a["id"]
        assert result["winner_score"] == 500
        assert result["runner_up_score"] == 300
        assert result["is_tie"] is False

        second = client.post(f"{API}/competition/finalize")
        assert second.json()["status"] == "already_settled"
        assert second.json()["result"]["id"] == result["id"]

        history = client.get(f"{API}/competition/results").json()
        assert [r["id"] for r in history] == [result["id"]]

        assert client.get(f"{API}/competition/results/2026-10-11").json()["id"] == result["id"]

    def test_finalize_without_activity(self, client, monkeypatch):
        monkeypatch.setattr("app.competition.settlement.local_now", lambda: NOW)
        p = _partner(client, "A")
        # Only current-week activity
        _workout(client, p["id"], 400, 30, NOW - datetime.timedelta(hours=1))

        response = client.post(f"{API}/competition/finalize")
        assert response.json()["status"] == "nothing_to_settle"
        assert response.json()["week_start"] == "2026-10-11"
        assert response.json()["result"] is None
        assert client.get(f"{API}/competition/results").json() == []

    def test_unsettled_week_lookup(self, client):
        assert client.get(f"{API}/competition/results/2026-10-11").status_code == 404

    def test_store_unavailable_maps_to_503(self, client):
        def _broken_db():
            raise OperationalError("SELECT 1", { }, Exception("connection refused"))

        app.dependency_overrides[get_db] = _broken_db

        response = client.post(f"{API}/competition/finalize")

        assert response.status_code == 503
        assert "retry" in response.json()["detail"]
