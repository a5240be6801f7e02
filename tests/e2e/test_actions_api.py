"""End-to-end tests for the action endpoints."""

from datetime import timedelta
from uuid import uuid4

import pytest

from eco.util.clock import FrozenClock
from tests.factories import make_user
from tests.harness import call_container, create_client, save_user


@pytest.fixture
def client():
    """Test client over in-memory repositories and a frozen clock."""
    with create_client() as test_client:
        yield test_client


@pytest.fixture
def user(client):
    return save_user(client, make_user("alice"))


@pytest.fixture
def auth(user, make_token):
    """Cookies authenticating as ``user``."""
    return {"auth_token": make_token(user.id, "alice")}


def advance_clock(client, delta: timedelta) -> None:
    async def _advance(container):
        (await container.get(FrozenClock)).advance(delta)

    call_container(client, _advance)


class TestLogActions:
    """POST /actions."""

    def test_requires_authentication(self, client):
        """Should return 401 without a token."""
        # Act
        response = client.post("/actions", json={"actions": [{"type": "Carpooling"}]})

        # Assert
        assert response.status_code == 401
        assert response.json() == {"success": False, "msg": "Authentication required"}

    def test_logs_batch(self, client, auth):
        """Should save the actions and return updated counters."""
        # Act
        response = client.post(
            "/actions",
            json={
                "actions": [
                    {"type": "Carpooling"},
                    {"type": "Custom", "notes": "Planted a tree"},
                ]
            },
            cookies=auth,
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert [a["type"] for a in data["actions"]] == ["Carpooling", "Custom"]
        assert data["actions"][1]["notes"] == "Planted a tree"
        assert data["stats"] == {
            "total_points": 3.0,
            "actions_added": 2,
            "current_streak": 1,
            "longest_streak": 1,
            "points_earned": 3.0,
            "carbon_saved": 3.0,
        }
        assert data["new_badges"] == []

    def test_bearer_header(self, client, user, make_token):
        """Should accept an Authorization: Bearer token."""
        response = client.post(
            "/actions",
            json={"actions": [{"type": "Skipped Meat"}]},
            headers={"Authorization": f"Bearer {make_token(user.id)}"},
        )

        assert response.status_code == 200

    def test_repeat_on_same_day_rejected(self, client, auth):
        """Should return 400 when every standard action was already logged."""
        # Arrange
        payload = {"actions": [{"type": "Carpooling"}]}
        client.post("/actions", json=payload, cookies=auth)

        # Act
        response = client.post("/actions", json=payload, cookies=auth)

        # Assert
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "msg": "All specified non-custom actions have already been logged today",
        }

    def test_streak_continues_next_day(self, client, auth):
        """Should increment the streak on consecutive days."""
        payload = {"actions": [{"type": "Carpooling"}]}
        client.post("/actions", json=payload, cookies=auth)
        advance_clock(client, timedelta(days=1))

        response = client.post("/actions", json=payload, cookies=auth)

        assert response.status_code == 200
        assert response.json()["stats"]["current_streak"] == 2
        assert response.json()["stats"]["total_points"] == 4.0

    def test_invalid_action_type(self, client, auth):
        """Should return 400 naming the invalid entry."""
        response = client.post(
            "/actions",
            json={"actions": [{"type": "Carpooling"}, {"type": "Reflection"}]},
            cookies=auth,
        )

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["errors"][0]["msg"] == "Invalid action type"
        assert data["errors"][0]["loc"] == ["actions", 1, "type"]

    def test_empty_batch(self, client, auth):
        """Should return 400 for an empty batch."""
        response = client.post("/actions", json={"actions": []}, cookies=auth)

        assert response.status_code == 400

    def test_malformed_body(self, client, auth):
        """Should return 400 when the body does not match the schema."""
        response = client.post("/actions", json={"actions": "Carpooling"}, cookies=auth)

        assert response.status_code == 400
        assert response.json()["msg"] == "Invalid data"

    def test_unknown_user(self, client, make_token):
        """Should return 404 when the token's user does not exist."""
        response = client.post(
            "/actions",
            json={"actions": [{"type": "Carpooling"}]},
            cookies={"auth_token": make_token(uuid4())},
        )

        assert response.status_code == 404
        assert response.json() == {"success": False, "msg": "User not found"}


class TestActionHistory:
    """GET /actions and GET /actions/today."""

    def test_history_pagination(self, client, auth):
        """Should page newest first with pagination metadata."""
        # Arrange - one action per day for three days
        for _ in range(3):
            client.post("/actions", json={"actions": [{"type": "Custom"}]}, cookies=auth)
            advance_clock(client, timedelta(days=1))

        # Act
        response = client.get("/actions", params={"limit": 2, "page": 1}, cookies=auth)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert len(data["actions"]) == 2
        assert data["actions"][0]["date"] > data["actions"][1]["date"]
        assert data["pagination"] == {"total": 3, "page": 1, "limit": 2, "pages": 2}

    def test_history_invalid_query(self, client, auth):
        """Should reject a non-positive page."""
        response = client.get("/actions", params={"page": 0}, cookies=auth)

        assert response.status_code == 400

    def test_today(self, client, auth):
        """Should list today's records and completed types."""
        client.post(
            "/actions",
            json={"actions": [{"type": "Carpooling"}, {"type": "No-Plastic Day"}]},
            cookies=auth,
        )

        response = client.get("/actions/today", cookies=auth)

        assert response.status_code == 200
        data = response.json()
        assert len(data["actions"]) == 2
        assert data["completed"] == ["Carpooling", "No-Plastic Day"]

    def test_today_requires_authentication(self, client):
        response = client.get("/actions/today")

        assert response.status_code == 401


class TestActionStats:
    """GET /actions/stats."""

    def test_stats(self, client, auth):
        """Should report totals, busiest types first, active days and streak."""
        # Arrange - two days of logging
        client.post(
            "/actions",
            json={"actions": [{"type": "Carpooling"}, {"type": "Skipped Meat"}]},
            cookies=auth,
        )
        advance_clock(client, timedelta(days=1))
        client.post("/actions", json={"actions": [{"type": "Carpooling"}]}, cookies=auth)

        # Act
        response = client.get("/actions/stats", cookies=auth)

        # Assert
        assert response.status_code == 200
        stats = response.json()["stats"]
        assert stats["total_actions"] == 3
        assert stats["total_points"] == 6.0
        assert stats["total_carbon_saved"] == 8.0
        assert stats["actions_by_type"] == [
            {"type": "Carpooling", "count": 2, "points": 4.0, "carbon_saved": 5.0},
            {"type": "Skipped Meat", "count": 1, "points": 2.0, "carbon_saved": 3.0},
        ]
        assert [(d["date"], d["count"]) for d in stats["daily_actions"]] == [
            ("2025-06-15", 2),
            ("2025-06-16", 1),
        ]
        assert stats["streak"] == {"current": 2, "longest": 2}

    def test_stats_without_actions(self, client, auth):
        stats = client.get("/actions/stats", cookies=auth).json()["stats"]

        assert stats["total_actions"] == 0
        assert stats["actions_by_type"] == []
        assert stats["daily_actions"] == []

    def test_stats_requires_authentication(self, client):
        response = client.get("/actions/stats")

        assert response.status_code == 401
