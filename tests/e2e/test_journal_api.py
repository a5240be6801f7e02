"""End-to-end tests for the journal endpoints."""

import pytest

from tests.di import FROZEN_NOW
from tests.factories import make_user
from tests.harness import create_client, save_user

TODAY = FROZEN_NOW.date().isoformat()


@pytest.fixture
def client():
    with create_client() as test_client:
        yield test_client


@pytest.fixture
def auth(client, make_token):
    user = save_user(client, make_user("alice"))
    return {"auth_token": make_token(user.id)}


class TestJournalEndpoints:
    """GET /journal/{day} and POST /journal/{day}/reflection."""

    def test_day_with_actions_and_reflection(self, client, auth):
        """Should list the day's records, reflection included."""
        # Arrange
        client.post("/actions", json={"actions": [{"type": "Carpooling"}]}, cookies=auth)
        saved = client.post(
            f"/journal/{TODAY}/reflection",
            json={"reflection": "Shared a ride with a colleague"},
            cookies=auth,
        )

        # Act
        response = client.get(f"/journal/{TODAY}", cookies=auth)

        # Assert
        assert saved.status_code == 200
        assert saved.json()["reflection"]["type"] == "Reflection"
        data = response.json()
        assert data["date"] == TODAY
        assert [a["type"] for a in data["actions"]] == ["Carpooling", "Reflection"]
        assert data["stats"] == {
            "total_points": 2.0,
            "total_carbon_saved": 2.5,
            "action_count": 2,
        }

    def test_reflection_is_replaced(self, client, auth):
        """Should keep one reflection per day."""
        client.post(f"/journal/{TODAY}/reflection", json={"reflection": "v1"}, cookies=auth)
        client.post(f"/journal/{TODAY}/reflection", json={"reflection": "v2"}, cookies=auth)

        actions = client.get(f"/journal/{TODAY}", cookies=auth).json()["actions"]

        assert [a["notes"] for a in actions] == ["v2"]

    def test_reflection_does_not_touch_points(self, client, auth):
        """Should leave the user's points and streak alone."""
        client.post(f"/journal/{TODAY}/reflection", json={"reflection": "Quiet day"}, cookies=auth)

        stats = client.get("/badges/me", cookies=auth).json()["stats"]

        assert stats["total_points"] == 0.0
        assert stats["current_streak"] == 0

    @pytest.mark.parametrize("day", ["15-06-2025", "2025-13-01", "yesterday"])
    def test_invalid_date(self, client, auth, day):
        """Should return 400 for anything but YYYY-MM-DD."""
        response = client.get(f"/journal/{day}", cookies=auth)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "msg": "Invalid date format. Use YYYY-MM-DD",
            "errors": [],
        }

    def test_requires_authentication(self, client):
        response = client.get(f"/journal/{TODAY}")

        assert response.status_code == 401


class TestJournalOverview:
    """GET /journal."""

    def test_days_paged_newest_first(self, client, auth):
        """Should page by day and report lifetime totals."""
        # Arrange
        client.post("/actions", json={"actions": [{"type": "Carpooling"}]}, cookies=auth)
        client.post(f"/journal/{TODAY}/reflection", json={"reflection": "Rode in"}, cookies=auth)
        client.post(
            "/journal/2025-06-10/reflection", json={"reflection": "Earlier"}, cookies=auth
        )

        # Act
        first = client.get("/journal", params={"limit": 1}, cookies=auth)
        second = client.get("/journal", params={"limit": 1, "page": 2}, cookies=auth)

        # Assert
        assert first.status_code == 200
        data = first.json()
        assert [e["date"] for e in data["entries"]] == [TODAY]
        assert data["entries"][0]["action_count"] == 2
        assert data["entries"][0]["total_points"] == 2.0
        assert data["stats"] == {
            "total_points": 2.0,
            "total_carbon_saved": 2.5,
            "total_actions": 3,
        }
        assert data["pagination"] == {"total": 2, "page": 1, "limit": 1, "pages": 2}
        assert [e["date"] for e in second.json()["entries"]] == ["2025-06-10"]

    def test_limit_is_capped(self, client, auth):
        """Should clamp the page size to the configured maximum."""
        response = client.get("/journal", params={"limit": 500}, cookies=auth)

        assert response.status_code == 200
        assert response.json()["pagination"] == {
            "total": 0,
            "page": 1,
            "limit": 100,
            "pages": 0,
        }

    def test_requires_authentication(self, client):
        response = client.get("/journal")

        assert response.status_code == 401
