"""End-to-end tests for the badge endpoints."""

from datetime import timedelta
from decimal import Decimal

import pytest

from tests.di import FROZEN_NOW
from tests.factories import make_user
from tests.harness import create_client, save_user


@pytest.fixture
def client():
    with create_client() as test_client:
        yield test_client


class TestBadgeEndpoints:
    """GET /badges and GET /badges/me."""

    def test_badges_seeded_on_startup(self, client):
        """Should list all badges without authentication."""
        # Act
        response = client.get("/badges")

        # Assert
        assert response.status_code == 200
        badges = response.json()["badges"]
        assert len(badges) == 9
        assert [b["kind"] for b in badges[:3]] == ["category"] * 3
        transport = next(b for b in badges if b["id"] == "transport-10")
        assert transport["category"] == "Used Public Transport"
        assert transport["requirement"] == 10

    def test_my_badges_requires_authentication(self, client):
        response = client.get("/badges/me")

        assert response.status_code == 401

    def test_unlock_is_visible_in_my_badges(self, client, make_token):
        """Should unlock a streak badge and report it on /badges/me."""
        # Arrange
        user = save_user(
            client,
            make_user(
                "alice",
                total_points=Decimal("8"),
                current_streak=2,
                longest_streak=2,
                last_action_date=FROZEN_NOW - timedelta(days=1),
            ),
        )
        cookies = {"auth_token": make_token(user.id, "alice")}

        # Act
        logged = client.post(
            "/actions", json={"actions": [{"type": "Carpooling"}]}, cookies=cookies
        )
        response = client.get("/badges/me", cookies=cookies)

        # Assert
        assert [b["id"] for b in logged.json()["new_badges"]] == ["streak-3"]

        data = response.json()
        badges = {b["id"]: b for b in data["badges"]}
        assert badges["streak-3"]["is_unlocked"] is True
        assert badges["streak-3"]["progress"] is None
        assert badges["streak-7"]["progress"] == 3
        assert badges["points-100"]["progress"] == 10.0
        assert data["stats"] == {
            "total_badges": 1,
            "current_streak": 3,
            "longest_streak": 3,
            "total_points": 10.0,
        }
