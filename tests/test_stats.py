"""Tests for campaign statistics."""

import pytest
from fastapi.testclient import TestClient

from adoption_service.app.crud.stats_crud import progress_percentage


class TestProgressPercentage:

    def test_zero_goal_is_zero(self):
        assert progress_percentage(0, 0) == 0
        assert progress_percentage(500, 0) == 0

    @pytest.mark.parametrize("raised,goal", [(0, 3000), (3000, 3000), (1000, 3000), (2000, 61000), (7, 9)])
    def test_ratio_of_raised_to_goal(self, raised, goal):
        assert progress_percentage(raised, goal) == pytest.approx(100 * raised / goal)


class TestStatsEndpoint:
    """Tests for GET /api/stats"""

    def test_empty_store(self, client: TestClient):
        body = client.get("/api/stats").json()

        assert body["totalSpaces"] == 0
        assert body["totalGoal"] == 0
        assert body["totalRaised"] == 0
        assert body["progressPercentage"] == 0
        assert body["volunteersAvailable"] == 0
        assert body["adoptionsByStatus"] == {
            "pending": 0, "approved": 0, "confirmed": 0,
            "completed": 0, "cancelled": 0, "rejected": 0,
        }

    def test_single_space_adopted(self, client: TestClient, add_space):
        space = add_space(name="Bagno 1", cost=3000)
        assert client.get("/api/stats").json()["adoptedSpaces"] == 0

        client.post(f"/api/spaces/{space.id}/adopt", data={"sponsorName": "Acme"})
        body = client.get("/api/stats").json()

        assert body["totalSpaces"] == 1
        assert body["adoptedSpaces"] == 1
        assert body["availableSpaces"] == 0
        assert body["totalRaised"] == 3000
        assert body["totalGoal"] == 3000
        assert body["progressPercentage"] == 100
        assert body["totalAdoptions"] == 1

    def test_aggregates_over_mixed_catalog(self, client: TestClient, add_space):
        bagno = add_space(name="Bagno 1", cost=3000)
        cucina = add_space(name="Cucina", cost=12000)
        add_space(name="Giardino", cost=5000)
        client.post(f"/api/spaces/{bagno.id}/adopt", data={"sponsorName": "Acme", "wantsToHelp": "on"})
        client.post(f"/api/spaces/{cucina.id}/adopt", data={"sponsorName": "Beta"})
        client.put("/api/adoptions/2/status", json={"status": "approved"})

        body = client.get("/api/stats").json()

        assert body["totalSpaces"] == 3
        assert body["adoptedSpaces"] == 2
        assert body["availableSpaces"] == 1
        assert body["totalRaised"] == 15000
        assert body["totalGoal"] == 20000
        assert body["progressPercentage"] == pytest.approx(75.0)
        assert body["volunteersAvailable"] == 1
        assert body["adoptionsByStatus"]["pending"] == 1
        assert body["adoptionsByStatus"]["approved"] == 1
