"""
Unit tests for the tag and priority API endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestTags:
    async def test_crud(self, client: AsyncClient, project, alice):
        url = f"/api/v1/projects/{project['id']}/tags"

        created = await client.post(url, json={"title": "ops", "color": "#ff0000"}, headers=alice)
        assert created.status_code == 201
        tag = created.json()
        assert tag["color"] == "#ff0000"

        updated = await client.put(f"{url}/{tag['id']}", json={"color": "#0f0"}, headers=alice)
        assert updated.json()["color"] == "#0f0"
        assert updated.json()["title"] == "ops"

        first = await client.delete(f"{url}/{tag['id']}", headers=alice)
        second = await client.delete(f"{url}/{tag['id']}", headers=alice)
        assert first.status_code == 204
        assert second.status_code == 404
        assert (await client.get(url, headers=alice)).json() == []

    async def test_default_color(self, client: AsyncClient, project, alice):
        response = await client.post(f"/api/v1/projects/{project['id']}/tags", json={"title": "ops"}, headers=alice)
        assert response.json()["color"] == "#808080"

    @pytest.mark.parametrize("color", ["red", "#12345", "ff0000", "#ggg"])
    async def test_invalid_color(self, client: AsyncClient, project, alice, color):
        response = await client.post(
            f"/api/v1/projects/{project['id']}/tags", json={"title": "ops", "color": color}, headers=alice
        )
        assert response.status_code == 422

    async def test_listed_by_title(self, client: AsyncClient, project, alice):
        url = f"/api/v1/projects/{project['id']}/tags"
        for title in ["zeta", "alpha"]:
            await client.post(url, json={"title": title}, headers=alice)

        response = await client.get(url, headers=alice)

        assert [t["title"] for t in response.json()] == ["alpha", "zeta"]

    async def test_deleted_tag_detached(self, client: AsyncClient, project, meeting, alice):
        tag = (await client.post(f"/api/v1/projects/{project['id']}/tags", json={"title": "ops"}, headers=alice)).json()
        meeting_url = f"/api/v1/projects/{project['id']}/meetings/{meeting['id']}"
        await client.post(f"{meeting_url}/tags/{tag['id']}", headers=alice)

        await client.delete(f"/api/v1/projects/{project['id']}/tags/{tag['id']}", headers=alice)

        assert (await client.get(meeting_url, headers=alice)).json()["tags"] == []

    async def test_stranger_denied(self, client: AsyncClient, project, mallory):
        response = await client.get(f"/api/v1/projects/{project['id']}/tags", headers=mallory)
        assert response.status_code == 403


class TestPriorities:
    async def test_ordered_by_weight(self, client: AsyncClient, project, alice):
        url = f"/api/v1/projects/{project['id']}/priorities"
        await client.post(url, json={"title": "low", "weight": 1}, headers=alice)
        await client.post(url, json={"title": "high", "weight": 10}, headers=alice)
        await client.post(url, json={"title": "mid", "weight": 5}, headers=alice)

        response = await client.get(url, headers=alice)

        assert [p["title"] for p in response.json()] == ["high", "mid", "low"]

    async def test_update_and_delete(self, client: AsyncClient, project, alice):
        url = f"/api/v1/projects/{project['id']}/priorities"
        priority = (await client.post(url, json={"title": "p"}, headers=alice)).json()

        updated = await client.put(f"{url}/{priority['id']}", json={"weight": 3}, headers=alice)
        deleted = await client.delete(f"{url}/{priority['id']}", headers=alice)
        missing = await client.get(f"{url}/{priority['id']}", headers=alice)

        assert updated.json()["weight"] == 3
        assert deleted.status_code == 204
        assert missing.status_code == 404

    async def test_deleted_priority_cleared_from_action(self, client: AsyncClient, project, alice):
        url = f"/api/v1/projects/{project['id']}"
        priority = (await client.post(f"{url}/priorities", json={"title": "p"}, headers=alice)).json()
        action = (
            await client.post(f"{url}/actions", json={"title": "x", "priority_id": priority["id"]}, headers=alice)
        ).json()
        assert action["priority_id"] == priority["id"]

        await client.delete(f"{url}/priorities/{priority['id']}", headers=alice)

        assert (await client.get(f"{url}/actions/{action['id']}", headers=alice)).json()["priority_id"] is None


class TestNullUpdates:
    @pytest.mark.parametrize("field", ["title", "color"])
    async def test_tag_null_rejected(self, client: AsyncClient, project, alice, field):
        url = f"/api/v1/projects/{project['id']}/tags"
        tag = (await client.post(url, json={"title": "bug"}, headers=alice)).json()

        response = await client.put(f"{url}/{tag['id']}", json={field: None}, headers=alice)

        assert response.status_code == 422

    @pytest.mark.parametrize("field", ["title", "weight", "color"])
    async def test_priority_null_rejected(self, client: AsyncClient, project, alice, field):
        url = f"/api/v1/projects/{project['id']}/priorities"
        priority = (await client.post(url, json={"title": "p"}, headers=alice)).json()

        response = await client.put(f"{url}/{priority['id']}", json={field: None}, headers=alice)

        assert response.status_code == 422
