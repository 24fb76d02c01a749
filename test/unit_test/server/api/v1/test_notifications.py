"""
Unit tests for the notification API endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

URL = "/api/v1/notifications"


class TestNotifications:
    async def test_grant_notification_content(self, client: AsyncClient, shared_project, bob):
        notifications = (await client.get(URL, headers=bob)).json()

        assert len(notifications) == 1
        notification = notifications[0]
        assert notification["title"] == "You were added to a project"
        assert notification["description"] == "by Alice"
        assert notification["link"] == f"/projects/{shared_project['id']}"
        assert notification["read_at"] is None

    async def test_mark_read_and_filter(self, client: AsyncClient, shared_project, bob):
        notification = (await client.get(URL, headers=bob)).json()[0]

        read = await client.put(f"{URL}/{notification['id']}/read", headers=bob)
        unread = await client.get(URL, params={"unread_only": True}, headers=bob)

        assert read.json()["read_at"] is not None
        assert unread.json() == []
        assert len((await client.get(URL, headers=bob)).json()) == 1

    async def test_others_notification_is_404(self, client: AsyncClient, shared_project, alice, bob):
        notification = (await client.get(URL, headers=bob)).json()[0]

        read = await client.put(f"{URL}/{notification['id']}/read", headers=alice)
        deleted = await client.delete(f"{URL}/{notification['id']}", headers=alice)

        assert read.status_code == 404
        assert deleted.status_code == 404
        assert len((await client.get(URL, headers=bob)).json()) == 1

    async def test_delete_one(self, client: AsyncClient, shared_project, bob):
        notification = (await client.get(URL, headers=bob)).json()[0]

        response = await client.delete(f"{URL}/{notification['id']}", headers=bob)

        assert response.status_code == 204
        assert (await client.get(URL, headers=bob)).json() == []

    async def test_clear_all(self, client: AsyncClient, shared_project, meeting, alice, bob):
        await client.post(f"/api/v1/projects/{shared_project['id']}/meetings/{meeting['id']}/users/bob", headers=alice)

        response = await client.delete(URL, headers=bob)

        assert response.json() == {"deleted": 2}
        assert (await client.get(URL, headers=bob)).json() == []

    async def test_requires_authentication(self, client: AsyncClient):
        response = await client.get(URL)

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
