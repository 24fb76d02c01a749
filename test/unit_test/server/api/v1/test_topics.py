"""
Unit tests for the topic API endpoints: agenda order, status and solutions.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


def _url(project: dict, meeting: dict, suffix: str = "") -> str:
    return f"/api/v1/projects/{project['id']}/meetings/{meeting['id']}/topics{suffix}"


async def _create(client: AsyncClient, project, meeting, headers, title: str, **fields) -> dict:
    response = await client.post(_url(project, meeting), json={"title": title, **fields}, headers=headers)
    assert response.status_code == 201
    return response.json()


class TestTopicCrud:
    async def test_create_appends_to_agenda(self, client: AsyncClient, project, meeting, alice):
        first = await _create(client, project, meeting, alice, "Budget")
        second = await _create(client, project, meeting, alice, "Hiring")

        assert first["order_index"] == 0
        assert second["order_index"] == 1
        assert first["meeting_id"] == meeting["id"]

        listed = await client.get(_url(project, meeting), headers=alice)
        assert [t["title"] for t in listed.json()] == ["Budget", "Hiring"]

    async def test_update_and_delete(self, client: AsyncClient, project, meeting, alice):
        topic = await _create(client, project, meeting, alice, "Budget")

        updated = await client.put(_url(project, meeting, f"/{topic['id']}"), json={"title": "Costs"}, headers=alice)
        first = await client.delete(_url(project, meeting, f"/{topic['id']}"), headers=alice)
        second = await client.delete(_url(project, meeting, f"/{topic['id']}"), headers=alice)

        assert updated.json()["title"] == "Costs"
        assert first.status_code == 204
        assert second.status_code == 404

    async def test_topic_of_other_meeting_is_404(self, client: AsyncClient, project, meeting, alice):
        topic = await _create(client, project, meeting, alice, "Budget")
        other = (
            await client.post(
                f"/api/v1/projects/{project['id']}/meetings",
                json={"name": "Other", "start_date": "2026-05-01T10:00:00"},
                headers=alice,
            )
        ).json()

        response = await client.get(_url(project, other, f"/{topic['id']}"), headers=alice)

        assert response.status_code == 404

    async def test_priority_must_belong_to_project(self, client: AsyncClient, project, meeting, alice):
        other = (await client.post("/api/v1/projects", json={"name": "Other"}, headers=alice)).json()
        foreign = (
            await client.post(f"/api/v1/projects/{other['id']}/priorities", json={"title": "high"}, headers=alice)
        ).json()

        response = await client.post(
            _url(project, meeting), json={"title": "Budget", "priority_id": foreign["id"]}, headers=alice
        )

        assert response.status_code == 404


class TestTopicOrder:
    async def test_move_between_siblings(self, client: AsyncClient, project, meeting, alice):
        a = await _create(client, project, meeting, alice, "a")
        b = await _create(client, project, meeting, alice, "b")
        c = await _create(client, project, meeting, alice, "c")

        response = await client.put(
            _url(project, meeting, f"/{c['id']}/order"), json={"before": a["id"], "after": b["id"]}, headers=alice
        )

        assert response.status_code == 200
        assert [t["title"] for t in response.json()] == ["a", "c", "b"]
        assert [t["order_index"] for t in response.json()] == [0, 1, 2]

    async def test_move_without_anchor(self, client: AsyncClient, project, meeting, alice):
        a = await _create(client, project, meeting, alice, "a")

        response = await client.put(_url(project, meeting, f"/{a['id']}/order"), json={}, headers=alice)

        assert response.status_code == 400

    async def test_contradicting_anchors_rejected(self, client: AsyncClient, project, meeting, alice):
        a = await _create(client, project, meeting, alice, "a")
        await _create(client, project, meeting, alice, "b")
        c = await _create(client, project, meeting, alice, "c")
        d = await _create(client, project, meeting, alice, "d")

        response = await client.put(
            _url(project, meeting, f"/{d['id']}/order"), json={"before": a["id"], "after": c["id"]}, headers=alice
        )

        assert response.status_code == 400


class TestTopicStatus:
    async def test_close_and_reopen(self, client: AsyncClient, project, meeting, alice):
        topic = await _create(client, project, meeting, alice, "a")

        closed = await client.put(_url(project, meeting, f"/{topic['id']}/status"), json={"close": True}, headers=alice)
        reopened = await client.put(
            _url(project, meeting, f"/{topic['id']}/status"), json={"close": False}, headers=alice
        )

        assert closed.json()["closed_at"] is not None
        assert reopened.json()["closed_at"] is None

    async def test_forced_solution(self, client: AsyncClient, project, meeting, alice):
        topic = await _create(client, project, meeting, alice, "a", force_solution=True)
        status_url = _url(project, meeting, f"/{topic['id']}/status")

        blocked = await client.put(status_url, json={"close": True}, headers=alice)
        assert blocked.status_code == 400

        comment = (
            await client.post(_url(project, meeting, f"/{topic['id']}/comments"), json={"content": "Agreed"}, headers=alice)
        ).json()
        marked = await client.put(_url(project, meeting, f"/{topic['id']}/solution/{comment['id']}"), headers=alice)
        assert marked.json()["solution_id"] == comment["id"]

        closed = await client.put(status_url, json={"close": True}, headers=alice)
        assert closed.status_code == 200
        assert closed.json()["closed_at"] is not None

    async def test_solution_must_be_topic_comment(self, client: AsyncClient, project, meeting, alice):
        topic = await _create(client, project, meeting, alice, "a")
        comment = (
            await client.post(f"/api/v1/projects/{project['id']}/comments", json={"content": "x"}, headers=alice)
        ).json()

        response = await client.put(_url(project, meeting, f"/{topic['id']}/solution/{comment['id']}"), headers=alice)

        assert response.status_code == 400

    async def test_clear_solution(self, client: AsyncClient, project, meeting, alice):
        topic = await _create(client, project, meeting, alice, "a")
        comment = (
            await client.post(_url(project, meeting, f"/{topic['id']}/comments"), json={"content": "x"}, headers=alice)
        ).json()
        await client.put(_url(project, meeting, f"/{topic['id']}/solution/{comment['id']}"), headers=alice)

        cleared = await client.delete(_url(project, meeting, f"/{topic['id']}/solution/{comment['id']}"), headers=alice)
        again = await client.delete(_url(project, meeting, f"/{topic['id']}/solution/{comment['id']}"), headers=alice)

        assert cleared.json()["solution_id"] is None
        assert again.status_code == 404


class TestTopicAssignments:
    async def test_assign_user_and_tag(self, client: AsyncClient, shared_project, meeting, alice, bob):
        topic = await _create(client, shared_project, meeting, alice, "a")
        tag = (
            await client.post(f"/api/v1/projects/{shared_project['id']}/tags", json={"title": "ops"}, headers=alice)
        ).json()

        assigned = await client.post(_url(shared_project, meeting, f"/{topic['id']}/users/bob"), headers=alice)
        tagged = await client.post(_url(shared_project, meeting, f"/{topic['id']}/tags/{tag['id']}"), headers=alice)

        assert [u["id"] for u in assigned.json()["assigned_users"]] == ["bob"]
        assert [t["id"] for t in tagged.json()["tags"]] == [tag["id"]]
        titles = [n["title"] for n in (await client.get("/api/v1/notifications", headers=bob)).json()]
        assert "You were assigned to the topic" in titles

    async def test_repeated_assignment_notifies_once(self, client: AsyncClient, shared_project, meeting, alice, bob):
        topic = await _create(client, shared_project, meeting, alice, "a")

        await client.post(_url(shared_project, meeting, f"/{topic['id']}/users/bob"), headers=alice)
        await client.post(_url(shared_project, meeting, f"/{topic['id']}/users/bob"), headers=alice)

        titles = [n["title"] for n in (await client.get("/api/v1/notifications", headers=bob)).json()]
        assert titles.count("You were assigned to the topic") == 1


class TestTopicNulls:
    @pytest.mark.parametrize("field", ["title", "description", "force_solution"])
    async def test_null_rejected(self, client: AsyncClient, project, meeting, alice, field):
        topic = await _create(client, project, meeting, alice, "Budget")

        response = await client.put(_url(project, meeting, f"/{topic['id']}"), json={field: None}, headers=alice)

        assert response.status_code == 422

    async def test_priority_can_be_cleared(self, client: AsyncClient, project, meeting, alice):
        priority = (
            await client.post(f"/api/v1/projects/{project['id']}/priorities", json={"title": "high"}, headers=alice)
        ).json()
        topic = await _create(client, project, meeting, alice, "Budget", priority_id=priority["id"])

        response = await client.put(
            _url(project, meeting, f"/{topic['id']}"), json={"priority_id": None}, headers=alice
        )

        assert response.status_code == 200
        assert response.json()["priority_id"] is None
