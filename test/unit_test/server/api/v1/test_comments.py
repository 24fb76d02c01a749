"""
Unit tests for the comment API endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


def _project_url(project: dict, suffix: str = "") -> str:
    return f"/api/v1/projects/{project['id']}{suffix}"


class TestCommentParents:
    async def test_project_comment(self, client: AsyncClient, project, alice):
        response = await client.post(_project_url(project, "/comments"), json={"content": "Hello"}, headers=alice)

        assert response.status_code == 201
        data = response.json()
        assert data["author_id"] == "alice"
        assert data["project_id"] == project["id"]
        assert data["meeting_id"] is None

    async def test_lists_only_exact_parent(self, client: AsyncClient, project, meeting, alice):
        await client.post(_project_url(project, "/comments"), json={"content": "on project"}, headers=alice)
        await client.post(
            _project_url(project, f"/meetings/{meeting['id']}/comments"), json={"content": "on meeting"}, headers=alice
        )

        on_project = await client.get(_project_url(project, "/comments"), headers=alice)
        on_meeting = await client.get(_project_url(project, f"/meetings/{meeting['id']}/comments"), headers=alice)

        assert [c["content"] for c in on_project.json()] == ["on project"]
        assert [c["content"] for c in on_meeting.json()] == ["on meeting"]
        assert on_meeting.json()[0]["meeting_id"] == meeting["id"]

    async def test_action_comments(self, client: AsyncClient, project, alice):
        action = (await client.post(_project_url(project, "/actions"), json={"title": "x"}, headers=alice)).json()
        url = _project_url(project, f"/actions/{action['id']}/comments")

        await client.post(url, json={"content": "first"}, headers=alice)
        await client.post(url, json={"content": "second"}, headers=alice)

        listed = await client.get(url, headers=alice)
        assert [c["content"] for c in listed.json()] == ["first", "second"]
        assert all(c["action_id"] == action["id"] for c in listed.json())

    async def test_missing_parent_is_404(self, client: AsyncClient, project, alice):
        response = await client.post(
            _project_url(project, "/actions/9999/comments"), json={"content": "x"}, headers=alice
        )
        assert response.status_code == 404

    @pytest.mark.parametrize("content", ["", "c" * 4097])
    async def test_content_length(self, client: AsyncClient, project, alice, content):
        response = await client.post(_project_url(project, "/comments"), json={"content": content}, headers=alice)
        assert response.status_code == 422


class TestCommentAuthor:
    async def test_author_edits_and_deletes(self, client: AsyncClient, project, alice):
        comment = (
            await client.post(_project_url(project, "/comments"), json={"content": "draft"}, headers=alice)
        ).json()

        edited = await client.put(
            _project_url(project, f"/comments/{comment['id']}"), json={"content": "final"}, headers=alice
        )
        deleted = await client.delete(_project_url(project, f"/comments/{comment['id']}"), headers=alice)
        again = await client.delete(_project_url(project, f"/comments/{comment['id']}"), headers=alice)

        assert edited.json()["content"] == "final"
        assert deleted.status_code == 204
        assert again.status_code == 404

    async def test_other_member_cannot_edit_or_delete(self, client: AsyncClient, shared_project, alice, bob):
        comment = (
            await client.post(_project_url(shared_project, "/comments"), json={"content": "mine"}, headers=alice)
        ).json()

        edited = await client.put(
            _project_url(shared_project, f"/comments/{comment['id']}"), json={"content": "hijack"}, headers=bob
        )
        deleted = await client.delete(_project_url(shared_project, f"/comments/{comment['id']}"), headers=bob)

        assert edited.status_code == 403
        assert deleted.status_code == 403

    async def test_comment_of_other_project_is_404(self, client: AsyncClient, project, alice):
        comment = (
            await client.post(_project_url(project, "/comments"), json={"content": "x"}, headers=alice)
        ).json()
        other = (await client.post("/api/v1/projects", json={"name": "Other"}, headers=alice)).json()

        response = await client.put(
            _project_url(other, f"/comments/{comment['id']}"), json={"content": "y"}, headers=alice
        )

        assert response.status_code == 404
