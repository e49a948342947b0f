"""HTTP API tests for users, projects and tasks."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.integration


async def _create_user(client: AsyncClient, email: str, name: str = "Tester") -> dict[str, str]:
    response = await client.post("/api/v1/users", json={"email": email, "display_name": name})
    assert response.status_code == 201, response.text
    return {"X-User-Id": str(response.json()["id"])}


@pytest.fixture
async def alice(client: AsyncClient) -> dict[str, str]:
    return await _create_user(client, "alice@example.com", "Alice")


@pytest.fixture
async def bob(client: AsyncClient) -> dict[str, str]:
    return await _create_user(client, "bob@example.com", "Bob")


class TestUsers:
    async def test_signup_conflict_and_restore(self, client: AsyncClient):
        first = await client.post(
            "/api/v1/users", json={"email": "x@example.com", "display_name": "First"}
        )
        assert first.status_code == 201
        user_id = first.json()["id"]

        duplicate = await client.post(
            "/api/v1/users", json={"email": "x@example.com", "display_name": "Dup"}
        )
        assert duplicate.status_code == 409

        deleted = await client.delete("/api/v1/users/me", headers={"X-User-Id": str(user_id)})
        assert deleted.status_code == 204

        restored = await client.post(
            "/api/v1/users", json={"email": "x@example.com", "display_name": "Second"}
        )
        assert restored.status_code == 201
        body = restored.json()
        assert body["id"] == user_id
        assert body["display_name"] == "Second"
        assert body["deleted_at"] is None

    async def test_deleted_user_cannot_act(self, client: AsyncClient, alice):
        await client.delete("/api/v1/users/me", headers=alice)

        response = await client.get("/api/v1/users/me", headers=alice)

        assert response.status_code == 401

    async def test_update_profile(self, client: AsyncClient, alice):
        response = await client.patch(
            "/api/v1/users/me", headers=alice, json={"display_name": "Alice B."}
        )

        assert response.status_code == 200
        assert response.json()["display_name"] == "Alice B."

    async def test_email_change_to_taken_address_conflicts(self, client: AsyncClient, alice, bob):
        response = await client.patch(
            "/api/v1/users/me", headers=alice, json={"email": "bob@example.com"}
        )

        assert response.status_code == 409


class TestProjects:
    async def test_hierarchy_and_delete_ordering(self, client: AsyncClient, alice):
        p1 = (await client.post("/api/v1/projects", headers=alice, json={"name": "P1"})).json()
        p2 = (
            await client.post(
                "/api/v1/projects",
                headers=alice,
                json={"name": "P2", "parent_project_id": p1["id"], "depth": 1},
            )
        ).json()
        assert p1["color"] == "#808080"

        roots = await client.get("/api/v1/projects", headers=alice, params={"roots_only": True})
        children = await client.get(f"/api/v1/projects/{p1['id']}/children", headers=alice)
        assert [p["id"] for p in roots.json()] == [p1["id"]]
        assert [p["id"] for p in children.json()] == [p2["id"]]

        blocked = await client.delete(f"/api/v1/projects/{p1['id']}", headers=alice)
        assert blocked.status_code == 409

        child_deleted = await client.delete(f"/api/v1/projects/{p2['id']}", headers=alice)
        assert child_deleted.status_code == 204
        parent_deleted = await client.delete(f"/api/v1/projects/{p1['id']}", headers=alice)
        assert parent_deleted.status_code == 204

        gone = await client.get(f"/api/v1/projects/{p1['id']}", headers=alice)
        assert gone.status_code == 404

    async def test_other_users_project_is_not_found(self, client: AsyncClient, alice, bob):
        project = (await client.post("/api/v1/projects", headers=alice, json={"name": "A"})).json()

        fetched = await client.get(f"/api/v1/projects/{project['id']}", headers=bob)
        assert fetched.status_code == 404
        patched = await client.patch(
            f"/api/v1/projects/{project['id']}", headers=bob, json={"name": "B"}
        )
        assert patched.status_code == 404

    async def test_self_parent_is_unprocessable(self, client: AsyncClient, alice):
        project = (await client.post("/api/v1/projects", headers=alice, json={"name": "A"})).json()

        response = await client.patch(
            f"/api/v1/projects/{project['id']}",
            headers=alice,
            json={"parent_project_id": project["id"]},
        )

        assert response.status_code == 422
        assert response.json()["detail"] == "Project cannot be its own parent"

    async def test_invalid_color_rejected(self, client: AsyncClient, alice):
        response = await client.post(
            "/api/v1/projects", headers=alice, json={"name": "A", "color": "red"}
        )

        assert response.status_code == 422


class TestTasks:
    async def _project(self, client: AsyncClient, headers: dict[str, str]) -> int:
        response = await client.post("/api/v1/projects", headers=headers, json={"name": "Work"})
        return response.json()["id"]

    async def test_complete_twice(self, client: AsyncClient, alice):
        project_id = await self._project(client, alice)
        task = (
            await client.post(
                "/api/v1/tasks",
                headers=alice,
                json={"project_id": project_id, "title": "Write report"},
            )
        ).json()
        assert task["status"] == "pending"

        first = await client.post(f"/api/v1/tasks/{task['id']}/complete", headers=alice)
        second = await client.post(f"/api/v1/tasks/{task['id']}/complete", headers=alice)

        assert first.status_code == 200
        assert first.json()["status"] == "completed"
        assert first.json()["completed_at"] is not None
        assert second.status_code == 409

    async def test_task_in_foreign_project_forbidden(self, client: AsyncClient, alice, bob):
        project_id = await self._project(client, alice)

        response = await client.post(
            "/api/v1/tasks", headers=bob, json={"project_id": project_id, "title": "Sneak"}
        )

        assert response.status_code == 403

    async def test_paginated_listing(self, client: AsyncClient, alice):
        project_id = await self._project(client, alice)
        for i in range(5):
            await client.post(
                "/api/v1/tasks",
                headers=alice,
                json={"project_id": project_id, "title": f"Task {i}"},
            )

        response = await client.get(
            "/api/v1/tasks", headers=alice, params={"page": 2, "limit": 2}
        )

        body = response.json()
        assert response.status_code == 200
        assert [t["title"] for t in body["items"]] == ["Task 2", "Task 3"]
        assert body["total"] == 5
        assert body["page"] == 2
        assert body["limit"] == 2
        assert body["total_pages"] == 3

    async def test_status_and_deleted_filters(self, client: AsyncClient, alice):
        project_id = await self._project(client, alice)
        ids = []
        for title in ("Keep", "Drop"):
            response = await client.post(
                "/api/v1/tasks", headers=alice, json={"project_id": project_id, "title": title}
            )
            ids.append(response.json()["id"])
        await client.delete(f"/api/v1/tasks/{ids[1]}", headers=alice)

        default = await client.get("/api/v1/tasks", headers=alice, params={"status": "pending"})
        everything = await client.get(
            "/api/v1/tasks", headers=alice, params={"include_deleted": True}
        )

        assert [t["id"] for t in default.json()["items"]] == [ids[0]]
        assert [t["id"] for t in everything.json()["items"]] == ids
        assert default.json()["limit"] is None
        assert default.json()["total_pages"] == 1

    async def test_subtasks_and_project_tasks(self, client: AsyncClient, alice):
        project_id = await self._project(client, alice)
        parent = (
            await client.post(
                "/api/v1/tasks", headers=alice, json={"project_id": project_id, "title": "Move"}
            )
        ).json()
        child = (
            await client.post(
                "/api/v1/tasks",
                headers=alice,
                json={"project_id": project_id, "title": "Pack", "parent_task_id": parent["id"]},
            )
        ).json()

        subtasks = await client.get(f"/api/v1/tasks/{parent['id']}/subtasks", headers=alice)
        project_tasks = await client.get(f"/api/v1/projects/{project_id}/tasks", headers=alice)

        assert [t["id"] for t in subtasks.json()] == [child["id"]]
        assert [t["id"] for t in project_tasks.json()] == [parent["id"], child["id"]]

    async def test_reopen_clears_completed_at(self, client: AsyncClient, alice):
        project_id = await self._project(client, alice)
        task = (
            await client.post(
                "/api/v1/tasks", headers=alice, json={"project_id": project_id, "title": "Flip"}
            )
        ).json()
        await client.post(f"/api/v1/tasks/{task['id']}/complete", headers=alice)

        response = await client.patch(
            f"/api/v1/tasks/{task['id']}", headers=alice, json={"status": "in_progress"}
        )

        assert response.json()["status"] == "in_progress"
        assert response.json()["completed_at"] is None


async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "healthy"
