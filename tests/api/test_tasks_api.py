"""Coffeeshop, task definition and task result endpoint tests."""

from httpx import AsyncClient

from tests.fakes import SHOP_ID, FakeStore, bearer


async def test_superadmin_creates_and_lists_coffeeshops(
    client: AsyncClient, store: FakeStore
) -> None:
    created = await client.post(
        "/api/v1/coffeeshops",
        json={"name": "Airport", "location": {"latitude": 43.35, "longitude": 77.04}},
        headers=bearer("super-uid"),
    )
    assert created.status_code == 201
    assert created.json()["location"] == {"latitude": 43.35, "longitude": 77.04}

    listed = await client.get("/api/v1/coffeeshops", headers=bearer("super-uid"))
    assert {s["name"] for s in listed.json()} == {"Central", "Riverside", "Airport"}


async def test_admin_cannot_manage_coffeeshops(client: AsyncClient) -> None:
    response = await client.get("/api/v1/coffeeshops", headers=bearer("admin-uid"))
    assert response.status_code == 403


async def test_admin_task_crud(client: AsyncClient, store: FakeStore) -> None:
    created = await client.post(
        "/api/v1/tasks",
        json={"title": "Clean machine", "days": [1, 3, 5], "expected_finish_time": "09:00"},
        headers=bearer("admin-uid"),
    )
    assert created.status_code == 201
    task_id = created.json()["id"]
    assert created.json()["repeat_type"] == "weekly"
    assert task_id in store.tasks.docs[SHOP_ID]

    patched = await client.patch(
        f"/api/v1/tasks/{task_id}", json={"title": "Descale"}, headers=bearer("admin-uid")
    )
    assert patched.status_code == 200
    assert patched.json()["title"] == "Descale"
    assert patched.json()["days"] == [1, 3, 5]

    deleted = await client.delete(f"/api/v1/tasks/{task_id}", headers=bearer("admin-uid"))
    assert deleted.json()["active"] is False

    listed = await client.get("/api/v1/tasks", headers=bearer("admin-uid"))
    assert [t["id"] for t in listed.json()] == [task_id]


async def test_weekly_task_without_days_returns_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/tasks", json={"title": "Clean"}, headers=bearer("admin-uid")
    )
    assert response.status_code == 400
    assert response.json()["details"]["field"] == "days"


async def test_staff_cannot_create_tasks(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/tasks", json={"title": "Clean", "days": [1]}, headers=bearer("staff-uid")
    )
    assert response.status_code == 403


async def test_submit_and_review_result(client: AsyncClient, store: FakeStore) -> None:
    store.results.seed(
        SHOP_ID,
        "t1_2024-06-05",
        {
            "task_id": "t1",
            "title": "Clean",
            "type": "checkbox",
            "status": "Not_Done",
            "date": "2024-06-05",
        },
    )

    listed = await client.get(
        "/api/v1/task-results", params={"date": "2024-06-05"}, headers=bearer("staff-uid")
    )
    assert [r["id"] for r in listed.json()] == ["t1_2024-06-05"]

    submitted = await client.post(
        "/api/v1/task-results/t1_2024-06-05/submit", json={}, headers=bearer("staff-uid")
    )
    assert submitted.status_code == 200
    assert submitted.json()["status"] == "In_Review"
    assert submitted.json()["user_id"] == "staff-uid"

    again = await client.post(
        "/api/v1/task-results/t1_2024-06-05/submit", json={}, headers=bearer("staff-uid")
    )
    assert again.status_code == 409

    forbidden = await client.post(
        "/api/v1/task-results/t1_2024-06-05/review",
        json={"outcome": "Approved"},
        headers=bearer("staff-uid"),
    )
    assert forbidden.status_code == 403

    reviewed = await client.post(
        "/api/v1/task-results/t1_2024-06-05/review",
        json={"outcome": "Approved", "review_comment": "ok"},
        headers=bearer("admin-uid"),
    )
    assert reviewed.status_code == 200
    assert reviewed.json()["status"] == "Approved"


async def test_unknown_result_returns_404(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/task-results/nope/submit", json={}, headers=bearer("staff-uid")
    )
    assert response.status_code == 404
