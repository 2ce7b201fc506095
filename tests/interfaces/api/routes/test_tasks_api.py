"""Integration tests for the task endpoints and the events they trigger."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

from app.application.event_bus import EventBus
from app.application.subscribers import register_subscribers
from app.domain.events import TASK_STATUS_CHANGED
from app.infrastructure import database


def _create_task(client, seed, headers, **fields) -> dict:
    response = client.post(
        f"/api/task/{seed.project_id}",
        json={"title": "Fix login", **fields},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


def _activities(client, task_id, headers) -> list[dict]:
    response = client.get(f"/api/activity/{task_id}", headers=headers)
    assert response.status_code == 200
    return response.json()


def test_requests_without_token_are_rejected(client, seed):
    response = client.get(f"/api/task/tasks/{seed.project_id}")

    assert response.status_code == 401


def test_status_change_records_one_activity_and_no_notification(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    task = _create_task(client, seed, owner)

    response = client.put(
        f"/api/task/status/{task['id']}", json={"status": "in-progress"}, headers=owner
    )

    assert response.status_code == 200
    assert response.json()["status"] == "in-progress"
    status_activities = [
        activity
        for activity in _activities(client, task["id"], owner)
        if activity["type"] == "status_changed"
    ]
    assert len(status_activities) == 1
    assert status_activities[0]["content"] == "changed the status from To Do to In Progress"
    assert status_activities[0]["user_id"] == seed.owner_id

    for user_id in (seed.owner_id, seed.member_id):
        notifications = client.get("/api/notification/", headers=auth_headers(user_id))
        assert notifications.json() == []


def test_assignment_records_activity_and_notifies_assignee(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    task = _create_task(client, seed, owner)

    response = client.put(
        f"/api/task/assignee/{task['id']}", json={"user_id": seed.member_id}, headers=owner
    )

    assert response.status_code == 200
    contents = [activity["content"] for activity in _activities(client, task["id"], owner)]
    assert "assigned the task to Grace Hopper" in contents

    notifications = client.get("/api/notification/", headers=auth_headers(seed.member_id)).json()
    assert len(notifications) == 1
    assert notifications[0]["title"] == "New task assigned"
    assert notifications[0]["content"] == 'You were assigned to "Fix login"'
    assert notifications[0]["resource_id"] == task["id"]
    assert notifications[0]["resource_type"] == "task"
    assert notifications[0]["is_read"] is False


def test_unassignment_notifies_previous_assignee_and_keeps_history(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    task = _create_task(client, seed, owner, user_id=seed.member_id)

    response = client.put(
        f"/api/task/assignee/{task['id']}", json={"user_id": None}, headers=owner
    )

    assert response.status_code == 200
    assert response.json()["user_id"] is None
    types = [activity["type"] for activity in _activities(client, task["id"], owner)]
    assert sorted(types) == ["create", "unassigned"]

    notifications = client.get("/api/notification/", headers=auth_headers(seed.member_id)).json()
    assert sorted(n["type"] for n in notifications) == ["task_assigned", "task_unassigned"]


def test_full_update_without_changes_records_nothing(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    task = _create_task(client, seed, owner)
    payload = {
        "title": task["title"],
        "description": task["description"],
        "status": task["status"],
        "priority": task["priority"],
        "project_id": task["project_id"],
        "position": task["position"],
    }

    response = client.put(f"/api/task/{task['id']}", json=payload, headers=owner)

    assert response.status_code == 200
    assert [activity["type"] for activity in _activities(client, task["id"], owner)] == ["create"]


def test_due_date_and_title_changes(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    task = _create_task(client, seed, owner)

    client.put(
        f"/api/task/due-date/{task['id']}",
        json={"due_date": "2025-03-05T10:00:00Z"},
        headers=owner,
    )
    client.put(f"/api/task/due-date/{task['id']}", json={"due_date": None}, headers=owner)
    client.put(f"/api/task/title/{task['id']}", json={"title": "Fix sign in"}, headers=owner)

    contents = [activity["content"] for activity in _activities(client, task["id"], owner)]
    assert "changed the due date to Mar 5" in contents
    assert "removed the due date" in contents
    assert 'changed the title from "Fix login" to "Fix sign in"' in contents


def test_update_of_missing_task_returns_404(client, seed, auth_headers):
    response = client.put(
        "/api/task/status/missing",
        json={"status": "done"},
        headers=auth_headers(seed.owner_id),
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Task not found"


def test_failing_subscriber_does_not_fail_the_request(seed, auth_headers):
    from app.main import create_app

    bus = EventBus()

    def broken(event) -> None:
        raise RuntimeError("subscriber down")

    bus.subscribe(TASK_STATUS_CHANGED, broken)
    register_subscribers(bus, database.SessionLocal)

    owner = auth_headers(seed.owner_id)
    with TestClient(create_app(event_bus=bus)) as client:
        task = _create_task(client, seed, owner)
        response = client.put(
            f"/api/task/status/{task['id']}", json={"status": "done"}, headers=owner
        )

        assert response.status_code == 200
        assert response.json()["status"] == "done"
        types = [activity["type"] for activity in _activities(client, task["id"], owner)]
        assert "status_changed" in types


def test_project_board_and_workspace_listing(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    _create_task(client, seed, owner, status="in-progress", user_id=seed.member_id)
    _create_task(client, seed, owner, title="Plan roadmap", status="planned")

    board = client.get(f"/api/task/tasks/{seed.project_id}", headers=owner).json()
    columns = {column["id"]: column for column in board["columns"]}
    assert [task["title"] for task in columns["in-progress"]["tasks"]] == ["Fix login"]
    assert [task["title"] for task in board["planned_tasks"]] == ["Plan roadmap"]

    listed = client.get(
        f"/api/task/workspace/{seed.workspace_id}",
        params={"user_id": seed.member_id},
        headers=owner,
    )
    assert listed.status_code == 200
    assert [task["title"] for task in listed.json()] == ["Fix login"]

    forbidden = client.get(
        f"/api/task/workspace/{seed.workspace_id}", headers=auth_headers(seed.outsider_id)
    )
    assert forbidden.status_code == 403


def test_export_and_import_round_trip(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    _create_task(client, seed, owner)

    exported = client.get(f"/api/task/export/{seed.project_id}", headers=owner)
    assert exported.status_code == 200
    body = exported.json()
    assert body["project"] == "Website"

    response = client.post(
        f"/api/task/import/{seed.project_id}",
        json={"tasks": [{"title": task["title"]} for task in body["tasks"]]},
        headers=owner,
    )
    assert response.status_code == 200
    assert response.json()["imported"] == 1
    imported = response.json()["tasks"][0]
    assert imported["number"] == 2
    contents = [activity["content"] for activity in _activities(client, imported["id"], owner)]
    assert contents == ["imported the task"]


def test_deleting_a_task_removes_its_activities(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    task = _create_task(client, seed, owner)

    assert client.delete(f"/api/task/{task['id']}", headers=owner).status_code == 200
    assert client.get(f"/api/task/{task['id']}", headers=owner).status_code == 404
    assert _activities(client, task["id"], owner) == []


def test_assigning_an_unknown_user_returns_404_and_records_nothing(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    task = _create_task(client, seed, owner, user_id=seed.member_id)

    response = client.put(
        f"/api/task/assignee/{task['id']}", json={"user_id": "missing"}, headers=owner
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"
    stored = client.get(f"/api/task/{task['id']}", headers=owner).json()
    assert stored["user_id"] == seed.member_id
    types = [activity["type"] for activity in _activities(client, task["id"], owner)]
    assert types == ["create"]


def test_creating_a_task_for_an_unknown_user_returns_404(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)

    response = client.post(
        f"/api/task/{seed.project_id}",
        json={"title": "Fix login", "user_id": "missing"},
        headers=owner,
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"
    board = client.get(f"/api/task/tasks/{seed.project_id}", headers=owner).json()
    assert all(not column["tasks"] for column in board["columns"])


def test_concurrent_priority_changes_each_record_an_activity(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    task = _create_task(client, seed, owner)

    def change(priority: str):
        return client.put(
            f"/api/task/priority/{task['id']}", json={"priority": priority}, headers=owner
        )

    with ThreadPoolExecutor(max_workers=2) as executor:
        responses = list(executor.map(change, ["high", "urgent"]))

    assert [response.status_code for response in responses] == [200, 200]
    priority_activities = [
        activity
        for activity in _activities(client, task["id"], owner)
        if activity["type"] == "priority_changed"
    ]
    assert len(priority_activities) == 2
