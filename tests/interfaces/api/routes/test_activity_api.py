"""Integration tests for the activity feed and comment endpoints."""

from __future__ import annotations


def _create_task(client, seed, headers) -> dict:
    response = client.post(
        f"/api/task/{seed.project_id}", json={"title": "Fix login"}, headers=headers
    )
    assert response.status_code == 201
    return response.json()


def test_comment_lifecycle_is_limited_to_its_author(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    member = auth_headers(seed.member_id)
    task = _create_task(client, seed, owner)

    created = client.post(
        "/api/activity/comment",
        json={"task_id": task["id"], "content": "Looking into it"},
        headers=owner,
    )
    assert created.status_code == 201
    comment = created.json()
    assert comment["type"] == "comment"
    assert comment["user_id"] == seed.owner_id

    foreign_edit = client.put(
        "/api/activity/comment",
        json={"id": comment["id"], "content": "Hijacked"},
        headers=member,
    )
    assert foreign_edit.status_code == 403

    edited = client.put(
        "/api/activity/comment",
        json={"id": comment["id"], "content": "Fixed in staging"},
        headers=owner,
    )
    assert edited.status_code == 200
    assert edited.json()["content"] == "Fixed in staging"

    foreign_delete = client.request(
        "DELETE", "/api/activity/comment", json={"id": comment["id"]}, headers=member
    )
    assert foreign_delete.status_code == 403

    deleted = client.request(
        "DELETE", "/api/activity/comment", json={"id": comment["id"]}, headers=owner
    )
    assert deleted.status_code == 204

    types = [activity["type"] for activity in client.get(f"/api/activity/{task['id']}", headers=owner).json()]
    assert types == ["create"]


def test_audit_entries_cannot_be_edited_as_comments(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    task = _create_task(client, seed, owner)
    (created,) = client.get(f"/api/activity/{task['id']}", headers=owner).json()

    response = client.put(
        "/api/activity/comment",
        json={"id": created["id"], "content": "Rewritten history"},
        headers=owner,
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Comment not found"


def test_comment_on_missing_task_returns_404(client, seed, auth_headers):
    response = client.post(
        "/api/activity/comment",
        json={"task_id": "missing", "content": "Hello"},
        headers=auth_headers(seed.owner_id),
    )

    assert response.status_code == 404


def test_create_activity_endpoint(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    task = _create_task(client, seed, owner)

    response = client.post(
        "/api/activity/create",
        json={"task_id": task["id"], "type": "create", "content": "moved from another tool"},
        headers=owner,
    )

    assert response.status_code == 201
    assert response.json()["content"] == "moved from another tool"


def test_workspace_feed_requires_membership(client, seed, auth_headers):
    owner = auth_headers(seed.owner_id)
    task = _create_task(client, seed, owner)
    client.put(f"/api/task/status/{task['id']}", json={"status": "done"}, headers=owner)

    feed = client.get(
        "/api/activity/", params={"workspace_id": seed.workspace_id}, headers=owner
    )
    assert feed.status_code == 200
    items = feed.json()
    assert {item["type"] for item in items} == {"create", "status_changed"}
    assert all(item["task_title"] == "Fix login" for item in items)
    assert all(item["project_name"] == "Website" for item in items)
    assert all(item["user_name"] == "Ada Lovelace" for item in items)

    filtered = client.get(
        "/api/activity/",
        params={"workspace_id": seed.workspace_id, "user_id": seed.member_id},
        headers=owner,
    )
    assert filtered.json() == []

    forbidden = client.get(
        "/api/activity/",
        params={"workspace_id": seed.workspace_id},
        headers=auth_headers(seed.outsider_id),
    )
    assert forbidden.status_code == 403
