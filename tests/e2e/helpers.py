"""Helpers shared by E2E tests."""

from fastapi.testclient import TestClient


def register(client: TestClient, username: str) -> dict:
    """Register a user and return auth headers plus the user payload."""
    response = client.post(
        "/api/auth/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": "secret123",
        },
    )
    assert response.status_code == 201, response.text
    data = response.json()["data"]
    return {"headers": {"Authorization": f"Bearer {data['token']}"}, "user": data}


def create_diary(
    client: TestClient,
    headers: dict,
    title: str = "A day",
    is_public: bool = True,
    content: str = "Dear diary",
) -> dict:
    response = client.post(
        "/api/diaries",
        json={"title": title, "content": content, "is_public": is_public},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


def add_comment(
    client: TestClient,
    headers: dict,
    diary_id: str,
    content: str = "Nice",
    parent_comment: str | None = None,
):
    body = {"content": content}
    if parent_comment:
        body["parent_comment"] = parent_comment
    return client.post(
        f"/api/diaries/{diary_id}/comments", json=body, headers=headers
    )
