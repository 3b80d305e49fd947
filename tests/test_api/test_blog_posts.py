# tests/test_api/test_blog_posts.py
import os
from datetime import datetime


def parse(timestamp: str) -> datetime:
    return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))


def test_lists_welcome_post_when_nothing_saved(client):
    response = client.get("/api/blog-posts")

    assert response.status_code == 200
    posts = response.json()
    assert len(posts) == 1
    assert posts[0]["title"] == "Welcome to My Photography Blog"


def test_object_document_lists_welcome_post(client, settings, auth_headers):
    os.makedirs(settings.DATA_DIR, exist_ok=True)
    with open(os.path.join(settings.DATA_DIR, "blog-posts.json"), "w") as f:
        f.write("{}")

    response = client.get("/api/blog-posts")
    assert response.status_code == 200
    assert [post["id"] for post in response.json()] == [1]

    created = client.post(
        "/api/blog-posts",
        json={"title": "Next", "content": "Body"},
        headers=auth_headers,
    )
    assert created.status_code == 201
    assert created.json()["id"] == 2


def test_create_sets_equal_timestamps(client, auth_headers):
    response = client.post(
        "/api/blog-posts",
        json={"title": "First light", "content": "Up at five.", "tags": ["dawn"]},
        headers=auth_headers,
    )

    assert response.status_code == 201
    post = response.json()
    assert post["id"] == 2
    assert post["createdAt"] == post["updatedAt"]
    assert post["tags"] == ["dawn"]
    assert client.get(f"/api/blog-posts/{post['id']}").json() == post


def test_update_moves_updated_at_forward(client, auth_headers):
    created = client.post(
        "/api/blog-posts", json={"title": "Draft", "content": "..."}, headers=auth_headers
    ).json()

    response = client.patch(f"/api/blog-posts/{created['id']}", json={"title": "Final"}, headers=auth_headers)

    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Final"
    assert updated["content"] == "..."
    assert updated["createdAt"] == created["createdAt"]
    assert parse(updated["updatedAt"]) > parse(created["updatedAt"])


def test_update_missing_post_returns_404(client, auth_headers):
    response = client.patch("/api/blog-posts/99", json={"title": "Nope"}, headers=auth_headers)

    assert response.status_code == 404


def test_get_missing_post_returns_404(client):
    assert client.get("/api/blog-posts/99").status_code == 404


def test_delete_post(client, auth_headers):
    created = client.post(
        "/api/blog-posts", json={"title": "Short-lived", "content": "bye"}, headers=auth_headers
    ).json()

    assert client.delete(f"/api/blog-posts/{created['id']}", headers=auth_headers).status_code == 204
    assert client.delete(f"/api/blog-posts/{created['id']}", headers=auth_headers).status_code == 204
    assert created["id"] not in [post["id"] for post in client.get("/api/blog-posts").json()]


def test_create_requires_title_and_content(client, auth_headers):
    response = client.post("/api/blog-posts", json={"tags": []}, headers=auth_headers)

    assert response.status_code == 400
    assert {error["field"] for error in response.json()["errors"]} == {"title", "content"}


def test_mutations_require_token(client):
    assert client.post("/api/blog-posts", json={"title": "t", "content": "c"}).status_code == 401
    assert client.patch("/api/blog-posts/1", json={"title": "t"}).status_code == 401
    assert client.delete("/api/blog-posts/1").status_code == 401
    assert len(client.get("/api/blog-posts").json()) == 1
