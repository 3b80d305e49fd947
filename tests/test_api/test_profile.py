# tests/test_api/test_profile.py
from portfolio_api.schemas.profile import default_profile


def test_profile_defaults_until_saved(client):
    response = client.get("/api/profile")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == 1
    assert body["name"] == default_profile().name
    assert body["avatarUrl"] == default_profile().avatar_url


def test_update_bio_keeps_other_fields(client, auth_headers):
    before = client.get("/api/profile").json()

    response = client.patch("/api/profile", json={"bio": "X"}, headers=auth_headers)

    assert response.status_code == 200
    after = client.get("/api/profile").json()
    assert after["bio"] == "X"
    assert {k: v for k, v in after.items() if k != "bio"} == {k: v for k, v in before.items() if k != "bio"}


def test_successive_updates_accumulate(client, auth_headers):
    client.patch("/api/profile", json={"name": "Ada"}, headers=auth_headers)
    client.patch("/api/profile", json={"github": "https://github.com/ada"}, headers=auth_headers)

    profile = client.get("/api/profile").json()
    assert profile["name"] == "Ada"
    assert profile["github"] == "https://github.com/ada"
    assert profile["id"] == 1


def test_update_rejects_empty_avatar(client, auth_headers):
    response = client.patch("/api/profile", json={"avatarUrl": ""}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "avatarUrl"


def test_update_requires_token(client):
    response = client.patch("/api/profile", json={"bio": "hijacked"})

    assert response.status_code == 401
    assert client.get("/api/profile").json()["bio"] == default_profile().bio
