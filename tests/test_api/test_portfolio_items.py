# tests/test_api/test_portfolio_items.py
import os


ITEMS = [
    {"id": 1, "name": "Gallery", "description": "Photo gallery", "technologies": ["Python"]},
    {"id": 2, "name": "Blog", "description": "Notes", "technologies": [], "url": "https://example.com"},
]


def test_default_items_when_nothing_saved(client):
    response = client.get("/api/portfolio-items")

    assert response.status_code == 200
    items = response.json()
    assert len(items) == 1
    assert items[0]["name"] == "Photography Portfolio"
    assert items[0]["technologies"] == ["React", "TypeScript", "Vite", "TailwindCSS", "shadcn/ui"]
    assert items[0]["url"] == "https://portfolio.ronnyreyes.com"
    assert items[0]["github"] == "https://github.com/ronnyreyes/portfolio"


def test_null_document_lists_default_items(client, settings):
    os.makedirs(settings.DATA_DIR, exist_ok=True)
    with open(os.path.join(settings.DATA_DIR, "portfolio-items.json"), "w") as f:
        f.write("null")

    response = client.get("/api/portfolio-items")

    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Photography Portfolio"]


def test_save_replaces_whole_collection(client, auth_headers):
    response = client.post("/api/portfolio-items", json=ITEMS, headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Portfolio items saved successfully"}

    items = client.get("/api/portfolio-items").json()
    assert [item["name"] for item in items] == ["Gallery", "Blog"]
    assert items[1]["url"] == "https://example.com"
    assert items[0]["github"] is None

    client.post("/api/portfolio-items", json=ITEMS[1:], headers=auth_headers)
    assert [item["id"] for item in client.get("/api/portfolio-items").json()] == [2]


def test_duplicate_ids_are_stored_verbatim(client, auth_headers):
    twins = [dict(ITEMS[0]), dict(ITEMS[0], name="Twin")]

    client.post("/api/portfolio-items", json=twins, headers=auth_headers)

    assert [item["id"] for item in client.get("/api/portfolio-items").json()] == [1, 1]


def test_save_requires_token(client):
    response = client.post("/api/portfolio-items", json=ITEMS)

    assert response.status_code == 401
    assert len(client.get("/api/portfolio-items").json()) == 1


def test_save_rejects_non_array(client, auth_headers):
    response = client.post("/api/portfolio-items", json={"id": 1}, headers=auth_headers)

    assert response.status_code == 400
