from indiaaura.catalog.schemas import HeritageEnrichment
from indiaaura.catalog.service import get_summary_lookup
from indiaaura.catalog.store import HERITAGE_ITEMS, InMemoryHeritageRepository, get_repository
from indiaaura.config import settings
from indiaaura.main import app


def _ids(payload):
    return [item["id"] for item in payload]


def test_health(client):
    assert client.get("/").json() == {"status": "ok"}


def test_search(client):
    response = client.get("/api/heritage/search", params={"q": "tamil"})
    assert response.status_code == 200
    assert _ids(response.json()["items"]) == ["5", "6", "11"]


def test_search_empty_query(client):
    assert client.get("/api/heritage/search", params={"q": "  "}).json() == {"items": []}
    assert client.get("/api/heritage/search").json() == {"items": []}


def test_state_listing(client):
    response = client.get("/api/heritage/state/tamil-nadu")
    assert _ids(response.json()["items"]) == ["5", "6"]


def test_region_listing(client):
    response = client.get("/api/heritage/region/south")
    assert _ids(response.json()["items"]) == ["5", "6", "7", "11", "17"]


def test_category_listing(client):
    response = client.get("/api/heritage/category/Dance")
    assert _ids(response.json()["items"]) == ["6", "7"]


def test_featured(client):
    response = client.get("/api/heritage/featured", params={"limit": 3})
    assert _ids(response.json()) == ["6", "8", "16"]


def test_featured_rejects_bad_limit(client):
    assert client.get("/api/heritage/featured", params={"limit": 0}).status_code == 422


def test_popular_states(client):
    states = client.get("/api/heritage/popular-states", params={"limit": 2}).json()
    assert states[0]["state"] == "Pan-India"
    assert states[0]["slug"] == "pan-india"
    assert states[0]["count"] == 4
    assert states[1]["state"] == "Uttar Pradesh"


def test_item_details(client):
    response = client.get("/api/heritage/items/1")
    assert response.status_code == 200
    body = response.json()
    assert body["error"] is None
    assert body["item"]["title"] == "Taj Mahal"
    assert body["item"]["source_label"] == "Wikipedia"


def test_item_details_not_found(client):
    response = client.get("/api/heritage/items/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Item not found"


def test_item_details_uses_enrichment(client):
    item = HERITAGE_ITEMS[0].model_copy(update={"significance": None})
    app.dependency_overrides[get_repository] = lambda: InMemoryHeritageRepository([item])
    app.dependency_overrides[get_summary_lookup] = lambda: (
        lambda title: HeritageEnrichment(
            significance=f"{title} significance",
            long_description="<p>replacement</p>",
        )
    )
    body = client.get(f"/api/heritage/items/{item.id}").json()
    assert body["item"]["significance"] == "Taj Mahal significance"
    assert body["item"]["long_description"] == item.long_description


def test_item_details_enrichment_failure(client):
    item = HERITAGE_ITEMS[0].model_copy(update={"significance": None})
    app.dependency_overrides[get_repository] = lambda: InMemoryHeritageRepository([item])

    def failing_lookup(title):
        raise RuntimeError("timeout")

    app.dependency_overrides[get_summary_lookup] = lambda: failing_lookup
    response = client.get(f"/api/heritage/items/{item.id}")
    assert response.status_code == 200
    assert response.json()["item"]["significance"] is None


def test_regions(client):
    regions = client.get("/api/regions").json()
    assert [r["id"] for r in regions] == ["north", "south", "east", "west", "central"]
    assert client.get("/api/regions/west").json()["name"] == "West India"
    assert client.get("/api/regions/atlantis").status_code == 404


def test_external_search_blank(client):
    assert client.get("/api/heritage/external-search").json() == {"items": []}


def test_bookmark_add_then_list(client):
    first = client.post("/api/bookmarks/5")
    assert first.json() == {"success": True, "bookmarks": ["5"]}
    assert "Max-Age" in first.headers["set-cookie"]
    second = client.post("/api/bookmarks/5")
    assert second.json()["bookmarks"] == ["5"]
    client.post("/api/bookmarks/1")
    listed = client.get("/api/bookmarks").json()["bookmarks"]
    assert _ids(listed) == ["5", "1"]


def test_bookmark_remove(client):
    client.post("/api/bookmarks/5")
    client.post("/api/bookmarks/1")
    response = client.delete("/api/bookmarks/5")
    assert response.json()["bookmarks"] == ["1"]
    assert _ids(client.get("/api/bookmarks").json()["bookmarks"]) == ["1"]


def test_bookmark_remove_absent_id_still_writes_cookie(client):
    response = client.delete("/api/bookmarks/42")
    assert response.json() == {"success": True, "bookmarks": []}
    assert response.headers["set-cookie"].startswith(f"{settings.BOOKMARK_COOKIE_NAME}=")


def test_bookmarks_with_corrupt_cookie(client):
    client.cookies.set(settings.BOOKMARK_COOKIE_NAME, "not valid json")
    response = client.get("/api/bookmarks")
    assert response.status_code == 200
    assert response.json() == {"bookmarks": []}
