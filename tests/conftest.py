import pytest
from fastapi.testclient import TestClient

from indiaaura.catalog.schemas import HeritageItem
from indiaaura.catalog.service import get_summary_lookup
from indiaaura.catalog.store import HERITAGE_ITEMS, REGIONS, InMemoryHeritageRepository
from indiaaura.main import app


def make_item(item_id, **overrides):
    fields = {
        "id": item_id,
        "title": f"Item {item_id}",
        "description": "A heritage entry.",
        "image": f"/img/{item_id}.jpg",
        "category": "Monuments",
        "state": "Rajasthan",
        "region": "West India",
        "location": "Jaipur, Rajasthan",
        "source": "local",
    }
    fields.update(overrides)
    return HeritageItem(**fields)


@pytest.fixture
def repository():
    return InMemoryHeritageRepository(HERITAGE_ITEMS, REGIONS)


@pytest.fixture
def client():
    app.dependency_overrides[get_summary_lookup] = lambda: None
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
