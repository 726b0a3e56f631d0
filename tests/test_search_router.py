# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-10
# Description: test_search_router.py
# -----------------------------------------------------------------------------
import logging

import pytest
from starlette.testclient import TestClient

from api.dependencies import get_recipe_service, get_search_engine
from api.main import app
from search.SemanticSearchEngine import SemanticSearchEngine
from services.RecipeLifecycleHook import RecipeLifecycleHook
from services.RecipeService import RecipeService
from utility.errors import StoreError
import settings

logger = logging.getLogger(__name__)


class BrokenStore:
    def test_connection(self):
        return False

    def find_all(self):
        raise StoreError("chroma down")


@pytest.fixture
def wire(make_provider, store, catalog):
    """Point the app at in-memory collaborators; returns a TestClient."""
    def _wire(provider, embedding_store=store):
        engine = SemanticSearchEngine(provider=provider, store=embedding_store, catalog=catalog)
        svc = RecipeService(
            catalog=catalog,
            lifecycle_hook=RecipeLifecycleHook(provider=provider, store=embedding_store),
        )
        app.dependency_overrides[get_search_engine] = lambda: engine
        app.dependency_overrides[get_recipe_service] = lambda: svc
        return TestClient(app)

    yield _wire
    app.dependency_overrides.clear()


@pytest.fixture
def chicken_provider(make_provider):
    return make_provider({
        "chicken soup chicken, water": [1, 0, 0],
        "beef stew beef, potato": [0, 1, 0],
        "chicken broth chicken, bones": [0.9, 0.1, 0],
        "chicken": [1, 0, 0],
    })


def _create(client, title, ingredients):
    resp = client.post(
        "/recipes",
        json={"title": title, "ingredients": [{"name": n} for n in ingredients]},
        headers={"X-User": "cook@example.com"},
    )
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_post_search_ranks_created_recipes(wire, chicken_provider):
    client = wire(chicken_provider)
    _create(client, "chicken soup", ["chicken", "water"])
    _create(client, "beef stew", ["beef", "potato"])
    _create(client, "chicken broth", ["chicken", "bones"])

    resp = client.post("/search", json={"query": "chicken", "top_k": 5})

    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["query"] == "chicken"
    assert data["count"] == 3
    assert [r["title"] for r in data["results"]] == ["chicken soup", "chicken broth", "beef stew"]
    assert data["results"][0]["owner"] == "cook@example.com"


def test_post_search_accepts_camel_case_top_k(wire, chicken_provider):
    client = wire(chicken_provider)
    _create(client, "chicken soup", ["chicken", "water"])
    _create(client, "beef stew", ["beef", "potato"])

    resp = client.post("/search", json={"query": "chicken", "topK": 1})

    assert resp.status_code == 200, resp.text
    assert [r["title"] for r in resp.json()["results"]] == ["chicken soup"]


def test_post_search_defaults_top_k(wire, chicken_provider):
    client = wire(chicken_provider)

    resp = client.post("/search", json={"query": "chicken"})

    assert resp.status_code == 200, resp.text
    assert resp.json()["top_k"] == 5
    assert resp.json()["results"] == []


def test_post_search_top_k_zero(wire, chicken_provider):
    client = wire(chicken_provider)
    _create(client, "chicken soup", ["chicken", "water"])

    resp = client.post("/search", json={"query": "chicken", "top_k": 0})
    assert resp.status_code == 200
    assert resp.json()["results"] == []


def test_post_search_large_top_k_returns_everything(wire, chicken_provider):
    client = wire(chicken_provider)
    _create(client, "chicken soup", ["chicken", "water"])

    resp = client.post("/search", json={"query": "chicken", "top_k": 500})

    assert resp.status_code == 200, resp.text
    assert resp.json()["top_k"] == 500
    assert [r["title"] for r in resp.json()["results"]] == ["chicken soup"]


def test_post_search_honours_configured_top_k_cap(wire, chicken_provider, monkeypatch):
    monkeypatch.setattr(settings, "SEARCH_MAX_TOP_K", 10)
    client = wire(chicken_provider)

    assert client.post("/search", json={"query": "chicken", "top_k": 10}).status_code == 200
    assert client.post("/search", json={"query": "chicken", "top_k": 11}).status_code == 422


def test_post_search_rejects_blank_and_negative(wire, chicken_provider):
    client = wire(chicken_provider)

    assert client.post("/search", json={"query": "   "}).status_code == 400
    assert client.post("/search", json={"query": ""}).status_code == 422
    assert client.post("/search", json={"query": "x", "top_k": -1}).status_code == 422


def test_post_search_provider_failure_is_502(wire, failing_provider):
    client = wire(failing_provider)

    resp = client.post("/search", json={"query": "chicken"})
    assert resp.status_code == 502
    assert "Embedding failed" in resp.json()["detail"]


def test_post_search_store_failure_is_503(wire, make_provider):
    client = wire(make_provider({}, default=[1.0]), embedding_store=BrokenStore())

    resp = client.post("/search", json={"query": "chicken"})
    assert resp.status_code == 503


def test_deleted_recipe_disappears_from_search(wire, chicken_provider):
    client = wire(chicken_provider)
    soup = _create(client, "chicken soup", ["chicken", "water"])
    _create(client, "chicken broth", ["chicken", "bones"])

    resp = client.delete(f"/recipes/{soup['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"recipe_id": soup["id"], "deleted": True}

    titles = [r["title"] for r in client.post("/search", json={"query": "chicken"}).json()["results"]]
    assert titles == ["chicken broth"]


@pytest.mark.integration
def test_post_search_live():
    client = TestClient(app)

    resp = client.post("/search", json={"query": "spicy chicken", "top_k": 3})
    logger.info("STATUS: %s BODY: %s", resp.status_code, resp.text)

    assert resp.status_code == 200
    assert isinstance(resp.json()["results"], list)
