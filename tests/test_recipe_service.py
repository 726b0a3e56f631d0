# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-10
# Description: test_recipe_service.py
# -----------------------------------------------------------------------------
import pytest

from catalog.Recipe import Ingredient, Recipe
from services.RecipeLifecycleHook import RecipeLifecycleHook
from services.RecipeService import RecipeService
from utility.errors import ProviderError, StoreError


def _service(provider, store, catalog) -> RecipeService:
    return RecipeService(catalog=catalog, lifecycle_hook=RecipeLifecycleHook(provider=provider, store=store))


def test_create_recipe_persists_then_embeds(make_provider, store, catalog):
    provider = make_provider({"Pancakes flour, milk, egg": [0.2, 0.8]})
    svc = _service(provider, store, catalog)

    recipe = Recipe(
        title="Pancakes",
        ingredients=[Ingredient(name="flour"), Ingredient(name="milk"), Ingredient(name="egg")],
    )
    saved = svc.create_recipe(recipe, owner="alice@example.com")

    assert saved.id is not None
    assert saved.owner == "alice@example.com"
    assert catalog.find_by_id(saved.id) is not None
    assert provider.calls == ["Pancakes flour, milk, egg"]

    emb = store.find_by_recipe_id(saved.id)
    assert emb is not None
    assert emb.embedding == [0.2, 0.8]


def test_create_recipe_rolls_back_when_embedding_fails(failing_provider, store, catalog):
    svc = _service(failing_provider, store, catalog)

    with pytest.raises(ProviderError):
        svc.create_recipe(Recipe(title="Doomed"), owner="bob")

    assert catalog.find_all() == []
    assert store.find_all() == []


def test_get_recipe(make_provider, store, catalog):
    svc = _service(make_provider({}, default=[1.0]), store, catalog)
    saved = svc.create_recipe(Recipe(title="Tea"), owner="bob")

    assert svc.get_recipe(saved.id).title == "Tea"
    assert svc.get_recipe(12345) is None


def test_delete_recipe_removes_recipe_and_embedding(make_provider, store, catalog):
    svc = _service(make_provider({}, default=[1.0]), store, catalog)
    saved = svc.create_recipe(Recipe(title="Tea"), owner="bob")

    svc.delete_recipe(saved.id)

    assert catalog.find_by_id(saved.id) is None
    assert store.find_by_recipe_id(saved.id) is None


def test_delete_unknown_recipe_raises_key_error(make_provider, store, catalog):
    svc = _service(make_provider({}, default=[1.0]), store, catalog)
    with pytest.raises(KeyError):
        svc.delete_recipe(77)


def test_delete_recipe_without_embedding_succeeds(make_provider, store, catalog):
    svc = _service(make_provider({}, default=[1.0]), store, catalog)
    orphan = catalog.save(Recipe(title="Imported"))

    svc.delete_recipe(orphan.id)
    assert catalog.find_by_id(orphan.id) is None


def test_create_recipe_rolls_back_when_vector_is_not_numeric(make_provider, store, catalog):
    svc = _service(make_provider({}, default=[1.0, None]), store, catalog)

    with pytest.raises(StoreError):
        svc.create_recipe(Recipe(title="soup"), owner="bob")

    assert catalog.find_all() == []
    assert store.find_all() == []


class ExplodingHook:
    def on_recipe_created(self, recipe_id, title, ingredient_names):
        raise RuntimeError("unexpected client failure")

    def on_recipe_deleted(self, recipe_id):
        pass


def test_create_recipe_rolls_back_on_unexpected_errors(catalog):
    svc = RecipeService(catalog=catalog, lifecycle_hook=ExplodingHook())

    with pytest.raises(RuntimeError):
        svc.create_recipe(Recipe(title="soup"), owner="bob")

    assert catalog.find_all() == []


def test_create_recipe_does_not_mutate_callers_recipe(make_provider, store, catalog):
    svc = _service(make_provider({}, default=[1.0]), store, catalog)
    draft = Recipe(title="Tea", owner=None)

    saved = svc.create_recipe(draft, owner="bob")

    assert saved.owner == "bob"
    assert draft.owner is None
    assert draft.id is None
