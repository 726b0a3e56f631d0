# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-08
# Description: test_recipe_lifecycle_hook.py
# -----------------------------------------------------------------------------
import pytest

from search.SemanticSearchEngine import SemanticSearchEngine
from services.RecipeLifecycleHook import RecipeLifecycleHook, build_embedding_text
from utility.errors import ProviderError


def test_build_embedding_text_joins_title_and_ingredients():
    assert build_embedding_text("Chicken Soup", ["chicken", "carrot", "salt"]) == "Chicken Soup chicken, carrot, salt"


def test_build_embedding_text_without_ingredients_keeps_trailing_space():
    assert build_embedding_text("Toast", []) == "Toast "


def test_on_recipe_created_embeds_and_saves(make_provider, store):
    provider = make_provider({"Chicken Soup chicken, water": [1.0, 0.0, 0.0]})
    hook = RecipeLifecycleHook(provider=provider, store=store)

    record = hook.on_recipe_created(7, "Chicken Soup", ["chicken", "water"])

    assert provider.calls == ["Chicken Soup chicken, water"]
    assert record.recipe_id == 7
    assert record.embedding == [1.0, 0.0, 0.0]
    assert store.find_by_recipe_id(7) is not None


def test_on_recipe_created_propagates_provider_error(failing_provider, store):
    hook = RecipeLifecycleHook(provider=failing_provider, store=store)

    with pytest.raises(ProviderError):
        hook.on_recipe_created(1, "Anything", ["x"])

    assert store.find_all() == []


def test_on_recipe_created_twice_inserts_duplicates(make_provider, store):
    hook = RecipeLifecycleHook(provider=make_provider({}, default=[1.0, 1.0]), store=store)

    hook.on_recipe_created(3, "Stew", ["beef"])
    hook.on_recipe_created(3, "Stew", ["beef"])

    assert [r.recipe_id for r in store.find_all()] == [3, 3]


def test_on_recipe_deleted_removes_embedding(make_provider, store):
    hook = RecipeLifecycleHook(provider=make_provider({}, default=[1.0]), store=store)
    hook.on_recipe_created(5, "Salad", ["lettuce"])

    hook.on_recipe_deleted(5)

    assert store.find_by_recipe_id(5) is None


def test_on_recipe_deleted_is_idempotent(make_provider, store):
    hook = RecipeLifecycleHook(provider=make_provider({}, default=[1.0]), store=store)
    hook.on_recipe_created(5, "Salad", ["lettuce"])

    hook.on_recipe_deleted(5)
    hook.on_recipe_deleted(5)
    hook.on_recipe_deleted(999)
    hook.on_recipe_deleted(None)

    assert store.find_all() == []


def test_created_recipe_is_found_by_similar_query(make_provider, store, catalog, add_recipe):
    # one-hot vectors per recipe text; the query maps next to the soup
    provider = make_provider({
        "Chicken Soup chicken, carrot": [1.0, 0.0, 0.0],
        "Beef Stew beef, potato": [0.0, 1.0, 0.0],
        "Fruit Salad apple, banana": [0.0, 0.0, 1.0],
        "warm chicken soup": [0.95, 0.05, 0.0],
    })
    hook = RecipeLifecycleHook(provider=provider, store=store)
    engine = SemanticSearchEngine(provider=provider, store=store, catalog=catalog)

    for title, ingredients in [
        ("Beef Stew", ["beef", "potato"]),
        ("Chicken Soup", ["chicken", "carrot"]),
        ("Fruit Salad", ["apple", "banana"]),
    ]:
        recipe = add_recipe(title, ingredients)
        hook.on_recipe_created(recipe.id, recipe.title, recipe.ingredient_names)

    results = engine.search("warm chicken soup", 3)
    assert results[0].title == "Chicken Soup"
