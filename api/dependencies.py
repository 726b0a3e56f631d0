# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-05
# Description: dependencies.py
# -----------------------------------------------------------------------------
from functools import lru_cache

from api.AppContainer import AppContainer
from search.SemanticSearchEngine import SemanticSearchEngine
from services.HealthService import HealthService
from services.RecipeService import RecipeService

@lru_cache
def get_container() -> AppContainer:
    # Built on first request so importing the app never needs credentials
    return AppContainer()

def get_health_service() -> HealthService:
    return get_container().health_service

def get_search_engine() -> SemanticSearchEngine:
    return get_container().search_engine

def get_recipe_service() -> RecipeService:
    return get_container().recipe_service
