# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-06
# Description: main.py
# -----------------------------------------------------------------------------
import logging

from fastapi import FastAPI
from api.routers import health, recipes, search

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
app = FastAPI(title="Recipe Semantic Search API")
app.include_router(health.router)
app.include_router(recipes.router)
app.include_router(search.router)
