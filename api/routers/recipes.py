# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-06
# Description: recipes.py
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends, Header, HTTPException

from api.dependencies import get_recipe_service
from api.schemas.recipes import DeleteRecipeResponse, RecipeCreateRequest, RecipeOut
from services.RecipeService import RecipeService
from utility.errors import ProviderError, StoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.post("", response_model=RecipeOut)
def create_recipe(
    req: RecipeCreateRequest,
    x_user: str = Header(..., min_length=1, description="Acting user (resolved upstream by the auth layer)"),
    svc: RecipeService = Depends(get_recipe_service),
) -> RecipeOut:
    owner = x_user.strip()
    logger.info("POST /recipes (start) owner='%s' title=%r", owner, req.title)
    if not owner:
        raise HTTPException(status_code=400, detail="X-User must not be empty")

    try:
        saved = svc.create_recipe(req.to_recipe(), owner=owner)
    except ProviderError as e:
        logger.error("POST /recipes -> 502 embedding failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Recipe not created, embedding failed: {e}")
    except StoreError as e:
        logger.error("POST /recipes -> 503 store failed: %s", e)
        raise HTTPException(status_code=503, detail=f"Recipe not created, embedding store unavailable: {e}")
    except Exception as e:
        logger.exception("POST /recipes -> 500: %s", e)
        raise HTTPException(status_code=500, detail=f"create_recipe failed: {e}")

    logger.info("POST /recipes (done) recipe_id=%s", saved.id)
    return RecipeOut.from_recipe(saved)


@router.get("/{recipe_id}", response_model=RecipeOut)
def get_recipe(
    recipe_id: int,
    svc: RecipeService = Depends(get_recipe_service),
) -> RecipeOut:
    recipe = svc.get_recipe(recipe_id)
    if recipe is None:
        logger.info("GET /recipes/{recipe_id} -> 404 recipe_id=%s", recipe_id)
        raise HTTPException(status_code=404, detail="Recipe not found")
    return RecipeOut.from_recipe(recipe)


@router.delete("/{recipe_id}", response_model=DeleteRecipeResponse)
def delete_recipe(
    recipe_id: int,
    svc: RecipeService = Depends(get_recipe_service),
) -> DeleteRecipeResponse:
    logger.info("DELETE /recipes/{recipe_id} (start) recipe_id=%s", recipe_id)
    try:
        svc.delete_recipe(recipe_id)
    except KeyError as e:
        logger.warning("DELETE /recipes/{recipe_id} -> 404 recipe_id=%s: %s", recipe_id, e)
        raise HTTPException(status_code=404, detail="Recipe not found")
    except StoreError as e:
        logger.error("DELETE /recipes/{recipe_id} -> 503 recipe_id=%s: %s", recipe_id, e)
        raise HTTPException(status_code=503, detail=f"Embedding store unavailable: {e}")
    except Exception as e:
        logger.exception("DELETE /recipes/{recipe_id} -> 500 recipe_id=%s: %s", recipe_id, e)
        raise HTTPException(status_code=500, detail=f"delete_recipe failed: {e}")

    logger.info("DELETE /recipes/{recipe_id} (done) recipe_id=%s", recipe_id)
    return DeleteRecipeResponse(recipe_id=recipe_id, deleted=True)
