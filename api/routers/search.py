# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-06
# Description: search router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_search_engine
from api.schemas.recipes import RecipeOut
from api.schemas.search import SearchRequest, SearchResponse
from search.SemanticSearchEngine import SemanticSearchEngine
from utility.errors import ProviderError, StoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.post("", response_model=SearchResponse)
def post_search(
    req: SearchRequest,
    engine: SemanticSearchEngine = Depends(get_search_engine),
) -> SearchResponse:
    query_text = (req.query or "").strip()
    logger.info("POST /search (start) query=%r top_k=%d", query_text, req.top_k)
    if not query_text:
        logger.warning("POST /search -> 400 (query empty)")
        raise HTTPException(status_code=400, detail="query must not be empty")

    try:
        recipes = engine.search(query_text, req.top_k)
    except ProviderError as e:
        logger.error("POST /search -> 502 embedding failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Embedding failed: {e}")
    except StoreError as e:
        logger.error("POST /search -> 503 store failed: %s", e)
        raise HTTPException(status_code=503, detail=f"Embedding store unavailable: {e}")
    except Exception as e:
        logger.exception("POST /search -> 500: %s", e)
        raise HTTPException(status_code=500, detail=f"Search failed: {e}")

    results = [RecipeOut.from_recipe(r) for r in recipes]
    logger.info("POST /search (done) query=%r count=%d", query_text, len(results))
    return SearchResponse(
        query=query_text,
        top_k=req.top_k,
        count=len(results),
        results=results,
    )
