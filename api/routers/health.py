# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-05
# Updated: 2026-10-19
# Description: health.py
# -----------------------------------------------------------------------------
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.schemas.health import HealthResponse, DeepHealthResponse
from api.dependencies import get_health_service
from services.HealthService import HealthService
import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok", message="Recipe search API running")


@router.get("/deep", response_model=DeepHealthResponse)
def deep_health_check(
    svc: HealthService = Depends(get_health_service),
    run_embedding: Optional[bool] = Query(
        None,
        description="Include a live embedding round-trip (default: RECIPE_HEALTH_CHECK_EMBEDDING)",
    ),
) -> DeepHealthResponse:
    if run_embedding is None:
        run_embedding = settings.HEALTH_CHECK_EMBEDDING

    logger.info("GET /health/deep called (run_embedding=%s)", run_embedding)
    try:
        result = svc.deep_health(run_embedding=run_embedding)
        logger.info("GET /health/deep completed (status=%s)", result.status)
        return result

    except Exception as e:
        logger.exception("GET /health/deep failed: %s", e)
        raise HTTPException(status_code=500, detail=f"deep health failed: {e}")
