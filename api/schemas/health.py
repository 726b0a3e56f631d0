# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-04
# Updated: 2026-10-19
# Description: health.py
# -----------------------------------------------------------------------------
from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field

class HealthResponse(BaseModel):
    status: str
    message: str

class SmokeTestSummary(BaseModel):
    total: int
    passed: int
    failed: int

    @classmethod
    def from_results(cls, results: Dict[str, bool]) -> "SmokeTestSummary":
        passed = sum(1 for ok in results.values() if ok)
        return cls(total=len(results), passed=passed, failed=len(results) - passed)

class DeepHealthResponse(BaseModel):
    status: Literal["ok", "error"]
    results: Dict[str, bool]
    summary: SmokeTestSummary
    # None when the store could not be counted (or no store was wired in)
    embedding_count: Optional[int] = Field(None, ge=0)
