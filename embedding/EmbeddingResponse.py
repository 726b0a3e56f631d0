# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-29
# Description: EmbeddingResponse
# -----------------------------------------------------------------------------
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class EmbeddingDatum(BaseModel):
    model_config = ConfigDict(extra="ignore", from_attributes=True)

    index: Optional[int] = None
    embedding: Optional[List[float]] = None


class EmbeddingUsage(BaseModel):
    model_config = ConfigDict(extra="ignore", from_attributes=True)

    prompt_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class EmbeddingResponse(BaseModel):
    """
    Typed view of an /embeddings response.
    Everything is optional so a partial payload still validates and the
    embedder can report exactly what was missing.
    """
    model_config = ConfigDict(extra="ignore", from_attributes=True)

    model: Optional[str] = None
    data: Optional[List[EmbeddingDatum]] = None
    usage: Optional[EmbeddingUsage] = None

    @classmethod
    def from_sdk(cls, resp: Any) -> "EmbeddingResponse":
        """Accepts an OpenAI SDK response object or a plain dict."""
        if resp is None:
            return cls()
        if isinstance(resp, dict):
            return cls.model_validate(resp)
        if hasattr(resp, "model_dump"):
            return cls.model_validate(resp.model_dump())
        return cls.model_validate(resp, from_attributes=True)

    def first_vector(self) -> Optional[List[float]]:
        if not self.data:
            return None
        return self.data[0].embedding
