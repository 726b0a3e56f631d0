# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-29
# Description: EmbeddingRecord
# -----------------------------------------------------------------------------
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class EmbeddingRecord:
    """
    One stored recipe vector.

    recipe_id is not unique-constrained: save() always inserts, so a retried
    create can leave two records for the same recipe.
    created_at is informational and never used for ranking.
    """
    recipe_id: Optional[int]
    embedding: Optional[List[float]]
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=_utcnow)
