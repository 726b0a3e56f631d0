# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-01
# Description: similarity.py
# -----------------------------------------------------------------------------
import math
from typing import Optional, Sequence

import numpy as np


def cosine_similarity(a: Optional[Sequence[float]], b: Optional[Sequence[float]]) -> float:
    """
    Cosine similarity with two deliberate policies:

    - Truncation: when lengths differ both vectors are cut to the shorter
      length (no zero-padding). [1, 0, 0] vs [1, 0] scores 1.0.
    - Zero fallback: a missing vector, or a zero norm over the compared
      prefix, scores exactly 0.0. A degenerate vector can therefore rank
      above a genuinely negative match.
    """
    if a is None or b is None:
        return 0.0

    n = min(len(a), len(b))
    if n == 0:
        return 0.0

    va = np.asarray(a[:n], dtype=np.float64)
    vb = np.asarray(b[:n], dtype=np.float64)

    norm_a = math.sqrt(float(np.dot(va, va)))
    norm_b = math.sqrt(float(np.dot(vb, vb)))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    return float(np.dot(va, vb)) / (norm_a * norm_b)
