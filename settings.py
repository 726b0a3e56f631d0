# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-28
# Updated: 2026-10-11
# Description: settings.py
# -----------------------------------------------------------------------------
import os

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(usecwd=True), override=False)


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Logging (read by utility/logging_utils)
# -----------------------------------------------------------------------------
LOG_LEVEL = _env("RECIPE_LOG_LEVEL", "INFO").upper()

# Off by default; the API container is usually collected from stdout
LOG_TO_FILE = _env_bool("RECIPE_LOG_TO_FILE", False)
LOG_FILE = _env("RECIPE_LOG_FILE", "./logs/recipe_search.log")
LOG_MAX_BYTES = _env_int("RECIPE_LOG_MAX_BYTES", 5 * 1024 * 1024)
LOG_BACKUP_COUNT = _env_int("RECIPE_LOG_BACKUP_COUNT", 5)


# -----------------------------------------------------------------------------
# Search defaults
# -----------------------------------------------------------------------------
SEARCH_DEFAULT_TOP_K = _env_int("RECIPE_SEARCH_DEFAULT_TOP_K", 5)

# Optional cap on top_k at the HTTP boundary; 0 means no cap.
# The engine itself accepts any top_k >= 0
SEARCH_MAX_TOP_K = _env_int("RECIPE_SEARCH_MAX_TOP_K", 0)


# -----------------------------------------------------------------------------
# Embedding storage (Chroma collection name)
# -----------------------------------------------------------------------------
EMBEDDING_COLLECTION_DEFAULT = _env("RECIPE_EMBEDDING_COLLECTION", "recipe_embeddings")


# -----------------------------------------------------------------------------
# Embedding provider (adapter-level behaviour, the search core never retries)
# -----------------------------------------------------------------------------
EMBED_MAX_RETRIES = _env_int("RECIPE_EMBED_MAX_RETRIES", 3)
EMBED_TIMEOUT_SECONDS = _env_float("RECIPE_EMBED_TIMEOUT_SECONDS", 30.0)

# 0 disables the dimension check in /health/deep
# text-embedding-3-small -> 1536, text-embedding-3-large -> 3072
EMBED_EXPECTED_DIM = _env_int("RECIPE_EMBED_EXPECTED_DIM", 0)

# Include the (slower) embedding round-trip in /health/deep
HEALTH_CHECK_EMBEDDING = _env_bool("RECIPE_HEALTH_CHECK_EMBEDDING", True)


# -----------------------------------------------------------------------------
# Sanity checks (tunable)
# -----------------------------------------------------------------------------
if SEARCH_DEFAULT_TOP_K < 0:
    raise RuntimeError("SEARCH_DEFAULT_TOP_K must be >= 0")

if SEARCH_MAX_TOP_K < 0:
    raise RuntimeError("SEARCH_MAX_TOP_K must be >= 0 (0 disables the cap)")

if SEARCH_MAX_TOP_K and SEARCH_MAX_TOP_K < SEARCH_DEFAULT_TOP_K:
    raise RuntimeError("SEARCH_MAX_TOP_K must be >= SEARCH_DEFAULT_TOP_K when set")

if EMBED_MAX_RETRIES < 1:
    raise RuntimeError("EMBED_MAX_RETRIES must be >= 1")

if not EMBEDDING_COLLECTION_DEFAULT:
    raise RuntimeError("EMBEDDING_COLLECTION_DEFAULT resolved to empty value")
