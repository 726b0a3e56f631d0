# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-30
# Updated: 2026-10-19
# Description: ChromaRecipeEmbeddingStore
# -----------------------------------------------------------------------------
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

import chromadb
from chromadb import ClientAPI
from chromadb.api.models import Collection
from chromadb.config import Settings

from config.Config import Config
from embedding.EmbeddingRecord import EmbeddingRecord
import settings
from utility.errors import StoreError
from utility.logging_utils import get_class_logger


@dataclass
class ChromaRecipeEmbeddingStore:
    """
    RecipeEmbeddingStore on a Chroma collection used as a plain document store.

    Only add/get/delete are used; ranking happens in SemanticSearchEngine,
    never through collection.query().
    Each record: id=<uuid hex>, embedding=<vector>,
    metadata={"recipe_id": int, "created_at": iso-8601}.
    """
    cfg: Optional[Config] = None
    collection_name: str = settings.EMBEDDING_COLLECTION_DEFAULT
    client: Any = None
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        if self.client is None:
            self.client = self._init_client()

        try:
            self.collection: Collection = self.client.get_or_create_collection(
                name=self.collection_name,
                embedding_function=None,
            )
        except Exception as e:
            self.logger.error("Failed to open Chroma collection '%s': %s", self.collection_name, e)
            raise StoreError(f"Failed to open Chroma collection '{self.collection_name}': {e}") from e

        self.logger.info("Chroma collection ready: '%s'", self.collection_name)

    def _init_client(self) -> ClientAPI:
        cfg = self.cfg
        if cfg is not None and cfg.use_chroma_cloud:
            self.logger.info(
                "Initialising Chroma Cloud client (tenant=%s, database=%s)",
                cfg.chroma_tenant,
                cfg.chroma_database,
            )
            return chromadb.CloudClient(
                tenant=cfg.chroma_tenant,
                database=cfg.chroma_database,
                api_key=cfg.chroma_api_key,
            )

        if cfg is not None and cfg.chroma_path:
            self.logger.info("Initialising persistent Chroma client (path=%s)", cfg.chroma_path)
            return chromadb.PersistentClient(
                path=cfg.chroma_path,
                settings=Settings(anonymized_telemetry=False),
            )

        self.logger.warning("No Chroma cloud/path configured; using an ephemeral in-process client")
        return chromadb.EphemeralClient(settings=Settings(anonymized_telemetry=False))

    def test_connection(self) -> bool:
        """
        Simple health check: can we talk to Chroma and our collection?
        """
        try:
            _ = self.collection.count()
            return True
        except Exception as e:
            self.logger.error("Chroma connection failed: %s", e)
            return False

    def save(self, recipe_id: int, vector: Sequence[float]) -> EmbeddingRecord:
        try:
            if hasattr(vector, "tolist"):
                vector = vector.tolist()

            record = EmbeddingRecord(
                recipe_id=recipe_id,
                embedding=[float(x) for x in vector],
                id=uuid.uuid4().hex,
                created_at=datetime.now(timezone.utc),
            )

            metadata: Dict[str, Any] = {"created_at": record.created_at.isoformat()}
            if recipe_id is not None:
                metadata["recipe_id"] = int(recipe_id)

            self.collection.add(
                ids=[record.id],
                embeddings=[record.embedding],
                metadatas=[metadata],
            )
        except Exception as e:
            self.logger.error(
                "Failed to save embedding for recipe_id=%s into '%s': %s",
                recipe_id,
                self.collection_name,
                e,
                exc_info=True,
            )
            raise StoreError(f"Failed to save embedding for recipe {recipe_id}: {e}") from e

        self.logger.info(
            "Saved embedding id='%s' for recipe_id=%s (dim=%d) into '%s'",
            record.id,
            recipe_id,
            len(record.embedding),
            self.collection_name,
        )
        return record

    def find_all(self) -> List[EmbeddingRecord]:
        try:
            res = self.collection.get(include=["embeddings", "metadatas"])
        except Exception as e:
            self.logger.error("Failed to scan collection '%s': %s", self.collection_name, e, exc_info=True)
            raise StoreError(f"Failed to load embeddings: {e}") from e

        records = self._to_records(res)
        self.logger.debug("Loaded %d embeddings from '%s'", len(records), self.collection_name)
        return records

    def find_by_recipe_id(self, recipe_id: int) -> Optional[EmbeddingRecord]:
        try:
            res = self.collection.get(
                where={"recipe_id": {"$eq": int(recipe_id)}},
                include=["embeddings", "metadatas"],
                limit=1,
            )
        except Exception as e:
            self.logger.error(
                "Failed to look up embedding for recipe_id=%s: %s", recipe_id, e, exc_info=True
            )
            raise StoreError(f"Failed to look up embedding for recipe {recipe_id}: {e}") from e

        records = self._to_records(res)
        return records[0] if records else None

    def delete_for_recipe(self, recipe_id: Optional[int]) -> None:
        if recipe_id is None:
            return

        record = self.find_by_recipe_id(recipe_id)
        if record is None:
            self.logger.info(
                "No embedding found for recipe_id=%s in '%s'; nothing to delete",
                recipe_id,
                self.collection_name,
            )
            return

        try:
            self.collection.delete(ids=[record.id])
        except Exception as e:
            self.logger.error(
                "Failed to delete embedding id='%s' for recipe_id=%s: %s",
                record.id,
                recipe_id,
                e,
                exc_info=True,
            )
            raise StoreError(f"Failed to delete embedding for recipe {recipe_id}: {e}") from e

        self.logger.info("Deleted embedding id='%s' for recipe_id=%s", record.id, recipe_id)

    def count(self) -> int:
        try:
            return self.collection.count()
        except Exception as e:
            raise StoreError(f"Failed to count collection '{self.collection_name}': {e}") from e

    @staticmethod
    def _to_records(res: Dict[str, Any]) -> List[EmbeddingRecord]:
        ids = res.get("ids") or []

        # Chroma may hand back a numpy array here, so never test it for truthiness
        embeddings = res.get("embeddings")
        if embeddings is None:
            embeddings = [None] * len(ids)

        metadatas = res.get("metadatas")
        if metadatas is None:
            metadatas = [None] * len(ids)

        records: List[EmbeddingRecord] = []
        for rec_id, emb, md in zip(ids, embeddings, metadatas):
            md = md or {}
            raw_recipe_id = md.get("recipe_id")
            raw_created = md.get("created_at")

            records.append(EmbeddingRecord(
                id=rec_id,
                recipe_id=int(raw_recipe_id) if raw_recipe_id is not None else None,
                embedding=[float(x) for x in emb] if emb is not None else None,
                created_at=(
                    datetime.fromisoformat(raw_created)
                    if isinstance(raw_created, str) else datetime.now(timezone.utc)
                ),
            ))
        return records
