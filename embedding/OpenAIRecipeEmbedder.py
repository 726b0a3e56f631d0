# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-29
# Updated: 2026-10-12
# Description: OpenAIRecipeEmbedder
# -----------------------------------------------------------------------------
import time
from typing import Any, List, Optional

import numpy as np
from openai import AzureOpenAI, OpenAI, OpenAIError
from pydantic import ValidationError

from config.Config import Config
from embedding.EmbeddingResponse import EmbeddingResponse
import settings
from utility.errors import ProviderError
from utility.logging_utils import get_class_logger


class OpenAIRecipeEmbedder:
    """
    EmbeddingProvider backed by the OpenAI /embeddings endpoint
    (direct OpenAI, or an Azure OpenAI deployment when configured).

    Vectors are returned as plain float64 lists and are NOT normalised;
    cosine ranking is scale-invariant and stored vectors keep the model's raw values.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            client: Any = None,
            max_retries: int = settings.EMBED_MAX_RETRIES,
            timeout: float = settings.EMBED_TIMEOUT_SECONDS,
            retry_delay: float = 0.8,
            logger=None,
    ):
        self.cfg = cfg
        self.max_retries = max(1, max_retries)
        self.timeout = timeout
        self.retry_delay = retry_delay
        self.logger = logger or get_class_logger(self.__class__)

        if cfg.use_azure:
            self.model = cfg.openai_azure_embed_deployment
        else:
            self.model = cfg.openai_embed_model or "text-embedding-3-small"

        self.client = client if client is not None else self._init_client()
        self.logger.info(
            "OpenAI Embedder initialised (provider=%s, model='%s', max_retries=%d)",
            "azure" if cfg.use_azure else "openai",
            self.model,
            self.max_retries,
        )

    def _init_client(self) -> Any:
        # SDK-level retries are disabled; embed() owns the retry loop
        if self.cfg.use_azure:
            return AzureOpenAI(
                api_key=self.cfg.openai_azure_api_key,
                azure_endpoint=self.cfg.openai_azure_endpoint.rstrip("/"),
                api_version="2024-10-21",
                timeout=self.timeout,
                max_retries=0,
            )
        return OpenAI(
            api_key=self.cfg.openai_api_key,
            base_url=self.cfg.openai_base_url or None,
            timeout=self.timeout,
            max_retries=0,
        )

    def _create(self, text: str) -> Any:
        delay = self.retry_delay
        for attempt in range(1, self.max_retries + 1):
            try:
                return self.client.embeddings.create(model=self.model, input=text)
            except OpenAIError as e:
                self.logger.warning(
                    "Embedding call failed (attempt %d/%d): %s", attempt, self.max_retries, e
                )
                if attempt == self.max_retries:
                    raise ProviderError(f"Embedding request failed after {attempt} attempts: {e}") from e
                time.sleep(delay)
                delay *= 1.7  # backoff

        # Unreachable and include for type checkers
        raise ProviderError("Embedding request failed")

    def embed(self, text: str) -> List[float]:
        if text is None:
            raise ProviderError("Cannot embed None text")

        self.logger.debug("Embedding text (chars=%d, model=%s)", len(text), self.model)
        resp = self._create(text)

        try:
            parsed = EmbeddingResponse.from_sdk(resp)
        except ValidationError as e:
            self.logger.error("Malformed embedding response: %s", e)
            raise ProviderError(f"Malformed embedding response: {e}") from e

        if parsed.data is None:
            raise ProviderError("Empty embedding response")
        if not parsed.data:
            raise ProviderError("No embedding data returned")

        vector: Optional[List[float]] = parsed.first_vector()
        if not vector:
            raise ProviderError("Embedding response contained an empty vector")

        arr = np.asarray(vector, dtype=np.float64)
        self.logger.debug("Embedding generated: vector_length=%d", arr.shape[0])
        return arr.tolist()
