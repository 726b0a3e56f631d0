# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-28
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=False)


@dataclass(frozen=True)
class Config:
    # OpenAI (direct) for embeddings
    openai_api_key: str = ""
    openai_base_url: str = ""
    openai_embed_model: str = "text-embedding-3-small"

    # Azure OpenAI (optional alternative to direct OpenAI)
    openai_azure_api_key: str = ""
    openai_azure_endpoint: str = ""
    openai_azure_embed_deployment: str = ""

    # Chroma (used as a plain document store for embedding records)
    chroma_api_key: str = ""
    chroma_tenant: str = ""
    chroma_database: str = ""
    chroma_path: str = ""

    # "chroma" or "memory"
    embedding_store_backend: str = "chroma"

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        # OpenAI direct
        "openai_api_key": "OPENAI_API_KEY",
        "openai_base_url": "OPENAI_BASE_URL",      # e.g. https://api.openai.com/v1
        "openai_embed_model": "OPENAI_EMBED_MODEL",

        # Azure OpenAI
        "openai_azure_api_key": "AZURE_OPENAI_API_KEY",
        "openai_azure_endpoint": "AZURE_OPENAI_ENDPOINT",
        "openai_azure_embed_deployment": "AZURE_OPENAI_EMBED_DEPLOYMENT",

        # Chroma
        "chroma_api_key": "CHROMA_API_KEY",
        "chroma_tenant": "CHROMA_TENANT",
        "chroma_database": "CHROMA_DATABASE",
        "chroma_path": "CHROMA_PATH",

        "embedding_store_backend": "RECIPE_EMBEDDING_STORE",
    }

    AZURE_OPENAI_ENV_VARS = (
        "AZURE_OPENAI_API_KEY",
        "AZURE_OPENAI_ENDPOINT",
        "AZURE_OPENAI_EMBED_DEPLOYMENT",
    )

    STORE_BACKENDS = ("chroma", "memory")

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables."""
        kwargs = {}
        for field_name, env_name in Config.ENV_VARS.items():
            value = (os.getenv(env_name) or "").strip()
            # Unset env vars fall back to the dataclass defaults
            if value:
                kwargs[field_name] = value
        return Config(**kwargs)

    @property
    def use_azure(self) -> bool:
        return bool(
            self.openai_azure_api_key
            and self.openai_azure_endpoint
            and self.openai_azure_embed_deployment
        )

    @property
    def use_chroma_cloud(self) -> bool:
        return bool(self.chroma_api_key and self.chroma_tenant and self.chroma_database)

    def __post_init__(self):
        """
        Fail fast if embedding credentials are missing or the store
        backend is unknown.
        """
        if not self.openai_api_key and not self.use_azure:
            missing = ["OPENAI_API_KEY"] + [
                name for name in self.AZURE_OPENAI_ENV_VARS
                if not getattr(self, self._field_for_env(name))
            ]
            raise ValueError(
                f"Missing embedding credentials: set OPENAI_API_KEY or all of "
                f"{list(self.AZURE_OPENAI_ENV_VARS)} (missing: {missing})"
            )

        if self.embedding_store_backend not in self.STORE_BACKENDS:
            raise ValueError(
                f"RECIPE_EMBEDDING_STORE must be one of {list(self.STORE_BACKENDS)}, "
                f"got {self.embedding_store_backend!r}"
            )

    @classmethod
    def _field_for_env(cls, env_name: str) -> str:
        for field_name, name in cls.ENV_VARS.items():
            if name == env_name:
                return field_name
        raise KeyError(env_name)

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "embedding_provider": "azure" if self.use_azure else "openai",
            "openai_base_url": self.openai_base_url,
            "openai_embed_model": self.openai_embed_model,
            "openai_azure_endpoint": self.openai_azure_endpoint,
            "openai_azure_embed_deployment": self.openai_azure_embed_deployment,
            "embedding_store_backend": self.embedding_store_backend,
            "chroma_tenant": self.chroma_tenant,
            "chroma_database": self.chroma_database,
            "chroma_path": self.chroma_path,
        }
