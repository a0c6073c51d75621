"""
Retrieval Configuration

Loads service settings from environment variables. The similarity
threshold is intentionally absent: it is a fixed constant of the
matcher, not a deployment setting.
"""

import os
from dataclasses import dataclass

from scaffold_retrieval.embeddings import DEFAULT_EMBEDDING_MODEL


@dataclass
class RetrievalConfig:
    """Configuration for the retrieval pipeline.

    Environment Variables:
        OPENAI_API_KEY: OpenAI key for query embeddings
        EMBEDDING_MODEL: Embedding model id (default: text-embedding-ada-002)
        DATABASE_URL: Postgres connection string for the scaffold store
        MATCH_FUNCTION: SQL similarity function (default: match_documents)
        VECTOR_STORE: "postgres" (default) or "memory"
        USE_MOCK_EMBEDDINGS: Use deterministic fake embeddings (default: false)
    """

    openai_api_key: str | None = None
    embedding_model: str = DEFAULT_EMBEDDING_MODEL
    database_url: str = "postgresql://localhost/scaffolds"
    match_function: str = "match_documents"
    vector_store: str = "postgres"
    use_mock_embeddings: bool = False

    @property
    def use_postgres(self) -> bool:
        return self.vector_store != "memory"

    @classmethod
    def from_env(cls) -> "RetrievalConfig":
        """Load config from environment variables."""
        return cls(
            openai_api_key=os.environ.get("OPENAI_API_KEY") or None,
            embedding_model=os.environ.get("EMBEDDING_MODEL", DEFAULT_EMBEDDING_MODEL),
            database_url=os.environ.get("DATABASE_URL", "postgresql://localhost/scaffolds"),
            match_function=os.environ.get("MATCH_FUNCTION", "match_documents"),
            vector_store=os.environ.get("VECTOR_STORE", "postgres").lower(),
            use_mock_embeddings=os.environ.get("USE_MOCK_EMBEDDINGS", "false").lower() in ("true", "1", "yes"),
        )


# Global config singleton
_config: RetrievalConfig | None = None


def get_config() -> RetrievalConfig:
    """Get the global retrieval config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = RetrievalConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
