"""
Embeddings Module - Single Responsibility: Generate text embeddings.

It has ONE job: convert text to vector embeddings.
The stored scaffold corpus was embedded with text-embedding-ada-002, so
query vectors must come from the same model to land in the same space.
"""

import hashlib
import os
from typing import Protocol

import numpy as np
from openai import OpenAI

DEFAULT_EMBEDDING_MODEL = "text-embedding-ada-002"


class EmbeddingProvider(Protocol):
    """Protocol for embedding providers - enables easy swapping."""

    model: str

    def embed(self, text: str) -> np.ndarray:
        """Generate embedding for a single text."""
        ...


class OpenAIEmbeddings:
    """
    OpenAI-based embedding provider.

    Uses text-embedding-ada-002 by default (1536 dimensions).
    The client holds no per-request state and is shared across calls.
    """

    def __init__(
        self,
        model: str = DEFAULT_EMBEDDING_MODEL,
        api_key: str | None = None,
    ):
        self.model = model
        self._client = OpenAI(api_key=api_key or os.environ.get("OPENAI_API_KEY"))

    def embed(self, text: str) -> np.ndarray:
        """Generate embedding for a single text."""
        response = self._client.embeddings.create(
            input=text,
            model=self.model
        )
        data = response.data or []
        if not data or data[0].embedding is None:
            raise ValueError(f"Embedding response from {self.model} contained no vector")
        return np.array(data[0].embedding, dtype=np.float32)


class MockEmbeddings:
    """
    Mock embedding provider for testing without API calls.

    Generates deterministic unit vectors seeded from the text hash.
    NOT for production use - only for testing/development.
    """

    def __init__(self, dimensions: int = 1536, model: str = "mock-embedding"):
        self._dimensions = dimensions
        self.model = model

    def embed(self, text: str) -> np.ndarray:
        """Generate deterministic pseudo-embedding from text hash."""
        seed = int.from_bytes(hashlib.sha256(text.encode()).digest()[:8], "big")
        vector = np.random.default_rng(seed).standard_normal(self._dimensions)
        return (vector / np.linalg.norm(vector)).astype(np.float32)


def get_embedding_provider(
    use_mock: bool = False,
    model: str = DEFAULT_EMBEDDING_MODEL,
    api_key: str | None = None,
) -> EmbeddingProvider:
    """
    Factory function to get the appropriate embedding provider.

    Args:
        use_mock: If True, return MockEmbeddings (for testing)
        model: OpenAI embedding model id
        api_key: OpenAI API key (falls back to OPENAI_API_KEY)
    """
    if use_mock:
        return MockEmbeddings()
    return OpenAIEmbeddings(model=model, api_key=api_key)
