"""
Embeddings module - text embedding generation.

1. Protocol (EmbeddingProvider) defines the interface
2. Production implementation (OpenAIEmbeddings)
3. Test double (MockEmbeddings) for fast testing
4. Factory function (get_embedding_provider)
"""

from scaffold_retrieval.embeddings.openai_embeddings import (
    DEFAULT_EMBEDDING_MODEL,
    EmbeddingProvider,
    OpenAIEmbeddings,
    MockEmbeddings,
    get_embedding_provider,
)

__all__ = [
    "DEFAULT_EMBEDDING_MODEL",
    "EmbeddingProvider",
    "OpenAIEmbeddings",
    "MockEmbeddings",
    "get_embedding_provider",
]
