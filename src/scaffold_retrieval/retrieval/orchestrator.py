"""
Retrieval orchestrator - the single entry point of the pipeline.

    validate → embed → match → normalize each → assemble

Each stage short-circuits the rest on failure. There are no retries and
no partial results: a request either returns every matched document in
matcher order or raises.

Collaborators are injected, never created at import time. Tests pass
MockEmbeddings and InMemoryVectorStore (or MagicMocks) directly.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from scaffold_retrieval.config import RetrievalConfig, get_config
from scaffold_retrieval.core import DocumentMatcher, EmbeddingProvider, RetrievalFailure
from scaffold_retrieval.observability import (
    RETRIEVAL_QUERY_LENGTH,
    TracerProtocol,
    get_tracer,
    retrieval_outcome_attributes,
    retrieval_request_attributes,
)
from scaffold_retrieval.retrieval.embedder import QueryEmbedder, build_query_text
from scaffold_retrieval.retrieval.matcher import MATCH_THRESHOLD, SimilarityMatcher
from scaffold_retrieval.retrieval.normalizer import normalize_document
from scaffold_retrieval.schemas.retrieval import RetrievalRequest, RetrievalResult

logger = logging.getLogger(__name__)


class RetrievalOrchestrator:
    """
    Composes embedder, matcher and normalizer into one request cycle.

    Holds only stateless, shareable handles, so one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        embedder: QueryEmbedder,
        matcher: SimilarityMatcher,
        tracer: TracerProtocol | None = None,
    ):
        self._embedder = embedder
        self._matcher = matcher
        self._tracer = tracer

    def retrieve(self, request: RetrievalRequest | Mapping[str, Any]) -> list[RetrievalResult]:
        """
        Answer a request with normalized results, in matcher order.

        Raises:
            ValidationFailure: before any external call, if a field is missing
            RetrievalFailure: if embedding or matching fails
        """
        if not isinstance(request, RetrievalRequest):
            request = RetrievalRequest.from_payload(request)

        tracer = self._tracer or get_tracer()
        query_text = build_query_text(request)

        with tracer.start_span(
            "retrieval.retrieve",
            attributes=retrieval_request_attributes(request.k, MATCH_THRESHOLD, self._embedder.model),
        ) as span:
            try:
                with tracer.start_span("retrieval.embed", attributes={RETRIEVAL_QUERY_LENGTH: len(query_text)}):
                    vector = self._embedder.embed(query_text)

                with tracer.start_span("retrieval.match"):
                    documents = self._matcher.match(vector, MATCH_THRESHOLD, request.k)
            except RetrievalFailure as e:
                span.record_exception(e)
                span.set_status("error", str(e))
                raise

            results = [normalize_document(doc) for doc in documents]

            degraded = sum(1 for r in results if r.pdf_summary is None and r.standard is None)
            for key, value in retrieval_outcome_attributes(len(results), degraded).items():
                span.set_attribute(key, value)
            span.set_status("ok")

        logger.info(f"Retrieved {len(results)} scaffold(s) for k={request.k} ({degraded} without summary)")
        return results


def create_orchestrator(
    config: RetrievalConfig | None = None,
    embeddings: EmbeddingProvider | None = None,
    store: DocumentMatcher | None = None,
) -> RetrievalOrchestrator:
    """
    Factory that wires the orchestrator once at process start.

    Args:
        config: Settings (loaded from env if not provided)
        embeddings: Embedding provider (built from config if not provided)
        store: Vector store (built from config if not provided)
    """
    config = config or get_config()

    if embeddings is None:
        from scaffold_retrieval.embeddings import get_embedding_provider

        embeddings = get_embedding_provider(
            use_mock=config.use_mock_embeddings,
            model=config.embedding_model,
            api_key=config.openai_api_key,
        )

    if store is None:
        from scaffold_retrieval.retrieval.store import VectorStoreConfig, get_vector_store

        store = get_vector_store(
            use_postgres=config.use_postgres,
            config=VectorStoreConfig(
                connection_string=config.database_url,
                match_function=config.match_function,
            ),
            embeddings=embeddings,
        )

    return RetrievalOrchestrator(QueryEmbedder(embeddings), SimilarityMatcher(store))
