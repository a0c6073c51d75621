"""
End-to-End Tests

Runs the full request path - handler → orchestrator → embedder →
matcher → normalizer - with only the two external services faked.
"""

import json
from unittest.mock import MagicMock

import numpy as np
import pytest

from scaffold_retrieval.api import handle_retrieval_request
from scaffold_retrieval.config import RetrievalConfig
from scaffold_retrieval.observability import NoOpTracer
from scaffold_retrieval.retrieval import (
    InMemoryVectorStore,
    QueryEmbedder,
    RetrievalOrchestrator,
    SimilarityMatcher,
    StoredDocument,
    create_orchestrator,
    seed_vector_store,
)


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------


class KeywordEmbeddings:
    """Maps text to one of three axes by keyword, so matches are predictable."""

    model = "keyword-test"

    def embed(self, text: str) -> np.ndarray:
        lowered = text.lower()
        if "fraction" in lowered:
            return np.array([1.0, 0.0, 0.0], dtype=np.float32)
        if "array" in lowered:
            return np.array([0.0, 1.0, 0.0], dtype=np.float32)
        return np.array([0.0, 0.0, 1.0], dtype=np.float32)


@pytest.fixture
def doc_a():
    return StoredDocument(
        id="A",
        title="Fraction Strips",
        author="Author A",
        url="https://example.org/a.pdf",
        answer_url="https://example.org/a-key.pdf",
        summary='{"Summary":"intro to fractions","CCSS standards":["3.NF.1"]}',
        type_tags="worksheet, quiz",
    )


@pytest.fixture
def doc_b():
    return StoredDocument(
        id="B",
        title="Pizza Fractions",
        author="Author B",
        url="https://example.org/b.pdf",
        answer_url="https://example.org/b-key.pdf",
        summary="Summary - pizza slices {{ broken",
        type_tags="",
    )


@pytest.fixture
def seeded_orchestrator():
    embeddings = KeywordEmbeddings()
    store = InMemoryVectorStore(embeddings)
    seed_vector_store(store)
    return create_orchestrator(RetrievalConfig(), embeddings=embeddings, store=store)


# ---------------------------------------------------------------------------
# SCENARIO: fractions request with one good and one malformed document
# ---------------------------------------------------------------------------


class TestFractionsScenario:
    """Two matched documents, the second with a malformed summary."""

    def test_handler_response(self, doc_a, doc_b):
        embeddings = MagicMock()
        embeddings.model = "text-embedding-ada-002"
        embeddings.embed.return_value = np.array([0.1, 0.2, 0.3])
        store = MagicMock()
        store.match.return_value = [doc_a, doc_b]
        orchestrator = RetrievalOrchestrator(
            QueryEmbedder(embeddings), SimilarityMatcher(store), tracer=NoOpTracer()
        )

        response = handle_retrieval_request(
            "POST",
            {"objectives": "fractions", "standards": "3.NF.1", "k": 2},
            orchestrator,
        )

        embeddings.embed.assert_called_once_with("fractions3.NF.1")
        assert store.match.call_args.args[1:] == (0.5, 2)
        assert response.status == 200
        assert response.body == [
            {
                "title": "Fraction Strips",
                "author": "Author A",
                "link_url": "https://example.org/a.pdf",
                "answer_url": "https://example.org/a-key.pdf",
                "pdf_summary": "intro to fractions",
                "standard": ["3.NF.1"],
                "type_tags": ["worksheet", "quiz"],
            },
            {
                "title": "Pizza Fractions",
                "author": "Author B",
                "link_url": "https://example.org/b.pdf",
                "answer_url": "https://example.org/b-key.pdf",
                "type_tags": [],
            },
        ]

    def test_response_is_json_serializable(self, doc_a, doc_b):
        embeddings = MagicMock()
        embeddings.model = "m"
        embeddings.embed.return_value = np.array([1.0])
        store = MagicMock()
        store.match.return_value = [doc_a, doc_b]
        orchestrator = RetrievalOrchestrator(
            QueryEmbedder(embeddings), SimilarityMatcher(store), tracer=NoOpTracer()
        )

        response = handle_retrieval_request(
            "POST", {"objectives": "fractions", "standards": "3.NF.1", "k": 2}, orchestrator
        )

        assert json.loads(json.dumps(response.body)) == response.body


# ---------------------------------------------------------------------------
# SEEDED IN-MEMORY CORPUS
# ---------------------------------------------------------------------------


class TestSeededCorpus:
    """Full pipeline against the demo corpus and the in-memory store."""

    def test_fraction_query_returns_top_k_in_store_order(self, seeded_orchestrator):
        results = seeded_orchestrator.retrieve(
            {"objectives": "fractions", "standards": "3.NF.1", "k": 2}
        )

        assert [r.title for r in results] == [
            "Understanding Unit Fractions",
            "Fractions on a Number Line",
        ]
        assert results[0].standard == ["3.NF.1"]
        assert results[0].type_tags == ["worksheet", "quiz"]

    def test_k_larger_than_matches(self, seeded_orchestrator):
        results = seeded_orchestrator.retrieve(
            {"objectives": "fractions", "standards": "3.NF.1", "k": 10}
        )

        assert len(results) == 3

    def test_legacy_record_degrades(self, seeded_orchestrator):
        """The non-JSON seed record still comes back, without summary fields."""
        results = seeded_orchestrator.retrieve(
            {"objectives": "arrays", "standards": "3.OA.1", "k": 5}
        )

        assert len(results) == 1
        assert results[0].title == "Multiplication with Arrays"
        assert results[0].pdf_summary is None
        assert results[0].standard is None
        assert results[0].type_tags == []

    def test_no_match_above_threshold(self, seeded_orchestrator):
        results = seeded_orchestrator.retrieve(
            {"objectives": "photosynthesis", "standards": "5-LS1-1", "k": 5}
        )

        # Only the ELA record shares the catch-all axis
        assert [r.title for r in results] == ["Finding the Main Idea"]
