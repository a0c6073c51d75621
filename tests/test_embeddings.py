"""
Unit Tests for Embedding Providers

OpenAI is mocked at the client constructor so no network call is made.
"""

from unittest.mock import MagicMock, patch

import numpy as np
import pytest

from scaffold_retrieval.embeddings import (
    DEFAULT_EMBEDDING_MODEL,
    MockEmbeddings,
    OpenAIEmbeddings,
    get_embedding_provider,
)


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_openai():
    """Patch the OpenAI client class used by OpenAIEmbeddings."""
    with patch("scaffold_retrieval.embeddings.openai_embeddings.OpenAI") as mock_cls:
        client = MagicMock()
        mock_cls.return_value = client
        yield client


def _response(*vectors):
    return MagicMock(data=[MagicMock(embedding=list(v)) for v in vectors])


# ---------------------------------------------------------------------------
# OPENAI EMBEDDINGS
# ---------------------------------------------------------------------------


class TestOpenAIEmbeddings:
    """Test the production provider with a mocked client."""

    def test_default_model_is_ada(self, mock_openai):
        provider = OpenAIEmbeddings()

        assert provider.model == "text-embedding-ada-002"

    def test_embed_calls_api_with_model(self, mock_openai):
        mock_openai.embeddings.create.return_value = _response([0.1, 0.2, 0.3])
        provider = OpenAIEmbeddings()

        vector = provider.embed("fractions3.NF.1")

        mock_openai.embeddings.create.assert_called_once_with(
            input="fractions3.NF.1",
            model=DEFAULT_EMBEDDING_MODEL,
        )
        assert vector.dtype == np.float32
        np.testing.assert_allclose(vector, [0.1, 0.2, 0.3], rtol=1e-6)

    def test_embed_custom_model(self, mock_openai):
        mock_openai.embeddings.create.return_value = _response([1.0])
        provider = OpenAIEmbeddings(model="text-embedding-3-large")

        provider.embed("text")

        assert mock_openai.embeddings.create.call_args.kwargs["model"] == "text-embedding-3-large"

    def test_empty_response_raises(self, mock_openai):
        """No data means no vector - the caller decides how to surface it."""
        mock_openai.embeddings.create.return_value = MagicMock(data=[])
        provider = OpenAIEmbeddings()

        with pytest.raises(ValueError):
            provider.embed("text")

    def test_api_key_passed_to_client(self):
        with patch("scaffold_retrieval.embeddings.openai_embeddings.OpenAI") as mock_cls:
            OpenAIEmbeddings(api_key="sk-test")

        mock_cls.assert_called_once_with(api_key="sk-test")


# ---------------------------------------------------------------------------
# MOCK EMBEDDINGS
# ---------------------------------------------------------------------------


class TestMockEmbeddings:
    """Test the deterministic test double."""

    def test_deterministic(self):
        provider = MockEmbeddings(dimensions=64)

        np.testing.assert_array_equal(provider.embed("fractions"), provider.embed("fractions"))

    def test_vector_length(self):
        provider = MockEmbeddings(dimensions=64)

        assert provider.embed("fractions").shape == (64,)

    def test_unit_norm(self):
        vector = MockEmbeddings(dimensions=64).embed("fractions")

        assert np.linalg.norm(vector) == pytest.approx(1.0, rel=1e-5)

    def test_different_texts_differ(self):
        provider = MockEmbeddings(dimensions=64)

        assert not np.array_equal(provider.embed("fractions"), provider.embed("decimals"))


# ---------------------------------------------------------------------------
# FACTORY
# ---------------------------------------------------------------------------


class TestGetEmbeddingProvider:
    """Test provider selection."""

    def test_mock(self):
        assert isinstance(get_embedding_provider(use_mock=True), MockEmbeddings)

    def test_openai(self, mock_openai):
        provider = get_embedding_provider(model="text-embedding-3-small")

        assert isinstance(provider, OpenAIEmbeddings)
        assert provider.model == "text-embedding-3-small"
