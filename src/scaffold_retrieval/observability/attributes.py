"""
Semantic Conventions for Span Attributes

GenAI keys follow the OpenTelemetry GenAI conventions; retrieval keys
are a custom namespace.

Reference: https://opentelemetry.io/docs/specs/semconv/gen-ai/
"""

from typing import Any

# ---------------------------------------------------------------------------
# GENAI NAMESPACE (OTel standard)
# ---------------------------------------------------------------------------

GEN_AI_REQUEST_MODEL = "gen_ai.request.model"  # "text-embedding-ada-002"


# ---------------------------------------------------------------------------
# RETRIEVAL NAMESPACE (custom)
# ---------------------------------------------------------------------------

RETRIEVAL_K = "retrieval.k"
RETRIEVAL_THRESHOLD = "retrieval.threshold"
RETRIEVAL_RESULT_COUNT = "retrieval.result_count"
RETRIEVAL_DEGRADED_COUNT = "retrieval.degraded_count"  # docs with unparseable summary
RETRIEVAL_QUERY_LENGTH = "retrieval.query_length"  # chars, never the text itself


# ---------------------------------------------------------------------------
# HELPERS
# ---------------------------------------------------------------------------


def retrieval_request_attributes(k: int, threshold: float, model: str) -> dict[str, Any]:
    """Attributes for the top-level retrieval span."""
    return {
        RETRIEVAL_K: k,
        RETRIEVAL_THRESHOLD: threshold,
        GEN_AI_REQUEST_MODEL: model,
    }


def retrieval_outcome_attributes(result_count: int, degraded_count: int) -> dict[str, Any]:
    """Attributes set once results are assembled."""
    return {
        RETRIEVAL_RESULT_COUNT: result_count,
        RETRIEVAL_DEGRADED_COUNT: degraded_count,
    }
