"""Pydantic contracts for retrieval requests and results."""

from scaffold_retrieval.schemas.retrieval import (
    MISSING_FIELDS_MESSAGE,
    RetrievalRequest,
    RetrievalResult,
)

__all__ = [
    "MISSING_FIELDS_MESSAGE",
    "RetrievalRequest",
    "RetrievalResult",
]
