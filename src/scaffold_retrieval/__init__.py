"""
scaffold_retrieval - semantic retrieval of teaching scaffolds.

Turns learning objectives and standards into a query vector, finds the
nearest stored scaffolds above a fixed similarity threshold, and
normalizes their loosely-typed metadata into a uniform result shape.

    from scaffold_retrieval import create_orchestrator

    orchestrator = create_orchestrator()
    results = orchestrator.retrieve({"objectives": "fractions", "standards": "3.NF.1", "k": 2})
"""

from scaffold_retrieval.core import (
    RetrievalError,
    RetrievalFailure,
    ValidationFailure,
)
from scaffold_retrieval.retrieval import (
    MATCH_THRESHOLD,
    RetrievalOrchestrator,
    create_orchestrator,
)
from scaffold_retrieval.schemas import RetrievalRequest, RetrievalResult

__version__ = "0.1.0"

__all__ = [
    "RetrievalError",
    "RetrievalFailure",
    "ValidationFailure",
    "MATCH_THRESHOLD",
    "RetrievalOrchestrator",
    "create_orchestrator",
    "RetrievalRequest",
    "RetrievalResult",
]
