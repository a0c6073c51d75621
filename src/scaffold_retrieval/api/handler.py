"""
Inbound request handler, independent of any web framework.

Maps a (method, body) pair to an ApiResponse. A web route only has to
forward the method and decoded JSON body and write back status, headers
and body.

    POST + valid body     → 200, list of result dicts
    POST + missing fields → 400, {"error": <message>}
    POST + backend error  → 500, {"error": "Failed to fetch scaffolds."}
    anything else         → 405, Allow: POST
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from scaffold_retrieval.core import RetrievalFailure, ValidationFailure
from scaffold_retrieval.retrieval.orchestrator import RetrievalOrchestrator

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["POST"]
SERVER_ERROR_MESSAGE = "Failed to fetch scaffolds."


@dataclass
class ApiResponse:
    """Transport-neutral response."""
    status: int
    body: Any
    headers: dict[str, str] = field(default_factory=dict)


def handle_retrieval_request(
    method: str,
    body: Any,
    orchestrator: RetrievalOrchestrator,
) -> ApiResponse:
    """Run one retrieval call and translate the outcome to a status code."""
    if method.upper() not in ALLOWED_METHODS:
        return ApiResponse(
            status=405,
            body=f"Method {method} Not Allowed",
            headers={"Allow": ", ".join(ALLOWED_METHODS)},
        )

    try:
        results = orchestrator.retrieve(body)
    except ValidationFailure as e:
        return ApiResponse(status=400, body={"error": str(e)})
    except RetrievalFailure:
        logger.exception("Error getting scaffolds")
        return ApiResponse(status=500, body={"error": SERVER_ERROR_MESSAGE})
    except Exception:
        logger.exception("Unexpected error getting scaffolds")
        return ApiResponse(status=500, body={"error": SERVER_ERROR_MESSAGE})

    return ApiResponse(status=200, body=[result.to_dict() for result in results])
