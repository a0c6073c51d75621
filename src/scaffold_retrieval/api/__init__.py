"""Framework-neutral inbound handler for the retrieval operation."""

from scaffold_retrieval.api.handler import (
    ALLOWED_METHODS,
    SERVER_ERROR_MESSAGE,
    ApiResponse,
    handle_retrieval_request,
)

__all__ = [
    "ALLOWED_METHODS",
    "SERVER_ERROR_MESSAGE",
    "ApiResponse",
    "handle_retrieval_request",
]
