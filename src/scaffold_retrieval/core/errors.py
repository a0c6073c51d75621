"""
Error taxonomy for the retrieval pipeline.

Two failure categories abort a request:
- ValidationFailure: the request is missing required fields (client error)
- RetrievalFailure: embedding or similarity search failed (server error)

Malformed stored metadata is NOT an error - the normalizer degrades
those fields to absent/empty and the request still succeeds.
"""


class RetrievalError(Exception):
    """Base class for failures that abort a retrieval request."""


class ValidationFailure(RetrievalError):
    """Raised when a request is missing objectives, standards or k."""


class RetrievalFailure(RetrievalError):
    """
    Raised when the embedding or matching stage fails.

    The message is safe to show to callers. The underlying cause is
    chained via `raise ... from exc` and only goes to the logs.
    """
