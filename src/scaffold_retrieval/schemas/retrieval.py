"""
Request and response contracts for scaffold retrieval.

These Pydantic models are the boundary of the pipeline:
- RetrievalRequest is validated once, up front, before any network call
- RetrievalResult is the uniform output shape, whatever the stored
  metadata looked like

WHY PYDANTIC HERE:
------------------
The inbound payload is loosely typed JSON. Validating it into a frozen
model means the rest of the pipeline never re-checks field presence.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from scaffold_retrieval.core.errors import ValidationFailure

MISSING_FIELDS_MESSAGE = "Please provide objectives, standards and k"


class RetrievalRequest(BaseModel):
    """A single retrieval call. Immutable once validated."""

    model_config = ConfigDict(frozen=True)

    objectives: str = Field(
        min_length=1,
        description="Learning objectives text, embedded first",
    )

    standards: str = Field(
        min_length=1,
        description="Standards text (e.g. '3.NF.1'), appended to objectives",
    )

    k: int = Field(
        gt=0,
        description="Maximum number of documents to return",
    )

    @classmethod
    def from_payload(cls, payload: Any) -> "RetrievalRequest":
        """
        Validate a raw request body.

        Raises:
            ValidationFailure: if the body is not a mapping or any of
                objectives, standards, k is missing or falsy
        """
        if not isinstance(payload, Mapping):
            raise ValidationFailure(MISSING_FIELDS_MESSAGE)

        # Falsy values (None, "", 0) are all "missing"
        if not payload.get("objectives") or not payload.get("standards") or not payload.get("k"):
            raise ValidationFailure(MISSING_FIELDS_MESSAGE)

        try:
            return cls(
                objectives=payload["objectives"],
                standards=payload["standards"],
                k=payload["k"],
            )
        except ValidationError as e:
            raise ValidationFailure(f"{MISSING_FIELDS_MESSAGE}: {e.error_count()} invalid field(s)") from e


class RetrievalResult(BaseModel):
    """
    One matched document in the uniform output shape.

    pdf_summary and standard are None when the stored summary blob could
    not be decoded. type_tags is always a list, possibly empty.
    """

    title: Any = None
    author: Any = None
    link_url: Any = None
    answer_url: Any = None
    pdf_summary: Any = None
    standard: Any = None
    type_tags: list[str] = Field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize for JSON output, dropping the absent summary fields."""
        data = self.model_dump()
        for key in ("pdf_summary", "standard"):
            if data[key] is None:
                del data[key]
        return data
