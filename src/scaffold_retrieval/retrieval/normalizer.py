"""
Metadata normalizer - turns loosely-typed stored blobs into result fields.

Every function here is total: malformed input degrades to None (absent)
or an empty list, it never raises. One bad record must not fail the
whole batch.

Stored summary blob (expected, not guaranteed):
    '{"Summary": "intro to fractions", "CCSS standards": ["3.NF.1"]}'

Stored type_tags blob (expected, not guaranteed):
    'worksheet, quiz'
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from scaffold_retrieval.retrieval.document import StoredDocument
from scaffold_retrieval.schemas.retrieval import RetrievalResult

logger = logging.getLogger(__name__)

SUMMARY_KEY = "Summary"
STANDARDS_KEY = "CCSS standards"


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON and would leak into the response
    raise ValueError(f"Invalid JSON constant {name}")


def parse_summary(document: StoredDocument) -> dict | None:
    """
    Decode the summary blob into a dict.

    Returns None when the blob is missing, is not valid JSON, or decodes
    to something other than a JSON object. A blob that is already a
    mapping (jsonb column) is used as-is.
    """
    raw = document.summary

    if isinstance(raw, Mapping):
        return dict(raw)

    if not isinstance(raw, (str, bytes, bytearray)):
        logger.warning(f"Summary for document {document.id!r} is {type(raw).__name__}, not text")
        return None

    try:
        parsed = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Error parsing summary for document {document.id!r}: {e}")
        return None

    if not isinstance(parsed, dict):
        logger.warning(f"Summary for document {document.id!r} decoded to {type(parsed).__name__}, not an object")
        return None

    return parsed


def _summary_field(parsed: dict | None, key: str) -> Any:
    return parsed.get(key) if parsed is not None else None


def extract_summary_text(document: StoredDocument) -> Any:
    """Free-text summary from the parsed blob, or None."""
    return _summary_field(parse_summary(document), SUMMARY_KEY)


def extract_standards(document: StoredDocument) -> Any:
    """Standards list from the parsed blob, or None. Passed through untouched."""
    return _summary_field(parse_summary(document), STANDARDS_KEY)


def extract_type_tags(document: StoredDocument) -> list[str]:
    """
    Split the comma-separated type_tags blob.

    Each segment is whitespace-trimmed. Empty segments between
    consecutive commas are kept. Anything that is not a non-blank
    string yields [].
    """
    raw = document.type_tags
    if isinstance(raw, str) and raw.strip():
        return [tag.strip() for tag in raw.split(",")]
    return []


def normalize_document(document: StoredDocument) -> RetrievalResult:
    """Build the uniform result for one stored document."""
    # Parse once and read both fields from it
    parsed = parse_summary(document)
    return RetrievalResult(
        title=document.title,
        author=document.author,
        link_url=document.url,
        answer_url=document.answer_url,
        pdf_summary=_summary_field(parsed, SUMMARY_KEY),
        standard=_summary_field(parsed, STANDARDS_KEY),
        type_tags=extract_type_tags(document),
    )
