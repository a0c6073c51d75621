"""
Demo scaffold corpus for the in-memory store.

In production the corpus lives in Postgres and is written by the
ingestion pipeline. These records mirror its row shape, including one
with a summary blob that is not JSON.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from scaffold_retrieval.retrieval.document import StoredDocument

if TYPE_CHECKING:
    from scaffold_retrieval.retrieval.store import InMemoryVectorStore


def _summary(text: str, standards: list[str]) -> str:
    return json.dumps({"Summary": text, "CCSS standards": standards})


def get_scaffold_documents() -> list[StoredDocument]:
    """Get seed documents for the demo scaffold corpus."""
    return [
        StoredDocument(
            id="scaffold_fractions_unit",
            title="Understanding Unit Fractions",
            author="Grade 3 Math Team",
            url="https://example.org/scaffolds/unit-fractions.pdf",
            answer_url="https://example.org/scaffolds/unit-fractions-key.pdf",
            summary=_summary(
                "Students partition shapes into equal parts and name one part as 1/b.",
                ["3.NF.1"],
            ),
            type_tags="worksheet, quiz",
        ),
        StoredDocument(
            id="scaffold_fractions_number_line",
            title="Fractions on a Number Line",
            author="Grade 3 Math Team",
            url="https://example.org/scaffolds/number-line.pdf",
            answer_url="https://example.org/scaffolds/number-line-key.pdf",
            summary=_summary(
                "Students place fractions on a number line between 0 and 1.",
                ["3.NF.2", "3.NF.2a"],
            ),
            type_tags="worksheet",
        ),
        StoredDocument(
            id="scaffold_equivalent_fractions",
            title="Equivalent Fractions with Area Models",
            author="Grade 4 Math Team",
            url="https://example.org/scaffolds/equivalent.pdf",
            answer_url="https://example.org/scaffolds/equivalent-key.pdf",
            summary=_summary(
                "Students use area models to explain why a/b equals (n x a)/(n x b).",
                ["4.NF.1"],
            ),
            type_tags="activity, exit ticket",
        ),
        StoredDocument(
            id="scaffold_main_idea",
            title="Finding the Main Idea",
            author="ELA Team",
            url="https://example.org/scaffolds/main-idea.pdf",
            answer_url="https://example.org/scaffolds/main-idea-key.pdf",
            summary=_summary(
                "Students identify the main idea of a text and supporting key details.",
                ["RI.3.2"],
            ),
            type_tags="graphic organizer",
        ),
        StoredDocument(
            id="scaffold_multiplication_arrays",
            title="Multiplication with Arrays",
            author="Grade 3 Math Team",
            url="https://example.org/scaffolds/arrays.pdf",
            answer_url="https://example.org/scaffolds/arrays-key.pdf",
            summary="Summary: arrays as equal groups (legacy record, not JSON)",
            type_tags="",
        ),
    ]


def seed_vector_store(store: InMemoryVectorStore) -> int:
    """
    Load the demo corpus into a store.

    Returns:
        Number of documents inserted
    """
    docs = get_scaffold_documents()
    store.insert_documents_batch(docs)
    return len(docs)
