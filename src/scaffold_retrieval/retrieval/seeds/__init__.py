"""
Seed data for the retrieval system.

A small demo corpus for development runs against the in-memory store.
"""

from scaffold_retrieval.retrieval.seeds.scaffolds import (
    get_scaffold_documents,
    seed_vector_store,
)

__all__ = ["get_scaffold_documents", "seed_vector_store"]
