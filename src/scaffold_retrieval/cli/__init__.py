"""
CLI module - command-line interface.

Provides entry points for:
- Running a retrieval request
- Inspecting the effective configuration
"""

from scaffold_retrieval.cli.commands import (
    main,
    run_search_cli,
    run_config_cli,
)

__all__ = [
    "main",
    "run_search_cli",
    "run_config_cli",
]
