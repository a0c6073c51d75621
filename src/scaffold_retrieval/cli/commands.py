"""
CLI commands - entry points for running retrieval from a shell.

Each command follows a consistent pattern:
1. Parse arguments
2. Load environment
3. Run the pipeline
4. Print results
5. Return exit code
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, replace

from dotenv import load_dotenv

EXIT_OK = 0
EXIT_RETRIEVAL_FAILED = 1
EXIT_INVALID_REQUEST = 2
EXIT_INTERRUPTED = 130


def _load_env() -> None:
    """Load environment variables from .env file."""
    load_dotenv()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_search_cli() -> int:
    """CLI entry point for a single retrieval request."""
    from scaffold_retrieval.config import get_config
    from scaffold_retrieval.core import RetrievalFailure, ValidationFailure
    from scaffold_retrieval.observability import init_tracing, shutdown_tracing
    from scaffold_retrieval.embeddings import get_embedding_provider
    from scaffold_retrieval.retrieval import (
        VectorStoreConfig,
        create_orchestrator,
        get_vector_store,
        seed_vector_store,
    )

    _load_env()

    parser = argparse.ArgumentParser(description="Find scaffolds for objectives and standards")
    parser.add_argument("--objectives", default="", help="Learning objectives text")
    parser.add_argument("--standards", default="", help="Standards text, e.g. 3.NF.1")
    parser.add_argument("-k", "--k", type=int, default=0, help="Maximum number of results")
    parser.add_argument("--in-memory", action="store_true", help="Search the seeded demo corpus")
    parser.add_argument("--mock-embeddings", action="store_true", help="Use deterministic fake embeddings")
    parser.add_argument("--verbose", action="store_true", help="Debug logging to stderr")
    args = parser.parse_args()

    _configure_logging(args.verbose)
    init_tracing()

    config = get_config()
    if args.in_memory:
        config = replace(config, vector_store="memory")
    if args.mock_embeddings:
        config = replace(config, use_mock_embeddings=True)

    request = {"objectives": args.objectives, "standards": args.standards, "k": args.k}

    store = None
    try:
        embeddings = get_embedding_provider(
            use_mock=config.use_mock_embeddings,
            model=config.embedding_model,
            api_key=config.openai_api_key,
        )
        store = get_vector_store(
            use_postgres=config.use_postgres,
            config=VectorStoreConfig(
                connection_string=config.database_url,
                match_function=config.match_function,
            ),
            embeddings=embeddings,
        )
        if not config.use_postgres:
            seed_vector_store(store)

        orchestrator = create_orchestrator(config, embeddings=embeddings, store=store)
        results = orchestrator.retrieve(request)
    except ValidationFailure as e:
        print(f"Invalid request: {e}", file=sys.stderr)
        return EXIT_INVALID_REQUEST
    except RetrievalFailure as e:
        print(f"Retrieval failed: {e}", file=sys.stderr)
        return EXIT_RETRIEVAL_FAILED
    finally:
        if store is not None:
            store.close()
        shutdown_tracing()

    print(json.dumps([result.to_dict() for result in results], indent=2))
    return EXIT_OK


def run_config_cli() -> int:
    """CLI entry point that prints the effective configuration."""
    from scaffold_retrieval.config import get_config

    _load_env()

    config = asdict(get_config())
    if config["openai_api_key"]:
        config["openai_api_key"] = "***"

    print(json.dumps(config, indent=2))
    return EXIT_OK


def main() -> int:
    """
    Main CLI entry point with subcommands.

    Usage:
        scaffold-retrieval search --objectives fractions --standards 3.NF.1 -k 3
        scaffold-retrieval config
    """
    _load_env()

    parser = argparse.ArgumentParser(
        description="Semantic scaffold retrieval",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  search      Embed objectives + standards and list matching scaffolds
  config      Print the effective configuration

Examples:
  scaffold-retrieval search --objectives "fractions" --standards "3.NF.1" -k 2
  scaffold-retrieval search --objectives "fractions" --standards "3.NF.1" -k 2 --in-memory
        """,
    )

    parser.add_argument(
        "command",
        choices=["search", "config"],
        help="Command to run",
    )

    # Parse just the command first
    args, remaining = parser.parse_known_args()

    commands = {
        "search": run_search_cli,
        "config": run_config_cli,
    }

    # Re-inject remaining args for the subcommand
    sys.argv = [sys.argv[0]] + remaining

    try:
        return commands[args.command]()
    except KeyboardInterrupt:
        print("\nInterrupted")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
