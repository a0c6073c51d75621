"""
Tracing Configuration

Loads observability settings from environment variables.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


@dataclass
class TracingConfig:
    """Configuration for OpenTelemetry tracing.

    Environment Variables:
        TRACING_ENABLED: Enable span export (default: false)
        TRACING_SERVICE_NAME: Service name on exported spans (default: scaffold-retrieval)
        OTLP_ENDPOINT: OTLP/HTTP collector endpoint (optional, console if empty)
    """

    enabled: bool = False
    service_name: str = "scaffold-retrieval"
    otlp_endpoint: str | None = None

    @classmethod
    def from_env(cls) -> "TracingConfig":
        """Load config from environment variables."""
        return cls(
            enabled=_env_flag("TRACING_ENABLED"),
            service_name=os.environ.get("TRACING_SERVICE_NAME", "scaffold-retrieval"),
            otlp_endpoint=os.environ.get("OTLP_ENDPOINT") or None,
        )


# Global config singleton
_config: TracingConfig | None = None


def get_config() -> TracingConfig:
    """Get the global tracing config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = TracingConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
