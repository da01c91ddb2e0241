"""Centralized Documentation Hub configuration.

All fetch, server and feature settings in one place.
Override via environment variables or .env file.

=== CONFIGURATION HIERARCHY ===

1. Feature Flags (DOCHUB_FEATURE_*)
   - DOCHUB_FEATURE_METRICS: Enable/disable Prometheus metric recording

2. Fetch Settings (DOCHUB_FETCH_*)
   - DOCHUB_FETCH_TIMEOUT: Per-request timeout in seconds (default: 30)
   - DOCHUB_FETCH_MAX_RETRIES: Retries after the first attempt (default: 2)
   - DOCHUB_FETCH_RETRY_BASE_DELAY / DOCHUB_FETCH_RETRY_MAX_DELAY: Backoff bounds
   - DOCHUB_USER_AGENT: User-Agent header sent to documentation hosts
   - DOCHUB_FOLLOW_REDIRECTS: Follow HTTP redirects (default: true)

3. Server Settings
   - DOCHUB_SERVER_NAME: MCP server name (default: documentation-hub)
   - DOCHUB_LOG_LEVEL: Root log level (default: INFO)
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

SERVER_VERSION = "1.0.0"

env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


def _get_env(key: str, default: str) -> str:
    """Get environment variable with default."""
    return os.getenv(key, default)


def _get_env_int(key: str, default: int) -> int:
    """Get integer environment variable with default."""
    return int(os.getenv(key, str(default)))


def _get_env_float(key: str, default: float) -> float:
    """Get float environment variable with default."""
    return float(os.getenv(key, str(default)))


def _get_env_bool(key: str, default: bool) -> bool:
    """Get boolean environment variable with default."""
    val = os.getenv(key, str(default)).lower()
    return val in ("true", "1", "yes", "on")


# ============================================================================
# FEATURE FLAGS
# ============================================================================

@dataclass
class FeatureFlags:
    """Master feature flags.

    Environment Variables:
        DOCHUB_FEATURE_METRICS: Record Prometheus metrics (default: true)
    """

    enable_metrics: bool = field(default_factory=lambda: _get_env_bool("DOCHUB_FEATURE_METRICS", True))


# ============================================================================
# FETCH + SERVER
# ============================================================================

@dataclass
class FetchConfig:
    """HTTP settings for fetching documentation pages."""

    timeout: float = field(default_factory=lambda: _get_env_float("DOCHUB_FETCH_TIMEOUT", 30.0))
    # Retries after the first attempt; 0 disables retrying
    max_retries: int = field(default_factory=lambda: _get_env_int("DOCHUB_FETCH_MAX_RETRIES", 2))
    retry_base_delay: float = field(default_factory=lambda: _get_env_float("DOCHUB_FETCH_RETRY_BASE_DELAY", 0.5))
    retry_max_delay: float = field(default_factory=lambda: _get_env_float("DOCHUB_FETCH_RETRY_MAX_DELAY", 8.0))
    user_agent: str = field(
        default_factory=lambda: _get_env("DOCHUB_USER_AGENT", f"documentation-hub/{SERVER_VERSION}")
    )
    follow_redirects: bool = field(default_factory=lambda: _get_env_bool("DOCHUB_FOLLOW_REDIRECTS", True))

    def __post_init__(self):
        if self.max_retries < 0:
            logger.warning(f"max_retries={self.max_retries} is negative; using 0")
            self.max_retries = 0


@dataclass
class ServerConfig:
    """MCP server identity and logging."""

    name: str = field(default_factory=lambda: _get_env("DOCHUB_SERVER_NAME", "documentation-hub"))
    version: str = SERVER_VERSION
    log_level: str = field(default_factory=lambda: _get_env("DOCHUB_LOG_LEVEL", "INFO").upper())


@dataclass
class DocHubConfig:
    """Master Documentation Hub configuration."""

    features: FeatureFlags = field(default_factory=FeatureFlags)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


# Global singleton
_config: Optional[DocHubConfig] = None


def get_config() -> DocHubConfig:
    """Get the global configuration singleton."""
    global _config
    if _config is None:
        _config = DocHubConfig()
    return _config


def reset_config() -> None:
    """Reset configuration (for testing)."""
    global _config
    _config = None


def get_fetch_config() -> FetchConfig:
    """Get documentation fetch configuration."""
    return get_config().fetch


def get_server_config() -> ServerConfig:
    """Get MCP server configuration."""
    return get_config().server


def get_feature_flags() -> FeatureFlags:
    """Get feature flags configuration."""
    return get_config().features
