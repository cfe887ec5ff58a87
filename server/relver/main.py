"""
relver - version banner entry point.

Usage:
    python -m server.relver.main

Prints a single line with the current release, the companion index
format version, build metadata and the Python runtime.

Configuration is entirely via environment variables.
See config.py for all available settings.
"""

from __future__ import annotations

import logging
import platform

import json_log_formatter

from .config import Settings
from .version import CURRENT

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    """Configure logging based on configuration.

    Args:
        settings: relver settings
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "json":
        formatter = json_log_formatter.JSONFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]


def version_banner(settings: Settings) -> str:
    """Single-line description of this build.

    Example:
        >>> version_banner(Settings(build_hash="abc1234def", build_date="2019-05-22"))
        'Version: 7.0.2, Companion: 8.0.0, Build: default/tar/abc1234/2019-05-22, Python: 3.12.3'
    """
    return (
        f"Version: {CURRENT}, Companion: {CURRENT.companion}, "
        f"Build: {settings.build_flavor}/{settings.build_type}/"
        f"{settings.short_hash}/{settings.build_date}, "
        f"Python: {platform.python_version()}"
    )


def main() -> None:
    """Print the version banner."""
    settings = Settings()
    setup_logging(settings)
    logger.debug("Loaded settings", extra={"log_format": settings.log_format})
    print(version_banner(settings))


if __name__ == "__main__":
    main()
