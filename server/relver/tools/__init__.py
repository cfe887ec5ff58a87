"""
CLI tools for relver.

This module provides command-line tools for:
- version: Inspect versions, compatibility floors and the declared catalog

Invariants:
    - Tools work offline (no running cluster required)
    - Tools never modify the registry
"""

from .version_cli import VersionCLI

__all__ = ["VersionCLI"]
