"""
Configuration for relver.

Uses pydantic-settings for environment variable loading. Build metadata
is stamped into the environment by the packaging pipeline.

Invariants:
    - All settings have defaults usable for local development
    - Unknown log formats are rejected at load time
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """relver configuration loaded from environment."""

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: Literal["text", "json"] = Field(default="text", description="Log output format")

    # Build metadata reported by the version banner
    build_flavor: str = Field(default="default", description="Distribution flavor")
    build_type: str = Field(default="tar", description="Package type")
    build_hash: str = Field(default="unknown", description="Commit hash of the build")
    build_date: str = Field(default="unknown", description="Build timestamp")

    model_config = {"env_prefix": "RELVER_"}

    @property
    def short_hash(self) -> str:
        """Abbreviated commit hash."""
        return self.build_hash[:7]
