"""
Error types for relver.

This module defines all exception types raised by the package:
- RelverError: Base exception
- VersionParseError: Malformed version string or setting value
- MissingVersionSettingError: Index settings carry no creation version
- RegistryError: Version catalog misuse (frozen, not frozen, duplicates)
- WireFormatError: Truncated or overlong variable-length integer

Invariants:
    - All errors inherit from RelverError
    - Errors include context for debugging
    - Parse errors echo the offending input
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class RelverError(Exception):
    """Base exception for all relver errors.

    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or "RELVER_ERROR"
        self.details = details or {}


class VersionParseError(RelverError, ValueError):
    """A version string could not be parsed.

    Raised when:
    - Segment count is not 3 or 4
    - A numeric field is not a number
    - The qualifier keyword is unknown or its number is out of range
    - A -SNAPSHOT suffix or a qualifier is used on a major that forbids it
    """

    def __init__(self, message: str, text: Optional[str] = None) -> None:
        super().__init__(
            message,
            code="VERSION_PARSE_ERROR",
            details={"text": text},
        )
        self.text = text


class MissingVersionSettingError(RelverError):
    """Index settings do not carry the version the index was created with."""

    def __init__(
        self,
        message: str,
        setting: str,
        index_uuid: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            code="MISSING_VERSION_SETTING",
            details={"setting": setting, "index_uuid": index_uuid},
        )
        self.setting = setting
        self.index_uuid = index_uuid


class RegistryError(RelverError):
    """Base class for version registry errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="REGISTRY_ERROR")


class RegistryFrozenError(RegistryError):
    """Raised when attempting to modify a frozen registry."""
    pass


class RegistryNotFrozenError(RegistryError):
    """Raised when reading sorted views of a registry that is still being built."""
    pass


class DuplicateVersionError(RegistryError):
    """Raised when two declared versions share an id but not a companion version."""
    pass


class WireFormatError(RelverError):
    """A variable-length integer on the wire was truncated or too long."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="WIRE_FORMAT_ERROR")
