"""
Release version module for relver.

This module provides the versioning system for platform releases:
- Integer encoding of versions (codec)
- The Version value type and its companion index format version
- Registry of every declared release
- Resolution of ids and strings, including undeclared ids
- Compatibility floors and the pairwise compatibility check
- Wire encoding and index settings lookups

Invariants:
    - Version ids are immutable once released
    - The registry is built once and never modified afterwards
    - Equal ids always carry the same companion version

How to change safely:
    - Declare new releases in declared.py
    - Add historical compatibility exceptions to the override tables in compat.py
"""

from .codec import BuildKind, decode, encode
from .compat import (
    is_compatible,
    minimum_compatibility_version,
    minimum_index_compatibility_version,
)
from .companion import CompanionVersion
from .declared import CURRENT, DECLARED_VERSIONS, V_EMPTY
from .format import format_id, parse_id
from .registry import VersionRegistry, build_registry, get_registry, reset_registry
from .resolver import from_id, from_string
from .settings import index_created, version_created
from .types import Version, max_version, min_version
from .wire import read_version, write_version

__all__ = [
    # Types
    "Version",
    "CompanionVersion",
    "BuildKind",
    "min_version",
    "max_version",
    # Codec and format
    "encode",
    "decode",
    "format_id",
    "parse_id",
    # Declared versions
    "CURRENT",
    "V_EMPTY",
    "DECLARED_VERSIONS",
    # Registry
    "VersionRegistry",
    "build_registry",
    "get_registry",
    "reset_registry",
    # Resolution
    "from_id",
    "from_string",
    # Compatibility
    "minimum_compatibility_version",
    "minimum_index_compatibility_version",
    "is_compatible",
    # Wire and settings
    "read_version",
    "write_version",
    "index_created",
    "version_created",
]
