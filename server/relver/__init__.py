"""
relver - release version identifiers for the data platform.

This package implements the versioning rules shared by every node:
- Packing a version into a 32-bit id and back
- Parsing and formatting human-readable version strings
- The catalog of declared releases and their companion index formats
- Version skew policy: which releases may interoperate and which
  on-disk formats a release must still read

Architecture:
    string / wire id ──▶ format / wire ──▶ resolver ──▶ Version
                                              │
                                              ▼
                                     registry (declared.py)
                                              │
                                              ▼
                                           compat

Invariants:
    - Version ids are immutable once released
    - The registry is built once per process and read-only afterwards
    - All resolution and compatibility functions are pure

How to change safely:
    - Declare new releases in version/declared.py
    - Keep compatibility exceptions in the override tables of version/compat.py

Version: see _version.py.
"""

from ._version import __version__

__all__ = ["__version__"]
