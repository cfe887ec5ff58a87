"""
Version skew policy for relver.

This module answers which releases may talk to each other and which
on-disk formats a release must still read:
- minimum_compatibility_version: oldest release a node can exchange data with
- minimum_index_compatibility_version: oldest release whose indices,
  transaction logs and metadata files must still be readable
- is_compatible: whether two releases may run in the same cluster

Invariants:
    - Compatible releases are at most one major apart
    - is_compatible is symmetric
    - From major 7 on, the wire floor is the first patch release of the
      newest minor series of the previous major that predates the release

How to change safely:
    - Historical exceptions live in the override tables below; add new
      ones there instead of branching in the scan
    - Do not replace the minor-series floor with the latest patch release
"""

from __future__ import annotations

from typing import Dict, Optional

from . import codec
from .registry import VersionRegistry, get_registry
from .resolver import from_id
from .types import Version, min_version

# major -> fixed wire floor id (majors 5.x are no longer declared)
WIRE_FLOOR_OVERRIDES: Dict[int, int] = {
    6: codec.encode(5, 6, 0),
}

# major -> fixed index floor id, returned as is
INDEX_FLOOR_OVERRIDES: Dict[int, int] = {
    7: codec.encode(6, 0, 0, 26),
}

# major -> major whose first release is the index floor (3.x and 4.x never existed)
INDEX_BACKWARD_MAJOR: Dict[int, int] = {
    5: 2,
}

# Majors from here on are compatible with the last minor series of the previous major
_MINOR_SERIES_SINCE_MAJOR = 7


def minimum_compatibility_version(
    version: Version,
    registry: Optional[VersionRegistry] = None,
) -> Version:
    """Oldest version a node running ``version`` can communicate with.

    Args:
        version: The running version
        registry: Catalog to scan (default: declared versions)

    Returns:
        The compatibility floor
    """
    if registry is None:
        registry = get_registry()

    override = WIRE_FLOOR_OVERRIDES.get(version.major)
    if override is not None:
        return from_id(override, registry)

    if version.major >= _MINOR_SERIES_SINCE_MAJOR:
        return _previous_minor_series_floor(version, registry)

    return min_version(version, from_id(codec.encode(version.major, 0, 0), registry))


def _previous_minor_series_floor(version: Version, registry: VersionRegistry) -> Version:
    """First patch release of the newest previous-major minor series before ``version``."""
    floor: Optional[Version] = None
    for candidate in reversed(registry.versions()):
        if (
            candidate.major == version.major - 1
            and candidate.is_release
            and version.after(candidate)
        ):
            if floor is not None and candidate.minor < floor.minor:
                break
            floor = candidate
    if floor is None:
        return version
    return floor


def minimum_index_compatibility_version(
    version: Version,
    registry: Optional[VersionRegistry] = None,
) -> Version:
    """Oldest version whose on-disk formats ``version`` must still read.

    Covers indices as well as file based formats such as transaction
    logs, cluster state and index metadata.

    Args:
        version: The running version
        registry: Catalog to resolve against (default: declared versions)

    Returns:
        The index compatibility floor
    """
    if registry is None:
        registry = get_registry()

    override = INDEX_FLOOR_OVERRIDES.get(version.major)
    if override is not None:
        return from_id(override, registry)

    # Clamped so major 0 floors at 0.0.0 instead of a negative id
    backward_major = INDEX_BACKWARD_MAJOR.get(version.major, max(version.major - 1, 0))
    return min_version(version, from_id(codec.encode(backward_major, 0, 0), registry))


def is_compatible(
    version1: Version,
    version2: Version,
    registry: Optional[VersionRegistry] = None,
) -> bool:
    """Whether two versions can run in the same cluster.

    Returns:
        True iff each version is on or after the other's compatibility floor
    """
    compatible = (
        version1.on_or_after(minimum_compatibility_version(version2, registry))
        and version2.on_or_after(minimum_compatibility_version(version1, registry))
    )
    assert not compatible or abs(version1.major - version2.major) <= 1, (
        f"Versions {version1} and {version2} are more than one major apart"
    )
    return compatible
