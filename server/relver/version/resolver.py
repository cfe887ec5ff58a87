"""
Resolution of ids and strings to Version values.

Declared ids resolve to their registered constant. Any other id gets a
synthesized Version whose companion is inferred from the registry:

- below the oldest declared id: one companion major before the oldest
  declared companion (minor and patch 0)
- otherwise: the companion of the nearest declared predecessor, since
  patch releases of a minor series never change the companion

Synthesized versions are never added to the registry.

Invariants:
    - from_id(v.id) is v for every registered v
    - Negative ids are rejected, never decoded
    - from_string always resolves through from_id
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from typing import Optional

from .companion import CompanionVersion
from .declared import CURRENT, V_EMPTY, V_EMPTY_ID
from .format import parse_id
from .registry import VersionRegistry, get_registry
from .types import Version

logger = logging.getLogger(__name__)


def from_id(version_id: int, registry: Optional[VersionRegistry] = None) -> Version:
    """Resolve an id to a Version.

    Args:
        version_id: Packed version id
        registry: Catalog to resolve against (default: declared versions)

    Returns:
        The registered Version for declared ids, a synthesized one otherwise

    Raises:
        ValueError: If the id is negative
    """
    if version_id < 0:
        raise ValueError(f"Version id must be non-negative, got {version_id}")
    if registry is None:
        registry = get_registry()

    declared = registry.get(version_id)
    if declared is not None:
        return declared
    if version_id == V_EMPTY_ID:
        return V_EMPTY

    companion = _infer_companion(version_id, registry)
    logger.debug(f"Synthesized undeclared version id={version_id} with companion {companion}")
    return Version(version_id, companion)


def _infer_companion(version_id: int, registry: VersionRegistry) -> CompanionVersion:
    versions = registry.versions()
    index = bisect_left(registry.ids(), version_id)
    assert index == len(versions) or versions[index].id != version_id, (
        f"Version id [{version_id}] is declared but exact lookup missed it"
    )
    if index == 0:
        if not versions:
            raise LookupError("Cannot infer a companion version from an empty registry")
        return CompanionVersion(registry.oldest.companion.major - 1, 0, 0)
    return versions[index - 1].companion


def from_string(text: Optional[str], registry: Optional[VersionRegistry] = None) -> Version:
    """Resolve a version string to a Version.

    Args:
        text: Version string such as ``6.5.1`` or ``6.0.0-rc2``

    Returns:
        CURRENT for None or an empty string, the resolved version otherwise

    Raises:
        VersionParseError: If the string is malformed
    """
    if not text:
        return CURRENT
    return from_id(parse_id(text), registry)
