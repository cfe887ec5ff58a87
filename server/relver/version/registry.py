"""
Version Registry for relver.

The VersionRegistry is the catalog of every declared release.
It provides:
- Registration of declared versions, deduplicated by id
- Lookup by id
- Sorted views for nearest-neighbour resolution and compatibility scans
- Catalog fingerprinting for consistency checks
- Freeze mechanism to prevent runtime modifications

Invariants:
    - Registry is mutable while it is built, frozen before it is read
    - Once frozen, no new versions can be registered
    - No two registered versions share an id with different companions
    - Sorted views are ascending by id

How to change safely:
    - Declare new versions in declared.py, never register them at runtime
    - Use reset_registry() in tests only

Example:
    >>> from server.relver.version.registry import VersionRegistry
    >>> registry = VersionRegistry()
    >>> registry.register_version(V_7_0_0)
    >>> registry.freeze()
    'sha256:...'
    >>> registry.get(7000099)
    Version(7.0.0, id=7000099, companion=8.0.0)
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
from typing import Dict, Iterable, Optional, Tuple

from ..errors import DuplicateVersionError, RegistryFrozenError, RegistryNotFrozenError
from .declared import DECLARED_VERSIONS
from .types import Version

logger = logging.getLogger(__name__)

# Global registry instance
_global_registry: Optional[VersionRegistry] = None
_registry_lock = threading.Lock()


class VersionRegistry:
    """Catalog of declared release versions.

    Thread-safety:
        - Registration is thread-safe (uses internal lock)
        - Lookups after freeze are lock-free
        - Freeze is atomic and irreversible

    Attributes:
        frozen: Whether the registry is frozen (immutable)
        fingerprint: SHA-256 hash of the catalog (computed on freeze)
    """

    def __init__(self) -> None:
        """Initialize an empty, mutable registry."""
        self._by_id: Dict[int, Version] = {}
        self._sorted: Tuple[Version, ...] = ()
        self._ids: Tuple[int, ...] = ()
        self._frozen = False
        self._fingerprint: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def frozen(self) -> bool:
        """Whether the registry is frozen."""
        return self._frozen

    @property
    def fingerprint(self) -> Optional[str]:
        """Catalog fingerprint (available after freeze)."""
        return self._fingerprint

    def register_version(self, version: Version) -> None:
        """Register a declared version.

        Registering the same version twice is a no-op.

        Args:
            version: The version to register

        Raises:
            RegistryFrozenError: If registry is frozen
            DuplicateVersionError: If the id is registered with another companion
        """
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"Cannot register version '{version}': registry is frozen"
                )

            existing = self._by_id.get(version.id)
            if existing is not None:
                if existing.companion != version.companion:
                    raise DuplicateVersionError(
                        f"id {version.id} already registered as '{existing}' with companion "
                        f"{existing.companion}, cannot register companion {version.companion}"
                    )
                return

            self._by_id[version.id] = version
            logger.debug(f"Registered version: {version} (id={version.id})")

    def register_all(self, versions: Iterable[Version]) -> None:
        """Register every version in an iterable."""
        for version in versions:
            self.register_version(version)

    def get(self, version_id: int) -> Optional[Version]:
        """Get a registered version by id.

        Returns:
            The registered Version, or None if the id was never declared
        """
        return self._by_id.get(version_id)

    def __contains__(self, version_id: object) -> bool:
        return version_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def versions(self) -> Tuple[Version, ...]:
        """All registered versions, ascending by id.

        Raises:
            RegistryNotFrozenError: If the registry is still being built
        """
        self._require_frozen()
        return self._sorted

    def ids(self) -> Tuple[int, ...]:
        """All registered ids, ascending."""
        self._require_frozen()
        return self._ids

    @property
    def oldest(self) -> Optional[Version]:
        versions = self.versions()
        return versions[0] if versions else None

    @property
    def latest(self) -> Optional[Version]:
        versions = self.versions()
        return versions[-1] if versions else None

    def freeze(self) -> str:
        """Freeze the registry and compute fingerprint.

        After freezing, no new versions can be registered and the
        sorted views become available.

        Returns:
            Catalog fingerprint string

        Raises:
            RegistryFrozenError: If already frozen
        """
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is already frozen")

            self._sorted = tuple(sorted(self._by_id.values()))
            self._ids = tuple(v.id for v in self._sorted)
            self._fingerprint = self._compute_fingerprint()
            self._frozen = True
            logger.info(
                f"Version registry frozen with {len(self._sorted)} versions, "
                f"fingerprint={self._fingerprint}"
            )
            return self._fingerprint

    def _require_frozen(self) -> None:
        if not self._frozen:
            raise RegistryNotFrozenError("Registry must be frozen before it is read")

    def _compute_fingerprint(self) -> str:
        """Compute SHA-256 fingerprint of the catalog.

        Returns:
            Fingerprint string in format 'sha256:<hash>'
        """
        catalog = [[v.id, str(v.companion)] for v in self._sorted]
        canonical = json.dumps(catalog, separators=(',', ':'))
        hash_bytes = hashlib.sha256(canonical.encode('utf-8')).hexdigest()
        return f"sha256:{hash_bytes}"

    def to_dict(self) -> dict:
        """Convert registry to dictionary representation.

        Returns:
            Dictionary with the fingerprint and the versions sorted by id.
        """
        return {
            "fingerprint": self._fingerprint,
            "versions": [v.to_dict() for v in self.versions()],
        }


def build_registry(versions: Iterable[Version]) -> VersionRegistry:
    """Create and freeze a registry holding the given versions."""
    registry = VersionRegistry()
    registry.register_all(versions)
    registry.freeze()
    return registry


def get_registry() -> VersionRegistry:
    """Get the process-wide registry of declared versions.

    Built and frozen on first use.

    Returns:
        Global VersionRegistry instance
    """
    global _global_registry
    registry = _global_registry
    if registry is not None:
        return registry
    with _registry_lock:
        if _global_registry is None:
            _global_registry = build_registry(DECLARED_VERSIONS)
        return _global_registry


def reset_registry() -> None:
    """Reset the global registry (for testing only).

    Warning: This is intended for test cleanup only.
    Never use in production code.
    """
    global _global_registry
    with _registry_lock:
        _global_registry = None
