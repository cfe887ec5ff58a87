"""
The release version value type.

Invariants:
    - Identity, equality, hashing and ordering use the packed id only
    - major/minor/revision/build are derived from the id, never stored apart
    - Two versions with the same id carry the same companion version

Example:
    >>> from server.relver.version.types import Version
    >>> from server.relver.version.companion import COMPANION_7_0_0
    >>> v = Version(6000026, COMPANION_7_0_0)
    >>> str(v), v.is_beta
    ('6.0.0-beta1', True)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from . import codec
from .companion import CompanionVersion
from .format import format_id


@dataclass(frozen=True, order=True)
class Version:
    """A release of the platform.

    Attributes:
        id: Packed version id (see codec)
        companion: Format version of the bundled index library
    """

    id: int
    companion: CompanionVersion = field(compare=False)

    def __post_init__(self) -> None:
        if self.companion is None:
            raise ValueError(f"Version {self.id} requires a companion version")

    @property
    def major(self) -> int:
        return codec.decode(self.id).major

    @property
    def minor(self) -> int:
        return codec.decode(self.id).minor

    @property
    def revision(self) -> int:
        return codec.decode(self.id).revision

    @property
    def build(self) -> int:
        return self.id % 100

    @property
    def is_alpha(self) -> bool:
        """Whether this is an alpha build (never true before major 5)."""
        return codec.is_alpha(self.major, self.build)

    @property
    def is_beta(self) -> bool:
        return codec.is_beta(self.major, self.build)

    @property
    def is_rc(self) -> bool:
        return codec.is_rc(self.build)

    @property
    def is_release(self) -> bool:
        return codec.is_release(self.build)

    @property
    def build_kind(self) -> codec.BuildKind:
        return codec.classify_build(self.major, self.build)

    def after(self, other: Version) -> bool:
        return other.id < self.id

    def on_or_after(self, other: Version) -> bool:
        return other.id <= self.id

    def before(self, other: Version) -> bool:
        return other.id > self.id

    def on_or_before(self, other: Version) -> bool:
        return other.id >= self.id

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "id": self.id,
            "version": str(self),
            "companion": str(self.companion),
            "build_kind": self.build_kind.value,
        }

    def __str__(self) -> str:
        return format_id(self.id)

    def __repr__(self) -> str:
        return f"Version({self}, id={self.id}, companion={self.companion})"


def min_version(version1: Version, version2: Version) -> Version:
    """Return the older of two versions (the second one on a tie)."""
    return version1 if version1.id < version2.id else version2


def max_version(version1: Version, version2: Version) -> Version:
    """Return the newer of two versions (the second one on a tie)."""
    return version1 if version1.id > version2.id else version2
