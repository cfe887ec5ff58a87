"""
Format version of the bundled index library.

Every release ships with one version of the embedded indexing library and
its on-disk format. relver only stores and orders these values; what a
given format version means is owned by the library itself.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class CompanionVersion:
    """Format version of the bundled index library.

    Ordered lexicographically by (major, minor, patch).

    Attributes:
        major: Major format version
        minor: Minor format version
        patch: Patch level
    """

    major: int
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"Companion {name} must be non-negative, got {value}")

    @classmethod
    def from_bits(cls, major: int, minor: int, patch: int) -> CompanionVersion:
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


COMPANION_7_0_0 = CompanionVersion(7, 0, 0)
COMPANION_7_0_1 = CompanionVersion(7, 0, 1)
COMPANION_7_1_0 = CompanionVersion(7, 1, 0)
# Not shipped by the 7.3 library line, still needed by the 6.2 series
COMPANION_7_2_1 = CompanionVersion.from_bits(7, 2, 1)
COMPANION_7_3_1 = CompanionVersion(7, 3, 1)
COMPANION_7_4_0 = CompanionVersion(7, 4, 0)
COMPANION_7_5_0 = CompanionVersion(7, 5, 0)
COMPANION_7_6_0 = CompanionVersion(7, 6, 0)
COMPANION_7_7_0 = CompanionVersion(7, 7, 0)
COMPANION_8_0_0 = CompanionVersion(8, 0, 0)

# Format version of the library bundled with this build
LATEST = COMPANION_8_0_0
