"""
Integer encoding of release versions.

A version id packs four two-digit decimal groups:

    id = major * 1_000_000 + minor * 10_000 + revision * 100 + build

The low group is a build indicator rather than a counter:
- build < 25: alpha (only from major 5 on; earlier majors have no alphas)
- build < 50: beta (25..49 from major 5 on, 0..49 before)
- 50 <= build < 99: release candidate number build - 50
- build == 99: release

Invariants:
    - Every group is in [0, 99]
    - Ordering versions is plain integer ordering of ids; prereleases
      sort before the release of the same major.minor.revision

How to change safely:
    - Never change the multipliers; ids are stored on disk and on the wire
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

MAJOR_FACTOR = 1_000_000
MINOR_FACTOR = 10_000
REVISION_FACTOR = 100

ALPHA_LIMIT = 25
BETA_LIMIT = 50
RC_OFFSET = 50
RELEASE_BUILD = 99

# Majors below this have no alpha builds and betas start at build 0
ALPHA_SINCE_MAJOR = 5


class BuildKind(Enum):
    """Release stage encoded in the build indicator."""

    ALPHA = "alpha"
    BETA = "beta"
    RC = "rc"
    RELEASE = "release"


class VersionParts(NamedTuple):
    """The four digit groups of a version id."""

    major: int
    minor: int
    revision: int
    build: int


def encode(major: int, minor: int, revision: int, build: int = RELEASE_BUILD) -> int:
    """Pack digit groups into a version id.

    Args:
        major: Major version (0-99)
        minor: Minor version (0-99)
        revision: Revision / patch (0-99)
        build: Build indicator (0-99), release by default

    Returns:
        The packed integer id

    Raises:
        ValueError: If any group is outside [0, 99]
    """
    for name, value in (("major", major), ("minor", minor), ("revision", revision), ("build", build)):
        if not 0 <= value <= 99:
            raise ValueError(f"{name} must be in [0, 99], got {value}")
    return major * MAJOR_FACTOR + minor * MINOR_FACTOR + revision * REVISION_FACTOR + build


def decode(version_id: int) -> VersionParts:
    """Unpack a version id into its digit groups.

    Raises:
        ValueError: If the id is negative
    """
    if version_id < 0:
        raise ValueError(f"Version id must be non-negative, got {version_id}")
    return VersionParts(
        major=(version_id // MAJOR_FACTOR) % 100,
        minor=(version_id // MINOR_FACTOR) % 100,
        revision=(version_id // REVISION_FACTOR) % 100,
        build=version_id % 100,
    )


def beta_offset(major: int) -> int:
    """First beta build indicator for the given major."""
    return 0 if major < ALPHA_SINCE_MAJOR else ALPHA_LIMIT


def is_alpha(major: int, build: int) -> bool:
    return major >= ALPHA_SINCE_MAJOR and build < ALPHA_LIMIT


def is_beta(major: int, build: int) -> bool:
    if major < ALPHA_SINCE_MAJOR:
        return build < BETA_LIMIT
    return ALPHA_LIMIT <= build < BETA_LIMIT


def is_rc(build: int) -> bool:
    return RC_OFFSET <= build < RELEASE_BUILD


def is_release(build: int) -> bool:
    return build == RELEASE_BUILD


def classify_build(major: int, build: int) -> BuildKind:
    """Classify a build indicator.

    Args:
        major: Major version the build belongs to
        build: Build indicator (0-99)

    Returns:
        The release stage
    """
    if is_alpha(major, build):
        return BuildKind.ALPHA
    if is_beta(major, build):
        return BuildKind.BETA
    if is_release(build):
        return BuildKind.RELEASE
    return BuildKind.RC
