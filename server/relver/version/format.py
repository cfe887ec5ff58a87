"""
Human-readable version strings.

Grammar:

    MAJOR "." MINOR "." REVISION [ ("-" | ".") QUALIFIER ] [ "-SNAPSHOT" ]

    QUALIFIER ::= ("alpha" | "beta" | "Beta" | "rc" | "RC") DIGITS

Invariants:
    - Qualifiers are only representable before major 7
    - alpha exists from major 5 on; -SNAPSHOT only before major 5
    - format_id(parse_id(s)) == s for every canonical release string

How to change safely:
    - Keep legacy punctuation (".Beta1", ".RC1") for majors below 2
    - New qualifier keywords need a matching build indicator band in codec
"""

from __future__ import annotations

import re

from ..errors import VersionParseError
from . import codec

SNAPSHOT_SUFFIX = "-SNAPSHOT"

_SEPARATORS = re.compile(r"[.-]")
_DIGITS = re.compile(r"[0-9]+")

# Majors from here on never carry a qualifier in string form
_NO_QUALIFIER_SINCE_MAJOR = 7
# -SNAPSHOT was dropped starting with this major
_NO_SNAPSHOT_SINCE_MAJOR = 5
# Majors below this use ".Beta" / ".RC" punctuation
_DASH_PUNCTUATION_SINCE_MAJOR = 2


def format_id(version_id: int) -> str:
    """Render a version id as a string.

    Args:
        version_id: Packed version id

    Returns:
        String such as ``6.0.0-beta1``, ``7.0.2`` or ``1.0.0.RC1``
    """
    major, minor, revision, build = codec.decode(version_id)
    text = f"{major}.{minor}.{revision}"
    if codec.is_alpha(major, build):
        return f"{text}-alpha{build}"
    if codec.is_beta(major, build):
        punctuation = "-beta" if major >= _DASH_PUNCTUATION_SINCE_MAJOR else ".Beta"
        return f"{text}{punctuation}{build - codec.beta_offset(major)}"
    if build < codec.RELEASE_BUILD:
        punctuation = "-rc" if major >= _DASH_PUNCTUATION_SINCE_MAJOR else ".RC"
        return f"{text}{punctuation}{build - codec.RC_OFFSET}"
    return text


def parse_id(text: str) -> int:
    """Parse a version string into its packed id.

    No registry lookup happens here; callers that need a ``Version`` go
    through ``resolver.from_string``.

    Args:
        text: Version string

    Returns:
        Packed version id

    Raises:
        VersionParseError: If the string does not follow the grammar
    """
    original = text
    snapshot = text.endswith(SNAPSHOT_SUFFIX)
    if snapshot:
        text = text[: -len(SNAPSHOT_SUFFIX)]

    parts = _SEPARATORS.split(text)
    # Trailing separators do not count as segments
    while parts and not parts[-1]:
        parts.pop()
    if not 3 <= len(parts) <= 4:
        raise VersionParseError(
            "the version needs to contain major, minor, and revision, "
            f"and optionally the build: {original}",
            text=original,
        )

    major = _parse_number(parts[0], original)
    if snapshot and major >= _NO_SNAPSHOT_SINCE_MAJOR:
        raise VersionParseError(
            f"illegal version format - snapshots are only supported until version 2.x: {original}",
            text=original,
        )
    if major >= _NO_QUALIFIER_SINCE_MAJOR and len(parts) == 4:
        raise VersionParseError(
            f"illegal version format - qualifiers are only supported until version 6.x: {original}",
            text=original,
        )
    minor = _parse_number(parts[1], original)
    revision = _parse_number(parts[2], original)

    build = codec.RELEASE_BUILD
    if len(parts) == 4:
        build = _parse_qualifier(parts[3], major, original)

    try:
        return codec.encode(major, minor, revision, build)
    except ValueError as e:
        raise VersionParseError(f"unable to parse version {original}: {e}", text=original) from e


def _parse_qualifier(qualifier: str, major: int, original: str) -> int:
    """Translate a qualifier segment into a build indicator."""
    if qualifier.startswith("alpha"):
        if major < codec.ALPHA_SINCE_MAJOR:
            raise VersionParseError(
                f"alpha builds only exist from version 5.0 on: {original}",
                text=original,
            )
        build = _parse_number(qualifier[len("alpha"):], original)
        if build >= codec.ALPHA_LIMIT:
            raise VersionParseError(
                f"expected an alpha build but {build} >= {codec.ALPHA_LIMIT}: {original}",
                text=original,
            )
        return build

    if qualifier.startswith(("beta", "Beta")):
        build = codec.beta_offset(major) + _parse_number(qualifier[len("beta"):], original)
        if build >= codec.BETA_LIMIT:
            raise VersionParseError(
                f"expected a beta build but {build} >= {codec.BETA_LIMIT}: {original}",
                text=original,
            )
        return build

    if qualifier.startswith(("rc", "RC")):
        build = _parse_number(qualifier[len("rc"):], original) + codec.RC_OFFSET
        if build >= codec.RELEASE_BUILD:
            raise VersionParseError(
                f"expected a release candidate but {build} >= {codec.RELEASE_BUILD}: {original}",
                text=original,
            )
        return build

    raise VersionParseError(f"unable to parse version {original}", text=original)


def _parse_number(segment: str, original: str) -> int:
    if not _DIGITS.fullmatch(segment):
        raise VersionParseError(f"unable to parse version {original}", text=original)
    return int(segment)
