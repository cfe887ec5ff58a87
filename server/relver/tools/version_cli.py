"""
Version CLI tool for relver.

This tool inspects release versions and the skew policy:
- parse / decode: Show a version given as a string or as an id
- floor: Show the wire and index compatibility floors of a version
- compat: Check whether two versions can run side by side
- list: Dump the registry of declared versions
- banner: Print the build banner

Usage:
    relver parse 6.0.0-rc2
    relver decode 6050499
    relver floor 7.0.2
    relver compat 6.7.1 7.0.0
    relver list --format yaml

Invariants:
    - Incompatible versions cause exit code 1
    - Malformed input causes exit code 2
    - Output of list is deterministic (sorted by id)

How to change safely:
    - Add new commands, don't modify existing ones
    - Keep output format stable for CI parsing
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence

import yaml

from ..config import Settings
from ..errors import VersionParseError
from ..main import setup_logging, version_banner
from ..version import (
    Version,
    from_id,
    from_string,
    get_registry,
    is_compatible,
    minimum_compatibility_version,
    minimum_index_compatibility_version,
)

logger = logging.getLogger(__name__)


class VersionCLI:
    """CLI tool for version inspection.

    Example:
        >>> cli = VersionCLI()
        >>> cli.describe(cli.resolve("6.0.0-beta1"))["id"]
        6000026
    """

    def resolve(self, text: str) -> Version:
        """Resolve a version given as a string or a numeric id."""
        if text.isdigit():
            return from_id(int(text))
        return from_string(text)

    def describe(self, version: Version) -> dict[str, Any]:
        """Describe a version.

        Returns:
            Dictionary with id, string form, companion and build kind
        """
        info = version.to_dict()
        info["declared"] = version.id in get_registry()
        return info

    def floors(self, version: Version) -> dict[str, Any]:
        """Compatibility floors of a version."""
        return {
            "version": str(version),
            "minimum_compatibility_version": str(minimum_compatibility_version(version)),
            "minimum_index_compatibility_version": str(
                minimum_index_compatibility_version(version)
            ),
        }

    def compat(self, version1: Version, version2: Version) -> tuple[bool, list[str]]:
        """Check two versions against each other's floors.

        Returns:
            Tuple of (is_compatible, list_of_issues)
        """
        issues = []
        for left, right in ((version1, version2), (version2, version1)):
            floor = minimum_compatibility_version(right)
            if not left.on_or_after(floor):
                issues.append(f"{left} is before {floor}, the minimum compatible version of {right}")
        compatible = is_compatible(version1, version2)
        return compatible, issues

    def catalog(self) -> dict[str, Any]:
        """Registry contents, sorted by id."""
        return get_registry().to_dict()


def _print_mapping(data: dict[str, Any]) -> None:
    width = max(len(key) for key in data)
    for key, value in data.items():
        print(f"{key.ljust(width)}  {value}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for version tool."""
    parser = argparse.ArgumentParser(description="relver release version tool")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser("parse", help="Show a version given as a string")
    parse_parser.add_argument("text", help="Version string, e.g. 6.0.0-rc2")

    decode_parser = subparsers.add_parser("decode", help="Show a version given as an id")
    decode_parser.add_argument("id", type=int, help="Packed version id, e.g. 6050499")

    floor_parser = subparsers.add_parser("floor", help="Show compatibility floors")
    floor_parser.add_argument("version", help="Version string or id")

    compat_parser = subparsers.add_parser("compat", help="Check two versions for compatibility")
    compat_parser.add_argument("first", help="Version string or id")
    compat_parser.add_argument("second", help="Version string or id")

    list_parser = subparsers.add_parser("list", help="List declared versions")
    list_parser.add_argument(
        "--format", choices=["text", "json", "yaml"], default="text", help="Output format"
    )

    subparsers.add_parser("banner", help="Print the build banner")

    args = parser.parse_args(argv)
    settings = Settings()
    setup_logging(settings)
    cli = VersionCLI()

    try:
        if args.command == "parse":
            _print_mapping(cli.describe(cli.resolve(args.text)))

        elif args.command == "decode":
            _print_mapping(cli.describe(from_id(args.id)))

        elif args.command == "floor":
            _print_mapping(cli.floors(cli.resolve(args.version)))

        elif args.command == "compat":
            first = cli.resolve(args.first)
            second = cli.resolve(args.second)
            compatible, issues = cli.compat(first, second)
            if compatible:
                print(f"{first} and {second} are compatible")
                sys.exit(0)
            print(f"{first} and {second} are NOT compatible:")
            for issue in issues:
                print(f"  - {issue}")
            sys.exit(1)

        elif args.command == "list":
            catalog = cli.catalog()
            if args.format == "json":
                print(json.dumps(catalog, indent=2))
            elif args.format == "yaml":
                print(yaml.safe_dump(catalog, sort_keys=False), end="")
            else:
                print(
                    f"{len(catalog['versions'])} declared version(s), "
                    f"latest {get_registry().latest}, {catalog['fingerprint']}"
                )
                for entry in catalog["versions"]:
                    print(f"  {entry['version']:<14} {entry['id']:>8}  companion {entry['companion']}")

        elif args.command == "banner":
            print(version_banner(settings))

    except VersionParseError as e:
        logger.debug(f"Rejected version input: {e.text}")
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
