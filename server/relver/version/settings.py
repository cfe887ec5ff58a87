"""
Version lookups in index settings.

Index settings store the id of the release that created the index under
``index.version.created``. An index without it cannot be opened safely,
so index_created fails loudly instead of guessing.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from ..errors import MissingVersionSettingError, VersionParseError
from .declared import V_EMPTY
from .registry import VersionRegistry
from .resolver import from_id
from .types import Version

SETTING_VERSION_CREATED = "index.version.created"
SETTING_INDEX_UUID = "index.uuid"

_ID_PATTERN = re.compile(r"[0-9]+")


def version_created(
    index_settings: Mapping[str, Any],
    registry: Optional[VersionRegistry] = None,
) -> Version:
    """Read the creation version from index settings.

    Args:
        index_settings: Flat settings mapping
        registry: Catalog to resolve against (default: declared versions)

    Returns:
        The resolved version, V_EMPTY if the setting is absent

    Raises:
        VersionParseError: If the value is not a non-negative integer id
    """
    raw = index_settings.get(SETTING_VERSION_CREATED)
    if raw is None:
        return V_EMPTY
    if isinstance(raw, bool) or (isinstance(raw, int) and raw < 0):
        raise VersionParseError(
            f"[{SETTING_VERSION_CREATED}] must be a version id, got {raw!r}", text=str(raw)
        )
    if isinstance(raw, int):
        return from_id(raw, registry)
    text = str(raw).strip()
    if not _ID_PATTERN.fullmatch(text):
        raise VersionParseError(
            f"[{SETTING_VERSION_CREATED}] must be a version id, got {raw!r}", text=text
        )
    return from_id(int(text), registry)


def index_created(
    index_settings: Mapping[str, Any],
    registry: Optional[VersionRegistry] = None,
) -> Version:
    """Return the version an index was created with.

    Raises:
        MissingVersionSettingError: If the settings carry no creation version
    """
    version = version_created(index_settings, registry)
    if version == V_EMPTY:
        index_uuid = index_settings.get(SETTING_INDEX_UUID)
        raise MissingVersionSettingError(
            f"[{SETTING_VERSION_CREATED}] is not present in the index settings "
            f"for index with UUID [{index_uuid}]",
            setting=SETTING_VERSION_CREATED,
            index_uuid=index_uuid,
        )
    return version
