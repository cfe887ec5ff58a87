"""
Declared release versions.

This is the explicit registration list consumed by the version registry.
Each release is declared once as a module constant and listed in
DECLARED_VERSIONS.

Invariants:
    - Every constant name spells its own version (V_<major>_<minor>_<rev>[_<QUALIFIER><n>])
    - CURRENT is the newest declared version and ships the LATEST companion
    - V_EMPTY (id 0) stands for "no version" and is never registered

How to change safely:
    - Add a constant for the new release and append it to DECLARED_VERSIONS
    - Move CURRENT and bump companion.LATEST together
    - Never change the companion of a released version
"""

from __future__ import annotations

from .companion import (
    COMPANION_7_0_0,
    COMPANION_7_0_1,
    COMPANION_7_1_0,
    COMPANION_7_2_1,
    COMPANION_7_3_1,
    COMPANION_7_4_0,
    COMPANION_7_5_0,
    COMPANION_7_6_0,
    COMPANION_7_7_0,
    COMPANION_8_0_0,
    LATEST,
)
from .types import Version

V_EMPTY_ID = 0
V_EMPTY = Version(V_EMPTY_ID, LATEST)

V_6_0_0_ALPHA1 = Version(6000001, COMPANION_7_0_0)
V_6_0_0_ALPHA2 = Version(6000002, COMPANION_7_0_0)
V_6_0_0_BETA1 = Version(6000026, COMPANION_7_0_0)
V_6_0_0_BETA2 = Version(6000027, COMPANION_7_0_0)
V_6_0_0_RC1 = Version(6000051, COMPANION_7_0_0)
V_6_0_0_RC2 = Version(6000052, COMPANION_7_0_1)
V_6_0_0 = Version(6000099, COMPANION_7_0_1)
V_6_0_1 = Version(6000199, COMPANION_7_0_1)
V_6_1_0 = Version(6010099, COMPANION_7_1_0)
V_6_1_1 = Version(6010199, COMPANION_7_1_0)
V_6_1_2 = Version(6010299, COMPANION_7_1_0)
V_6_1_3 = Version(6010399, COMPANION_7_1_0)
V_6_1_4 = Version(6010499, COMPANION_7_1_0)
V_6_2_0 = Version(6020099, COMPANION_7_2_1)
V_6_2_1 = Version(6020199, COMPANION_7_2_1)
V_6_2_2 = Version(6020299, COMPANION_7_2_1)
V_6_2_3 = Version(6020399, COMPANION_7_2_1)
V_6_2_4 = Version(6020499, COMPANION_7_2_1)
V_6_3_0 = Version(6030099, COMPANION_7_3_1)
V_6_3_1 = Version(6030199, COMPANION_7_3_1)
V_6_3_2 = Version(6030299, COMPANION_7_3_1)
V_6_4_0 = Version(6040099, COMPANION_7_4_0)
V_6_4_1 = Version(6040199, COMPANION_7_4_0)
V_6_4_2 = Version(6040299, COMPANION_7_4_0)
V_6_4_3 = Version(6040399, COMPANION_7_4_0)
V_6_5_0 = Version(6050099, COMPANION_7_5_0)
V_6_5_1 = Version(6050199, COMPANION_7_5_0)
V_6_5_2 = Version(6050299, COMPANION_7_5_0)
V_6_5_3 = Version(6050399, COMPANION_7_5_0)
V_6_5_4 = Version(6050499, COMPANION_7_5_0)
V_6_6_0 = Version(6060099, COMPANION_7_6_0)
V_6_6_1 = Version(6060199, COMPANION_7_6_0)
V_6_6_2 = Version(6060299, COMPANION_7_6_0)
V_6_7_0 = Version(6070099, COMPANION_7_7_0)
V_6_7_1 = Version(6070199, COMPANION_7_7_0)
V_6_7_2 = Version(6070299, COMPANION_7_7_0)
V_6_7_3 = Version(6070399, COMPANION_7_7_0)
V_7_0_0 = Version(7000099, COMPANION_8_0_0)
V_7_0_1 = Version(7000199, COMPANION_8_0_0)
V_7_0_2 = Version(7000299, COMPANION_8_0_0)

CURRENT = V_7_0_2

DECLARED_VERSIONS: tuple[Version, ...] = (
    V_6_0_0_ALPHA1,
    V_6_0_0_ALPHA2,
    V_6_0_0_BETA1,
    V_6_0_0_BETA2,
    V_6_0_0_RC1,
    V_6_0_0_RC2,
    V_6_0_0,
    V_6_0_1,
    V_6_1_0,
    V_6_1_1,
    V_6_1_2,
    V_6_1_3,
    V_6_1_4,
    V_6_2_0,
    V_6_2_1,
    V_6_2_2,
    V_6_2_3,
    V_6_2_4,
    V_6_3_0,
    V_6_3_1,
    V_6_3_2,
    V_6_4_0,
    V_6_4_1,
    V_6_4_2,
    V_6_4_3,
    V_6_5_0,
    V_6_5_1,
    V_6_5_2,
    V_6_5_3,
    V_6_5_4,
    V_6_6_0,
    V_6_6_1,
    V_6_6_2,
    V_6_7_0,
    V_6_7_1,
    V_6_7_2,
    V_6_7_3,
    V_7_0_0,
    V_7_0_1,
    V_7_0_2,
)


def declared_constants() -> dict[str, Version]:
    """Map every version constant name in this module to its value.

    CURRENT and V_EMPTY are aliases / sentinels and are left out.
    """
    return {
        name: value
        for name, value in globals().items()
        if name.startswith("V_") and name != "V_EMPTY" and isinstance(value, Version)
    }


def constant_name(version: Version) -> str:
    """Name a declared version constant must be bound to.

    Example:
        >>> constant_name(V_6_0_0_BETA1)
        'V_6_0_0_BETA1'
    """
    name = f"V_{version.major}_{version.minor}_{version.revision}"
    if not version.is_release:
        # 6.0.0-beta1 -> BETA1
        name += "_" + str(version).rsplit("-", 1)[1].upper()
    return name


assert CURRENT.companion == LATEST, (
    f"Version must be upgraded to [{LATEST}] is still set to [{CURRENT.companion}]"
)
assert CURRENT == max(DECLARED_VERSIONS), "CURRENT must be the newest declared version"
