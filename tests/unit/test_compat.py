"""
Unit tests for version compatibility floors.

Tests cover:
- Wire compatibility floors per major, including fixed overrides
- The minor-series floor from major 7 on
- Index compatibility floors, including historical gaps
- Pairwise compatibility and its symmetry
"""

from server.relver.version.codec import encode
from server.relver.version.compat import (
    is_compatible,
    minimum_compatibility_version,
    minimum_index_compatibility_version,
)
from server.relver.version.declared import (
    DECLARED_VERSIONS,
    V_6_0_0,
    V_6_0_0_ALPHA1,
    V_6_0_0_BETA1,
    V_6_1_0,
    V_6_6_2,
    V_6_7_0,
    V_6_7_1,
    V_6_7_2,
    V_6_7_3,
    V_7_0_0,
    V_7_0_2,
)
from server.relver.version.registry import build_registry
from server.relver.version.resolver import from_id


def make_registry(*versions):
    """Helper to create a frozen registry with versions."""
    return build_registry(versions)


class TestMinimumCompatibilityVersion:
    """Tests for minimum_compatibility_version."""

    def test_major_6_fixed_floor(self):
        """Every 6.x talks to 5.6.0 and up."""
        assert minimum_compatibility_version(V_6_1_0).id == encode(5, 6, 0)
        assert minimum_compatibility_version(V_6_0_0_ALPHA1).id == 5060099

    def test_major_6_floor_ignores_registry(self):
        registry = make_registry(V_7_0_0)

        assert minimum_compatibility_version(V_6_1_0, registry).id == 5060099

    def test_major_7_floor_is_first_patch_of_last_minor(self):
        assert minimum_compatibility_version(V_7_0_0) is V_6_7_0
        assert minimum_compatibility_version(V_7_0_2) is V_6_7_0

    def test_minor_series_floor(self):
        """Earliest patch of the newest 6.x minor, not the latest patch."""
        registry = make_registry(V_6_7_0, V_6_7_1, V_6_7_2, V_6_7_3, V_7_0_0)

        assert minimum_compatibility_version(V_7_0_0, registry) is V_6_7_0

    def test_scan_stops_at_older_minor(self):
        registry = make_registry(V_6_6_2, V_6_7_1, V_6_7_2, V_7_0_0)

        assert minimum_compatibility_version(V_7_0_0, registry) is V_6_7_1

    def test_prereleases_are_not_candidates(self):
        """Without a previous-major release the version is its own floor."""
        registry = make_registry(V_6_0_0_ALPHA1, V_6_0_0_BETA1, V_7_0_0)

        assert minimum_compatibility_version(V_7_0_0, registry) is V_7_0_0

    def test_undeclared_next_major(self):
        """8.0.0 falls back to the 7.0 series."""
        assert minimum_compatibility_version(from_id(8000099)) is V_7_0_0

    def test_older_majors_floor_at_major_release(self):
        floor = minimum_compatibility_version(from_id(5030099))

        assert floor.id == 5000099

    def test_prerelease_of_major_is_own_floor(self):
        beta = from_id(5000026)

        assert minimum_compatibility_version(beta) is beta


class TestMinimumIndexCompatibilityVersion:
    """Tests for minimum_index_compatibility_version."""

    def test_major_7_fixed_floor(self):
        """7.x reads indices back to 6.0.0-beta1, returned directly."""
        assert minimum_index_compatibility_version(V_7_0_2) is V_6_0_0_BETA1
        assert minimum_index_compatibility_version(V_7_0_2).id == 6000026

    def test_major_6_reads_major_5(self):
        assert minimum_index_compatibility_version(V_6_7_3).id == 5000099
        assert minimum_index_compatibility_version(V_6_0_0_ALPHA1).id == 5000099

    def test_major_5_reads_major_2(self):
        """There never was a 3.x or 4.x."""
        assert minimum_index_compatibility_version(from_id(5030099)).id == 2000099

    def test_next_major(self):
        assert minimum_index_compatibility_version(from_id(8000099)) is V_7_0_0

    def test_old_majors(self):
        assert minimum_index_compatibility_version(from_id(2000099)).id == 1000099
        assert minimum_index_compatibility_version(from_id(0)).id == 0

    def test_major_0_floors_at_empty(self):
        """There is no major below 0 to fall back to."""
        floor = minimum_index_compatibility_version(from_id(900099))

        assert floor.id == 0


class TestIsCompatible:
    """Tests for is_compatible."""

    def test_same_version(self):
        assert is_compatible(V_7_0_0, V_7_0_0)

    def test_last_minor_to_next_major(self):
        assert is_compatible(V_6_7_0, V_7_0_0)
        assert is_compatible(V_6_7_3, V_7_0_2)

    def test_older_minor_to_next_major(self):
        assert not is_compatible(V_6_6_2, V_7_0_0)
        assert not is_compatible(V_6_0_0, V_7_0_0)

    def test_within_major_6(self):
        assert is_compatible(V_6_0_0_ALPHA1, V_6_7_3)

    def test_major_5_to_6(self):
        assert is_compatible(from_id(5060099), V_6_0_0)
        assert not is_compatible(from_id(5050099), V_6_0_0)

    def test_two_majors_apart(self):
        assert not is_compatible(from_id(5060099), V_7_0_0)

    def test_undeclared_next_major(self):
        assert is_compatible(V_7_0_0, from_id(8000099))
        assert not is_compatible(V_6_7_3, from_id(8000099))

    def test_symmetry(self):
        """is_compatible(a, b) == is_compatible(b, a) for all pairs."""
        extra = [from_id(5060099), from_id(8000099), from_id(5000026)]
        versions = list(DECLARED_VERSIONS) + extra
        for a in versions:
            for b in versions:
                assert is_compatible(a, b) == is_compatible(b, a)
                if is_compatible(a, b):
                    assert abs(a.major - b.major) <= 1
