"""
Unit tests for reading versions from index settings.

Tests cover:
- Resolution of integer and string ids
- Missing creation version
- Malformed values
"""

import pytest

from server.relver.errors import MissingVersionSettingError, VersionParseError
from server.relver.version.declared import V_6_5_4, V_7_0_0, V_EMPTY
from server.relver.version.settings import (
    SETTING_INDEX_UUID,
    SETTING_VERSION_CREATED,
    index_created,
    version_created,
)


class TestVersionCreated:
    """Tests for version_created."""

    def test_int_value(self):
        assert version_created({SETTING_VERSION_CREATED: 6050499}) is V_6_5_4

    def test_string_value(self):
        assert version_created({SETTING_VERSION_CREATED: "7000099"}) is V_7_0_0

    def test_missing_is_empty(self):
        assert version_created({}) is V_EMPTY

    @pytest.mark.parametrize("value", ["7.0.0", "abc", "", True, 1.5, "--5", "-5", -5, "+5", "\u0665"])
    def test_malformed(self, value):
        with pytest.raises(VersionParseError):
            version_created({SETTING_VERSION_CREATED: value})

    def test_doubled_sign_names_setting(self):
        """A doubled sign is rejected as a parse error, not a bare ValueError."""
        with pytest.raises(VersionParseError, match=r"\[index\.version\.created\]") as exc_info:
            version_created({SETTING_VERSION_CREATED: "--5"})

        assert exc_info.value.text == "--5"
        assert exc_info.value.code == "VERSION_PARSE_ERROR"


class TestIndexCreated:
    """Tests for index_created."""

    def test_present(self):
        settings = {SETTING_VERSION_CREATED: 6050499, SETTING_INDEX_UUID: "abc"}

        assert index_created(settings) is V_6_5_4

    def test_missing_raises(self):
        settings = {SETTING_INDEX_UUID: "Xq3z"}

        with pytest.raises(MissingVersionSettingError) as exc_info:
            index_created(settings)

        assert str(exc_info.value) == (
            "[index.version.created] is not present in the index settings "
            "for index with UUID [Xq3z]"
        )
        assert exc_info.value.setting == SETTING_VERSION_CREATED
        assert exc_info.value.index_uuid == "Xq3z"
        assert exc_info.value.code == "MISSING_VERSION_SETTING"

    def test_missing_without_uuid(self):
        with pytest.raises(MissingVersionSettingError, match=r"UUID \[None\]"):
            index_created({})

    def test_explicit_empty_id_raises(self):
        with pytest.raises(MissingVersionSettingError):
            index_created({SETTING_VERSION_CREATED: 0, SETTING_INDEX_UUID: "abc"})
