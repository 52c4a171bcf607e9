"""Tests for version normalization."""

import pytest

from workflow_validator.utils.format_version import (
    MISSING_VERSION,
    coerce_version_number,
    normalize_version,
    version_sort_key,
)


class TestNormalizeVersion:
    """Test normalize_version."""

    def test_missing_version_defaults_to_1_0(self):
        assert normalize_version() == "1.0"
        assert normalize_version(MISSING_VERSION) == "1.0"

    def test_null_version_is_zero(self):
        assert normalize_version(None) == "0"

    @pytest.mark.parametrize("raw", ["1", "1.0", "1.1", "1.2", 1, 1.0, 1.1, 1.2, "1.15", " 1.1 "])
    def test_legacy_versions_collapse_to_1_0(self, raw):
        assert normalize_version(raw) == "1.0"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("2.0", "2.0"),
            (" 2.0 ", "2.0"),
            (2.0, "2.0"),
            (2, "2"),
            ("3.7", "3.7"),
            (0.9, "0.9"),
            (1.25, "1.25"),
        ],
    )
    def test_numeric_versions_keep_their_form(self, raw, expected):
        assert normalize_version(raw) == expected

    def test_non_numeric_version_passes_through(self):
        assert normalize_version("latest") == "latest"
        assert normalize_version("nan") == "nan"

    def test_bools_are_numeric(self):
        assert normalize_version(True) == "1.0"
        assert normalize_version(False) == "0"

    def test_blank_string_is_zero(self):
        assert normalize_version("") == "0"
        assert normalize_version("   ") == "0"


class TestCoerceVersionNumber:
    """Test coerce_version_number."""

    def test_numbers(self):
        assert coerce_version_number("1.2") == 1.2
        assert coerce_version_number(2) == 2.0
        assert coerce_version_number(True) == 1.0
        assert coerce_version_number(False) == 0.0
        assert coerce_version_number(None) == 0.0

    def test_non_numbers(self):
        assert coerce_version_number("v1") is None
        assert coerce_version_number("inf") is None
        assert coerce_version_number([1]) is None


def test_version_sort_key_orders_numerically():
    versions = ["10.0", "latest", "2.0", "1.0"]
    assert sorted(versions, key=version_sort_key) == ["1.0", "2.0", "10.0", "latest"]
