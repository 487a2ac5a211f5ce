"""Tests for yarn version parsing."""

from __future__ import annotations

import pytest
from packaging.version import Version

from yarn_packager.version import is_supported, parse_yarn_version


class TestParseYarnVersion:
    def test_plain(self):
        assert parse_yarn_version("4.1.0\n") == Version("4.1.0")

    def test_leading_blank_lines_and_v_prefix(self):
        assert parse_yarn_version("\n v2.4.3\n") == Version("2.4.3")

    def test_garbage(self):
        with pytest.raises(ValueError):
            parse_yarn_version("command not found")

    def test_empty(self):
        with pytest.raises(ValueError):
            parse_yarn_version("")


class TestIsSupported:
    @pytest.mark.parametrize(
        "text, expected",
        [("1.22.19", False), ("2.0.0", True), ("2.0.0-rc.29", True), ("4.0.2", True)],
    )
    def test_major_versions(self, text, expected):
        assert is_supported(Version(text)) is expected
