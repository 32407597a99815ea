"""
Tests for naming helpers and error formatting.
"""

import pytest

from enumbind.core.errors import EnumBindError, RenderError
from enumbind.core.naming import camel_to_snake, common_prefix, indent, strip_affixes


class TestStripAffixes:
    """Test constant name normalization."""

    @pytest.mark.parametrize(
        ("name", "prefix", "suffix", "expected"),
        [
            ("UIViewContentModeScaleToFill", "UIViewContentMode", "", "ScaleToFill"),
            ("kCFStreamStatusOpen", "kCFStreamStatus", "", "Open"),
            ("NSFooBarKey", "NSFoo", "Key", "Bar"),
            ("Unrelated", "NSFoo", "", "Unrelated"),
            ("NSFoo", "NSFoo", "", "NSFoo"),
            ("UIImageOrientation2x", "UIImageOrientation", "", "_2x"),
            ("3D", "", "", "_3D"),
        ],
    )
    def test_strip_affixes(self, name, prefix, suffix, expected):
        assert strip_affixes(name, prefix, suffix) == expected

    @pytest.mark.parametrize(
        ("names", "expected"),
        [
            (["NSURLErrorTimedOut", "NSURLErrorCancelled"], "NSURLError"),
            (["NSURLErrorCancelled", "NSURLErrorCannotFindHost"], "NSURLErrorCan"),
            (["RED", "GREEN"], ""),
            (["UIViewContentModeRedraw"], ""),
            ([], ""),
        ],
    )
    def test_common_prefix(self, names, expected):
        assert common_prefix(names) == expected


class TestCaseConversion:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Color", "color"),
            ("HTTPStatus", "http_status"),
            ("NSURLErrorCode", "nsurl_error_code"),
            ("UIViewContentMode", "ui_view_content_mode"),
        ],
    )
    def test_camel_to_snake(self, name, expected):
        assert camel_to_snake(name) == expected

    def test_indent_skips_blank_lines(self):
        assert indent("a\n\nb", 2) == "  a\n\n  b"


class TestErrorFormatting:
    def test_enum_name_prefix(self):
        assert str(RenderError("unknown section(s): foo", "Color")) == "Color: unknown section(s): foo"

    def test_collapsed_to_one_line(self):
        error = EnumBindError("first line\n  second line")
        assert str(error) == "first line second line"
        assert error.enum_name is None
