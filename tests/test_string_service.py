"""
Tests for the string service business logic.
"""

import pytest

from string_service_api.app.services.string_service import EmptyStringError


class TestUppercase:

    @pytest.mark.parametrize(
        "s, expected",
        [
            ("hello, world", "HELLO, WORLD"),
            ("a", "A"),
            ("MiXeD 123 !?", "MIXED 123 !?"),
            ("straße", "STRAßE"),
            ("\ufb01le", "\ufb01LE"),
            ("ümlaut", "ÜMLAUT"),
            ("   ", "   "),
        ],
    )
    def test_converts_cased_characters(self, svc, s, expected):
        assert svc.uppercase(s) == expected

    @pytest.mark.parametrize("s", ["straße", "\ufb01", "ŉ", "ǰ", "hello, world"])
    def test_preserves_length(self, svc, s):
        assert len(svc.uppercase(s)) == len(s)

    def test_idempotent(self, svc):
        once = svc.uppercase("hello, world")
        assert svc.uppercase(once) == once

    def test_empty_string_rejected(self, svc):
        with pytest.raises(EmptyStringError) as exc_info:
            svc.uppercase("")
        assert str(exc_info.value) == "empty string"

    def test_empty_string_error_is_value_error(self, svc):
        with pytest.raises(ValueError):
            svc.uppercase("")


class TestCount:

    @pytest.mark.parametrize(
        "s, expected",
        [
            ("", 0),
            ("a", 1),
            ("hello, world", 12),
            ("日本語", 9),
            ("ü", 2),
        ],
    )
    def test_returns_length(self, svc, s, expected):
        assert svc.count(s) == expected

    def test_never_negative(self, svc):
        assert svc.count("") >= 0
