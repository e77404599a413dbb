"""Tests for minass.assertions._render."""

from datetime import timedelta

import pytest

from minass.assertions._render import format_duration, render_value, to_seconds, type_name
from minass.config import MinassConfig, set_config


class TestFormatDuration:
    @pytest.mark.parametrize(
        "duration,expected",
        [
            (0, "0s"),
            (1e-7, "100ns"),
            (2.5e-6, "2.5µs"),
            (0.05, "50ms"),
            (0.0015, "1.5ms"),
            (1, "1s"),
            (1.05, "1.05s"),
            (90, "1m30s"),
            (3600, "1h0m0s"),
            (3723.5, "1h2m3.5s"),
            (-1, "-1s"),
            (timedelta(minutes=2), "2m0s"),
            (timedelta(milliseconds=250), "250ms"),
        ],
    )
    def test_format(self, duration, expected):
        assert format_duration(duration) == expected


def test_to_seconds():
    assert to_seconds(2) == 2.0
    assert to_seconds(timedelta(milliseconds=500)) == 0.5


def test_type_name():
    assert type_name("x") == "str"
    assert type_name(None) == "NoneType"
    assert type_name({}) == "dict"


class TestRenderValue:
    def test_strings_are_verbatim(self):
        assert render_value("wanted") == "wanted"

    def test_containers_use_repr_style(self):
        assert render_value(["got"]) == "['got']"
        assert render_value({"a": 1}) == "{'a': 1}"
        assert render_value(b"hi") == "b'hi'"

    def test_wide_values_wrap(self):
        out = render_value({"key": "x" * 100, "other": 1})

        assert "\n" in out

    def test_expand_all(self):
        set_config(MinassConfig(expand_all=True))

        assert "\n" in render_value([1, 2])

    def test_max_length(self):
        set_config(MinassConfig(max_length=2))

        out = render_value([1, 2, 3, 4])

        assert out.startswith("[1, 2")
        assert "..." in out
