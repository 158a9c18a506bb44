"""Tests for length and percentage parsing."""

import pytest

from style_engine.css.errors import NumberError, UnitError
from style_engine.css.length import (EM_HEIGHT, Length, LengthMetric, format_number,
                                     parse_length, parse_percentage)


# ---------------------------------------------------------------------------
# parse_length
# ---------------------------------------------------------------------------


class TestParseLength:
    def test_pixels(self):
        assert parse_length("15px") == Length(LengthMetric.PX, 15.0)

    def test_em(self):
        assert parse_length("1.2em") == Length(LengthMetric.EM, 1.2)

    def test_negative(self):
        assert parse_length("-5px") == Length(LengthMetric.PX, -5.0)

    def test_leading_decimal_point(self):
        assert parse_length(".5em") == Length(LengthMetric.EM, 0.5)

    @pytest.mark.parametrize("text, unit", [
        ("aslkfdjasdflk", "aslkfdjasdflk"),
        ("15", ""),
        ("15pt", "pt"),
        ("15PX", "PX"),
        ("2rem", "rem"),
    ])
    def test_unrecognized_unit(self, text, unit):
        with pytest.raises(UnitError) as exc_info:
            parse_length(text)
        assert exc_info.value.value == unit

    @pytest.mark.parametrize("text", ["px", "1.2.3px", "-em", "..px"])
    def test_malformed_number(self, text):
        with pytest.raises(NumberError):
            parse_length(text)

    def test_unit_checked_before_number(self):
        with pytest.raises(UnitError):
            parse_length("1.2.3pt")


class TestToPixels:
    def test_pixels_unchanged(self):
        assert parse_length("15px").to_pixels() == 15.0

    def test_em_uses_fixed_em_height(self):
        assert EM_HEIGHT == 16.0
        assert parse_length("1.2em").to_pixels() == pytest.approx(19.2)

    def test_custom_em_size(self):
        assert parse_length("2em").to_pixels(em_size=10.0) == 20.0

    def test_em_size_ignored_for_pixels(self):
        assert parse_length("3px").to_pixels(em_size=10.0) == 3.0


class TestLengthToCss:
    @pytest.mark.parametrize("text", ["15px", "1.2em", "-5px", "0px"])
    def test_round_trip(self, text):
        length = parse_length(text)
        assert length.to_css() == text
        assert parse_length(length.to_css()) == length

    @pytest.mark.parametrize("number, expected", [
        (15.0, "15"),
        (1.2, "1.2"),
        (-0.0, "0"),
        (33.333333333, "33.333333"),
    ])
    def test_format_number(self, number, expected):
        assert format_number(number) == expected


# ---------------------------------------------------------------------------
# parse_percentage
# ---------------------------------------------------------------------------


class TestParsePercentage:
    @pytest.mark.parametrize("text, expected", [
        ("50%", 0.5),
        ("10%", 0.1),
        ("0%", 0.0),
        ("100%", 1.0),
        ("12.5%", 0.125),
    ])
    def test_fraction(self, text, expected):
        assert parse_percentage(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["50", "abc%", "%", "5%%", "inf%", "nan%", ""])
    def test_not_a_percentage_is_none(self, text):
        assert parse_percentage(text) is None


class TestLengthDataclass:
    def test_length_is_frozen(self):
        length = parse_length("15px")
        with pytest.raises(AttributeError):
            length.number = 3.0  # type: ignore[misc]
