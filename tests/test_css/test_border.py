"""Tests for border, border-style and border-radius parsing."""

import math

import pytest

from style_engine.css.border import (Border, BorderStyle, CornerRadii, Size, parse_border,
                                     parse_border_radius, parse_border_style)
from style_engine.css.color import BLACK, Color
from style_engine.css.errors import (ArityError, ComponentError, KeywordError,
                                     NegativeValueError, TooManyValuesError, UnitError)


# ---------------------------------------------------------------------------
# border-style
# ---------------------------------------------------------------------------


class TestBorderStyle:
    @pytest.mark.parametrize("style", list(BorderStyle))
    def test_every_keyword(self, style):
        assert parse_border_style(style.value) == style

    @pytest.mark.parametrize("text", ["wavy", "Solid", "", "solid "])
    def test_unknown(self, text):
        with pytest.raises(KeywordError) as exc_info:
            parse_border_style(text)
        assert exc_info.value.kind == "border-style"


# ---------------------------------------------------------------------------
# border-radius
# ---------------------------------------------------------------------------


def _radii(top_left, top_right, bottom_right, bottom_left):
    return CornerRadii(Size(top_left, top_left), Size(top_right, top_right),
                       Size(bottom_right, bottom_right), Size(bottom_left, bottom_left))


class TestBorderRadius:
    @pytest.mark.parametrize("text, expected", [
        ("5px", _radii(5, 5, 5, 5)),
        ("5px 10px", _radii(5, 10, 5, 10)),
        ("5px 10px 6px", _radii(5, 10, 6, 10)),
        ("5px 10px 6px 7px", _radii(5, 10, 6, 7)),
        ("1em", _radii(16, 16, 16, 16)),
    ])
    def test_arity(self, text, expected):
        assert parse_border_radius(text) == expected

    def test_too_many_values(self):
        with pytest.raises(TooManyValuesError):
            parse_border_radius("5px 10px 6px 7px 8px")

    def test_too_many_is_an_arity_error(self):
        with pytest.raises(ArityError):
            parse_border_radius("1px 1px 1px 1px 1px")

    def test_empty(self):
        with pytest.raises(ArityError):
            parse_border_radius("")

    def test_invalid_corner_is_named(self):
        with pytest.raises(ComponentError) as exc_info:
            parse_border_radius("5px 10pt")
        assert exc_info.value.component == "top-right"
        assert isinstance(exc_info.value.cause, UnitError)

    def test_negative_radius(self):
        with pytest.raises(ComponentError) as exc_info:
            parse_border_radius("-5px")
        assert isinstance(exc_info.value.cause, NegativeValueError)

    def test_em_size(self):
        assert parse_border_radius("2em", em_size=10.0) == CornerRadii.uniform(20.0)

    def test_to_css(self):
        assert parse_border_radius("5px 10px").to_css() == "5px 10px 5px 10px"


# ---------------------------------------------------------------------------
# border
# ---------------------------------------------------------------------------


class TestBorder:
    def test_full_declaration(self):
        border = parse_border("5px solid red")
        assert border.widths.top == border.widths.left == 5.0
        assert border.top.style == BorderStyle.SOLID
        assert border.top.color == Color(255, 0, 0)
        assert border.top == border.right == border.bottom == border.left
        assert border.radius == CornerRadii.zero()

    def test_style_only(self):
        border = parse_border("double")
        assert border.widths.bottom == 1.0
        assert border.bottom.style == BorderStyle.DOUBLE
        assert border.bottom.color == BLACK

    def test_em_thickness(self):
        assert parse_border("0.5em dotted #888888").widths.right == 8.0

    def test_rgb_color(self):
        assert parse_border("1px dashed rgb(0, 0, 255)").top.color == Color(0, 0, 255)

    @pytest.mark.parametrize("text", ["", "1px solid", "1px solid red extra"])
    def test_arity(self, text):
        with pytest.raises(ArityError):
            parse_border(text)

    def test_bad_style(self):
        with pytest.raises(KeywordError):
            parse_border("1px wavy red")

    def test_bad_single_style(self):
        with pytest.raises(KeywordError):
            parse_border("thick")

    def test_bad_thickness(self):
        with pytest.raises(ComponentError) as exc_info:
            parse_border("thick solid red")
        assert exc_info.value.component == "thickness"

    def test_negative_thickness(self):
        with pytest.raises(ComponentError) as exc_info:
            parse_border("-1px solid red")
        assert isinstance(exc_info.value.cause, NegativeValueError)

    def test_bad_color(self):
        with pytest.raises(ComponentError) as exc_info:
            parse_border("1px solid notacolor")
        assert exc_info.value.component == "color"
        assert exc_info.value.value == "notacolor"

    def test_with_radius(self):
        border = parse_border("2px solid black")
        rounded = border.with_radius(parse_border_radius("4px"))
        assert rounded.radius == CornerRadii.uniform(4.0)
        assert border.radius == CornerRadii.zero()
        assert rounded.top == border.top

    def test_to_css_round_trip(self):
        border = parse_border("5px solid #FF0000")
        assert border.to_css() == "5px solid #FF0000"
        assert parse_border(border.to_css()) == border

    def test_frozen(self):
        border = parse_border("solid")
        with pytest.raises(AttributeError):
            border.top = None  # type: ignore[misc]
        assert isinstance(border, Border)


class TestSourceTokens:
    def test_unclosed_color_function(self):
        with pytest.raises(ComponentError) as exc_info:
            parse_border("1px solid rgb(0, 0, 0")
        assert exc_info.value.component == "color"
        assert exc_info.value.value == "rgb(0, 0, 0"


class TestNegativeZero:
    def test_radius(self):
        radii = parse_border_radius("-0px")
        assert math.copysign(1.0, radii.top_left.width) == 1.0

    def test_thickness(self):
        border = parse_border("-0em solid red")
        assert math.copysign(1.0, border.widths.top) == 1.0
        assert border.to_css() == "0px solid #FF0000"
