"""
Border, border-style and border-radius values.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum

from .color import BLACK, Color, parse_color
from .errors import (ArityError, ComponentError, CSSValueError, KeywordError,
                     NegativeValueError, TooManyValuesError)
from .length import EM_HEIGHT, format_number, parse_length
from .tokens import split_whitespace

logger = logging.getLogger(__name__)


class BorderStyle(Enum):
    """CSS border-style keywords."""
    NONE = "none"
    SOLID = "solid"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"
    HIDDEN = "hidden"
    GROOVE = "groove"
    RIDGE = "ridge"
    INSET = "inset"
    OUTSET = "outset"


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class CornerRadii:
    """Radii of the four corners of a box."""

    top_left: Size
    top_right: Size
    bottom_right: Size
    bottom_left: Size

    @classmethod
    def uniform(cls, radius: float) -> 'CornerRadii':
        size = Size(radius, radius)
        return cls(size, size, size, size)

    @classmethod
    def zero(cls) -> 'CornerRadii':
        return cls.uniform(0.0)

    def to_css(self) -> str:
        """Serialize as the four-value border-radius shorthand."""
        return " ".join(
            f"{format_number(size.width)}px"
            for size in (self.top_left, self.top_right, self.bottom_right, self.bottom_left)
        )


@dataclass(frozen=True)
class BorderWidths:
    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True)
class BorderSide:
    color: Color
    style: BorderStyle


@dataclass(frozen=True)
class Border:
    """
    A border with the same width, color and style on all four sides.

    The radius is zero unless set with ``with_radius``.
    """

    widths: BorderWidths
    top: BorderSide
    right: BorderSide
    bottom: BorderSide
    left: BorderSide
    radius: CornerRadii = CornerRadii.zero()

    def with_radius(self, radius: CornerRadii) -> 'Border':
        """
        Get a copy of the border with rounded corners.

        Args:
            radius: Corner radii, e.g. from parse_border_radius

        Returns:
            A new Border
        """
        return replace(self, radius=radius)

    def to_css(self) -> str:
        return (f"{format_number(self.widths.top)}px {self.top.style.value} "
                f"{self.top.color.to_css()}")


# Corner slots filled by each value of the shorthand, per number of values
_RADIUS_TEMPLATES = {
    1: (('top-left', 'top-right', 'bottom-right', 'bottom-left'),),
    2: (('top-left', 'bottom-right'), ('top-right', 'bottom-left')),
    3: (('top-left',), ('top-right', 'bottom-left'), ('bottom-right',)),
    4: (('top-left',), ('top-right',), ('bottom-right',), ('bottom-left',)),
}


def parse_border_style(text: str) -> BorderStyle:
    """Parse a border-style keyword such as "solid" or "dotted"."""
    try:
        return BorderStyle(text)
    except ValueError:
        raise KeywordError("border-style", text) from None


def _parse_pixels(text: str, component: str, em_size: float,
                  negative: bool = True) -> float:
    """Parse a length token to pixels, naming the slot on failure."""
    try:
        pixels = parse_length(text).to_pixels(em_size)
        if pixels < 0 and not negative:
            raise NegativeValueError(f"Negative value not allowed: {text!r}", text)
    except CSSValueError as e:
        raise ComponentError(component, e) from e
    return pixels


def parse_border_radius(text: str, em_size: float = EM_HEIGHT) -> CornerRadii:
    """
    Parse a border-radius shorthand such as "5px 10px" or "5px 10px 6px 10px".

    1 value sets all corners; 2 values set top-left/bottom-right then
    top-right/bottom-left; 3 values set top-left, top-right/bottom-left,
    bottom-right; 4 values set each corner clockwise from top-left.

    Args:
        text: The border-radius value
        em_size: Pixels per em

    Returns:
        The corner radii in pixels

    Raises:
        ArityError: If there is no value
        TooManyValuesError: If there are more than 4 values
        ComponentError: If a value is not a non-negative length
    """
    tokens = split_whitespace(text)

    if len(tokens) > 4:
        raise TooManyValuesError(f"Too many border-radius values: {text!r}", text)

    template = _RADIUS_TEMPLATES.get(len(tokens))
    if template is None:
        raise ArityError(f"Empty border-radius: {text!r}", text)

    corners = {}
    for token, slots in zip(tokens, template):
        radius = _parse_pixels(token, slots[0], em_size, negative=False)
        for slot in slots:
            corners[slot] = Size(radius, radius)

    return CornerRadii(
        top_left=corners['top-left'],
        top_right=corners['top-right'],
        bottom_right=corners['bottom-right'],
        bottom_left=corners['bottom-left'],
    )


def parse_border(text: str, em_size: float = EM_HEIGHT) -> Border:
    """
    Parse a border shorthand such as "5px solid red" or "double".

    A single value is the style, with a 1px black border.

    Args:
        text: The border value
        em_size: Pixels per em

    Returns:
        The Border, identical on all four sides

    Raises:
        ArityError: If there are not exactly 1 or 3 values
        KeywordError: If the style is not recognized
        ComponentError: If the thickness or color is invalid
    """
    tokens = split_whitespace(text)

    if len(tokens) == 1:
        thickness = 1.0
        style = parse_border_style(tokens[0])
        color = BLACK
    elif len(tokens) == 3:
        thickness = _parse_pixels(tokens[0], 'thickness', em_size, negative=False)
        style = parse_border_style(tokens[1])
        try:
            color = parse_color(tokens[2])
        except CSSValueError as e:
            raise ComponentError('color', e) from e
    else:
        raise ArityError(f"Invalid border declaration: {text!r}", text)

    logger.debug(f"Parsed border {text!r}: {thickness}px {style.value}")

    side = BorderSide(color=color, style=style)
    return Border(
        widths=BorderWidths(thickness, thickness, thickness, thickness),
        top=side,
        right=side,
        bottom=side,
        left=side,
    )
