"""
Gradient directions and radial shapes.

A linear gradient runs along an angle ("50deg") or between two sides or
corners of the box ("to bottom right"). Radial gradients take a shape.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .errors import ArityError, KeywordError, MissingDirectionError, NumberError
from .length import format_number


class DirectionCorner(Enum):
    """A side or corner of a box."""
    RIGHT = "right"
    LEFT = "left"
    TOP = "top"
    BOTTOM = "bottom"
    TOP_RIGHT = "top right"
    TOP_LEFT = "top left"
    BOTTOM_RIGHT = "bottom right"
    BOTTOM_LEFT = "bottom left"

    def opposite(self) -> 'DirectionCorner':
        """Reflect the side or corner across the centre of the box."""
        return _OPPOSITES[self]

    def combine(self, other: 'DirectionCorner') -> Optional['DirectionCorner']:
        """
        Combine two adjacent sides into the corner between them.

        Args:
            other: The other side

        Returns:
            The corner, or None if the two are not perpendicular sides
        """
        return _COMBINATIONS.get(frozenset((self, other)))

    def to_point(self, x: float, y: float, width: float, height: float) -> Tuple[float, float]:
        """
        Get the point of a rectangle this side or corner refers to.

        Screen coordinates: y grows downwards, (x, y) is the top-left corner.

        Returns:
            (x, y) of the side midpoint or the corner
        """
        center_x = x + width / 2
        center_y = y + height / 2
        return {
            DirectionCorner.RIGHT: (x + width, center_y),
            DirectionCorner.LEFT: (x, center_y),
            DirectionCorner.TOP: (center_x, y),
            DirectionCorner.BOTTOM: (center_x, y + height),
            DirectionCorner.TOP_RIGHT: (x + width, y),
            DirectionCorner.TOP_LEFT: (x, y),
            DirectionCorner.BOTTOM_RIGHT: (x + width, y + height),
            DirectionCorner.BOTTOM_LEFT: (x, y + height),
        }[self]


_OPPOSITES = {
    DirectionCorner.RIGHT: DirectionCorner.LEFT,
    DirectionCorner.LEFT: DirectionCorner.RIGHT,
    DirectionCorner.TOP: DirectionCorner.BOTTOM,
    DirectionCorner.BOTTOM: DirectionCorner.TOP,
    DirectionCorner.TOP_RIGHT: DirectionCorner.BOTTOM_LEFT,
    DirectionCorner.BOTTOM_LEFT: DirectionCorner.TOP_RIGHT,
    DirectionCorner.TOP_LEFT: DirectionCorner.BOTTOM_RIGHT,
    DirectionCorner.BOTTOM_RIGHT: DirectionCorner.TOP_LEFT,
}

# Unordered pairs of sides -> the corner they bound
_COMBINATIONS = {
    frozenset((DirectionCorner.RIGHT, DirectionCorner.TOP)): DirectionCorner.TOP_RIGHT,
    frozenset((DirectionCorner.LEFT, DirectionCorner.TOP)): DirectionCorner.TOP_LEFT,
    frozenset((DirectionCorner.RIGHT, DirectionCorner.BOTTOM)): DirectionCorner.BOTTOM_RIGHT,
    frozenset((DirectionCorner.LEFT, DirectionCorner.BOTTOM)): DirectionCorner.BOTTOM_LEFT,
}

_SIDES = {
    'right': DirectionCorner.RIGHT,
    'left': DirectionCorner.LEFT,
    'top': DirectionCorner.TOP,
    'bottom': DirectionCorner.BOTTOM,
}

# Angle unit -> factor to degrees. "grad" is checked before "rad".
_ANGLE_UNITS = (
    ('deg', 1.0),
    ('grad', 360.0 / 400.0),
    ('rad', 180.0 / math.pi),
)


@dataclass(frozen=True)
class Direction:
    """
    Direction of a linear gradient.

    Either ``degrees`` is set (an angle, 0deg points up, clockwise) or
    ``start`` and ``end`` are set (from one side or corner to the opposite).
    """

    degrees: Optional[float] = None
    start: Optional[DirectionCorner] = None
    end: Optional[DirectionCorner] = None

    @classmethod
    def angle(cls, degrees: float) -> 'Direction':
        return cls(degrees=degrees)

    @classmethod
    def from_to(cls, start: DirectionCorner, end: DirectionCorner) -> 'Direction':
        return cls(start=start, end=end)

    @property
    def is_angle(self) -> bool:
        return self.degrees is not None

    def to_css(self) -> str:
        if self.is_angle:
            return f"{format_number(self.degrees)}deg"
        return f"to {self.end.value}"

    def to_points(self, x: float, y: float, width: float,
                  height: float) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """
        Get the start and end points of the gradient line in a rectangle.

        Args:
            x: Left edge of the rectangle
            y: Top edge of the rectangle
            width: Width of the rectangle
            height: Height of the rectangle

        Returns:
            ((start_x, start_y), (end_x, end_y))
        """
        if not self.is_angle:
            return (self.start.to_point(x, y, width, height),
                    self.end.to_point(x, y, width, height))

        radians = math.radians(self.degrees)
        dx, dy = math.sin(radians), -math.cos(radians)
        half_length = (abs(width * dx) + abs(height * dy)) / 2
        center_x = x + width / 2
        center_y = y + height / 2
        return ((center_x - dx * half_length, center_y - dy * half_length),
                (center_x + dx * half_length, center_y + dy * half_length))


# Top to bottom, used when a linear gradient has no direction
DEFAULT_DIRECTION = Direction.from_to(DirectionCorner.TOP, DirectionCorner.BOTTOM)


class Shape(Enum):
    """Ending shape of a radial gradient."""
    CIRCLE = "circle"
    ELLIPSE = "ellipse"


def parse_direction_corner(text: str) -> DirectionCorner:
    """Parse one of "right", "left", "top" or "bottom"."""
    corner = _SIDES.get(text)
    if corner is None:
        raise KeywordError("direction", text)
    return corner


def parse_shape(text: str) -> Shape:
    """Parse "circle" or "ellipse"."""
    try:
        return Shape(text)
    except ValueError:
        raise KeywordError("shape", text) from None


def parse_direction(text: str) -> Direction:
    """
    Parse a gradient direction.

    Args:
        text: An angle ("50deg", "1.5rad", "100grad") or a side or corner
            ("to right", "to bottom right")

    Returns:
        The parsed Direction

    Raises:
        NumberError: If the angle is not a number
        KeywordError: If the text is not an angle and does not start with
            "to", or names an unknown or non-adjacent side
        MissingDirectionError: If "to" is not followed by a side
        ArityError: If more than two sides are given
    """
    words = text.split()
    if not words:
        raise MissingDirectionError(f"Missing direction: {text!r}", text)

    first = words[0]
    for unit, factor in _ANGLE_UNITS:
        if first.endswith(unit):
            if len(words) > 1:
                raise ArityError(f"Unexpected tokens after angle: {text!r}", text)
            number = first[:-len(unit)]
            try:
                degrees = float(number) * factor
            except ValueError:
                raise NumberError(f"Malformed angle {first!r}", first) from None
            if not math.isfinite(degrees):
                raise NumberError(f"Angle is not finite: {first!r}", first)
            return Direction.angle(degrees)

    if first != 'to':
        raise KeywordError("direction", first)

    if len(words) == 1:
        raise MissingDirectionError(f"Missing side after 'to': {text!r}", text)

    if len(words) > 3:
        raise ArityError(f"Too many sides in direction: {text!r}", text)

    end = parse_direction_corner(words[1])

    if len(words) == 3:
        # "to bottom right" -> BOTTOM_RIGHT, in either order
        corner = end.combine(parse_direction_corner(words[2]))
        if corner is None:
            raise KeywordError("direction", text)
        end = corner

    return Direction.from_to(end.opposite(), end)
