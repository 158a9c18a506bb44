"""
CSS gradient parsing.
This module turns linear-gradient(), radial-gradient() and their repeating
variants into gradient descriptors with fully resolved color stops.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from .color import Color, parse_color
from .direction import DEFAULT_DIRECTION, Direction, Shape, parse_direction, parse_shape
from .errors import (ArityError, ComponentError, CSSValueError, EmptyValueError,
                     GradientError, TooFewStopsError, UnclosedGradientError,
                     UnknownGradientError)
from .length import format_number, parse_percentage
from .tokens import split_commas, split_whitespace

logger = logging.getLogger(__name__)


class ExtendMode(Enum):
    """What the gradient does outside its stop range."""
    CLAMP = "clamp"
    REPEAT = "repeat"


@dataclass(frozen=True)
class GradientStop:
    """
    A color stop in a gradient.

    ``offset`` is a fraction of the gradient line, or None when the source
    did not give one. Stops returned by parse_gradient always have one.
    """

    color: Color
    offset: Optional[float] = None

    def to_css(self) -> str:
        if self.offset is None:
            return self.color.to_css()
        return f"{self.color.to_css()} {format_number(self.offset * 100)}%"


class Gradient:
    """
    Base class for CSS gradients.
    """

    function_name = None

    def _function(self, extend_mode: 'ExtendMode') -> str:
        if extend_mode == ExtendMode.REPEAT:
            return f"repeating-{self.function_name}"
        return self.function_name

    def _stops_css(self, stops: Tuple[GradientStop, ...]) -> str:
        return ", ".join(stop.to_css() for stop in stops)


@dataclass(frozen=True)
class LinearGradient(Gradient):
    """
    Represents a CSS linear gradient.
    """

    direction: Direction
    extend_mode: ExtendMode
    stops: Tuple[GradientStop, ...]

    function_name = 'linear-gradient'

    def to_css(self) -> str:
        """
        Convert the linear gradient to a CSS string.

        Returns:
            CSS representation of the linear gradient
        """
        return (f"{self._function(self.extend_mode)}({self.direction.to_css()}, "
                f"{self._stops_css(self.stops)})")


@dataclass(frozen=True)
class RadialGradient(Gradient):
    """
    Represents a CSS radial gradient.
    """

    shape: Shape
    extend_mode: ExtendMode
    stops: Tuple[GradientStop, ...]

    function_name = 'radial-gradient'

    def to_css(self) -> str:
        """
        Convert the radial gradient to a CSS string.

        Returns:
            CSS representation of the radial gradient
        """
        return (f"{self._function(self.extend_mode)}({self.shape.value}, "
                f"{self._stops_css(self.stops)})")


# Function name -> (is linear, extend mode)
_GRADIENT_TYPES = {
    'linear-gradient': (True, ExtendMode.CLAMP),
    'repeating-linear-gradient': (True, ExtendMode.REPEAT),
    'radial-gradient': (False, ExtendMode.CLAMP),
    'repeating-radial-gradient': (False, ExtendMode.REPEAT),
}


def parse_gradient_stop(text: str) -> GradientStop:
    """
    Parse a color stop such as "red" or "red 5%".

    A second token that is not a percentage leaves the offset unspecified.

    Args:
        text: The color stop string

    Returns:
        GradientStop with an offset fraction, or None as offset

    Raises:
        EmptyValueError: If the stop is empty
        ArityError: If there are more than two tokens
        ColorError: If the color is invalid
    """
    tokens = split_whitespace(text)

    if not tokens:
        raise EmptyValueError("Empty color stop", text)
    if len(tokens) > 2:
        raise ArityError(f"Too many tokens in color stop: {text!r}", text)

    color = parse_color(tokens[0])
    offset = parse_percentage(tokens[1]) if len(tokens) == 2 else None

    return GradientStop(color, offset)


def normalize_stop_offsets(stops: Iterable[GradientStop],
                           trailing_stop_at_end: bool = False) -> Tuple[GradientStop, ...]:
    """
    Give every color stop an offset.

    Explicit offsets are clamped to [0, 1] and never decrease along the list.
    An unspecified first stop is placed at 0 and an unspecified last stop at
    1; every other run of unspecified stops is spread evenly between the
    known stops around it.

    A last stop without an offset that directly follows a stop with an
    explicit one takes that stop's offset instead of 1, unless
    ``trailing_stop_at_end`` is set.

    Args:
        stops: Color stops in source order
        trailing_stop_at_end: Place such a last stop at 1 as well

    Returns:
        The stops with offsets filled in
    """
    stops = tuple(stops)
    count = len(stops)
    if not count:
        return stops

    offsets = []
    last_known = 0.0
    for stop in stops:
        if stop.offset is None:
            offsets.append(None)
        else:
            last_known = max(last_known, min(1.0, stop.offset))
            offsets.append(last_known)

    if offsets[0] is None:
        offsets[0] = 0.0

    if offsets[-1] is None:
        if count > 1 and stops[-2].offset is not None and not trailing_stop_at_end:
            offsets[-1] = offsets[-2]
        else:
            offsets[-1] = 1.0

    index = 1
    while index < count:
        if offsets[index] is not None:
            index += 1
            continue

        # offsets[index - 1] is known, find the next known one
        start = index - 1
        end = index
        while offsets[end] is None:
            end += 1

        step = (offsets[end] - offsets[start]) / (end - start)
        for position in range(index, end):
            offsets[position] = offsets[start] + step * (position - start)
        index = end

    return tuple(replace(stop, offset=offset) for stop, offset in zip(stops, offsets))


class GradientParser:
    """
    Parser for CSS gradients.
    """

    def __init__(self, trailing_stop_at_end: bool = False):
        """
        Initialize the gradient parser.

        Args:
            trailing_stop_at_end: See normalize_stop_offsets
        """
        self.trailing_stop_at_end = trailing_stop_at_end

    def parse(self, gradient_str: str) -> Union[LinearGradient, RadialGradient]:
        """
        Parse a CSS gradient string.

        Args:
            gradient_str: The gradient string to parse

        Returns:
            Parsed LinearGradient or RadialGradient

        Raises:
            UnknownGradientError: If the text is not one of the gradient functions
            UnclosedGradientError: If the closing parenthesis is missing
            TooFewStopsError: If fewer than two color stops are given
            ComponentError: If a color stop is invalid
        """
        gradient_str = gradient_str.strip()

        name, paren, rest = gradient_str.partition('(')
        gradient_type = _GRADIENT_TYPES.get(name.strip())
        if gradient_type is None or not paren:
            raise UnknownGradientError(f"Invalid gradient: {gradient_str!r}",
                                       name if paren else gradient_str)

        close = rest.rfind(')')
        if close == -1:
            raise UnclosedGradientError(f"Unclosed gradient: {gradient_str!r}", gradient_str)
        if rest[close + 1:].strip():
            raise GradientError(f"Unexpected text after gradient: {gradient_str!r}",
                                rest[close + 1:].strip())

        is_linear, extend_mode = gradient_type
        parts = split_commas(rest[:close])

        if is_linear:
            direction = self._sniff(parse_direction, parts[0])
            if direction is None:
                direction = DEFAULT_DIRECTION
            else:
                parts = parts[1:]
            stops = self._parse_stops(parts, gradient_str)
            return LinearGradient(direction, extend_mode, stops)

        shape = self._sniff(parse_shape, parts[0])
        if shape is None:
            shape = Shape.ELLIPSE
        else:
            parts = parts[1:]
        stops = self._parse_stops(parts, gradient_str)
        return RadialGradient(shape, extend_mode, stops)

    def _sniff(self, parse, part: str):
        """Parse the first part as a direction or shape, or return None."""
        try:
            return parse(part)
        except CSSValueError as e:
            logger.debug(f"{part!r} is not a gradient prefix, treating it as a stop: {e}")
            return None

    def _parse_stops(self, parts, gradient_str: str) -> Tuple[GradientStop, ...]:
        if len(parts) < 2:
            raise TooFewStopsError(f"Gradient needs at least two color stops: {gradient_str!r}",
                                   gradient_str)

        stops = []
        for number, part in enumerate(parts, 1):
            try:
                stops.append(parse_gradient_stop(part))
            except CSSValueError as e:
                raise ComponentError(f"stop {number}", e) from e

        return normalize_stop_offsets(stops, self.trailing_stop_at_end)


def parse_gradient(text: str, trailing_stop_at_end: bool = False) -> Union[LinearGradient, RadialGradient]:
    """
    Parse a background gradient, such as "linear-gradient(red, green)".

    See GradientParser.parse.
    """
    return GradientParser(trailing_stop_at_end).parse(text)
