"""
Length and percentage values.
"""

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import NumberError, UnitError

logger = logging.getLogger(__name__)

# Pixels per em when no font size is known
EM_HEIGHT = 16.0

# Leading run of sign, digits and decimal points; the rest is the unit
_LENGTH_RE = re.compile(r'^(?P<number>[-+]?[0-9.]*)(?P<unit>.*)$', re.DOTALL)


class LengthMetric(Enum):
    """Units a length can be expressed in."""
    PX = "px"
    EM = "em"


@dataclass(frozen=True)
class Length:
    """A number tagged with the rule used to resolve it to pixels."""

    metric: LengthMetric
    number: float

    def to_pixels(self, em_size: float = EM_HEIGHT) -> float:
        """
        Resolve the length to pixels.

        Args:
            em_size: Pixels per em for font-relative lengths

        Returns:
            The length in pixels, with -0 resolved to 0
        """
        if self.metric == LengthMetric.EM:
            return self.number * em_size + 0.0
        return self.number + 0.0

    def to_css(self) -> str:
        return f"{format_number(self.number)}{self.metric.value}"


def format_number(number: float) -> str:
    """Format a number the way it would be written in CSS ("15", "1.2")."""
    text = repr(round(float(number), 6))
    if text.endswith('.0'):
        text = text[:-2]
    if text == '-0':
        text = '0'
    return text


def parse_length(text: str) -> Length:
    """
    Parse a single length such as "15px" or "1.2em".

    Args:
        text: The length token

    Returns:
        The parsed Length

    Raises:
        UnitError: If the unit is neither px nor em
        NumberError: If the numeric part is not a valid number
    """
    match = _LENGTH_RE.match(text)
    number, unit = match.group('number'), match.group('unit')

    try:
        metric = LengthMetric(unit)
    except ValueError:
        raise UnitError(f"Unrecognized unit {unit!r} in {text!r}", unit) from None

    try:
        value = float(number)
    except ValueError:
        raise NumberError(f"Malformed number {number!r} in {text!r}", number) from None

    return Length(metric, value)


def parse_percentage(text: str) -> Optional[float]:
    """
    Parse a percentage such as "50%" into a fraction (0.5).

    Returns None rather than raising when the text is not a percentage, so
    callers can tell an absent percentage from a hard failure.
    """
    if not text.endswith('%'):
        return None

    try:
        value = float(text[:-1])
    except ValueError:
        logger.debug(f"Not a percentage: {text!r}")
        return None

    if not math.isfinite(value):
        return None

    return value / 100
