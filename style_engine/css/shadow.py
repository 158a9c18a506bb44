"""
Box-shadow values.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .color import BLACK, Color, parse_color
from .errors import ArityError, ComponentError, CSSValueError, NegativeValueError
from .length import EM_HEIGHT, format_number, parse_length
from .tokens import split_whitespace

logger = logging.getLogger(__name__)


class ClipMode(Enum):
    """Whether the shadow is painted outside or inside the box."""
    OUTSET = "outset"
    INSET = "inset"


@dataclass(frozen=True)
class BoxShadow:
    offset_x: float = 0.0
    offset_y: float = 0.0
    color: Color = BLACK
    blur_radius: float = 0.0
    spread_radius: float = 0.0
    clip_mode: ClipMode = ClipMode.OUTSET

    def to_css(self) -> str:
        parts = [
            f"{format_number(self.offset_x)}px",
            f"{format_number(self.offset_y)}px",
            f"{format_number(self.blur_radius)}px",
            f"{format_number(self.spread_radius)}px",
            self.color.to_css(),
        ]
        if self.clip_mode == ClipMode.INSET:
            parts.append(ClipMode.INSET.value)
        return " ".join(parts)


# Meaning of each positional token, keyed by the number of tokens left
# once a trailing inset/outset keyword has been removed
_SHADOW_TEMPLATES = {
    2: ('offset_x', 'offset_y'),
    3: ('offset_x', 'offset_y', 'color'),
    4: ('offset_x', 'offset_y', 'blur_radius', 'color'),
    5: ('offset_x', 'offset_y', 'blur_radius', 'spread_radius', 'color'),
}

_MAX_SHADOW_TOKENS = 6


def _parse_component(field: str, token: str, em_size: float):
    try:
        if field == 'color':
            return parse_color(token)

        pixels = parse_length(token).to_pixels(em_size)
        if pixels < 0 and field in ('blur_radius', 'spread_radius'):
            raise NegativeValueError(f"Negative value not allowed: {token!r}", token)
        return pixels
    except CSSValueError as e:
        raise ComponentError(field.replace('_', '-'), e) from e


def parse_box_shadow(text: str, em_size: float = EM_HEIGHT) -> Optional[BoxShadow]:
    """
    Parse a box-shadow value.

    Examples:
        "none"                             -> None
        "5px 10px"                         -> offset only
        "5px 10px inset"                   -> inset, black
        "5px 10px 5px #888888 inset"       -> blur and color, inset
        "5px 10px 5px 10px #888888 inset"  -> everything

    Args:
        text: The box-shadow value
        em_size: Pixels per em

    Returns:
        The BoxShadow, or None for "none"

    Raises:
        ArityError: If the number of tokens matches no form
        ComponentError: If an offset, radius or color is invalid
    """
    tokens = split_whitespace(text)
    count = len(tokens)

    if count == 0 or count > _MAX_SHADOW_TOKENS:
        raise ArityError(f"Invalid number of box-shadow components: {text!r}", text)

    if count == 1:
        if tokens[0] == 'none':
            return None
        raise ArityError(f"Invalid single box-shadow value: {text!r}", text)

    values = {}
    if count > 2 and tokens[-1] in ('inset', 'outset'):
        values['clip_mode'] = ClipMode(tokens[-1])
        tokens = tokens[:-1]

    template = _SHADOW_TEMPLATES.get(len(tokens))
    if template is None:
        raise ArityError(f"Invalid box-shadow declaration: {text!r}", text)

    for field, token in zip(template, tokens):
        values[field] = _parse_component(field, token, em_size)

    logger.debug(f"Parsed box-shadow {text!r} with {sorted(values)}")
    return BoxShadow(**values)
