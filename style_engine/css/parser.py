"""
Property value parser.
This module maps CSS property names to the value parsers, for a styling
stage that hands over one declaration value at a time.
"""

import logging
from typing import Any, Callable, Dict, Optional

from .border import parse_border, parse_border_radius, parse_border_style
from .color import parse_color
from .errors import CSSValueError
from .gradient import parse_gradient
from .length import parse_length
from .shadow import parse_box_shadow
from ..utils.config import Config

logger = logging.getLogger(__name__)

_GRADIENT_PREFIXES = ('linear-gradient(', 'repeating-linear-gradient(',
                      'radial-gradient(', 'repeating-radial-gradient(')


class UnknownPropertyError(KeyError):
    """Raised for a property name the parser has no value parser for."""


class ValueParser:
    """
    Parser for CSS property values.

    Settings come from a Config: ``units.em_size`` resolves em lengths in
    borders, radii and shadows, ``gradients.trailing_stop_at_end`` is passed
    to the gradient stop normalization.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the value parser.

        Args:
            config: Configuration, defaults are used when omitted
        """
        self.config = config or Config()

        self._parsers: Dict[str, Callable[[str], Any]] = {
            'color': parse_color,
            'background-color': parse_color,
            'border-color': parse_color,
            'width': parse_length,
            'height': parse_length,
            'border-width': parse_length,
            'font-size': parse_length,
            'border-style': parse_border_style,
            'border': self._parse_border,
            'border-top': self._parse_border,
            'border-right': self._parse_border,
            'border-bottom': self._parse_border,
            'border-left': self._parse_border,
            'border-radius': self._parse_border_radius,
            'box-shadow': self._parse_box_shadow,
            'background-image': self._parse_gradient,
            'background': self._parse_background,
        }

        logger.debug(f"Value parser initialized with {len(self._parsers)} properties")

    @property
    def recognized_properties(self):
        """Names of the properties that can be parsed."""
        return frozenset(self._parsers)

    @property
    def em_size(self) -> float:
        return float(self.config.get('units.em_size', 16.0))

    def parse(self, property_name: str, value: str) -> Any:
        """
        Parse the value of a property.

        Args:
            property_name: CSS property name, e.g. 'box-shadow'
            value: The declaration value

        Returns:
            The parsed descriptor (None for "box-shadow: none")

        Raises:
            UnknownPropertyError: If the property is not recognized
            CSSValueError: If the value is invalid
        """
        parser = self._parsers.get(property_name.strip().lower())
        if parser is None:
            raise UnknownPropertyError(property_name)

        return parser(value.strip())

    def parse_or_default(self, property_name: str, value: str, default: Any = None) -> Any:
        """
        Parse the value of a property, falling back to a default when invalid.

        Args:
            property_name: CSS property name
            value: The declaration value
            default: Value returned when the declaration cannot be parsed

        Returns:
            The parsed descriptor or the default
        """
        try:
            return self.parse(property_name, value)
        except CSSValueError as e:
            logger.warning(f"Ignoring invalid {property_name} value {value!r}: {e}")
            return default

    def _parse_border(self, value: str):
        return parse_border(value, em_size=self.em_size)

    def _parse_border_radius(self, value: str):
        return parse_border_radius(value, em_size=self.em_size)

    def _parse_box_shadow(self, value: str):
        return parse_box_shadow(value, em_size=self.em_size)

    def _parse_gradient(self, value: str):
        trailing_stop_at_end = bool(self.config.get('gradients.trailing_stop_at_end', False))
        return parse_gradient(value, trailing_stop_at_end=trailing_stop_at_end)

    def _parse_background(self, value: str):
        if value.startswith(_GRADIENT_PREFIXES):
            return self._parse_gradient(value)
        return parse_color(value)
