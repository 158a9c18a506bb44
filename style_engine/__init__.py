"""
Style Engine - CSS property values to typed descriptors for rendering.
"""

from style_engine.css import (CSSValueError, ValueParser, parse_border, parse_border_radius,
                              parse_box_shadow, parse_color, parse_gradient, parse_length)

# Package information
__version__ = "1.0.0"
__author__ = "Wink Browser Team"
__description__ = "CSS property value parsing for the Wink rendering pipeline"

__all__ = [
    'CSSValueError',
    'ValueParser',
    'parse_border',
    'parse_border_radius',
    'parse_box_shadow',
    'parse_color',
    'parse_gradient',
    'parse_length',
]
