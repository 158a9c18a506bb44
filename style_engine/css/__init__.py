"""
CSS value parsing.
This package turns property value strings into typed, render-ready descriptors.
"""

from .border import (Border, BorderSide, BorderStyle, BorderWidths, CornerRadii, Size,
                     parse_border, parse_border_radius, parse_border_style)
from .color import NAMED_COLORS, Color, parse_color, parse_hex_color
from .direction import (DEFAULT_DIRECTION, Direction, DirectionCorner, Shape,
                        parse_direction, parse_direction_corner, parse_shape)
from .errors import CSSValueError
from .gradient import (ExtendMode, GradientParser, GradientStop, LinearGradient,
                       RadialGradient, normalize_stop_offsets, parse_gradient,
                       parse_gradient_stop)
from .length import EM_HEIGHT, Length, LengthMetric, parse_length, parse_percentage
from .parser import UnknownPropertyError, ValueParser
from .shadow import BoxShadow, ClipMode, parse_box_shadow

__all__ = [
    'Border', 'BorderSide', 'BorderStyle', 'BorderWidths', 'CornerRadii', 'Size',
    'parse_border', 'parse_border_radius', 'parse_border_style',
    'NAMED_COLORS', 'Color', 'parse_color', 'parse_hex_color',
    'DEFAULT_DIRECTION', 'Direction', 'DirectionCorner', 'Shape',
    'parse_direction', 'parse_direction_corner', 'parse_shape',
    'CSSValueError',
    'ExtendMode', 'GradientParser', 'GradientStop', 'LinearGradient', 'RadialGradient',
    'normalize_stop_offsets', 'parse_gradient', 'parse_gradient_stop',
    'EM_HEIGHT', 'Length', 'LengthMetric', 'parse_length', 'parse_percentage',
    'UnknownPropertyError', 'ValueParser',
    'BoxShadow', 'ClipMode', 'parse_box_shadow',
]
