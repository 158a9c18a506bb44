"""
CSS color parsing.

Colors are 8-bit sRGB with an alpha channel. Accepted forms are hex
literals, the standard color names and the rgb()/rgba() functions.
"""

import re
import string
import types
from dataclasses import dataclass
from typing import Tuple

import tinycss2

from .errors import ColorComponentError, ColorError


# Standard color names, listed once in CamelCase. The hyphenated lower-case
# spelling ("alice-blue") is derived from these when the table is built.
_COLOR_NAMES = {
    'AliceBlue': 'F0F8FF',
    'AntiqueWhite': 'FAEBD7',
    'Aqua': '00FFFF',
    'Aquamarine': '7FFFD4',
    'Azure': 'F0FFFF',
    'Beige': 'F5F5DC',
    'Bisque': 'FFE4C4',
    'Black': '000000',
    'BlanchedAlmond': 'FFEBCD',
    'Blue': '0000FF',
    'BlueViolet': '8A2BE2',
    'Brown': 'A52A2A',
    'BurlyWood': 'DEB887',
    'CadetBlue': '5F9EA0',
    'Chartreuse': '7FFF00',
    'Chocolate': 'D2691E',
    'Coral': 'FF7F50',
    'CornflowerBlue': '6495ED',
    'Cornsilk': 'FFF8DC',
    'Crimson': 'DC143C',
    'Cyan': '00FFFF',
    'DarkBlue': '00008B',
    'DarkCyan': '008B8B',
    'DarkGoldenRod': 'B8860B',
    'DarkGray': 'A9A9A9',
    'DarkGrey': 'A9A9A9',
    'DarkGreen': '006400',
    'DarkKhaki': 'BDB76B',
    'DarkMagenta': '8B008B',
    'DarkOliveGreen': '556B2F',
    'DarkOrange': 'FF8C00',
    'DarkOrchid': '9932CC',
    'DarkRed': '8B0000',
    'DarkSalmon': 'E9967A',
    'DarkSeaGreen': '8FBC8F',
    'DarkSlateBlue': '483D8B',
    'DarkSlateGray': '2F4F4F',
    'DarkSlateGrey': '2F4F4F',
    'DarkTurquoise': '00CED1',
    'DarkViolet': '9400D3',
    'DeepPink': 'FF1493',
    'DeepSkyBlue': '00BFFF',
    'DimGray': '696969',
    'DimGrey': '696969',
    'DodgerBlue': '1E90FF',
    'FireBrick': 'B22222',
    'FloralWhite': 'FFFAF0',
    'ForestGreen': '228B22',
    'Fuchsia': 'FF00FF',
    'Gainsboro': 'DCDCDC',
    'GhostWhite': 'F8F8FF',
    'Gold': 'FFD700',
    'GoldenRod': 'DAA520',
    'Gray': '808080',
    'Grey': '808080',
    'Green': '008000',
    'GreenYellow': 'ADFF2F',
    'HoneyDew': 'F0FFF0',
    'HotPink': 'FF69B4',
    'IndianRed': 'CD5C5C',
    'Indigo': '4B0082',
    'Ivory': 'FFFFF0',
    'Khaki': 'F0E68C',
    'Lavender': 'E6E6FA',
    'LavenderBlush': 'FFF0F5',
    'LawnGreen': '7CFC00',
    'LemonChiffon': 'FFFACD',
    'LightBlue': 'ADD8E6',
    'LightCoral': 'F08080',
    'LightCyan': 'E0FFFF',
    'LightGoldenRodYellow': 'FAFAD2',
    'LightGray': 'D3D3D3',
    'LightGrey': 'D3D3D3',
    'LightGreen': '90EE90',
    'LightPink': 'FFB6C1',
    'LightSalmon': 'FFA07A',
    'LightSeaGreen': '20B2AA',
    'LightSkyBlue': '87CEFA',
    'LightSlateGray': '778899',
    'LightSlateGrey': '778899',
    'LightSteelBlue': 'B0C4DE',
    'LightYellow': 'FFFFE0',
    'Lime': '00FF00',
    'LimeGreen': '32CD32',
    'Linen': 'FAF0E6',
    'Magenta': 'FF00FF',
    'Maroon': '800000',
    'MediumAquaMarine': '66CDAA',
    'MediumBlue': '0000CD',
    'MediumOrchid': 'BA55D3',
    'MediumPurple': '9370DB',
    'MediumSeaGreen': '3CB371',
    'MediumSlateBlue': '7B68EE',
    'MediumSpringGreen': '00FA9A',
    'MediumTurquoise': '48D1CC',
    'MediumVioletRed': 'C71585',
    'MidnightBlue': '191970',
    'MintCream': 'F5FFFA',
    'MistyRose': 'FFE4E1',
    'Moccasin': 'FFE4B5',
    'NavajoWhite': 'FFDEAD',
    'Navy': '000080',
    'OldLace': 'FDF5E6',
    'Olive': '808000',
    'OliveDrab': '6B8E23',
    'Orange': 'FFA500',
    'OrangeRed': 'FF4500',
    'Orchid': 'DA70D6',
    'PaleGoldenRod': 'EEE8AA',
    'PaleGreen': '98FB98',
    'PaleTurquoise': 'AFEEEE',
    'PaleVioletRed': 'DB7093',
    'PapayaWhip': 'FFEFD5',
    'PeachPuff': 'FFDAB9',
    'Peru': 'CD853F',
    'Pink': 'FFC0CB',
    'Plum': 'DDA0DD',
    'PowderBlue': 'B0E0E6',
    'Purple': '800080',
    'RebeccaPurple': '663399',
    'Red': 'FF0000',
    'RosyBrown': 'BC8F8F',
    'RoyalBlue': '4169E1',
    'SaddleBrown': '8B4513',
    'Salmon': 'FA8072',
    'SandyBrown': 'F4A460',
    'SeaGreen': '2E8B57',
    'SeaShell': 'FFF5EE',
    'Sienna': 'A0522D',
    'Silver': 'C0C0C0',
    'SkyBlue': '87CEEB',
    'SlateBlue': '6A5ACD',
    'SlateGray': '708090',
    'SlateGrey': '708090',
    'Snow': 'FFFAFA',
    'SpringGreen': '00FF7F',
    'SteelBlue': '4682B4',
    'Tan': 'D2B48C',
    'Teal': '008080',
    'Thistle': 'D8BFD8',
    'Tomato': 'FF6347',
    'Turquoise': '40E0D0',
    'Violet': 'EE82EE',
    'Wheat': 'F5DEB3',
    'White': 'FFFFFF',
    'WhiteSmoke': 'F5F5F5',
    'Yellow': 'FFFF00',
    'YellowGreen': '9ACD32',
    'Transparent': '00000000',
}


def _hyphenate(name: str) -> str:
    """AliceBlue -> alice-blue"""
    return re.sub(r'(?<!^)(?=[A-Z])', '-', name).lower()


def _build_named_colors():
    table = {}
    for name, hex_value in _COLOR_NAMES.items():
        table[name] = hex_value
        table[_hyphenate(name)] = hex_value
    return types.MappingProxyType(table)


# Read-only lookup of both spellings to their hex literal
NAMED_COLORS = _build_named_colors()


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA color."""

    r: int
    g: int
    b: int
    a: int = 255

    def to_css(self) -> str:
        """
        Convert the color to its canonical hex form.

        Returns:
            "#RRGGBB" for opaque colors, "#RRGGBBAA" otherwise
        """
        if self.a == 255:
            return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"

    def to_rgba_float(self) -> Tuple[float, float, float, float]:
        """Channels scaled to 0.0-1.0, as renderers consume them."""
        return (self.r / 255, self.g / 255, self.b / 255, self.a / 255)


BLACK = Color(0, 0, 0)


def parse_color(text: str) -> Color:
    """
    Parse any supported CSS color.

    "#00FF00", "lime", "Lime" and "rgb(0, 255, 0)" all give Color(0, 255, 0, 255).

    Args:
        text: The color token

    Returns:
        The parsed Color

    Raises:
        ColorError: If the color is not recognized
    """
    if text.startswith('#'):
        return parse_hex_color(text[1:])

    if '(' in text:
        return _parse_color_function(text)

    hex_value = NAMED_COLORS.get(text)
    if hex_value is None:
        raise ColorError(f"Invalid color: {text!r}", text)

    return parse_hex_color(hex_value)


def parse_hex_color(text: str) -> Color:
    """
    Parse a hex color without the leading hash.

    Args:
        text: 3, 4, 6 or 8 hex digits ("EEE", "F0F8FF00")

    Returns:
        The parsed Color

    Raises:
        ColorComponentError: If a character is not a hex digit
        ColorError: If the number of digits is not supported
    """
    for char in text:
        if char not in string.hexdigits:
            raise ColorComponentError(
                f"Invalid hex digit {char!r} in color {text!r}", char)

    if len(text) in (3, 4):
        # Each digit is doubled: "E" -> "EE"
        channels = [int(char * 2, 16) for char in text]
    elif len(text) in (6, 8):
        channels = [int(text[i:i + 2], 16) for i in range(0, len(text), 2)]
    else:
        raise ColorError(f"Invalid color: {text!r}", text)

    return Color(*channels)


def _parse_color_function(text: str) -> Color:
    """Parse rgb(r, g, b) or rgba(r, g, b, a)."""
    function = tinycss2.parse_one_component_value(text, skip_comments=True)
    if (function.type != 'function' or function.lower_name not in ('rgb', 'rgba')
            or not text.rstrip().endswith(')')):
        raise ColorError(f"Invalid color: {text!r}", text)

    args = [token for token in function.arguments if token.type != 'whitespace']
    values = args[::2]
    separators = args[1::2]

    if (len(values) not in (3, 4) or len(args) != 2 * len(values) - 1
            or any(sep.type != 'literal' or sep.value != ',' for sep in separators)):
        raise ColorError(f"Invalid color arguments: {text!r}", text)

    red, green, blue = (_color_channel(token, text) for token in values[:3])
    alpha = _alpha_channel(values[3], text) if len(values) == 4 else 255

    return Color(red, green, blue, alpha)


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def _color_channel(token, text: str) -> int:
    if token.type == 'number':
        return int(round(_clamp(token.value, 0, 255)))
    if token.type == 'percentage':
        return int(round(_clamp(token.value, 0, 100) * 255 / 100))
    raise ColorError(f"Invalid color channel in {text!r}", text)


def _alpha_channel(token, text: str) -> int:
    if token.type == 'number':
        return int(round(_clamp(token.value, 0, 1) * 255))
    if token.type == 'percentage':
        return int(round(_clamp(token.value, 0, 100) * 255 / 100))
    raise ColorError(f"Invalid alpha channel in {text!r}", text)
