"""
Exceptions raised by the CSS value parsers.

Every parse failure is a CSSValueError carrying the offending text in
``value``. Composite parsers wrap the failure of a sub-parser in a
ComponentError that names the slot which failed.
"""

from typing import Optional


class CSSValueError(ValueError):
    """Base class for all value parsing errors."""

    def __init__(self, message: str, value: Optional[str] = None):
        self.value = value
        super().__init__(message)


# Arity errors

class ArityError(CSSValueError):
    """Wrong number of tokens for a fixed-arity grammar."""


class TooManyValuesError(ArityError):
    """More components than the grammar accepts."""


# Lexical errors

class UnitError(CSSValueError):
    """Unrecognized unit suffix."""


class NumberError(CSSValueError):
    """Malformed numeric literal."""


class KeywordError(CSSValueError):
    """Unrecognized keyword.

    ``kind`` names the keyword family, e.g. ``"border-style"``.
    """

    def __init__(self, kind: str, value: str):
        self.kind = kind
        super().__init__(f"Invalid {kind} keyword: {value!r}", value)


class ColorError(CSSValueError):
    """Unrecognized color name or malformed color literal."""


class ColorComponentError(ColorError):
    """Non-hex character inside a hex color literal."""


class NegativeValueError(CSSValueError):
    """Negative value where only non-negative values are allowed."""


class EmptyValueError(CSSValueError):
    """Empty value where a token was expected."""


# Semantic errors

class GradientError(CSSValueError):
    """Base class for gradient structure errors."""


class UnknownGradientError(GradientError):
    """Not one of the four gradient functions."""


class UnclosedGradientError(GradientError):
    """Gradient function without a closing parenthesis."""


class TooFewStopsError(GradientError):
    """Fewer than two color stops."""


class MissingDirectionError(CSSValueError):
    """``to`` not followed by a side keyword."""


# Composite errors

class ComponentError(CSSValueError):
    """A sub-parser failed inside a composite parser.

    Attributes:
        component: Name of the slot that failed (e.g. ``"color"``, ``"top-left"``)
        cause: The original error
    """

    def __init__(self, component: str, cause: CSSValueError):
        self.component = component
        self.cause = cause
        super().__init__(f"Invalid {component}: {cause}", cause.value)
