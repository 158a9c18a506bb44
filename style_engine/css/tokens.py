"""
Splitting of property values into tokens.

Values are tokenized with tinycss2 so that whitespace and commas nested
inside functions such as ``rgb(1, 2, 3)`` do not split a token. Each token
is cut out of the source text as written, so an unclosed ``rgb(`` stays
unclosed for the parser that receives it.
"""

from typing import List

import tinycss2


def _normalize(value: str) -> str:
    # Same newline and NUL handling as the tinycss2 tokenizer, so that node
    # positions index into the returned text
    return (value.replace('\0', '\uFFFD')
            .replace('\r\n', '\n').replace('\r', '\n').replace('\f', '\n'))


class _Source:
    """Maps tinycss2 node positions back to offsets in the source text."""

    def __init__(self, value: str):
        self.text = _normalize(value)
        self._line_starts = [0]
        for index, char in enumerate(self.text):
            if char == '\n':
                self._line_starts.append(index + 1)

    def offset(self, node) -> int:
        return self._line_starts[node.source_line - 1] + node.source_column - 1

    def nodes(self):
        return tinycss2.parse_component_value_list(self.text, skip_comments=True)


def _split(value: str, is_separator) -> List[str]:
    source = _Source(value)
    pieces = []
    start = 0

    for node in source.nodes():
        if is_separator(node):
            offset = source.offset(node)
            pieces.append(source.text[start:offset])
            start = offset + len(node.value)

    pieces.append(source.text[start:])
    return pieces


def _strip_comments(text: str) -> str:
    # Comments inside a token ("1px/* x */solid" is not split) are dropped
    # from its text the same way the tokenizer drops them
    while '/*' in text:
        head, _, rest = text.partition('/*')
        _, closed, tail = rest.partition('*/')
        text = head + tail if closed else head
    return text


def split_whitespace(value: str) -> List[str]:
    """
    Split a value on top-level whitespace.

    Args:
        value: The value string, e.g. ``"5px 10px #888888 inset"``

    Returns:
        The tokens in order, as written in the value
    """
    pieces = _split(value, lambda node: node.type == 'whitespace')
    tokens = [_strip_comments(piece).strip() for piece in pieces]
    return [token for token in tokens if token]


def split_commas(value: str) -> List[str]:
    """
    Split a value on top-level commas.

    An empty value gives a single empty segment, like ``str.split``.

    Args:
        value: The value string, e.g. ``"to right, red, rgb(0, 0, 255) 50%"``

    Returns:
        The stripped comma-separated segments in order
    """
    pieces = _split(value, lambda node: node.type == 'literal' and node.value == ',')
    return [_strip_comments(piece).strip() for piece in pieces]
