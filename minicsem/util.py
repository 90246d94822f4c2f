"""Text helpers shared by the lexical and semantic stages."""

from __future__ import annotations

from collections.abc import Iterable

_SPECIAL_CHARS = {
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "v": "\v",
    "f": "\f",
    "r": "\r",
}

_DATA_SIZES = {
    "VOID": 0,
    "CHAR": 1,
    "INT": 4,
    "FLOAT": 4,
    "DOUBLE": 8,
}

_SPACE_AFTER = frozenset({"type_specifier", "ELSE", "RETURN"})
_NEWLINE_AFTER = frozenset({"LCURL", "unit", "statement"})


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``."""
    return "".join(c.upper() if c.isascii() else c for c in text)


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``."""
    return "".join(c.lower() if c.isascii() else c for c in text)


def special_char(c: str) -> str:
    """Return the character an escape sequence ``\\c`` stands for."""
    return _SPECIAL_CHARS.get(c, c)


def actual_char(symbol: str) -> str:
    """Return the character a quoted character literal such as ``'\\n'`` denotes."""
    if symbol[1] != "\\":
        return symbol[1]
    return special_char(symbol[2])


def _char_at(text: str, index: int) -> str:
    return text[index : index + 1]


def _count_escaped_newlines(text: str, start: int, stop: int) -> int:
    """Count lines joined by backslash-newline, scanning from ``start`` up to ``stop``."""
    count = 1
    i = start
    while i < stop:
        if text[i] == "\\":
            i += 1
            following = _char_at(text, i)
            if following in ("\r", "\n"):
                if following == "\r":
                    i += 1
                count += 1
        i += 1
    return count


def string_line_count(text: str) -> int:
    """Number of source lines a quoted string literal spans."""
    return _count_escaped_newlines(text, 1, len(text) - 1)


def single_comment_line_count(text: str) -> int:
    """Number of source lines a ``//`` comment spans (continued with backslashes)."""
    return _count_escaped_newlines(text, 0, len(text))


def multi_comment_line_count(text: str) -> int:
    """Number of source lines a ``/* */`` comment spans."""
    count = 1
    i = 0
    while i < len(text):
        if text[i] in ("\r", "\n"):
            if text[i] == "\r":
                i += 1
            count += 1
        i += 1
    return count


def actual_string(text: str) -> str:
    """Return the value of a quoted string literal, with escapes resolved."""
    parts: list[str] = []
    stop = len(text) - 1
    i = 1
    while i < stop:
        if text[i] == "\\":
            i += 1
            following = _char_at(text, i)
            if following in ("\r", "\n"):
                if following == "\r":
                    i += 1
            else:
                parts.append(special_char(following))
        else:
            parts.append(text[i])
        i += 1
    return "".join(parts)


def format_code(tokens: Iterable) -> str:
    """Join the names of ``tokens`` into a code fragment."""
    pieces: list[str] = []
    for token in tokens:
        pieces.append(token.name)
        if token.type in _SPACE_AFTER:
            pieces.append(" ")
        elif token.type in _NEWLINE_AFTER:
            pieces.append("\n")
    return "".join(pieces)


def data_size(type_name: str) -> int:
    """Size in bytes of a data type name, or -1 for anything unknown."""
    return _DATA_SIZES.get(type_name, -1)