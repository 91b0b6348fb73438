"""
Value Coercion

Classifies one raw fragment (the right-hand side of a `key: value` pair,
or one array element) and converts it to a Python value.

Order of checks matters:
1. "quoted"  -> str (escaped quotes restored)
2. [list]    -> list[str]
3. number    -> float
4. anything else is kept verbatim as str

An array literal never reaches the numeric check, and a quoted numeric
string such as "123" stays a string.
"""

import re
from typing import Union

from ledgerstore.codec.scanner import ESCAPE, QUOTE, split_top_level

Value = Union[str, float, list[str]]

_ESCAPED_QUOTE = ESCAPE + QUOTE

# Plain decimals, with the exponent repr() uses for very large or small values
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def escape_text(text: str) -> str:
    """Replace every quote with backslash-quote. Nothing else is escaped."""
    return text.replace(QUOTE, _ESCAPED_QUOTE)


def unescape_text(text: str) -> str:
    return text.replace(_ESCAPED_QUOTE, QUOTE)


def is_quoted(fragment: str) -> bool:
    return len(fragment) >= 2 and fragment.startswith(QUOTE) and fragment.endswith(QUOTE)


def parse_number(fragment: str):
    """
    float value of the fragment, or None when it is not a number.

    Only decimal text counts; `inf`, `nan` and `1_000` stay text.
    """
    fragment = fragment.strip()
    if not _NUMBER.fullmatch(fragment):
        return None
    return float(fragment)


def coerce_list(fragment: str) -> list[str]:
    """
    Items of a `[...]` fragment as strings.

    Quoted items are unquoted and unescaped, bare items are kept as text.
    Blank bare items (from `a,,b` or a trailing comma) are dropped; a
    quoted empty string "" is kept.
    """
    items = []
    for item in split_top_level(fragment[1:-1]):
        if is_quoted(item):
            items.append(unescape_text(item[1:-1]))
        elif item:
            items.append(item)
    return items


def coerce_value(fragment: str) -> Value:
    fragment = fragment.strip()

    if is_quoted(fragment):
        return unescape_text(fragment[1:-1])

    if fragment.startswith("[") and fragment.endswith("]"):
        return coerce_list(fragment)

    number = parse_number(fragment)
    if number is not None:
        return number

    return fragment


def format_number(value: float) -> str:
    """
    Text form of a number in the store.

    repr() is the shortest text that parses back to the same float.
    """
    return repr(float(value))
