"""
Text Scanning

Three small scanners locate structure in store text without building a
parse tree:

- find_matching_bracket: end of a [...] span, by depth counting
- split_top_level: comma-separated segments, skipping commas nested in
  quotes, braces or brackets
- split_objects: the {...} spans inside an array body

find_matching_bracket and split_objects count brackets only and ignore
quotes. split_top_level tracks quotes; a quote directly preceded by a
backslash is an escaped quote and does not close a string, unless it
stands where a value ends (see is_escaped_quote). The encoder escapes
quotes only, so `"dir\\"` is read as the text `dir\\`.
"""

import re
from typing import Optional

QUOTE = '"'
ESCAPE = "\\"

# What may follow the closing quote of a value written by the encoder
_VALUE_END = re.compile(r'\s*(?:$|[}\]]|,\s*")')


def find_matching_bracket(text: str, start: int, open_char: str = "[", close_char: str = "]") -> Optional[int]:
    """
    Index of the bracket closing the one at `start`.

    Returns None when the depth never returns to zero before the text
    ends, or when `start` does not hold `open_char`.
    """
    if start < 0 or start >= len(text) or text[start] != open_char:
        return None

    depth = 0
    for i in range(start, len(text)):
        c = text[i]
        if c == open_char:
            depth += 1
        elif c == close_char:
            depth -= 1
            if depth == 0:
                return i
    return None


def locate_array(text: str, key: str) -> tuple[Optional[int], Optional[int]]:
    """
    Find the array span stored under a top-level key.

    The key is found by a plain search for `"<key>"` followed by a colon
    (so a record whose value happens to be the key name is not mistaken
    for it); the array starts at the next `[`. Returns (start, end)
    bracket indices; start is None when the key or its `[` is absent, end
    is None when the bracket is never closed.
    """
    match = re.search(rf'"{re.escape(key)}"\s*:', text)
    if match is None:
        return None, None
    start = text.find("[", match.end())
    if start < 0:
        return None, None
    return start, find_matching_bracket(text, start)


def is_escaped_quote(text: str, index: int) -> bool:
    """
    Whether the quote at `index`, inside a string, is an escaped quote.

    A quote after a backslash is escaped unless the text after it can only
    follow a finished value: the end of the text, a closing `}` or `]`, or
    a comma followed by the next quoted item. In that case the backslash is
    the last character of the value and the quote closes it.
    """
    if index == 0 or text[index - 1] != ESCAPE:
        return False
    return _VALUE_END.match(text, index + 1) is None


def split_top_level(text: str) -> list[str]:
    """
    Split on commas that are not inside quotes, braces or brackets.

    Segments are stripped of surrounding whitespace. A trailing separator
    does not produce an empty last segment; empty segments between two
    commas are kept so callers can decide what to do with them.

    Example:
        split_top_level('"a, b", "c,d"') == ['"a, b"', '"c,d"']
    """
    segments = []
    brace_depth = 0
    bracket_depth = 0
    in_quotes = False
    last_split = 0

    for i, c in enumerate(text):
        if c == QUOTE:
            if not in_quotes:
                in_quotes = True
                continue
            if not is_escaped_quote(text, i):
                in_quotes = False
            continue
        if in_quotes:
            continue

        if c == "{":
            brace_depth += 1
        elif c == "}":
            brace_depth -= 1
        elif c == "[":
            bracket_depth += 1
        elif c == "]":
            bracket_depth -= 1
        elif c == "," and brace_depth == 0 and bracket_depth == 0:
            segments.append(text[last_split:i].strip())
            last_split = i + 1

    tail = text[last_split:].strip()
    if tail:
        segments.append(tail)
    return segments


def split_objects(text: str) -> list[str]:
    """
    The top-level {...} spans of an array body, braces included.

    Text between objects (commas, whitespace, stray tokens) is ignored.
    An object left open at the end of the text is dropped.
    """
    objects = []
    start = -1
    depth = 0

    for i, c in enumerate(text):
        if c == "{":
            if depth == 0:
                start = i
            depth += 1
        elif c == "}":
            if depth == 0:
                continue
            depth -= 1
            if depth == 0 and start != -1:
                objects.append(text[start:i + 1].strip())
                start = -1
    return objects
