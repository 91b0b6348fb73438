"""
Generic Store Parser

First of the two decode layers: turns store text into plain Python values
(one list of field mappings per top-level collection) without knowing
anything about articles, wallets or transactions. The record assembler
maps those values onto typed records.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from ledgerstore.codec.scanner import (
    QUOTE,
    locate_array,
    split_objects,
    split_top_level,
)
from ledgerstore.codec.values import Value, coerce_value, unescape_text


class CollectionStatus(str, Enum):
    """How a top-level collection was found in the text."""
    PRESENT = "present"
    MISSING = "missing"        # Key absent
    UNBALANCED = "unbalanced"  # Key present, array never closed


class ParsedCollection(BaseModel):
    """One top-level collection as generic field mappings."""

    key: str
    status: CollectionStatus
    start: Optional[int] = Field(
        default=None,
        description="Index of the opening bracket, when found"
    )
    objects: list[dict[str, Any]] = Field(default_factory=list)


def parse_key(fragment: str) -> str:
    key = fragment.strip()
    if len(key) >= 2 and key.startswith(QUOTE) and key.endswith(QUOTE):
        key = key[1:-1]
    return unescape_text(key)


def parse_object(span: str) -> dict[str, Value]:
    """
    Field mapping of one `{...}` span.

    Segments without a colon are ignored; the key is everything before the
    first colon. A repeated key keeps its last value.
    """
    body = span.strip()
    if body.startswith("{"):
        body = body[1:]
    if body.endswith("}"):
        body = body[:-1]

    fields: dict[str, Value] = {}
    for pair in split_top_level(body):
        colon = pair.find(":")
        if colon < 0:
            continue
        fields[parse_key(pair[:colon])] = coerce_value(pair[colon + 1:])
    return fields


def parse_collection(text: str, key: str) -> ParsedCollection:
    """
    Locate the array stored under `key` and parse every object in it.

    A missing key and an unclosed bracket both yield an empty collection;
    the status tells them apart.
    """
    start, end = locate_array(text, key)
    if start is None:
        return ParsedCollection(key=key, status=CollectionStatus.MISSING)
    if end is None:
        return ParsedCollection(key=key, status=CollectionStatus.UNBALANCED, start=start)

    return ParsedCollection(
        key=key,
        status=CollectionStatus.PRESENT,
        start=start,
        objects=[parse_object(span) for span in split_objects(text[start + 1:end])],
    )


def parse_document(text: str, keys: tuple[str, ...]) -> dict[str, ParsedCollection]:
    """Parse each of `keys`, in order, from the same text."""
    return {key: parse_collection(text, key) for key in keys}
