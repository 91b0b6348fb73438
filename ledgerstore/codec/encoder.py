"""
Document Encoder

Renders a Document as the fixed-layout store text:

    {
      "articles": [
        {
          "name": "Food",
          "type": "Expense",
          "subArticles": ["Groceries", "Dining"]
        }
      ],
      "wallets": [],
      "transactions": []
    }

Collections and fields always appear in schema order and all three
collections are always written. Text is escaped by turning every quote
into backslash-quote and nothing else, so a value containing a newline or
ending in a backslash does not survive a round-trip.
"""

from typing import Any

from pydantic import BaseModel

from ledgerstore.codec.schema import COLLECTIONS, FieldKind, FieldSpec
from ledgerstore.codec.values import escape_text, format_number
from ledgerstore.models.records import Document


def _quote(text) -> str:
    return '"' + escape_text(text or "") + '"'


def render_value(spec: FieldSpec, value: Any) -> str:
    if spec.kind in (FieldKind.TEXT, FieldKind.OPTIONAL_TEXT):
        return _quote(value)
    if spec.kind == FieldKind.NUMBER:
        return format_number(value or 0.0)
    if spec.kind == FieldKind.DATE:
        return _quote(value.isoformat() if value else "")
    if spec.kind == FieldKind.TEXT_LIST:
        return "[" + ", ".join(_quote(item) for item in value or []) + "]"
    raise ValueError(f"Unknown field kind: {spec.kind}")


class DocumentEncoder:
    """Encodes a Document into store text."""

    def __init__(self, indent: int = 2):
        if indent < 0:
            raise ValueError("indent must be >= 0")
        self._indent = indent

    def _pad(self, level: int) -> str:
        return " " * (self._indent * level)

    def _render_record(self, fields: tuple[FieldSpec, ...], record: BaseModel) -> str:
        lines = [
            f'{self._pad(3)}"{spec.key}": {render_value(spec, getattr(record, spec.attribute))}'
            for spec in fields
        ]
        return f"{self._pad(2)}{{\n" + ",\n".join(lines) + f"\n{self._pad(2)}}}"

    def encode(self, document: Document) -> str:
        sections = []
        for schema in COLLECTIONS:
            records = getattr(document, schema.key)
            if not records:
                sections.append(f'{self._pad(1)}"{schema.key}": []')
                continue
            body = ",\n".join(self._render_record(schema.fields, record) for record in records)
            sections.append(f'{self._pad(1)}"{schema.key}": [\n{body}\n{self._pad(1)}]')
        return "{\n" + ",\n".join(sections) + "\n}\n"


def encode(document: Document, indent: int = 2) -> str:
    """Encode a Document with a one-off DocumentEncoder."""
    return DocumentEncoder(indent=indent).encode(document)
