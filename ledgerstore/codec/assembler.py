"""
Record Assembler

Second decode layer: maps one generic field mapping onto a typed record
following the tables in ledgerstore.codec.schema.

Defaults for absent keys:
- text -> "" (optional text -> None)
- numbers -> 0.0
- lists -> []
- dates -> None (also for "")

A value of the wrong kind (a date that is not YYYY-MM-DD, an amount that
is not a number) raises MalformedRecordError. Whether that fails the whole
decode or drops the record is the decoder's call.

No cross-record checks happen here: article and wallet names are not
resolved against their collections.
"""

import re
from datetime import date
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from ledgerstore.codec.errors import MalformedRecordError
from ledgerstore.codec.schema import (
    COLLECTIONS,
    CollectionSchema,
    FieldKind,
    FieldSpec,
)
from ledgerstore.codec.values import parse_number
from ledgerstore.models.records import Article, Transaction, Wallet

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

SCHEMAS = {schema.key: schema for schema in COLLECTIONS}


def _describe(value: Any) -> str:
    if isinstance(value, list):
        return "a list"
    if isinstance(value, float):
        return f"the number {value!r}"
    return repr(value)


def _read_text(spec: FieldSpec, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedRecordError(
            f"'{spec.key}' must be text, got {_describe(value)}",
            field=spec.key,
        )
    return value


def _read_optional_text(spec: FieldSpec, value: Any) -> Optional[str]:
    text = _read_text(spec, value)
    return text or None


def _read_number(spec: FieldSpec, value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        # A quoted number is still a number
        number = parse_number(value)
        if number is not None:
            return number
    raise MalformedRecordError(
        f"'{spec.key}' must be a number, got {_describe(value)}",
        field=spec.key,
    )


def _read_date(spec: FieldSpec, value: Any) -> Optional[date]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedRecordError(
            f"'{spec.key}' must be an ISO date, got {_describe(value)}",
            field=spec.key,
        )
    text = value.strip()
    if not text:
        return None
    if not _ISO_DATE.match(text):
        raise MalformedRecordError(
            f"'{spec.key}' must be an ISO date (YYYY-MM-DD), got {value!r}",
            field=spec.key,
        )
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise MalformedRecordError(
            f"'{spec.key}' is not a valid calendar date: {value!r}",
            field=spec.key,
        ) from e


def _read_text_list(spec: FieldSpec, value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedRecordError(
            f"'{spec.key}' must be a list, got {_describe(value)}",
            field=spec.key,
        )
    return list(value)


_READERS = {
    FieldKind.TEXT: _read_text,
    FieldKind.OPTIONAL_TEXT: _read_optional_text,
    FieldKind.NUMBER: _read_number,
    FieldKind.DATE: _read_date,
    FieldKind.TEXT_LIST: _read_text_list,
}


def assemble_record(schema: CollectionSchema, fields: Mapping[str, Any]) -> BaseModel:
    """Build one record of `schema` from a generic field mapping. Unknown keys are ignored."""
    values = {
        spec.attribute: _READERS[spec.kind](spec, fields.get(spec.key))
        for spec in schema.fields
    }
    return schema.model(**values)


def build_article(fields: Mapping[str, Any]) -> Article:
    return assemble_record(SCHEMAS["articles"], fields)


def build_wallet(fields: Mapping[str, Any]) -> Wallet:
    return assemble_record(SCHEMAS["wallets"], fields)


def build_transaction(fields: Mapping[str, Any]) -> Transaction:
    return assemble_record(SCHEMAS["transactions"], fields)
