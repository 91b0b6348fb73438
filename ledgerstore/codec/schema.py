"""
Store Schema

Field layout of the three stored collections. Both the record assembler
(decode) and the encoder walk these tables, so key names, field order and
value kinds are defined once.
"""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel

from ledgerstore.models.records import Article, Transaction, Wallet


class FieldKind(str, Enum):
    TEXT = "text"                  # Required text, "" when absent
    OPTIONAL_TEXT = "optional_text"  # None when absent or ""
    NUMBER = "number"              # float, 0.0 when absent
    DATE = "date"                  # ISO date, None when absent or ""
    TEXT_LIST = "text_list"        # list[str], [] when absent


class FieldSpec(NamedTuple):
    key: str        # Name in the store
    attribute: str  # Attribute on the record model
    kind: FieldKind


class CollectionSchema(NamedTuple):
    key: str
    model: type[BaseModel]
    fields: tuple[FieldSpec, ...]


ARTICLE_FIELDS = (
    FieldSpec("name", "name", FieldKind.TEXT),
    FieldSpec("type", "type", FieldKind.TEXT),
    FieldSpec("subArticles", "sub_articles", FieldKind.TEXT_LIST),
)

WALLET_FIELDS = (
    FieldSpec("name", "name", FieldKind.TEXT),
    FieldSpec("initialBalance", "initial_balance", FieldKind.NUMBER),
)

TRANSACTION_FIELDS = (
    FieldSpec("date", "date", FieldKind.DATE),
    FieldSpec("type", "type", FieldKind.TEXT),
    FieldSpec("article", "article", FieldKind.TEXT),
    FieldSpec("subArticle", "sub_article", FieldKind.OPTIONAL_TEXT),
    FieldSpec("wallet", "wallet", FieldKind.OPTIONAL_TEXT),
    FieldSpec("amount", "amount", FieldKind.NUMBER),
    FieldSpec("comment", "comment", FieldKind.OPTIONAL_TEXT),
)

# Top-level order in the store
COLLECTIONS = (
    CollectionSchema("articles", Article, ARTICLE_FIELDS),
    CollectionSchema("wallets", Wallet, WALLET_FIELDS),
    CollectionSchema("transactions", Transaction, TRANSACTION_FIELDS),
)

COLLECTION_KEYS = tuple(schema.key for schema in COLLECTIONS)
