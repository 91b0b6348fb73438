"""
Ledger Record Models

These models define the three record shapes kept in the store and the
Document aggregate that groups them.

DESIGN DECISION: Records describe shape only. Business rules such as
"a transaction's type mirrors its article's type" or "a sub-article must
belong to its article" are enforced by the editing code that mutates a
Document, never here. Names are references, not foreign keys.

Stored key names are camelCase; Python attributes are snake_case and the
stored names are exposed as aliases.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArticleType(str, Enum):
    """
    Expected labels for an article's type.

    The records store the type as plain text, so any string is accepted.
    """
    INCOME = "Income"
    EXPENSE = "Expense"


class Article(BaseModel):
    """
    A categorisation label, e.g. "Food (Expense)" with sub-articles
    "Groceries" and "Dining".
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    type: str = ""
    sub_articles: list[str] = Field(
        default_factory=list,
        alias="subArticles",
        description="Ordered sub-article names, duplicates allowed"
    )


class Wallet(BaseModel):
    """A cash source with its opening balance."""
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    name: str = ""
    initial_balance: float = Field(
        default=0.0,
        alias="initialBalance"
    )


class Transaction(BaseModel):
    """
    A single ledger entry.

    `article`, `sub_article` and `wallet` are names of other records; they
    are not checked against the Document.
    """
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    date: Optional[datetime.date] = None
    type: str = ""
    article: str = ""
    sub_article: Optional[str] = Field(default=None, alias="subArticle")
    wallet: Optional[str] = None
    amount: float = 0.0
    comment: Optional[str] = None

    @field_validator('sub_article', 'wallet', 'comment', mode='before')
    @classmethod
    def empty_text_is_absent(cls, v):
        """The store writes an absent value as "", so "" means absent."""
        if v == "":
            return None
        return v


class Document(BaseModel):
    """
    The unit exchanged with storage by load/save.

    All three collections are always present, possibly empty.
    """

    articles: list[Article] = Field(default_factory=list)
    wallets: list[Wallet] = Field(default_factory=list)
    transactions: list[Transaction] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "Document":
        return cls()

    def find_article(self, name: str) -> Optional[Article]:
        """First article with this name, or None."""
        for article in self.articles:
            if article.name == name:
                return article
        return None

    def find_wallet(self, name: str) -> Optional[Wallet]:
        """First wallet with this name, or None."""
        for wallet in self.wallets:
            if wallet.name == name:
                return wallet
        return None

    def counts(self) -> dict[str, int]:
        return {
            "articles": len(self.articles),
            "wallets": len(self.wallets),
            "transactions": len(self.transactions),
        }
