"""Shared fixtures for Ledger Store tests."""

from datetime import date

import pytest

from ledgerstore.audit import AuditLogger
from ledgerstore.config import get_settings
from ledgerstore.models import Article, Document, Transaction, Wallet


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Each test sees settings built from its own environment."""
    for name in (
        "LEDGER_STORE_STORE_PATH",
        "LEDGER_STORE_ATOMIC_WRITES",
        "LEDGER_STORE_ON_MALFORMED_RECORD",
        "LEDGER_STORE_INDENT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def audit_events():
    """An AuditLogger whose events are collected in a list."""
    events = []
    return AuditLogger(sink=events.append), events


@pytest.fixture
def sample_document():
    """A Document exercising quotes, commas, empty lists and absent values."""
    return Document(
        articles=[
            Article(name="Food", type="Expense", sub_articles=["Groceries", "Dining"]),
            Article(name="Salary", type="Income"),
            Article(name='The "Big" One, really', type="Expense", sub_articles=['say "x"', "y, z", ""]),
        ],
        wallets=[
            Wallet(name="Cash", initial_balance=150.0),
            Wallet(name="Card", initial_balance=-20.75),
        ],
        transactions=[
            Transaction(
                date=date(2024, 1, 5),
                type="Expense",
                article="Food",
                sub_article="Groceries",
                wallet="Cash",
                amount=12.5,
                comment='He said "hi, there"',
            ),
            Transaction(
                type="Income",
                article="Salary",
                amount=0.1,
            ),
            Transaction(
                date=date(2023, 12, 31),
                type="Expense",
                article="Food",
                wallet="Card",
                amount=1234567.891,
                comment="see [note] ratio 1:2",
            ),
        ],
    )
