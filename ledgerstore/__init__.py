"""
Ledger Store - Source Package

Persistence core for a personal finance ledger: categorisation articles,
wallets and transactions are kept in one flat JSON-like text file and
reconstructed on startup.

DESIGN PRINCIPLES:
1. One owned Document per load, never shared global lists
2. Parsing text and building records are separate layers
3. A missing or unbalanced collection is empty, not fatal
4. Every load and save is logged
"""

from ledgerstore.codec import (
    CodecError,
    DecodeError,
    MalformedRecordError,
    decode,
    encode,
)
from ledgerstore.ledger import LedgerSession
from ledgerstore.models import (
    Article,
    ArticleType,
    Document,
    Transaction,
    Wallet,
)
from ledgerstore.storage import (
    DocumentStorageInterface,
    FileDocumentStorage,
    StorageError,
    StoreIOError,
    load,
    save,
)

__version__ = "1.0.0"
__author__ = "Ledger Store Team"

__all__ = [
    "Article",
    "ArticleType",
    "CodecError",
    "DecodeError",
    "Document",
    "DocumentStorageInterface",
    "FileDocumentStorage",
    "LedgerSession",
    "MalformedRecordError",
    "StorageError",
    "StoreIOError",
    "Transaction",
    "Wallet",
    "decode",
    "encode",
    "load",
    "save",
]
