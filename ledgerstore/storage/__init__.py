"""
Storage Services Package

Provides the abstract storage interface and the flat-file implementation
behind load() and save().
"""

from ledgerstore.storage.interface import (
    DocumentStorageInterface,
    StorageError,
    StoreIOError,
)
from ledgerstore.storage.atomic_writer import AtomicFileWriter
from ledgerstore.storage.file_store import (
    FileDocumentStorage,
    load,
    save,
)

__all__ = [
    # Interfaces
    "DocumentStorageInterface",
    # Exceptions
    "StorageError",
    "StoreIOError",
    # File implementation
    "AtomicFileWriter",
    "FileDocumentStorage",
    "load",
    "save",
]
