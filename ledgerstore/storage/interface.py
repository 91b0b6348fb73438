"""
Abstract Storage Interface

DESIGN DECISION: Collaborators (editors, table views) talk to storage
through this interface only. This allows us to:
1. Keep the flat file as the single real backend
2. Use in-memory storage for testing
3. Keep the session code independent of where the Document lives

The interface is deliberately tiny: a Document is always loaded and saved
whole. There is no incremental update.
"""

from abc import ABC, abstractmethod

from ledgerstore.models.records import Document


class DocumentStorageInterface(ABC):
    """
    Abstract interface for Document storage.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def exists(self) -> bool:
        """
        Whether a stored Document is present.

        Returns:
            True if load() would read stored data
        """
        pass

    @abstractmethod
    def load(self) -> Document:
        """
        Load the stored Document.

        Returns:
            A new Document; an empty one when nothing is stored yet

        Raises:
            DecodeError: If the stored text cannot be decoded
            StoreIOError: If the store cannot be read
        """
        pass

    @abstractmethod
    def save(self, document: Document) -> None:
        """
        Replace the stored Document with a snapshot of `document`.

        Args:
            document: The Document to persist

        Raises:
            StoreIOError: If the store cannot be written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StoreIOError(StorageError):
    """The store could not be read or written."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)
