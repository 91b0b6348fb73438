"""
Ledger Session

Holds the one current Document that editing collaborators work on.

DESIGN DECISION: There are no process-wide record lists. A session owns
a Document and hands out a reference to it; collaborators mutate that
Document and then call commit(), which saves a full snapshot.

Flow:
1. reload()  -> load from storage, replace the current Document
2. mutate session.document (collaborator code)
3. commit()  -> save the whole Document, overwriting the store

A failed reload leaves the current Document untouched.
"""

from typing import Optional

from ledgerstore.config import get_settings
from ledgerstore.models.records import Document
from ledgerstore.storage import DocumentStorageInterface, FileDocumentStorage


class LedgerSession:
    """
    The explicit handle to the current Document.

    Construct with a storage backend, or use LedgerSession.open() to bind
    to a file (the configured store path by default).
    """

    def __init__(
        self,
        storage: DocumentStorageInterface,
        document: Optional[Document] = None,
    ):
        self._storage = storage
        self._document = document if document is not None else Document.empty()

    @classmethod
    def open(cls, path: Optional[str] = None) -> "LedgerSession":
        """Bind to a store file and load it."""
        storage = FileDocumentStorage(path or get_settings().store_path)
        session = cls(storage)
        session.reload()
        return session

    @property
    def document(self) -> Document:
        return self._document

    @property
    def storage(self) -> DocumentStorageInterface:
        return self._storage

    def reload(self) -> Document:
        """
        Load the stored Document and make it current.

        Raises whatever the storage raises; the current Document is only
        replaced on success.
        """
        document = self._storage.load()
        self._document = document
        return document

    def replace(self, document: Document) -> None:
        """Make `document` current without saving it."""
        self._document = document

    def commit(self) -> None:
        """Save a snapshot of the current Document."""
        self._storage.save(self._document)
