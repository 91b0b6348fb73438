"""
Flat File Storage

The store is one UTF-8 text file holding the encoded Document. `load`
reads it whole, `save` overwrites it whole from a snapshot; there is no
locking and no incremental update. With atomic writes enabled (the
default) a failed save leaves the previous file in place; without them a
failed save may leave a partially written file.

The two module-level functions load(path) and save(path, document) are
the entry points collaborators use.
"""

import os
from pathlib import Path
from typing import Optional, Union

from ledgerstore.audit import AuditLogger, create_correlation_id
from ledgerstore.codec import DecodeError, DocumentDecoder, DocumentEncoder
from ledgerstore.config import StoreSettings, get_settings
from ledgerstore.models.records import Document
from ledgerstore.storage.atomic_writer import AtomicFileWriter
from ledgerstore.storage.interface import DocumentStorageInterface, StoreIOError

PathLike = Union[str, os.PathLike]


class FileDocumentStorage(DocumentStorageInterface):
    """
    Document storage backed by a single text file.

    A missing file loads as an empty Document. Read and write failures are
    raised as StoreIOError; undecodable content as DecodeError.
    """

    def __init__(
        self,
        path: PathLike,
        settings: Optional[StoreSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
        writer: Optional[AtomicFileWriter] = None,
    ):
        self._path = Path(path)
        self._settings = settings or get_settings()
        self._audit_logger = audit_logger or AuditLogger()
        self._decoder = DocumentDecoder(
            policy=self._settings.on_malformed_record,
            audit_logger=self._audit_logger,
        )
        self._encoder = DocumentEncoder(indent=self._settings.indent)
        self._writer = writer or AtomicFileWriter(
            fsync_after_write=self._settings.fsync,
            temp_suffix=self._settings.temp_suffix,
            encoding=self._settings.encoding,
        )

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> Document:
        """Read and decode the store file."""
        correlation_id = create_correlation_id()
        path = str(self._path)

        if not self.exists():
            self._audit_logger.log_store_missing(path, correlation_id)
            return Document.empty()

        try:
            text = self._path.read_text(encoding=self._settings.encoding)
        except UnicodeDecodeError as e:
            self._audit_logger.log_decode_failed(path, str(e), correlation_id)
            raise DecodeError(
                f"Store is not valid {self._settings.encoding} text: {path}"
            ) from e
        except OSError as e:
            self._audit_logger.log_load_failed(path, str(e), correlation_id)
            raise StoreIOError(path, f"Failed to read store {path}: {e}") from e

        try:
            document = self._decoder.decode(text, correlation_id)
        except DecodeError as e:
            self._audit_logger.log_decode_failed(path, str(e), correlation_id)
            raise

        self._audit_logger.log_store_loaded(path, document.counts(), correlation_id)
        return document

    def save(self, document: Document) -> None:
        """Encode `document` and overwrite the store file with it."""
        correlation_id = create_correlation_id()
        path = str(self._path)
        text = self._encoder.encode(document)
        atomic = self._settings.atomic_writes

        try:
            if atomic:
                self._writer.atomic_write(path, text)
            else:
                with open(self._path, "w", encoding=self._settings.encoding) as f:
                    f.write(text)
        except (OSError, UnicodeEncodeError) as e:
            self._audit_logger.log_save_failed(path, str(e), correlation_id)
            raise StoreIOError(path, f"Failed to write store {path}: {e}") from e

        self._audit_logger.log_store_saved(path, document.counts(), atomic, correlation_id)


def load(
    path: PathLike,
    settings: Optional[StoreSettings] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> Document:
    """
    Load the Document stored at `path`.

    Returns an empty Document if the file does not exist.

    Raises:
        DecodeError: If the content cannot be decoded
        StoreIOError: If the file cannot be read
    """
    return FileDocumentStorage(path, settings=settings, audit_logger=audit_logger).load()


def save(
    path: PathLike,
    document: Document,
    settings: Optional[StoreSettings] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> None:
    """
    Overwrite the store at `path` with `document`.

    Raises:
        StoreIOError: If the file cannot be written
    """
    FileDocumentStorage(path, settings=settings, audit_logger=audit_logger).save(document)
