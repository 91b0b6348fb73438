"""
Document Decoder

Orchestrates the two decode layers over the three top-level collections,
in store order (articles, wallets, transactions):

    text -> parse_document -> field mappings -> assemble_record -> Document

Decoding is all-or-nothing for the caller: either a complete Document is
returned (some collections possibly empty) or DecodeError is raised.
"""

from typing import Optional
from uuid import UUID

from ledgerstore.audit import AuditLogger
from ledgerstore.codec.assembler import assemble_record
from ledgerstore.codec.errors import DecodeError, MalformedRecordError
from ledgerstore.codec.parser import CollectionStatus, parse_document
from ledgerstore.codec.schema import COLLECTION_KEYS, COLLECTIONS
from ledgerstore.config import MalformedRecordPolicy
from ledgerstore.models.records import Document


class DocumentDecoder:
    """
    Decodes store text into a Document.

    Missing and unbalanced collections decode as empty and are reported
    as warnings. Malformed records follow the configured policy.
    """

    def __init__(
        self,
        policy: MalformedRecordPolicy = MalformedRecordPolicy.RAISE,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._policy = MalformedRecordPolicy(policy)
        self._audit_logger = audit_logger

    def decode(self, text: str, correlation_id: Optional[UUID] = None) -> Document:
        if not isinstance(text, str):
            raise DecodeError(f"Store text must be str, got {type(text).__name__}")

        parsed = parse_document(text, COLLECTION_KEYS)
        collections = {}

        for schema in COLLECTIONS:
            collection = parsed[schema.key]

            if self._audit_logger:
                if collection.status == CollectionStatus.MISSING:
                    self._audit_logger.log_collection_missing(schema.key, correlation_id)
                elif collection.status == CollectionStatus.UNBALANCED:
                    self._audit_logger.log_collection_unbalanced(
                        schema.key, collection.start, correlation_id
                    )

            records = []
            for index, fields in enumerate(collection.objects):
                try:
                    records.append(assemble_record(schema, fields))
                except MalformedRecordError as e:
                    located = e.at(schema.key, index)
                    if self._policy == MalformedRecordPolicy.RAISE:
                        raise located from e
                    if self._audit_logger:
                        self._audit_logger.log_record_skipped(
                            schema.key, index, str(e), correlation_id
                        )
            collections[schema.key] = records

        return Document(**collections)


def decode(
    text: str,
    policy: MalformedRecordPolicy = MalformedRecordPolicy.RAISE,
    audit_logger: Optional[AuditLogger] = None,
) -> Document:
    """Decode store text with a one-off DocumentDecoder."""
    return DocumentDecoder(policy=policy, audit_logger=audit_logger).decode(text)
