"""
Store Codec Package

Reads and writes the JSON-like store text. Decoding runs in two layers:
a generic parser (scanner, values, parser) and a record assembler that
maps its output onto the record models.
"""

from ledgerstore.codec.decoder import DocumentDecoder, decode
from ledgerstore.codec.encoder import DocumentEncoder, encode
from ledgerstore.codec.errors import (
    CodecError,
    DecodeError,
    MalformedRecordError,
)

__all__ = [
    "CodecError",
    "DecodeError",
    "DocumentDecoder",
    "DocumentEncoder",
    "MalformedRecordError",
    "decode",
    "encode",
]
