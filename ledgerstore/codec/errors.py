"""Errors raised while turning store text into a Document."""

from typing import Optional


class CodecError(Exception):
    """Base exception for codec errors."""
    pass


class DecodeError(CodecError):
    """Store text could not be turned into a Document."""
    pass


class MalformedRecordError(DecodeError):
    """One record holds a value its field cannot take (bad date, non-numeric amount)."""

    def __init__(
        self,
        message: str,
        collection: Optional[str] = None,
        index: Optional[int] = None,
        field: Optional[str] = None,
    ):
        self.collection = collection
        self.index = index
        self.field = field
        super().__init__(message)

    def at(self, collection: str, index: int) -> "MalformedRecordError":
        """Copy of this error located at collection[index]."""
        return MalformedRecordError(
            f"{collection}[{index}]: {self}",
            collection=collection,
            index=index,
            field=self.field,
        )
