"""
Errors raised while decoding Bencoded data.

A ``StructuralMismatch`` only says "this rule does not match here": the
decoder catches it to try the next kind of value, or to end a list,
dictionary or the top-level sequence. Every ``FatalDecodeError`` means the
right kind of token was found but its content is invalid, and aborts the
whole decode.
"""
from typing import Optional

__all__ = [
    "BencodeDecodeError",
    "StructuralMismatch",
    "FatalDecodeError",
    "InvalidInteger",
    "IntegerOverflow",
    "InvalidByteStringLength",
    "NestingTooDeep",
]


class BencodeDecodeError(Exception):
    """Base class for Bencode decoding errors."""

    recoverable = False
    default_message = "invalid bencoded data"

    def __init__(self, offset: int, message: Optional[str] = None):
        self.offset = offset
        self.message = message or self.default_message
        super().__init__(f"{self.message} at offset {offset}")


class StructuralMismatch(BencodeDecodeError):
    """The input does not match the expected grammar token at this offset."""

    recoverable = True
    default_message = "unexpected input"


class FatalDecodeError(BencodeDecodeError):
    """The token kind is right but its content is invalid."""


class InvalidInteger(FatalDecodeError):
    default_message = "integer has a leading zero or is negative zero"


class IntegerOverflow(FatalDecodeError):
    default_message = "number out of range"


class InvalidByteStringLength(FatalDecodeError):
    default_message = "byte string declares zero length"


class NestingTooDeep(FatalDecodeError):
    default_message = "lists and dictionaries nested too deeply"
