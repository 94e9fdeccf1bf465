"""
Bencode decoder for BitTorrent metainfo and tracker responses.
"""
import logging
from pathlib import Path

from .errors import (
    FatalDecodeError,
    IntegerOverflow,
    InvalidByteStringLength,
    InvalidInteger,
    NestingTooDeep,
    StructuralMismatch,
)
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString

logger = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
UINT64_MAX = 2 ** 64 - 1


def _bounded_int(text: bytes, low: int, high: int):
    """
    Interprets an optionally signed ASCII digit run, or returns None when the
    value falls outside [low, high].
    """
    sign = -1 if text[:1] == b"-" else 1
    magnitude = text.lstrip(b"+-").lstrip(b"0")
    # int() refuses very long digit runs, so reject by length first
    if len(magnitude) > len(str(max(-low, high))):
        return None
    value = sign * int(magnitude or b"0")
    if not low <= value <= high:
        return None
    return value


class BencodeDecoder:
    """
    Decodes Bencoded byte strings into Bencode value trees.

    The input is viewed, never copied: decoded byte strings are memoryview
    slices of it. It must be an immutable buffer such as ``bytes``.
    """
    def __init__(self, data):
        view = memoryview(data)
        if not view.readonly:
            raise TypeError(
                f"BencodeDecoder requires a read-only buffer, not {type(data).__name__}; "
                "pass bytes(data) instead."
            )
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
        self.data = view
        self.i = 0  # cursor index
        self.rules = (self.parse_string, self.parse_int, self.parse_list, self.parse_dict)

    def decode(self):
        """
        Main decode entry point. Decodes values until none is recognised at
        the cursor, then requires the whole buffer to have been consumed.
        """
        values = []
        try:
            while True:
                try:
                    values.append(self.parse_value())
                except StructuralMismatch as exc:
                    if self.i != len(self.data):
                        raise StructuralMismatch(self.i, "unexpected trailing data") from exc
                    break
        except RecursionError:
            exc = NestingTooDeep(self.i)
            logger.debug("Decode aborted: %s", exc)
            raise exc from None
        except FatalDecodeError as exc:
            logger.debug("Decode aborted: %s", exc)
            raise

        logger.debug("Decoded %d top-level value(s) from %d bytes", len(values), len(self.data))
        return values

    # --------------------------
    # Low-level utilities
    # --------------------------

    def _peek(self):
        if self.i >= len(self.data):
            raise StructuralMismatch(self.i, "unexpected end of input")
        return bytes(self.data[self.i:self.i+1])

    def _expect(self, token: bytes):
        """Consumes ``token`` or raises a recoverable mismatch."""
        if self._peek() != token:
            raise StructuralMismatch(self.i, f"expected {token.decode()!r}")
        self.i += 1

    def _consume_digits(self):
        """Consumes a non-empty run of ASCII digits and returns it."""
        start = self.i
        while self.i < len(self.data) and 0x30 <= self.data[self.i] <= 0x39:
            self.i += 1
        if self.i == start:
            raise StructuralMismatch(start, "expected a digit")
        return bytes(self.data[start:self.i])

    # --------------------------
    # Parsing functions
    # --------------------------

    def parse_value(self):
        """
        Decodes exactly one value at the cursor by trying each rule in turn.

        If every rule fails recoverably the cursor is restored and the first
        rule's failure is raised. Fatal errors are never caught here.
        """
        start = self.i
        first_mismatch = None

        for rule in self.rules:
            try:
                return rule()
            except StructuralMismatch as exc:
                self.i = start
                if first_mismatch is None:
                    first_mismatch = exc

        raise first_mismatch

    def parse_int(self):
        """Parses an integer (i<digits>e) from the Bencoded data."""
        start = self.i
        self._expect(b"i")

        text_start = self.i
        if self.i < len(self.data) and self.data[self.i] in b"+-":
            self.i += 1
        self._consume_digits()
        text = bytes(self.data[text_start:self.i])
        self._expect(b"e")

        if text.startswith(b"-0") or (text.startswith(b"0") and len(text) > 1):
            raise InvalidInteger(start, f"invalid integer {text.decode()!r}")

        value = _bounded_int(text, INT64_MIN, INT64_MAX)
        if value is None:
            raise IntegerOverflow(start, f"integer {text.decode()!r} does not fit in 64 bits")

        return BencodeInt(value, start, self.i)

    def parse_string(self):
        """Parses a byte string (<length>:<payload>) from the Bencoded data."""
        start = self.i
        length_bytes = self._consume_digits()
        self._expect(b":")

        length = _bounded_int(length_bytes, 0, UINT64_MAX)
        if length is None:
            raise IntegerOverflow(start, "byte string length does not fit in 64 bits")
        if length == 0:
            raise InvalidByteStringLength(start)

        payload_start = self.i
        available = len(self.data) - payload_start
        if available < length:
            raise StructuralMismatch(
                payload_start, f"byte string needs {length} bytes, {available} left"
            )

        self.i = payload_start + length
        return BencodeString(self.data[payload_start:self.i], start, self.i)

    def parse_list(self):
        """Parses a list (l<values>e) from the Bencoded data."""
        start = self.i
        self._expect(b"l")
        items = []

        while self._peek() != b"e":
            items.append(self.parse_value())

        self.i += 1  # skip 'e'
        return BencodeList(items, start, self.i)

    def parse_dict(self):
        """Parses a dictionary (d<key><value>...e) from the Bencoded data."""
        start = self.i
        self._expect(b"d")
        obj = {}

        while self._peek() != b"e":
            # keys MUST be byte strings; later duplicates win
            key = self.parse_string().value
            obj[key] = self.parse_value()

        self.i += 1  # skip 'e'
        return BencodeDict(obj, start, self.i)


def decode(data):
    """
    Convenience function to decode Bencoded data.

    Returns the list of top-level values; an empty buffer gives an empty list.
    """
    return BencodeDecoder(data).decode()


def decode_one(data):
    """Decodes data that must hold exactly one top-level value."""
    values = decode(data)
    if len(values) != 1:
        raise StructuralMismatch(0, f"expected exactly one top-level value, found {len(values)}")
    return values[0]


def decode_file(path):
    """Reads a whole file and decodes it. The returned values view the file's bytes."""
    return decode(Path(path).read_bytes())
