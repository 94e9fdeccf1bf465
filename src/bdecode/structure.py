"""
Data structures for representing decoded Bencode values.

Every value remembers where its encoding sits in the input buffer:
``start`` is the offset of its first byte and ``end`` the offset just past
its last byte, so ``data[value.start:value.end]`` is the exact encoded span.
Values built by hand carry ``None`` for both.
"""
__all__ = [
    "BencodeType",
    "BencodeInt",
    "BencodeString",
    "BencodeList",
    "BencodeDict",
]


class BencodeType:
    """Base class for all Bencode data types."""

    __slots__ = ("value", "start", "end")

    def __init__(self, value, start=None, end=None):
        self.value = value
        self.start = start
        self.end = end

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    __hash__ = None

    def to_native(self):
        """Returns the value as plain Python objects (bytes, int, list, dict)."""
        raise NotImplementedError


class BencodeInt(BencodeType):
    """Represents a Bencoded integer."""

    __slots__ = ()

    def __init__(self, value: int, start=None, end=None):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("BencodeInt requires an integer.")
        super().__init__(value, start, end)

    def __hash__(self):
        return hash(self.value)

    def to_native(self):
        return self.value

    def __repr__(self):
        return f"BencodeInt({self.value})"


class BencodeString(BencodeType):
    """
    Represents a Bencoded byte string.

    ``value`` is a read-only memoryview into the buffer that was decoded, not
    a copy. The buffer has to stay alive for as long as the string is used;
    ``bytes(string)`` makes an independent copy. Built from a mutable buffer,
    the string copies it.
    """

    __slots__ = ()

    def __init__(self, value, start=None, end=None):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError("BencodeString requires a bytes-like object.")
        view = memoryview(value)
        if not view.readonly:
            # a view of a mutable buffer is unhashable, so keep a private copy
            view = memoryview(view.tobytes())
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
        if not len(view):
            raise ValueError("BencodeString cannot be empty.")
        super().__init__(view, start, end)

    @property
    def offset(self):
        """Offset of the first payload byte in the decoded buffer."""
        if self.end is None:
            return None
        return self.end - len(self.value)

    def __len__(self):
        return len(self.value)

    def __bytes__(self):
        return self.value.tobytes()

    def __hash__(self):
        return hash(self.value)

    def to_native(self):
        return self.value.tobytes()

    def __repr__(self):
        return f"BencodeString({self.value.tobytes()!r})"


class BencodeList(BencodeType):
    """Represents a Bencoded list."""

    __slots__ = ()

    def __init__(self, value: list, start=None, end=None):
        if not isinstance(value, list):
            raise TypeError("BencodeList requires a list.")
        super().__init__(value, start, end)

    def __len__(self):
        return len(self.value)

    def __iter__(self):
        return iter(self.value)

    def __getitem__(self, index):
        return self.value[index]

    def to_native(self):
        return [item.to_native() for item in self.value]

    def __repr__(self):
        return f"BencodeList({self.value!r})"


class BencodeDict(BencodeType):
    """
    Represents a Bencoded dictionary.

    Keys are the byte-string payloads themselves (memoryviews when decoded),
    which hash and compare like ``bytes``, so ``d.value[b"info"]`` works.
    """

    __slots__ = ()

    def __init__(self, value: dict, start=None, end=None):
        if not isinstance(value, dict):
            raise TypeError("BencodeDict requires a dict.")
        # keys must be byte strings (bencode requirement)
        for k in value.keys():
            if not isinstance(k, (bytes, memoryview)):
                raise TypeError("BencodeDict keys must be bytes.")
        super().__init__(value, start, end)

    def __len__(self):
        return len(self.value)

    def __contains__(self, key):
        return key in self.value

    def __getitem__(self, key):
        return self.value[key]

    def get(self, key, default=None):
        return self.value.get(key, default)

    def to_native(self):
        return {bytes(k): v.to_native() for k, v in self.value.items()}

    def __repr__(self):
        items = ", ".join(f"{bytes(k)!r}: {v!r}" for k, v in self.value.items())
        return f"BencodeDict({{{items}}})"
