"""
Bencode package for decoding BitTorrent data.
"""
from .decoder import BencodeDecoder, decode, decode_file, decode_one
from .errors import (
    BencodeDecodeError,
    FatalDecodeError,
    IntegerOverflow,
    InvalidByteStringLength,
    InvalidInteger,
    NestingTooDeep,
    StructuralMismatch,
)
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType

__all__ = [
    'decode', 'decode_one', 'decode_file', 'BencodeDecoder',
    'BencodeType', 'BencodeInt', 'BencodeString', 'BencodeList', 'BencodeDict',
    'BencodeDecodeError', 'StructuralMismatch', 'FatalDecodeError',
    'InvalidInteger', 'IntegerOverflow', 'InvalidByteStringLength', 'NestingTooDeep',
]
