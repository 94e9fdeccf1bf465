import pytest


def bstr(raw: bytes) -> bytes:
    return str(len(raw)).encode() + b":" + raw


@pytest.fixture
def sample_torrent() -> bytes:
    """A small single-file metainfo document; ``info`` is the last key."""
    info = (
        b"d"
        + bstr(b"length") + b"i655360000e"
        + bstr(b"name") + bstr(b"debian-mac-12.1.0-amd64-netinst.iso")
        + bstr(b"piece length") + b"i262144e"
        + bstr(b"pieces") + bstr(b"\x00" * 20 + b"\xff" * 20)
        + b"e"
    )
    return (
        b"d"
        + bstr(b"announce") + bstr(b"http://bttracker.debian.org:6969/announce")
        + bstr(b"created by") + bstr(b"mktorrent 1.1")
        + bstr(b"url-list") + b"l" + bstr(b"http://mirror.example/a") + bstr(b"http://mirror.example/b") + b"e"
        + bstr(b"info") + info
        + b"e"
    )
