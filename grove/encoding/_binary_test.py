import io

import pytest

from ._hash import Digest, Hasher
from ._binary import (
    BadModeError,
    FormatError,
    MissingTerminatorError,
    TruncatedDigestError,
    BadEncodingError,
    build_frame,
    read_frame_header,
    read_mode,
    write_mode,
    read_path,
    write_path,
    read_digest,
    write_digest,
)


def test_build_frame() -> None:

    assert build_frame("blob", b"hello\n") == b"blob 6\x00hello\n"
    assert build_frame("tree", b"") == b"tree 0\x00"


def test_read_frame_header() -> None:

    stream = io.BytesIO(b"commit 12\x00postfix")
    assert read_frame_header(stream) == ("commit", 12)
    assert stream.read() == b"postfix"


@pytest.mark.parametrize(
    "data",
    [b"", b"blob", b"blob 6", b"blob6\x00hello\n", b"x" * 64 + b" 6\x00"],
)
def test_read_frame_header_unterminated(data: bytes) -> None:

    with pytest.raises(MissingTerminatorError):
        read_frame_header(io.BytesIO(data))


@pytest.mark.parametrize("data", [b"blob \x00", b"blob -1\x00", b"blob six\x00"])
def test_read_frame_header_bad_size(data: bytes) -> None:

    with pytest.raises(FormatError):
        read_frame_header(io.BytesIO(data))


@pytest.mark.parametrize("mode", (40000, 100644, 100755, 120000))
def test_read_write_mode(mode: int) -> None:

    stream = io.BytesIO()
    write_mode(stream, mode)
    stream.write(b"postfix")
    stream.seek(0)
    assert read_mode(stream) == mode
    assert stream.read() == b"postfix"


def test_write_mode_bad_length() -> None:

    with pytest.raises(ValueError):
        write_mode(io.BytesIO(), 644)


def test_read_mode_empty() -> None:

    with pytest.raises(EOFError):
        read_mode(io.BytesIO(b""))


@pytest.mark.parametrize(
    "data", [b" a", b"1234 a", b"1006440 a", b"10064", b"10a64 a", b"+1006 a"]
)
def test_read_mode_bad(data: bytes) -> None:

    with pytest.raises(BadModeError):
        read_mode(io.BytesIO(data))


def test_read_write_path() -> None:

    stream = io.BytesIO()
    write_path(stream, "file.txt")
    write_path(stream, "über")
    stream.write(b"postfix")
    stream.seek(0)
    assert read_path(stream) == "file.txt"
    assert read_path(stream) == "über"
    assert stream.read() == b"postfix"


def test_read_path_unterminated() -> None:

    with pytest.raises(MissingTerminatorError):
        read_path(io.BytesIO(b"file.txt"))


def test_read_path_bad_encoding() -> None:

    with pytest.raises(BadEncodingError):
        read_path(io.BytesIO(b"\xff\xfe\x00"))


def test_write_path_null() -> None:

    with pytest.raises(ValueError):
        write_path(io.BytesIO(), "bad\x00path")


def test_read_write_digest() -> None:

    digest = Hasher(b"some data").digest()
    stream = io.BytesIO()
    write_digest(stream, digest)
    stream.seek(0)
    actual = read_digest(stream)
    assert isinstance(actual, Digest)
    assert actual == digest


def test_read_digest_truncated() -> None:

    with pytest.raises(TruncatedDigestError):
        read_digest(io.BytesIO(b"\x01" * 12))
