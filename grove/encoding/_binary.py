from typing import BinaryIO, Tuple

from ._hash import DIGEST_SIZE, Digest

MODE_LENGTHS = (5, 6)
_MAX_KIND_LENGTH = 16
_MAX_SIZE_LENGTH = 20


class FormatError(ValueError):
    """Denotes an object payload that does not follow the expected format."""

    pass


class BadModeError(FormatError):
    """Denotes a tree leaf with an invalid mode field."""

    def __init__(self, mode: bytes) -> None:
        super(BadModeError, self).__init__(
            f"Invalid tree leaf mode, expected 5 or 6 decimal digits: {mode!r}"
        )


class MissingTerminatorError(FormatError):
    """Denotes a field that was not terminated before the end of the data."""

    def __init__(self, field: str) -> None:
        super(MissingTerminatorError, self).__init__(
            f"End of data reached before the {field} was terminated"
        )


class TruncatedDigestError(FormatError):
    """Denotes a digest with fewer bytes than required."""

    def __init__(self, size: int) -> None:
        super(TruncatedDigestError, self).__init__(
            f"Expected {DIGEST_SIZE} bytes for digest, found {size}"
        )


class BadEncodingError(FormatError):
    """Denotes text data that is not valid utf-8."""

    def __init__(self, field: str, error: UnicodeDecodeError) -> None:
        super(BadEncodingError, self).__init__(f"Invalid utf-8 in {field}: {error}")


class MalformedHeaderError(FormatError):
    """Denotes a key-value header block that cannot be parsed."""

    pass


def read_until(reader: BinaryIO, delimiter: bytes, limit: int = -1) -> bytes:
    """Read from the stream up to and including the given single-byte delimiter.

    The delimiter is not included in the returned data. Reading stops
    early once limit bytes have been read without finding the delimiter.

    Raises:
        EOFError: if the stream ends before the delimiter is found
    """

    data = bytearray()
    while limit < 0 or len(data) < limit:
        c = reader.read(1)
        if not c:
            raise EOFError(bytes(data))
        if c == delimiter:
            return bytes(data)
        data += c
    raise OverflowError(bytes(data))


def build_frame(kind: str, payload: bytes) -> bytes:
    """Prefix the given payload with its kind and size header."""

    header = f"{kind} {len(payload)}".encode("ascii")
    return header + b"\x00" + payload


def read_frame_header(reader: BinaryIO) -> Tuple[str, int]:
    """Read a frame header from the given stream, returning the kind and size.

    Raises:
        FormatError: if the header is not terminated or has an invalid size
    """

    try:
        kind = read_until(reader, b" ", _MAX_KIND_LENGTH)
    except (EOFError, OverflowError):
        raise MissingTerminatorError("frame kind")
    try:
        size = read_until(reader, b"\x00", _MAX_SIZE_LENGTH)
    except (EOFError, OverflowError):
        raise MissingTerminatorError("frame size")
    if not size.isdigit():
        raise FormatError(f"Invalid frame size: {size!r}")
    try:
        return kind.decode("ascii"), int(size)
    except UnicodeDecodeError:
        raise FormatError(f"Invalid frame kind: {kind!r}")


def write_mode(writer: BinaryIO, mode: int) -> None:
    """Write a tree leaf mode to the given binary stream."""

    data = str(mode).encode("ascii")
    if len(data) not in MODE_LENGTHS:
        raise ValueError(f"Cannot encode mode, must be 5 or 6 digits: {mode}")
    writer.write(data)
    writer.write(b" ")


def read_mode(reader: BinaryIO) -> int:
    """Read a tree leaf mode from the given binary stream.

    Raises:
        EOFError: if the stream is already exhausted
        BadModeError: if the mode is not 5 or 6 decimal digits
    """

    first = reader.read(1)
    if not first:
        raise EOFError("no more data")
    if first == b" ":
        raise BadModeError(b"")
    try:
        data = first + read_until(reader, b" ", max(MODE_LENGTHS))
    except EOFError as e:
        raise BadModeError(first + e.args[0])
    except OverflowError as e:
        raise BadModeError(first + e.args[0])
    if len(data) not in MODE_LENGTHS or not data.isdigit():
        raise BadModeError(data)
    return int(data)


def write_path(writer: BinaryIO, path: str) -> None:
    """Write a null-terminated path to the given binary stream."""

    if "\x00" in path:
        raise ValueError("Cannot encode path with null character")
    writer.write(path.encode("utf-8"))
    writer.write(b"\x00")


def read_path(reader: BinaryIO) -> str:
    """Read a null-terminated path from the given binary stream."""

    try:
        data = read_until(reader, b"\x00")
    except EOFError:
        raise MissingTerminatorError("path")
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise BadEncodingError("path", e)


def write_digest(writer: BinaryIO, digest: Digest) -> None:
    """Write a digest to the given binary stream."""

    assert len(digest) == DIGEST_SIZE, "Cannot write corrupt digest"
    writer.write(digest)


def read_digest(reader: BinaryIO) -> Digest:
    """Read a digest from the given binary stream."""

    data = reader.read(DIGEST_SIZE)
    if len(data) < DIGEST_SIZE:
        raise TruncatedDigestError(len(data))
    return Digest(data)
