from ._binary import (
    MODE_LENGTHS,
    FormatError,
    BadModeError,
    MissingTerminatorError,
    TruncatedDigestError,
    BadEncodingError,
    MalformedHeaderError,
    read_until,
    build_frame,
    read_frame_header,
    read_mode,
    write_mode,
    read_path,
    write_path,
    read_digest,
    write_digest,
)
from ._compress import compress, decompress, CorruptionError, DEFAULT_COMPRESSION
from ._hash import (
    Digest,
    Hasher,
    DIGEST_SIZE,
    EMPTY_DIGEST,
    is_digest_string,
    parse_digest,
    Encodable,
    EncodableType,
)

__all__ = list(locals().keys())
