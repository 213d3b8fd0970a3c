import zlib

DEFAULT_COMPRESSION = zlib.Z_DEFAULT_COMPRESSION


class CorruptionError(ValueError):
    """Denotes data that could not be decompressed."""

    def __init__(self, error: Exception) -> None:
        super(CorruptionError, self).__init__(f"Invalid compressed data: {error}")


def compress(data: bytes, level: int = DEFAULT_COMPRESSION) -> bytes:
    """Compress the given data for storage."""

    return zlib.compress(data, level)


def decompress(data: bytes) -> bytes:
    """Decompress previously compressed data.

    Raises:
        CorruptionError: if the data is not exactly one complete zlib stream
    """

    decompressor = zlib.decompressobj()
    try:
        result = decompressor.decompress(data)
        result += decompressor.flush()
    except zlib.error as e:
        raise CorruptionError(e)
    if not decompressor.eof:
        raise CorruptionError(ValueError("stream ended before completion"))
    if decompressor.unused_data:
        raise CorruptionError(ValueError("unexpected data after end of stream"))
    return result
