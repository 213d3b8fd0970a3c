from typing import BinaryIO

from .. import graph


class Blob(graph.Object):
    """Blobs represent an arbitrary chunk of binary data, usually a file."""

    __fields__ = ["data"]
    kind = graph.ObjectKind.BLOB

    def __init__(self, data: bytes = b"") -> None:

        self.data = bytes(data)
        super(Blob, self).__init__()

    def __repr__(self) -> str:
        return f"Blob(size={self.size})"

    @property
    def size(self) -> int:
        return len(self.data)

    def encode(self, writer: BinaryIO) -> None:

        writer.write(self.data)

    @classmethod
    def decode(cls, reader: BinaryIO) -> "Blob":

        return Blob(reader.read())
