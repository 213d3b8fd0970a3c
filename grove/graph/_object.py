from typing import ClassVar, Tuple
import io
import abc
import enum

from .. import encoding


class ObjectKind(enum.Enum):

    COMMIT = "commit"
    TAG = "tag"
    TREE = "tree"
    BLOB = "blob"

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        """Return the frame header of every known kind."""
        return tuple(kind.value for kind in cls)


class Object(encoding.Encodable, metaclass=abc.ABCMeta):
    """Object is the base class for all storable data types.

    Objects are identified by a hash of their frame, which is the
    serialized payload prefixed with the object kind and payload size.
    """

    kind: ClassVar[ObjectKind]

    def serialize(self) -> bytes:
        """Return the payload of this object, without any frame header."""

        buffer = io.BytesIO()
        self.encode(buffer)
        return buffer.getvalue()

    def frame(self) -> bytes:
        """Return the complete frame for this object, as hashed and stored."""

        return encoding.build_frame(self.kind.value, self.serialize())

    def digest(self) -> encoding.Digest:

        return encoding.Hasher(self.frame()).digest()

    @classmethod
    def deserialize(cls, payload: bytes) -> "Object":
        """Parse an object of this type from its payload."""

        reader = io.BytesIO(payload)
        return cls.decode(reader)
