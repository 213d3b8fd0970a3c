from typing import BinaryIO, Any, TypeVar, Type
import io
import abc
import string
import hashlib

EncodableType = TypeVar("EncodableType", bound="Encodable")


class Encodable(metaclass=abc.ABCMeta):
    """Encodable is a type that can be binary encoded to a byte stream."""

    def digest(self) -> "Digest":
        return Digest.from_encodable(self)

    def __hash__(self) -> int:
        return hash(self.digest())

    def __eq__(self, other: Any) -> bool:

        if isinstance(other, Encodable):
            return self.digest() == other.digest()
        return super(Encodable, self).__eq__(other)

    @abc.abstractmethod
    def encode(self, writer: BinaryIO) -> None:
        """Write this object in binary format."""
        ...

    @classmethod
    @abc.abstractmethod
    def decode(cls: Type[EncodableType], reader: BinaryIO) -> EncodableType:
        """Read a previously encoded object from the given binary stream."""
        ...


class Digest(bytes):
    """Digest is the result of a hashing operation over binary data.

    The canonical text form is always lowercase hex.
    """

    def __str__(self) -> str:
        return self.hex()

    __repr__ = __str__

    @staticmethod
    def from_encodable(encodable: Encodable) -> "Digest":
        """Calculate the digest of an encodable type."""

        buffer = io.BytesIO()
        encodable.encode(buffer)
        hasher = Hasher(buffer.getvalue())
        return hasher.digest()

    def str(self) -> str:
        """Return a human readable string for this digest."""
        return str(self)


class Hasher:
    """Hasher is the hashing algorithm used for digest generation.

    Objects are addressed by the sha1 of their frame, which keeps
    digests identical to the ones produced by git for the same content.
    """

    __fields__ = ("_sha",)

    def __init__(self, data: bytes = b"") -> None:

        self._sha = hashlib.sha1(data)

    def __getattr__(self, name: str) -> Any:

        return getattr(self._sha, name)

    def digest(self) -> Digest:
        """Return the current digest as computed by this hasher."""

        return Digest(self._sha.digest())


DIGEST_SIZE = Hasher().digest_size
EMPTY_DIGEST = Hasher().digest()
_HEX_DIGITS = frozenset(string.hexdigits)


def is_digest_string(digest_str: str) -> bool:
    """Return true if the given string is a complete hex digest, in either case."""

    return len(digest_str) == DIGEST_SIZE * 2 and all(
        c in _HEX_DIGITS for c in digest_str
    )


def parse_digest(digest_str: str) -> Digest:
    """Parse a string-digest.

    Uppercase hex is accepted and normalized.

    Raises:
        ValueError: if the string is not a complete hex digest
    """

    if not is_digest_string(digest_str):
        raise ValueError(f"Invalid digest: {digest_str!r}")
    return Digest(bytes.fromhex(digest_str))
