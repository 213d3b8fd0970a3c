from .. import encoding


class StoreError(RuntimeError):
    """Base class for all failures to read or write stored objects."""

    pass


class UnknownObjectError(StoreError):
    """Denotes a missing object or one that is not present in the database."""

    def __init__(self, digest: encoding.Digest) -> None:

        super(UnknownObjectError, self).__init__(f"Unknown object: {str(digest)}")
        self.digest = digest


class StoreNotFoundError(StoreError):
    """Denotes an object storage location that does not exist at all."""

    def __init__(self, root: str) -> None:

        super(StoreNotFoundError, self).__init__(
            f"Object storage does not exist: {root}"
        )
        self.root = root


class CorruptObjectError(StoreError):
    """Denotes a stored object that cannot be decompressed or has an invalid frame."""

    def __init__(self, digest: encoding.Digest, reason: str) -> None:

        super(CorruptObjectError, self).__init__(
            f"Object is corrupt: {reason} [{str(digest)}]"
        )
        self.digest = digest


class ObjectSizeError(StoreError):
    """Denotes a stored object whose declared size does not match its payload."""

    def __init__(self, digest: encoding.Digest, declared: int, actual: int) -> None:

        super(ObjectSizeError, self).__init__(
            f"Malformed object, expected {declared} bytes"
            f" but found {actual} [{str(digest)}]"
        )
        self.digest = digest
        self.declared = declared
        self.actual = actual


class UnknownKindError(StoreError):
    """Denotes a stored object of a kind that is not recognized."""

    def __init__(self, digest: encoding.Digest, kind: str) -> None:

        super(UnknownKindError, self).__init__(
            f"Unknown object kind {kind!r} [{str(digest)}]"
        )
        self.digest = digest
        self.kind = kind


class StorageIOError(StoreError):
    """Denotes a filesystem failure while reading or writing objects.

    The original error is always available as the __cause__.
    """

    def __init__(self, path: str, error: OSError) -> None:

        super(StorageIOError, self).__init__(f"{error.strerror or error}: {path}")
        self.path = path
