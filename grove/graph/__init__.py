"""Low-level object representation and storage interfaces."""

from ._object import Object, ObjectKind
from ._errors import (
    StoreError,
    UnknownObjectError,
    StoreNotFoundError,
    CorruptObjectError,
    ObjectSizeError,
    UnknownKindError,
    StorageIOError,
)
from ._database import Database, DatabaseView
