"""The concrete object kinds and their payload formats."""

from typing import Dict, Type, Union

from .. import graph
from ._blob import Blob
from ._tree import (
    Tree,
    TreeLeaf,
    TREE_MODE,
    FILE_MODE,
    EXECUTABLE_MODE,
    SYMLINK_MODE,
    GITLINK_MODE,
)
from ._commit import Commit, Tag, KeyValueObject, parse_kvlm, serialize_kvlm

OBJECT_KINDS: Dict[graph.ObjectKind, Type[graph.Object]] = {
    graph.ObjectKind.COMMIT: Commit,
    graph.ObjectKind.TAG: Tag,
    graph.ObjectKind.TREE: Tree,
    graph.ObjectKind.BLOB: Blob,
}


def serialize(obj: graph.Object) -> bytes:
    """Return the payload of the given object."""

    return obj.serialize()


def deserialize(kind: Union[str, graph.ObjectKind], payload: bytes) -> graph.Object:
    """Parse the payload of an object of the given kind.

    Raises:
        ValueError: if the kind is not known
        encoding.FormatError: if the payload is malformed
    """

    kind = graph.ObjectKind(kind)
    return OBJECT_KINDS[kind].deserialize(payload)


__all__ = list(locals().keys())
