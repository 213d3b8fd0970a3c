from typing import Optional

import structlog

from . import graph, encoding, objects

_LOGGER = structlog.get_logger("grove")


class UnexpectedKindError(ValueError):
    """Denotes an object that is not of the kind that was requested."""

    def __init__(
        self, name: str, expected: graph.ObjectKind, actual: graph.ObjectKind
    ) -> None:
        super(UnexpectedKindError, self).__init__(
            f"Object {name} is a {actual.value}, not a {expected.value}"
        )
        self.expected = expected
        self.actual = actual


def find_object(
    db: graph.DatabaseView,
    name: str,
    kind: Optional[graph.ObjectKind] = None,
    follow: bool = True,
) -> encoding.Digest:
    """Resolve a name to the digest of an object in the given database.

    When a kind is given, the object must be of that kind. If follow is
    set, tags are followed to their target object and commits are
    followed to their tree until an object of the right kind is found.

    Raises:
        storage.ResolveError: if the name cannot be resolved
        UnexpectedKindError: if the object is not of the requested kind
    """

    digest = db.resolve_full_digest(name)
    if kind is None:
        return digest

    obj = db.read_object(digest)
    while obj.kind is not kind:
        if not follow:
            raise UnexpectedKindError(name, kind, obj.kind)

        if isinstance(obj, objects.Tag) and obj.object:
            target = obj.object
        elif (
            isinstance(obj, objects.Commit)
            and kind is graph.ObjectKind.TREE
            and obj.tree
        ):
            target = obj.tree
        else:
            raise UnexpectedKindError(name, kind, obj.kind)

        _LOGGER.debug("following reference", kind=obj.kind.value, target=target)
        digest = db.resolve_full_digest(target)
        obj = db.read_object(digest)

    return digest
