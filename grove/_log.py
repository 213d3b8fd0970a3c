from typing import Iterator, List, Set, Tuple

import structlog

from . import graph, encoding, objects

_LOGGER = structlog.get_logger("grove.log")


class NotACommitError(ValueError):
    """Denotes a non-commit object found while walking commit history."""

    def __init__(self, digest: encoding.Digest, kind: graph.ObjectKind) -> None:
        super(NotACommitError, self).__init__(
            f"Found a {kind.value} in commit history: {digest.str()}"
        )


def iter_history(
    db: graph.DatabaseView, digest: encoding.Digest
) -> Iterator[Tuple[encoding.Digest, objects.Commit]]:
    """Iterate the given commit and all of its ancestors.

    History is walked depth first, following the first parent of each
    commit before any others. Every commit is yielded only once, even
    when it is reachable through more than one merge.

    Raises:
        NotACommitError: if any object in the history is not a commit
    """

    seen: Set[encoding.Digest] = set()
    stack: List[encoding.Digest] = [digest]
    while stack:
        current = stack.pop()
        if current in seen:
            continue
        seen.add(current)

        obj = db.read_object(current)
        if not isinstance(obj, objects.Commit):
            raise NotACommitError(current, obj.kind)
        yield current, obj

        parents = [db.resolve_full_digest(p) for p in obj.parents]
        stack.extend(reversed(parents))


def format_graphviz(db: graph.DatabaseView, digest: encoding.Digest) -> Iterator[str]:
    """Iterate the lines of a graphviz digraph of the given commit history."""

    yield "digraph grovelog{"
    count = 0
    for current, commit in iter_history(db, digest):
        count += 1
        for parent in commit.parents:
            parent_digest = db.resolve_full_digest(parent)
            yield f"  c_{current.str()} -> c_{parent_digest.str()};"
    yield "}"
    _LOGGER.debug("rendered history", commits=count)
