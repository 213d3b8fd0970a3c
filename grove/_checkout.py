import os
import stat

import structlog

from . import graph, encoding, objects, storage
from ._config import DEFAULT_MAX_DEPTH

_LOGGER = structlog.get_logger("grove.checkout")
_EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class CheckoutError(ValueError):
    """Base class for failures to checkout a tree."""

    pass


class TargetNotDirectoryError(CheckoutError):
    """Denotes a checkout target that exists but is not a directory."""

    def __init__(self, path: str) -> None:
        super(TargetNotDirectoryError, self).__init__(f"Not a directory: {path}")
        self.path = path


class TargetNotEmptyError(CheckoutError):
    """Denotes a checkout target directory that already has contents."""

    def __init__(self, path: str) -> None:
        super(TargetNotEmptyError, self).__init__(f"Directory is not empty: {path}")
        self.path = path


class NoTreeFieldError(CheckoutError):
    """Denotes a commit that does not reference any tree."""

    def __init__(self, digest: encoding.Digest) -> None:
        super(NoTreeFieldError, self).__init__(
            f"Commit does not have a tree: {digest.str()}"
        )


class NotATreeError(CheckoutError):
    """Denotes an object that was expected to be a tree, but was not."""

    def __init__(self, digest: encoding.Digest, kind: graph.ObjectKind) -> None:
        super(NotATreeError, self).__init__(
            f"Object is a {kind.value}, not a tree: {digest.str()}"
        )


class UnresolvedTreeError(NotATreeError):
    """Denotes a commit whose tree value does not name any object."""

    def __init__(self, digest: encoding.Digest, ref: str) -> None:
        super(NotATreeError, self).__init__(
            f"Commit tree {ref!r} is not an object digest: {digest.str()}"
        )


class CheckoutIOError(CheckoutError):
    """Denotes a filesystem failure while writing checked out files.

    The original error is always available as the __cause__.
    """

    def __init__(self, path: str, error: OSError) -> None:

        super(CheckoutIOError, self).__init__(f"{error.strerror or error}: {path}")
        self.path = path


class InvalidLeafPathError(CheckoutError):
    """Denotes a tree leaf whose path is not a single file name."""

    def __init__(self, path: str) -> None:
        super(InvalidLeafPathError, self).__init__(f"Invalid path in tree: {path!r}")


class TreeDepthError(CheckoutError):
    """Denotes a tree that is nested deeper than allowed."""

    def __init__(self, path: str, max_depth: int) -> None:
        super(TreeDepthError, self).__init__(
            f"Tree is nested more than {max_depth} levels deep: {path}"
        )


def checkout(
    db: graph.DatabaseView,
    digest: encoding.Digest,
    target: str,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> None:
    """Write the files of a commit or tree into the given directory.

    The target must be an empty directory, or not exist at all. Files
    and directories are created in the order that they are stored in
    each tree. A failure part way through leaves any files and
    directories that were already created in place.

    Raises:
        CheckoutError: if the target or tree are not valid for checkout,
            or the files cannot be written
        graph.StoreError: if any object cannot be read
    """

    target = os.path.abspath(target)
    _validate_target(target)
    tree = _read_root_tree(db, digest)

    if not os.path.exists(target):
        try:
            os.makedirs(target)
        except OSError as e:
            raise CheckoutIOError(target, e) from e

    _LOGGER.info("checking out", digest=digest.str(), target=target)
    _checkout_tree(db, tree, target, 0, max_depth)


def _validate_target(target: str) -> None:

    if not os.path.exists(target):
        return
    if not os.path.isdir(target):
        raise TargetNotDirectoryError(target)
    if os.listdir(target):
        raise TargetNotEmptyError(target)


def _read_root_tree(db: graph.DatabaseView, digest: encoding.Digest) -> objects.Tree:

    obj = db.read_object(digest)
    if isinstance(obj, objects.Tree):
        return obj
    if not isinstance(obj, objects.Commit):
        raise NotATreeError(digest, obj.kind)

    if obj.tree is None:
        raise NoTreeFieldError(digest)
    try:
        tree_digest = db.resolve_full_digest(obj.tree)
    except storage.ResolveError as e:
        raise UnresolvedTreeError(digest, obj.tree) from e
    tree = db.read_object(tree_digest)
    if not isinstance(tree, objects.Tree):
        raise NotATreeError(tree_digest, tree.kind)
    return tree


def _checkout_tree(
    db: graph.DatabaseView, tree: objects.Tree, path: str, depth: int, max_depth: int
) -> None:

    for leaf in tree:
        _validate_leaf_path(leaf.path)
        dest = os.path.join(path, leaf.path)
        obj = db.read_object(leaf.digest)

        if isinstance(obj, objects.Tree):
            if depth + 1 > max_depth:
                raise TreeDepthError(dest, max_depth)
            try:
                os.mkdir(dest)
            except OSError as e:
                raise CheckoutIOError(dest, e) from e
            _checkout_tree(db, obj, dest, depth + 1, max_depth)

        elif isinstance(obj, objects.Blob):
            try:
                _write_blob(dest, obj, leaf.mode == objects.EXECUTABLE_MODE)
            except OSError as e:
                raise CheckoutIOError(dest, e) from e

        else:
            _LOGGER.debug("skipping unsupported leaf", path=dest, kind=obj.kind.value)


def _write_blob(dest: str, blob: objects.Blob, executable: bool) -> None:

    with open(dest, "xb") as writer:
        writer.write(blob.data)
    if executable:
        mode = os.stat(dest).st_mode
        os.chmod(dest, mode | _EXECUTABLE_BITS)


def _validate_leaf_path(path: str) -> None:

    separators = {"/", "\x00", os.sep, os.altsep or "/"}
    if path in ("", ".", "..") or any(s in path for s in separators):
        raise InvalidLeafPathError(path)
