from typing import TypeVar, List, Iterable, Union, Any, Iterator, BinaryIO

from .. import encoding, graph

T = TypeVar("T")

TREE_MODE = 40000
FILE_MODE = 100644
EXECUTABLE_MODE = 100755
SYMLINK_MODE = 120000
GITLINK_MODE = 160000


class TreeLeaf:
    """One named entry of a tree, referencing a blob or another tree.

    The mode is held as a number and always written without leading
    zeros, the way git writes it. A stored mode such as 040000 is read
    as 40000, so re-encoding that tree produces a different digest.
    """

    __fields__ = ("mode", "path", "digest")

    def __init__(self, mode: int, path: str, digest: encoding.Digest) -> None:

        self.mode = mode
        self.path = path
        self.digest = digest

    def __repr__(self) -> str:

        return f"TreeLeaf({self.mode}, {self.path!r}, {self.digest.str()})"

    def __eq__(self, other: Any) -> bool:

        if not isinstance(other, TreeLeaf):
            return NotImplemented
        return (
            other.mode == self.mode
            and other.path == self.path
            and other.digest == self.digest
        )

    def is_tree(self) -> bool:
        return self.mode == TREE_MODE

    def sort_key(self) -> bytes:
        """Return the key that git uses to order this leaf within a tree."""

        name = self.path.encode("utf-8")
        if self.is_tree():
            return name + b"/"
        return name

    def encode(self, writer: BinaryIO) -> None:

        encoding.write_mode(writer, self.mode)
        encoding.write_path(writer, self.path)
        encoding.write_digest(writer, self.digest)

    @classmethod
    def decode(cls, reader: BinaryIO) -> "TreeLeaf":
        """Read one leaf from the given stream.

        Raises:
            EOFError: if the stream holds no more data
            encoding.FormatError: if the leaf is incomplete or malformed
        """

        mode = encoding.read_mode(reader)
        path = encoding.read_path(reader)
        digest = encoding.read_digest(reader)
        return TreeLeaf(mode, path, digest)


class Tree(graph.Object):
    """Tree is an ordered collection of leaves.

    Leaves are kept in the order that they were added, use
    sort() to get the canonical ordering used by git.
    """

    kind = graph.ObjectKind.TREE

    def __init__(self, leaves: Iterable[TreeLeaf] = ()) -> None:

        self._leaves: List[TreeLeaf] = []
        for leaf in leaves:
            self.add(leaf)

    def __repr__(self) -> str:

        return f"<{self.__class__.__name__} '{self.digest().str()}'>"

    def __getitem__(self, key: Union[int, str]) -> TreeLeaf:

        if isinstance(key, int):
            return self._leaves[key]
        for leaf in self._leaves:
            if leaf.path == key:
                return leaf
        raise KeyError(key)

    def get(self, key: Union[int, str], default: T = None) -> Union[TreeLeaf, T, None]:

        try:
            return self[key]
        except (KeyError, IndexError):
            return default

    def __iter__(self) -> Iterator[TreeLeaf]:

        return iter(self._leaves)

    def __len__(self) -> int:
        return len(self._leaves)

    def add(self, leaf: TreeLeaf) -> None:
        """Add a leaf to the end of this tree.

        Raises:
            FileExistsError: if a leaf with the same path exists
        """

        if self.get(leaf.path) is not None:
            raise FileExistsError(leaf.path)
        self._leaves.append(leaf)

    def remove(self, path: str) -> TreeLeaf:

        for i, leaf in enumerate(self._leaves):
            if leaf.path == path:
                return self._leaves.pop(i)
        raise FileNotFoundError(path)

    def sort(self) -> None:
        """Reorder the leaves of this tree the way git does."""

        self._leaves.sort(key=TreeLeaf.sort_key)

    def encode(self, writer: BinaryIO) -> None:

        for leaf in self._leaves:
            leaf.encode(writer)

    @classmethod
    def decode(cls, reader: BinaryIO) -> "Tree":

        tree = Tree()
        while True:
            try:
                leaf = TreeLeaf.decode(reader)
            except EOFError:
                break
            tree._leaves.append(leaf)
        return tree
