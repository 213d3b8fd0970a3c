import pytest
from colorama import Style

from . import encoding, graph, objects
from .io import format_payload, format_tree_leaf, leaf_kind


def test_format_payload_text() -> None:

    assert format_payload(b"hello\n") == "hello\n"


def test_format_payload_binary() -> None:

    assert format_payload(b"\xff\x00\x01") == "ff0001"


@pytest.mark.parametrize(
    "mode,kind",
    [
        (objects.FILE_MODE, graph.ObjectKind.BLOB),
        (objects.EXECUTABLE_MODE, graph.ObjectKind.BLOB),
        (objects.SYMLINK_MODE, graph.ObjectKind.BLOB),
        (objects.TREE_MODE, graph.ObjectKind.TREE),
        (objects.GITLINK_MODE, graph.ObjectKind.COMMIT),
    ],
)
def test_leaf_kind(mode: int, kind: graph.ObjectKind) -> None:

    leaf = objects.TreeLeaf(mode, "name", encoding.EMPTY_DIGEST)
    assert leaf_kind(leaf) is kind


def test_format_tree_leaf() -> None:

    leaf = objects.TreeLeaf(objects.TREE_MODE, "src", encoding.EMPTY_DIGEST)
    line = format_tree_leaf(leaf)
    assert line.startswith("040000 tree ")
    assert encoding.EMPTY_DIGEST.str() in line
    assert line.endswith(f"\t{Style.BRIGHT}src{Style.RESET_ALL}")
