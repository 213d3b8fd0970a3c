from colorama import Fore, Style

from . import encoding, graph, objects


def format_digest(digest: encoding.Digest) -> str:
    """Return a nicely formatted string representation of the given digest."""

    return f"{Fore.YELLOW}{digest.str()}{Fore.RESET}"


def leaf_kind(leaf: objects.TreeLeaf) -> graph.ObjectKind:
    """Return the kind of object that a tree leaf refers to, based on its mode."""

    if leaf.mode == objects.TREE_MODE:
        return graph.ObjectKind.TREE
    if leaf.mode == objects.GITLINK_MODE:
        return graph.ObjectKind.COMMIT
    return graph.ObjectKind.BLOB


def format_tree_leaf(leaf: objects.TreeLeaf) -> str:
    """Return one line of tree listing output for the given leaf."""

    kind = leaf_kind(leaf)
    return (
        f"{leaf.mode:06d} {kind.value} {format_digest(leaf.digest)}"
        f"\t{Style.BRIGHT}{leaf.path}{Style.RESET_ALL}"
    )


def format_payload(payload: bytes) -> str:
    """Return a printable rendering of an object payload.

    Payloads that are valid utf-8 are returned as text, anything
    else is rendered as hex.
    """

    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError:
        return payload.hex()
