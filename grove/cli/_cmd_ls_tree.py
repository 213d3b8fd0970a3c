import argparse

import grove


def register(sub_parsers: argparse._SubParsersAction) -> None:

    ls_cmd = sub_parsers.add_parser("ls-tree", help=_ls_tree.__doc__)
    ls_cmd.add_argument("tree", metavar="TREE", help="The tree (or commit) to list")
    ls_cmd.set_defaults(func=_ls_tree)


def _ls_tree(args: argparse.Namespace) -> None:
    """List the contents of a tree object."""

    repo = grove.find_repository()
    db = repo.objects
    digest = grove.find_object(db, args.tree, grove.graph.ObjectKind.TREE)
    tree = db.read_object(digest)
    for leaf in tree:
        print(grove.io.format_tree_leaf(leaf))
