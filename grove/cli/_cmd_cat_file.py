import argparse

import grove


def register(sub_parsers: argparse._SubParsersAction) -> None:

    cat_cmd = sub_parsers.add_parser("cat-file", help=_cat_file.__doc__)
    cat_cmd.add_argument(
        "type",
        metavar="TYPE",
        choices=grove.graph.ObjectKind.names(),
        help="The kind of object expected: %(choices)s",
    )
    cat_cmd.add_argument("object", metavar="OBJECT", help="The object to display")
    cat_cmd.set_defaults(func=_cat_file)


def _cat_file(args: argparse.Namespace) -> None:
    """Print the payload of a repository object."""

    repo = grove.find_repository()
    db = repo.objects
    kind = grove.graph.ObjectKind(args.type)
    digest = grove.find_object(db, args.object, kind)
    obj = db.read_object(digest)
    print(grove.io.format_payload(obj.serialize()), end="")
