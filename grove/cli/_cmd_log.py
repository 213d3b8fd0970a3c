import argparse

import grove


def register(sub_parsers: argparse._SubParsersAction) -> None:

    log_cmd = sub_parsers.add_parser("log", help=_log.__doc__)
    log_cmd.add_argument(
        "commit", metavar="COMMIT", help="The commit to show history of"
    )
    log_cmd.set_defaults(func=_log)


def _log(args: argparse.Namespace) -> None:
    """Print the history of a commit as a graphviz digraph."""

    repo = grove.find_repository()
    db = repo.objects
    digest = grove.find_object(db, args.commit, grove.graph.ObjectKind.COMMIT)
    for line in grove.format_graphviz(db, digest):
        print(line)
