import argparse

import grove


def register(sub_parsers: argparse._SubParsersAction) -> None:

    checkout_cmd = sub_parsers.add_parser("checkout", help=_checkout.__doc__)
    checkout_cmd.add_argument(
        "commit", metavar="COMMIT", help="The commit or tree to checkout"
    )
    checkout_cmd.add_argument(
        "path", metavar="PATH", help="An empty directory to write files into"
    )
    checkout_cmd.set_defaults(func=_checkout)


def _checkout(args: argparse.Namespace) -> None:
    """Write the files of a commit into an empty directory."""

    repo = grove.find_repository()
    db = repo.objects
    digest = grove.find_object(db, args.commit)
    grove.checkout(db, digest, args.path, max_depth=repo.config.checkout_max_depth)
