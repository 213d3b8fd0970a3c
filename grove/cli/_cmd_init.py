import argparse

import grove


def register(sub_parsers: argparse._SubParsersAction) -> None:

    init_cmd = sub_parsers.add_parser("init", help=_init.__doc__)
    init_cmd.add_argument(
        "path",
        metavar="PATH",
        nargs="?",
        default=".",
        help="Where to create the repository, defaults to the current directory",
    )
    init_cmd.set_defaults(func=_init)


def _init(args: argparse.Namespace) -> None:
    """Create a new, empty repository."""

    repo = grove.create_repository(args.path)
    print(f"Initialized empty repository in {repo.gitdir}")
