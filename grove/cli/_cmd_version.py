import argparse

import grove


def register(sub_parsers: argparse._SubParsersAction) -> None:

    version_cmd = sub_parsers.add_parser("version", help=_version.__doc__)
    version_cmd.set_defaults(func=_version)


def _version(args: argparse.Namespace) -> None:
    """Print the grove version number and exit."""

    print(grove.__version__)
