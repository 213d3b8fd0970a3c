"""Command line interface to grove repositories."""

from typing import Sequence
import sys
import traceback

import structlog
import sentry_sdk

import grove

from ._args import parse_args, configure_logging, configure_sentry

_logger = structlog.get_logger("cli")


def main() -> None:

    code = run(sys.argv[1:])
    sentry_sdk.flush()
    sys.exit(code)


def run(argv: Sequence[str]) -> int:

    try:
        configure_sentry()
    except Exception as e:
        print(f"failed to initialize sentry: {e}", file=sys.stderr)

    try:
        args = parse_args(argv)
    except SystemExit as e:
        return e.code

    configure_logging(args)

    sentry_sdk.set_extra("command", args.command)
    sentry_sdk.set_extra("argv", sys.argv)

    try:
        args.func(args)

    except KeyboardInterrupt:
        pass

    except Exception as e:
        _capture_if_relevant(e)
        _logger.error(str(e))
        if args.debug:
            traceback.print_exc(file=sys.stderr)
        return 1

    return 0


def _capture_if_relevant(e: Exception) -> None:

    if isinstance(e, grove.graph.UnknownObjectError):
        return
    if isinstance(e, grove.storage.ResolveError):
        return
    if isinstance(e, grove.NotARepositoryError):
        return
    if isinstance(e, grove.WorktreeNotEmptyError):
        return
    if isinstance(e, grove.UnexpectedKindError):
        return
    if isinstance(e, grove.CheckoutError):
        return
    sentry_sdk.capture_exception(e)
