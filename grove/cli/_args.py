from typing import Sequence
import os
import sys
import logging
import argparse

import colorama
import structlog
import sentry_sdk
from sentry_sdk.integrations.logging import ignore_logger

import grove
from . import (
    _cmd_cat_file,
    _cmd_checkout,
    _cmd_hash_object,
    _cmd_init,
    _cmd_log,
    _cmd_ls_tree,
    _cmd_version,
)


def parse_args(argv: Sequence[str]) -> argparse.Namespace:

    parser = argparse.ArgumentParser(prog=grove.__name__, description=grove.__doc__)
    parser.add_argument(
        "--debug", "-d", action="store_true", default=("GROVE_DEBUG" in os.environ)
    )

    sub_parsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    _cmd_version.register(sub_parsers)
    _cmd_init.register(sub_parsers)

    _cmd_hash_object.register(sub_parsers)
    _cmd_cat_file.register(sub_parsers)
    _cmd_ls_tree.register(sub_parsers)

    _cmd_checkout.register(sub_parsers)
    _cmd_log.register(sub_parsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        sys.exit(1)
    return args


def configure_sentry() -> None:

    dsn = os.getenv("GROVE_SENTRY_DSN")
    if not dsn:
        return

    sentry_sdk.init(
        dsn,
        environment=os.getenv("SENTRY_ENVIRONMENT", "production"),
        release=grove.__version__,
    )
    # the cli uses the logger after capturing errors explicitly,
    # so in this case we'll ask sentry to ignore all logging errors
    ignore_logger("cli")


def configure_logging(args: argparse.Namespace) -> None:

    colorama.init()
    level = logging.INFO
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    if args.debug:
        os.environ["GROVE_DEBUG"] = "1"
        level = logging.DEBUG
        processors.extend(
            [
                structlog.stdlib.add_logger_name,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
            ]
        )

    processors.append(structlog.dev.ConsoleRenderer())

    # object payloads are written to stdout, so logs go elsewhere
    logging.basicConfig(stream=sys.stderr, format="%(message)s", level=level)
    logging.getLogger().setLevel(level)
    structlog.configure(
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=processors,
    )
