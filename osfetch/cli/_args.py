# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import Sequence
import os
import sys
import getpass
import logging
import argparse

import sentry_sdk
import structlog
import colorama

import osfetch
from . import _cmd_fetch, _cmd_ls, _cmd_version


def parse_args(argv: Sequence[str]) -> argparse.Namespace:

    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        help="Enable verbose output (can be specified more than once)",
        default=int(os.getenv("OSFETCH_VERBOSITY", 0)),
    )

    parser = argparse.ArgumentParser(
        prog=osfetch.__name__, description=osfetch.__doc__, parents=[parent_parser]
    )

    sub_parsers = parser.add_subparsers(
        dest="command", title="commands", metavar="COMMAND"
    )

    _cmd_fetch.register(sub_parsers, parents=[parent_parser])
    _cmd_ls.register(sub_parsers, parents=[parent_parser])
    _cmd_version.register(sub_parsers, parents=[parent_parser])

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        sys.exit(1)
    return args


def configure_sentry() -> None:

    config = osfetch.get_config()
    dsn = config.sentry_dsn
    if dsn is None:
        return

    from sentry_sdk.integrations.logging import ignore_logger

    sentry_sdk.init(
        dsn,
        environment=os.getenv("SENTRY_ENVIRONMENT", config["sentry"]["environment"]),
        release=osfetch.__version__,
    )
    # errors are logged by the cli after being captured explicitly
    ignore_logger("osfetch.cli")
    sentry_sdk.set_user({"username": getpass.getuser()})


def configure_logging(args: argparse.Namespace) -> None:

    colorama.init()

    level = logging.INFO
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    os.environ["OSFETCH_VERBOSITY"] = str(args.verbose)
    if args.verbose > 0:
        level = logging.DEBUG
        processors.extend(
            [
                structlog.stdlib.add_logger_name,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
            ]
        )

    processors.append(structlog.dev.ConsoleRenderer())

    logging.basicConfig(stream=sys.stderr, format="%(message)s", level=level)
    structlog.configure_once(
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=processors,
    )
