# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import Sequence
import sys
import traceback

import sentry_sdk
from colorama import Fore

import osfetch

from ._args import parse_args, configure_logging, configure_sentry


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
        sys.stdout.reconfigure(encoding="utf-8")  # type: ignore
    except AttributeError:
        # stdio might not be a real terminal, but that's okay
        pass

    try:
        args.func(args)

    except KeyboardInterrupt:
        pass

    except SystemExit as e:
        return e.code

    except Exception as e:
        _capture_if_relevant(e)
        print(f"{osfetch.io.format_error(e)}", file=sys.stderr)
        if args.verbose > 2:
            print(f"{Fore.RED}{traceback.format_exc()}{Fore.RESET}", file=sys.stderr)
        return 1

    return 0


def _capture_if_relevant(err: Exception) -> None:

    if isinstance(err, osfetch.OSFetchError):
        return
    if isinstance(err, ValueError):
        return
    sentry_sdk.capture_exception(err)
