# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import Sequence, TextIO
import sys

from colorama import Fore, Style

from ._errors import OSFetchError, CollaboratorError, FetchFailed


def format_ref(ref: str) -> str:
    """Return a nicely formatted string representation of the given ref."""

    return f"{Style.BRIGHT}{ref}{Style.RESET_ALL}"


def format_match_report(total: int, matched: Sequence[str]) -> str:
    """Return the match count followed by each matched ref on its own line."""

    color = Fore.GREEN if matched else Fore.YELLOW
    lines = [f"{color}{len(matched)}/{total} refs matched{Fore.RESET}"]
    lines.extend(f"  {format_ref(ref)}" for ref in matched)
    return "\n".join(lines)


def print_match_report(
    total: int, matched: Sequence[str], out: TextIO = None
) -> None:

    print(format_match_report(total, matched), file=out or sys.stdout)


def format_error(err: Exception) -> str:
    """Return a human readable description of the given error."""

    msg = str(err)
    if isinstance(err, FetchFailed):
        msg = f"{msg}\n {Style.DIM}fetch stopped at '{err.ref}'"
    elif isinstance(err, CollaboratorError) and err.command:
        msg = f"{msg}\n {Style.DIM}command: {' '.join(err.command)}"
    elif not isinstance(err, OSFetchError):
        msg = f"{type(err).__name__}: {msg}"
    return f"{Fore.RED}{msg}{Style.RESET_ALL}"
