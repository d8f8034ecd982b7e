# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import Any
import argparse

import osfetch

from . import _flags


def register(
    sub_parsers: argparse._SubParsersAction, **parser_args: Any
) -> argparse.ArgumentParser:

    fetch_cmd = sub_parsers.add_parser(
        "fetch", help=_fetch.__doc__, description=_fetch.__doc__, **parser_args
    )
    fetch_cmd.add_argument(
        "refs",
        metavar="REFGLOB",
        help="A ref that supports globs, for example: fedora/36/*/updates",
    )
    _flags.add_remote_flags(fetch_cmd)
    fetch_cmd.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Only report the matching refs, do not pull them",
    )
    fetch_cmd.add_argument(
        "--commit-metadata-only",
        action="store_true",
        default=None,
        help="Pull only the commit objects and not the content of each ref",
    )
    fetch_cmd.set_defaults(func=_fetch)
    return fetch_cmd


def _fetch(args: argparse.Namespace) -> None:
    """Fetch multiple ostree refs from a remote."""

    repo, remote = _flags.get_remote_from_flags(args)
    backend = osfetch.get_config().get_repository()
    if args.commit_metadata_only is not None:
        backend.commit_metadata_only = args.commit_metadata_only

    fetcher = (
        osfetch.Fetcher(repo, remote).with_backend(backend).dry_run(args.dry_run)
    )
    fetcher.fetch(args.refs)
