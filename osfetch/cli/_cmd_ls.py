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

    ls_cmd = sub_parsers.add_parser(
        "ls", aliases=["list"], help=_ls.__doc__, description=_ls.__doc__, **parser_args
    )
    ls_cmd.add_argument(
        "refs",
        metavar="REFGLOB",
        nargs="?",
        help="Only list the refs matching this glob, for example: fedora/36/*/updates",
    )
    _flags.add_remote_flags(ls_cmd)
    ls_cmd.set_defaults(func=_ls)
    return ls_cmd


def _ls(args: argparse.Namespace) -> None:
    """List the refs advertised by a remote."""

    repo, remote = _flags.get_remote_from_flags(args)
    backend = osfetch.get_config().get_repository()
    refs = osfetch.list_refs(backend, repo, remote)
    if args.refs is not None:
        refs = osfetch.match_refs(refs, args.refs)
    for ref in refs:
        print(ref)
