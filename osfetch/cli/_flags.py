# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import Tuple
import argparse

import osfetch


def add_remote_flags(parser: argparse.ArgumentParser) -> None:

    parser.add_argument(
        "--repo",
        type=str,
        metavar="PATH",
        default=None,
        help="Path to the local ostree repository (default from config [fetch] repo)",
    )
    parser.add_argument(
        "--remote",
        type=str,
        metavar="NAME",
        default=None,
        help="The ostree remote to list refs from (default from config [fetch] remote)",
    )


def get_remote_from_flags(args: argparse.Namespace) -> Tuple[str, str]:

    config = osfetch.get_config()
    repo = args.repo or config.default_repo
    remote = args.remote or config.default_remote
    if not repo:
        raise ValueError("no repository given, specify one with --repo")
    if not remote:
        raise ValueError("no remote given, specify one with --remote")
    return repo, remote
