# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import List

import structlog

from ._errors import CollaboratorError
from .storage import RefSource

_LOGGER = structlog.get_logger("osfetch.lister")


def list_refs(source: RefSource, repository: str, remote: str) -> List[str]:
    """List the names of all refs advertised by a remote.

    Raises:
        CollaboratorError: if the refs could not be queried, or the
            listing returned by the source could not be understood
    """

    try:
        output = source.list_refs(repository, remote)
    except OSError as e:
        raise CollaboratorError(
            f"failed to list refs for remote '{remote}': {e}"
        ) from e
    refs = parse_ref_listing(output)
    _LOGGER.debug("listed remote refs", remote=remote, count=len(refs))
    return refs


def parse_ref_listing(output: str) -> List[str]:
    """Parse the output of a remote ref listing into ref names.

    Each line is expected in the form <remote>:<ref>. Only the first
    colon separates the two, so the ref itself may contain colons.
    Lines are only broken on newlines, since any other character may
    be part of a ref name.
    """

    lines = output.split("\n")
    if lines[-1] == "":
        lines.pop()

    refs = []
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        _, sep, ref = line.partition(":")
        if not sep:
            raise CollaboratorError(
                f"malformed ref listing line, expected <remote>:<ref>: {line!r}"
            )
        refs.append(ref)
    return refs
