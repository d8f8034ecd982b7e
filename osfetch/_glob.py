# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import Iterable, List

WILDCARD = "*"
SEPARATOR = "/"


def split_ref(name: str) -> List[str]:
    """Split a ref name or ref glob into its path segments."""

    return name.split(SEPARATOR)


def is_glob(pattern: str) -> bool:
    """Return true if any segment of the given pattern is a wildcard."""

    return WILDCARD in split_ref(pattern)


def matches(ref: str, pattern: str) -> bool:
    """Return true if the given ref name is matched by the given ref glob.

    Each segment of the pattern is either a literal, which must be
    equal to the segment of the ref at the same position, or the
    wildcard '*' which matches any one whole segment. The number of
    segments is fixed by the pattern, so for example:

        fedora/36/*/silverblue

    matches fedora/36/x86_64/silverblue but not
    fedora/36/x86_64/testing/silverblue.
    """

    return _matches_parts(split_ref(ref), split_ref(pattern))


def match_refs(all_refs: Iterable[str], pattern: str) -> List[str]:
    """Return the refs matched by the given ref glob, in their original order.

    Duplicate entries in the input are kept.
    """

    parts = split_ref(pattern)
    return [ref for ref in all_refs if _matches_parts(split_ref(ref), parts)]


def _matches_parts(ref_parts: List[str], glob_parts: List[str]) -> bool:

    if len(ref_parts) != len(glob_parts):
        return False

    for part, glob in zip(ref_parts, glob_parts):
        if glob != WILDCARD and part != glob:
            return False

    return True
