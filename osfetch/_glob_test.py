# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import List

import pytest

from ._glob import match_refs, matches, is_glob, split_ref

FEDORA_REFS = [
    "fedora/36/aarch64/silverblue",
    "fedora/36/aarch64/testing/silverblue",
    "fedora/36/aarch64/updates/silverblue",
    "fedora/36/ppc64le/silverblue",
    "fedora/36/ppc64le/testing/silverblue",
    "fedora/36/x86_64/silverblue",
    "fedora/36/x86_64/testing/silverblue",
    "fedora/36/x86_64/updates/silverblue",
]


@pytest.mark.parametrize(
    "refs,pattern,expected",
    [
        (
            [
                "fedora/36/aarch64/silverblue",
                "fedora/36/aarch64/testing/silverblue",
                "fedora/36/x86_64/silverblue",
            ],
            "fedora/36/*/silverblue",
            ["fedora/36/aarch64/silverblue", "fedora/36/x86_64/silverblue"],
        ),
        (["a/b/c"], "a/b/c", ["a/b/c"]),
        ([], "a/*/c", []),
        ([], "", []),
        (["a/b/c", "a/b"], "a/b", ["a/b"]),
        (["a/b/c", "A/b/c"], "a/b/c", ["a/b/c"]),
        (["a/b/c"], "a/*", []),
        (["a/b/c"], "*/*/*/*", []),
        (["a/b:c/d", "a/b c/d"], "a/*/d", ["a/b:c/d", "a/b c/d"]),
        (["a/bc/d"], "a/b*/d", []),
        (["a/b*/d"], "a/b*/d", ["a/b*/d"]),
        (["a//c", "a/b/c"], "a/*/c", ["a//c", "a/b/c"]),
    ],
)
def test_match_refs(refs: List[str], pattern: str, expected: List[str]) -> None:

    assert match_refs(refs, pattern) == expected


def test_match_refs_wildcard_channels() -> None:

    actual = match_refs(FEDORA_REFS, "fedora/36/*/updates/silverblue")
    assert actual == [
        "fedora/36/aarch64/updates/silverblue",
        "fedora/36/x86_64/updates/silverblue",
    ]


def test_match_refs_segment_count() -> None:

    for pattern in ("*", "*/*", "*/*/*", "*/*/*/*", "*/*/*/*/*", "*/*/*/*/*/*"):
        count = len(split_ref(pattern))
        for ref in match_refs(FEDORA_REFS, pattern):
            assert len(split_ref(ref)) == count


def test_match_refs_all_wildcards() -> None:

    four = [r for r in FEDORA_REFS if len(split_ref(r)) == 4]
    five = [r for r in FEDORA_REFS if len(split_ref(r)) == 5]
    assert match_refs(FEDORA_REFS, "*/*/*/*") == four
    assert match_refs(FEDORA_REFS, "*/*/*/*/*") == five


def test_match_refs_literal_is_exact() -> None:

    for ref in FEDORA_REFS:
        assert match_refs(FEDORA_REFS, ref) == [ref]
    assert match_refs(FEDORA_REFS, "fedora/36/x86_64") == []
    assert match_refs(FEDORA_REFS, "fedora/36/x86_64/silverblue/") == []


def test_match_refs_preserves_order_and_duplicates() -> None:

    refs = ["z/1", "a/1", "z/1", "m/2", "b/1"]
    assert match_refs(refs, "*/1") == ["z/1", "a/1", "z/1", "b/1"]


def test_match_refs_is_pure() -> None:

    refs = list(FEDORA_REFS)
    first = match_refs(refs, "fedora/*/x86_64/*")
    second = match_refs(refs, "fedora/*/x86_64/*")
    assert first == second
    assert refs == FEDORA_REFS


def test_match_refs_accepts_iterables() -> None:

    assert match_refs(iter(["a/b", "a/c"]), "a/*") == ["a/b", "a/c"]


@pytest.mark.parametrize(
    "ref,pattern,expected",
    [
        ("fedora/36/x86_64/silverblue", "fedora/36/*/silverblue", True),
        ("fedora/36/x86_64/testing/silverblue", "fedora/36/*/silverblue", False),
        ("fedora/37/x86_64/silverblue", "fedora/36/*/silverblue", False),
        ("x", "*", True),
        ("", "*", True),
        ("", "", True),
    ],
)
def test_matches(ref: str, pattern: str, expected: bool) -> None:

    assert matches(ref, pattern) is expected


@pytest.mark.parametrize(
    "pattern,expected",
    [
        ("fedora/36/*/silverblue", True),
        ("*", True),
        ("fedora/36/x86_64/silverblue", False),
        ("fedora/3*/x86_64", False),
    ],
)
def test_is_glob(pattern: str, expected: bool) -> None:

    assert is_glob(pattern) is expected
