# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import Dict, Iterable, List, Set, Tuple

from .._errors import CollaboratorError, FetchFailed


class MemRepository:
    """An in-memory stand-in for a real repository backend.

    Remote refs are registered with add_refs, and every call to pull
    is recorded in the pulled list. Refs marked with fail_pull will
    fail with the given status when pulled.
    """

    def __init__(self) -> None:
        self._remotes: Dict[str, List[str]] = {}
        self._failing: Dict[Tuple[str, str], int] = {}
        self._broken: Set[str] = set()
        self.pulled: List[Tuple[str, str, str]] = []

    def add_refs(self, remote: str, refs: Iterable[str]) -> None:

        self._remotes.setdefault(remote, [])
        self._remotes[remote].extend(refs)

    def fail_pull(self, remote: str, ref: str, status: int = 1) -> None:

        self._failing[(remote, ref)] = status

    def break_remote(self, remote: str) -> None:

        self._broken.add(remote)

    def list_refs(self, repository: str, remote: str) -> str:

        if remote in self._broken:
            raise CollaboratorError(
                f"failed to list refs for remote '{remote}'", status=1
            )
        try:
            refs = self._remotes[remote]
        except KeyError:
            raise CollaboratorError(f"unknown remote '{remote}'", status=1)
        return "".join(f"{remote}:{ref}\n" for ref in refs)

    def pull(self, repository: str, remote: str, ref: str) -> None:

        self.pulled.append((repository, remote, ref))
        status = self._failing.get((remote, ref))
        if status is not None:
            raise FetchFailed(remote, ref, status=status)
