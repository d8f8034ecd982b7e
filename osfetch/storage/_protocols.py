# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class RefSource(Protocol):
    """A service that can enumerate the refs advertised by a remote."""

    def list_refs(self, repository: str, remote: str) -> str:
        """Return the raw ref listing for the named remote.

        The listing has one line per ref in the form <remote>:<ref>.

        Raises:
            CollaboratorError: if the listing could not be retrieved
        """
        ...


@runtime_checkable
class FetchSink(Protocol):
    """A service that pulls the content of a remote ref into local storage."""

    def pull(self, repository: str, remote: str, ref: str) -> None:
        """Pull the given ref from the named remote into the repository.

        Raises:
            FetchFailed: if the ref could not be pulled
        """
        ...


@runtime_checkable
class Repository(RefSource, FetchSink, Protocol):
    """A repository backend that can both list and pull remote refs."""

    pass
