# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import Optional, Sequence


class OSFetchError(RuntimeError):
    """Base class for all errors raised while listing or fetching refs."""

    pass


class CollaboratorError(OSFetchError):
    """Denotes a failure to list the refs advertised by a remote.

    This covers a non-zero status from the underlying tool, output
    that cannot be decoded as text and malformed listing lines.
    """

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        status: Optional[int] = None,
    ) -> None:

        self.command = list(command) if command is not None else None
        self.status = status
        if status is not None:
            message = f"{message} [status: {status}]"
        super(CollaboratorError, self).__init__(message)


class FetchFailed(OSFetchError):
    """Denotes a matched ref that could not be pulled from its remote."""

    def __init__(
        self, remote: str, ref: str, status: Optional[int] = None, reason: str = ""
    ) -> None:

        self.remote = remote
        self.ref = ref
        self.status = status
        message = f"failed to pull {remote}:{ref}"
        if status is not None:
            message += f" [status: {status}]"
        if reason:
            message += f": {reason}"
        super(FetchFailed, self).__init__(message)
