# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import List
import subprocess

import structlog

from .._errors import CollaboratorError, FetchFailed

_LOGGER = structlog.get_logger("osfetch.storage")


class OSTreeRepository:
    """Lists and pulls remote refs by running the ostree command line tool."""

    def __init__(self, binary: str = "ostree", commit_metadata_only: bool = False):

        self.binary = binary
        self.commit_metadata_only = commit_metadata_only

    def __repr__(self) -> str:
        return f"OSTreeRepository({self.binary!r})"

    def list_refs(self, repository: str, remote: str) -> str:

        cmd = [self.binary, f"--repo={repository}", "remote", "refs", remote]
        _LOGGER.debug(" ".join(cmd))
        try:
            proc = subprocess.run(cmd, stdout=subprocess.PIPE)
        except OSError as e:
            raise CollaboratorError(f"failed to run {self.binary}: {e}", command=cmd)
        if proc.returncode != 0:
            raise CollaboratorError(
                f"failed to list refs for remote '{remote}'",
                command=cmd,
                status=proc.returncode,
            )
        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CollaboratorError(
                f"ref listing for remote '{remote}' is not valid text: {e}",
                command=cmd,
            )

    def pull(self, repository: str, remote: str, ref: str) -> None:

        cmd = self._pull_command(repository, remote, ref)
        _LOGGER.debug(" ".join(cmd))
        try:
            proc = subprocess.run(cmd)
        except OSError as e:
            raise FetchFailed(remote, ref, reason=str(e))
        if proc.returncode != 0:
            raise FetchFailed(remote, ref, status=proc.returncode)

    def _pull_command(self, repository: str, remote: str, ref: str) -> List[str]:

        cmd = [self.binary, f"--repo={repository}", "pull"]
        if self.commit_metadata_only:
            cmd.append("--commit-metadata-only")
        cmd.extend([remote, ref])
        return cmd
