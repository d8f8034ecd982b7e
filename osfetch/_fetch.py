# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import Callable, List, Optional, Sequence, Tuple

import structlog

from . import storage, io
from ._glob import match_refs, is_glob
from ._lister import list_refs
from ._config import get_config

_LOGGER = structlog.get_logger("osfetch")

Reporter = Callable[[int, Sequence[str]], None]


class Fetcher:
    """Fetches every ref of a remote that matches a ref glob.

    The refs advertised by the remote are listed from the source,
    filtered by the glob, reported, and then pulled one at a time into
    the repository through the sink. The first failed pull stops the
    fetch and is raised to the caller, leaving any refs already pulled
    in place.
    """

    def __init__(self, repository: str, remote: str) -> None:

        self._repository = repository
        self._remote = remote
        self._source: Optional[storage.RefSource] = None
        self._sink: Optional[storage.FetchSink] = None
        self._report: Reporter = io.print_match_report
        self._dry_run = False

    def with_source(self, source: storage.RefSource) -> "Fetcher":

        self._source = source
        return self

    def with_sink(self, sink: storage.FetchSink) -> "Fetcher":

        self._sink = sink
        return self

    def with_backend(self, repo: storage.Repository) -> "Fetcher":

        return self.with_source(repo).with_sink(repo)

    def with_reporter(self, report: Reporter) -> "Fetcher":

        self._report = report
        return self

    def dry_run(self, dry_run: bool) -> "Fetcher":

        self._dry_run = dry_run
        return self

    def fetch(self, pattern: str) -> List[str]:
        """Fetch all refs matching the given pattern, returning the refs pulled.

        Raises:
            CollaboratorError: if the remote refs could not be listed
            FetchFailed: on the first ref that could not be pulled
        """

        source, sink = self._get_backend()
        all_refs = list_refs(source, self._repository, self._remote)
        targets = match_refs(all_refs, pattern)
        _LOGGER.debug(
            "matched refs",
            pattern=pattern,
            glob=is_glob(pattern),
            total=len(all_refs),
            count=len(targets),
        )
        self._report(len(all_refs), targets)

        if self._dry_run:
            _LOGGER.info("dry run, skipping pull", count=len(targets))
            return []

        pulled = []
        for ref in targets:
            _LOGGER.info("pulling ref", remote=self._remote, ref=ref)
            sink.pull(self._repository, self._remote, ref)
            pulled.append(ref)

        _LOGGER.info("done", remote=self._remote, count=len(pulled))
        return pulled

    def _get_backend(self) -> Tuple[storage.RefSource, storage.FetchSink]:

        if self._source is not None and self._sink is not None:
            return self._source, self._sink

        repo = get_config().get_repository()
        return self._source or repo, self._sink or repo


def fetch_refs(
    repository: str,
    remote: str,
    pattern: str,
    source: storage.RefSource = None,
    sink: storage.FetchSink = None,
    report: Reporter = None,
) -> List[str]:
    """Fetch every ref of the remote that matches the given ref glob.

    Args:
        repository (str): path to the local repository to fetch into
        remote (str): name of the remote to list and pull refs from
        pattern (str): the ref glob to match, eg: fedora/36/*/silverblue
        source (RefSource): where to list refs, defaults to the configured repository
        sink (FetchSink): where to pull refs, defaults to the configured repository
        report (callable): receives the total ref count and the matched refs

    Returns:
        List(str): the refs that were pulled, in order
    """

    fetcher = Fetcher(repository, remote)
    if source is not None:
        fetcher.with_source(source)
    if sink is not None:
        fetcher.with_sink(sink)
    if report is not None:
        fetcher.with_reporter(report)
    return fetcher.fetch(pattern)
