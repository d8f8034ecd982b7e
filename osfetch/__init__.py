# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk
"""OSFetch - fetch ostree refs from a remote using ref globs"""

__version__ = "0.1.0"

from . import storage, io
from ._errors import OSFetchError, CollaboratorError, FetchFailed
from ._config import get_config, load_config, Config
from ._glob import match_refs, matches, split_ref, is_glob, WILDCARD
from ._lister import list_refs, parse_ref_listing
from ._fetch import Fetcher, fetch_refs

__all__ = list(locals().keys())
