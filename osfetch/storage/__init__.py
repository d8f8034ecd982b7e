# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from ._protocols import RefSource, FetchSink, Repository
from ._ostree import OSTreeRepository
from ._mem import MemRepository
