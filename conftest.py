# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

import logging

import pytest
import structlog

import osfetch

logging.getLogger("").setLevel(logging.DEBUG)
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
)


@pytest.fixture
def memrepo() -> osfetch.storage.MemRepository:

    return osfetch.storage.MemRepository()


@pytest.fixture(autouse=True)
def config() -> osfetch.Config:

    osfetch._config._CONFIG = osfetch.Config()
    return osfetch.get_config()
