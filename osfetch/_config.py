# Copyright (c) 2021 Sony Pictures Imageworks, et al.
# SPDX-License-Identifier: Apache-2.0
# https://github.com/imageworks/spk

from typing import Mapping, Optional
import os
import errno
import configparser

import structlog

from . import storage

_DEFAULTS = {
    "ostree": {"binary": "ostree", "commit_metadata_only": "false"},
    "fetch": {"repo": "", "remote": ""},
    "sentry": {"dsn": "", "environment": "production"},
}
_CONFIG: Optional["Config"] = None
_LOGGER = structlog.get_logger("osfetch.config")
_ENV_PREFIX = "OSFETCH_"


class Config(configparser.ConfigParser):
    def __init__(self) -> None:
        super(Config, self).__init__()
        self.read_dict(_DEFAULTS)

    @property
    def default_repo(self) -> Optional[str]:
        """Return the configured local repository path, if any."""
        return self["fetch"]["repo"] or None

    @property
    def default_remote(self) -> Optional[str]:
        """Return the configured remote name, if any."""
        return self["fetch"]["remote"] or None

    @property
    def sentry_dsn(self) -> Optional[str]:
        return self["sentry"]["dsn"] or None

    def get_repository(self) -> storage.OSTreeRepository:
        """Get the repository backend instance as configured."""

        return storage.OSTreeRepository(
            binary=self["ostree"]["binary"],
            commit_metadata_only=self.getboolean("ostree", "commit_metadata_only"),
        )

    def load_environment(self, environ: Mapping[str, str] = os.environ) -> None:
        """Apply overrides from OSFETCH_<SECTION>_<OPTION> environment variables."""

        for section in self.sections():
            for option in self[section]:
                name = f"{_ENV_PREFIX}{section}_{option}".upper()
                if name in environ:
                    _LOGGER.debug("config override from env", var=name)
                    self[section][option] = environ[name]


def get_config() -> Config:
    """Get the current configuration, loading it if necessary."""

    global _CONFIG
    if _CONFIG is None:
        _CONFIG = load_config()
    return _CONFIG


def load_config() -> Config:
    """Load the osfetch configuration from disk.

    This includes the default, system and user configurations, if they
    exist, followed by any overrides from the environment.
    """

    user_config = os.path.expanduser("~/.config/osfetch/osfetch.conf")
    system_config = "/etc/osfetch.conf"

    config = Config()
    for path in (system_config, user_config):
        try:
            with open(path, "r", encoding="utf-8") as f:
                config.read_file(f, source=path)
        except OSError as e:
            if e.errno != errno.ENOENT:
                raise

    config.load_environment()
    return config
