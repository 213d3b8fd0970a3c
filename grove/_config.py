from typing import Optional
import os
import errno
import configparser

import structlog

from . import encoding

DEFAULT_MAX_DEPTH = 256
SYSTEM_CONFIG = "/etc/grove.conf"
USER_CONFIG = "~/.config/grove/grove.conf"
_DEFAULTS = {
    "core": {
        "repositoryformatversion": "0",
        "filemode": "false",
        "bare": "false",
        "compression": str(encoding.DEFAULT_COMPRESSION),
    },
    "checkout": {"max_depth": str(DEFAULT_MAX_DEPTH)},
}
_REPOSITORY_DEFAULTS = {
    "core": {
        "repositoryformatversion": "0",
        "filemode": "false",
        "bare": "false",
    }
}
_LOGGER = structlog.get_logger("grove.config")


class Config(configparser.ConfigParser):
    def __init__(self) -> None:
        super(Config, self).__init__()

    @property
    def repository_format_version(self) -> int:
        """Return the on-disk format version of the repository."""
        return self.getint("core", "repositoryformatversion")

    @property
    def compression_level(self) -> int:
        """Return the zlib compression level used for new objects."""
        return self.getint("core", "compression")

    @property
    def checkout_max_depth(self) -> int:
        """Return the deepest tree nesting allowed during checkout."""
        return self.getint("checkout", "max_depth")


def default_repository_config() -> Config:
    """Return the configuration written into newly created repositories."""

    config = Config()
    config.read_dict(_REPOSITORY_DEFAULTS)
    return config


def load_config(repository_config: Optional[str] = None) -> Config:
    """Load the grove configuration from disk.

    This includes the default, system and user configurations, followed
    by the given repository configuration file, if they exist.
    """

    user_config = os.path.expanduser(USER_CONFIG)
    system_config = SYSTEM_CONFIG

    config = Config()
    config.read_dict(_DEFAULTS)
    for filename in (system_config, user_config, repository_config):
        if filename is None:
            continue
        try:
            with open(filename, "r", encoding="utf-8") as f:
                config.read_file(f, source=filename)
        except OSError as e:
            if e.errno != errno.ENOENT:
                raise
            continue
        _LOGGER.debug("loaded config", source=filename)

    return config
