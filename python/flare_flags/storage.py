"""Configuration persistence over a key-value store."""

import logging
from typing import MutableMapping, Protocol

from .models import EMPTY_CONFIG, Configuration
from .wire import dumps, loads

__all__ = ["CONFIG_KEY", "ConfigSource", "ConfigStore"]

logger = logging.getLogger(__name__)

CONFIG_KEY = "config"


class ConfigSource(Protocol):
    """Anything that can hand out and store the current configuration."""

    def get(self) -> Configuration: ...

    def put(self, config: Configuration) -> None: ...


class ConfigStore:
    """Keeps the configuration as JSON under one key of a string store.

    ``kv`` is any mutable mapping of str -> str: a dict, a ``dbm`` handle
    wrapper, a shelf, or a client adapter for a remote store.
    """

    def __init__(self, kv: MutableMapping[str, str], key: str = CONFIG_KEY):
        self._kv = kv
        self._key = key

    def get(self) -> Configuration:
        """Return the stored configuration, or ``EMPTY_CONFIG`` if none.

        Raises:
            InvalidConfigError: If the stored value is not a valid configuration.
        """
        value = self._kv.get(self._key)
        if not value:
            logger.debug("No configuration stored under %r", self._key)
            return EMPTY_CONFIG
        return loads(value)

    def put(self, config: Configuration) -> None:
        self._kv[self._key] = dumps(config)

    def load_into(self, flags) -> None:
        """Push the stored configuration into a :class:`FlareFlags`."""
        flags.set_config(self.get())
