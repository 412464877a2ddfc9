"""Client-side boolean feature flags with cohorts and change notification."""

from .binding import FlagView
from .client import FlareFlags, Listener
from .engine import evaluate
from .exceptions import FlareFlagsError, InvalidConfigError, ListenerError
from .matching import matches, resolve_cohorts
from .models import (
    COHORT_PREFIX,
    EMPTY_CONFIG,
    CohortMatcher,
    Configuration,
    FlagRule,
    IdentifierMatcher,
    Matcher,
    PropertyMatcher,
    Scalar,
    Subject,
)
from .storage import CONFIG_KEY, ConfigSource, ConfigStore
from .wire import decode_config, dumps, encode_config, loads

__version__ = "0.1.0"

__all__ = [
    "COHORT_PREFIX",
    "CONFIG_KEY",
    "EMPTY_CONFIG",
    "CohortMatcher",
    "ConfigSource",
    "ConfigStore",
    "Configuration",
    "FlagRule",
    "FlagView",
    "FlareFlags",
    "FlareFlagsError",
    "IdentifierMatcher",
    "InvalidConfigError",
    "Listener",
    "ListenerError",
    "Matcher",
    "PropertyMatcher",
    "Scalar",
    "Subject",
    "decode_config",
    "dumps",
    "encode_config",
    "evaluate",
    "loads",
    "matches",
    "resolve_cohorts",
]
