"""Wire-format codec for configurations.

The wire shape is plain JSON::

    {
        "cohorts": {"beta": ["user-1", {"plan": "premium"}]},
        "flags": {"newUi": [false, "__cohort__beta", "user-2"]}
    }

A flag entry is a leading always-on bool followed by zero or more matchers.
A matcher is a user id string, a ``COHORT_PREFIX``-prefixed cohort name, or
an object of property name -> scalar.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Tuple

from .exceptions import InvalidConfigError
from .models import (
    COHORT_PREFIX,
    CohortMatcher,
    Configuration,
    FlagRule,
    IdentifierMatcher,
    Matcher,
    PropertyMatcher,
)

__all__ = [
    "decode_config",
    "decode_matcher",
    "dumps",
    "encode_config",
    "encode_matcher",
    "loads",
]

logger = logging.getLogger(__name__)

_SCALARS = (str, int, float, bool)


# ------------------------------------------------------------------
# Decoding
# ------------------------------------------------------------------


def decode_matcher(raw: Any, path: str = "") -> Matcher:
    """Decode one wire matcher into its tagged variant."""
    if isinstance(raw, str):
        if raw.startswith(COHORT_PREFIX):
            return CohortMatcher(raw[len(COHORT_PREFIX):])
        return IdentifierMatcher(raw)
    if isinstance(raw, Mapping):
        props = {}
        for key, value in raw.items():
            if not isinstance(key, str):
                raise InvalidConfigError(f"property name must be a string, got {key!r}", path)
            if not isinstance(value, _SCALARS):
                raise InvalidConfigError(
                    f"property {key!r} must be a string, number or bool, "
                    f"got {type(value).__name__}",
                    path,
                )
            props[key] = value
        return PropertyMatcher(props)
    raise InvalidConfigError(
        f"matcher must be a string or an object, got {type(raw).__name__}", path
    )


def _decode_matchers(raw: Any, path: str) -> Tuple[Matcher, ...]:
    if not isinstance(raw, (list, tuple)):
        raise InvalidConfigError("expected a list of matchers", path)
    return tuple(decode_matcher(m, f"{path}[{i}]") for i, m in enumerate(raw))


def _section(raw: Mapping, name: str) -> Mapping:
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidConfigError("expected an object", name)
    return value


def decode_config(raw: Mapping) -> Configuration:
    """Decode a wire mapping into a :class:`Configuration`.

    Missing ``cohorts`` or ``flags`` sections read as empty.

    Raises:
        InvalidConfigError: If the mapping does not have the wire shape.
    """
    if not isinstance(raw, Mapping):
        raise InvalidConfigError(
            f"configuration must be an object, got {type(raw).__name__}"
        )

    cohorts: Dict[str, Tuple[Matcher, ...]] = {}
    for name, matchers in _section(raw, "cohorts").items():
        decoded = _decode_matchers(matchers, f"cohorts.{name}")
        if any(isinstance(m, CohortMatcher) for m in decoded):
            logger.warning(
                "Cohort %r references another cohort; such matchers never match",
                name,
            )
        cohorts[name] = decoded

    flags: Dict[str, FlagRule] = {}
    for name, entry in _section(raw, "flags").items():
        path = f"flags.{name}"
        if not isinstance(entry, (list, tuple)) or not entry:
            raise InvalidConfigError("expected [always_on, ...matchers]", path)
        always_on = entry[0]
        if not isinstance(always_on, bool):
            raise InvalidConfigError(
                f"first element must be a bool, got {type(always_on).__name__}", path
            )
        flags[name] = FlagRule(always_on, _decode_matchers(entry[1:], path))

    return Configuration(cohorts=cohorts, flags=flags)


def loads(text) -> Configuration:
    """Parse a JSON document (str or bytes) into a :class:`Configuration`."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidConfigError(f"invalid JSON: {e}") from e
    return decode_config(raw)


# ------------------------------------------------------------------
# Encoding
# ------------------------------------------------------------------


def encode_matcher(matcher: Matcher):
    """Encode one tagged matcher back into its wire form."""
    if isinstance(matcher, IdentifierMatcher):
        return matcher.id
    if isinstance(matcher, CohortMatcher):
        return COHORT_PREFIX + matcher.cohort
    if isinstance(matcher, PropertyMatcher):
        return dict(matcher.properties)
    raise TypeError(f"not a matcher: {matcher!r}")


def encode_config(config: Configuration) -> dict:
    """Encode a :class:`Configuration` into its wire mapping."""
    cohorts = {
        name: [encode_matcher(m) for m in matchers]
        for name, matchers in config.cohorts.items()
    }
    flags: Dict[str, List[Any]] = {
        name: [rule.always_on] + [encode_matcher(m) for m in rule.matchers]
        for name, rule in config.flags.items()
    }
    return {"cohorts": cohorts, "flags": flags}


def dumps(config: Configuration) -> str:
    """Serialize a :class:`Configuration` as compact JSON."""
    return json.dumps(encode_config(config), separators=(",", ":"))
