"""Data model for flag evaluation.

Matchers are an explicit tagged union: the wire format's prefix-encoded
strings are decoded into these classes by :mod:`flare_flags.wire` and never
reach the evaluator as raw strings.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple, Union

__all__ = [
    "COHORT_PREFIX",
    "EMPTY_CONFIG",
    "CohortMatcher",
    "Configuration",
    "FlagRule",
    "IdentifierMatcher",
    "Matcher",
    "PropertyMatcher",
    "Scalar",
    "Subject",
    "scalar_equal",
]

# Shared by cohort definitions and flag matchers on the wire.
COHORT_PREFIX = "__cohort__"

Scalar = Union[str, int, float, bool]


def _scalar_tag(value) -> Optional[str]:
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


def scalar_equal(left, right) -> bool:
    """Strict scalar equality: same type tag, then same value.

    ``1`` and ``True`` are different, ``25`` and ``"25"`` are different,
    ``25`` and ``25.0`` are the same number.
    """
    tag = _scalar_tag(left)
    if tag is None or tag != _scalar_tag(right):
        return False
    return left == right


@dataclass(frozen=True)
class Subject:
    """The identified user flags are evaluated against."""

    id: str
    properties: Mapping[str, Scalar] = field(default_factory=dict)


@dataclass(frozen=True)
class IdentifierMatcher:
    id: str


@dataclass(frozen=True)
class PropertyMatcher:
    properties: Mapping[str, Scalar]


@dataclass(frozen=True)
class CohortMatcher:
    cohort: str


Matcher = Union[IdentifierMatcher, PropertyMatcher, CohortMatcher]


@dataclass(frozen=True)
class FlagRule:
    """Always-on switch plus an OR-list of matchers.

    When ``always_on`` is true the matchers are never consulted.
    """

    always_on: bool
    matchers: Tuple[Matcher, ...] = ()


@dataclass(frozen=True)
class Configuration:
    """One generation of cohorts and flag rules, replaced wholesale."""

    cohorts: Dict[str, Tuple[Matcher, ...]] = field(default_factory=dict)
    flags: Dict[str, FlagRule] = field(default_factory=dict)


EMPTY_CONFIG = Configuration()
