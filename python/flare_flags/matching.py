"""Matcher evaluation and cohort resolution.

Both functions are pure: no state, no side effects.
"""

from typing import AbstractSet, Iterable, Mapping, Optional, Set

from .models import (
    CohortMatcher,
    IdentifierMatcher,
    Matcher,
    PropertyMatcher,
    Subject,
    scalar_equal,
)

__all__ = ["matches", "resolve_cohorts"]

_MISSING = object()


def _match_one(subject: Subject, matcher: Matcher, cohorts: AbstractSet[str]) -> bool:
    if isinstance(matcher, IdentifierMatcher):
        return matcher.id == subject.id
    if isinstance(matcher, CohortMatcher):
        return matcher.cohort in cohorts
    if isinstance(matcher, PropertyMatcher):
        props = subject.properties
        for key, expected in matcher.properties.items():
            actual = props.get(key, _MISSING)
            if actual is _MISSING or not scalar_equal(actual, expected):
                return False
        return True
    return False


def matches(
    subject: Optional[Subject],
    matchers: Iterable[Matcher],
    cohorts: AbstractSet[str] = frozenset(),
) -> bool:
    """Return True if any matcher is satisfied by ``subject``.

    ``cohorts`` is the set of cohort names the subject already belongs to;
    it is looked up, never computed here. No subject or an empty matcher
    list never matches.
    """
    if subject is None:
        return False
    return any(_match_one(subject, m, cohorts) for m in matchers)


def resolve_cohorts(
    subject: Optional[Subject], cohorts: Mapping[str, Iterable[Matcher]]
) -> Set[str]:
    """Compute the names of every cohort ``subject`` belongs to.

    Cohort definitions are evaluated with an empty membership set, so a
    cohort reference inside a cohort definition never matches.
    """
    if subject is None:
        return set()
    return {name for name, matchers in cohorts.items() if matches(subject, matchers)}
