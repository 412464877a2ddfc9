"""Flag evaluation: defaults + configuration + subject -> snapshot."""

from typing import Dict, Mapping, Optional

from .matching import matches, resolve_cohorts
from .models import Configuration, Subject

__all__ = ["evaluate"]


def evaluate(
    defaults: Mapping[str, bool],
    config: Optional[Configuration],
    subject: Optional[Subject],
) -> Dict[str, bool]:
    """Compute the value of every flag named in ``defaults``.

    ``config`` of None means no configuration was ever set and yields a copy
    of ``defaults``. Flags configured but absent from ``defaults`` are
    ignored. Cohort membership is resolved once per call.
    """
    if config is None:
        return dict(defaults)

    memberships = resolve_cohorts(subject, config.cohorts)
    result = {}
    for name, default in defaults.items():
        rule = config.flags.get(name)
        if rule is None:
            result[name] = default
        elif rule.always_on:
            result[name] = True
        else:
            result[name] = subject is not None and matches(
                subject, rule.matchers, memberships
            )
    return result
