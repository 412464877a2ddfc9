"""Shared fixtures for flare_flags benchmarks."""

import pytest
from flare_flags import FlareFlags, decode_config


def _build_wire_config(n_flags=200, n_cohorts=20):
    """Build a configuration mixing every matcher kind."""
    cohorts = {}
    for i in range(n_cohorts):
        cohorts[f"cohort-{i}"] = [
            f"user-{i}",
            {"plan": "premium", "region": f"region-{i}"},
        ]

    flags = {}
    for i in range(n_flags):
        kind = i % 4
        if kind == 0:
            # Always on
            flags[f"flag-{i}"] = [True]
        elif kind == 1:
            # User id list
            flags[f"flag-{i}"] = [False] + [f"user-{j}" for j in range(10)]
        elif kind == 2:
            # Property matcher
            flags[f"flag-{i}"] = [False, {"plan": "premium", "beta": True}]
        else:
            # Cohort reference
            flags[f"flag-{i}"] = [False, f"__cohort__cohort-{i % n_cohorts}"]
    return {"cohorts": cohorts, "flags": flags}


@pytest.fixture
def wire_config():
    """Raw wire configuration for decode benchmarks."""
    return _build_wire_config()


@pytest.fixture
def config():
    """Decoded configuration."""
    return decode_config(_build_wire_config())


@pytest.fixture
def defaults():
    """Defaults covering every configured flag."""
    return {f"flag-{i}": False for i in range(200)}


@pytest.fixture
def flags(defaults, config):
    """FlareFlags preloaded with the configuration and an identified user."""
    ff = FlareFlags(defaults)
    ff.set_config(config)
    ff.identify("user-3", {"plan": "premium", "region": "region-3", "beta": True})
    return ff
