"""Benchmark suite for flare_flags.

Uses pytest-benchmark for statistically rigorous performance measurement.
Run with: pytest python/benchmarks/ --benchmark-only -v
"""

import pytest
from flare_flags import FlareFlags, Subject, decode_config, dumps, evaluate, loads


# ---------------------------------------------------------------------------
# Read path
# ---------------------------------------------------------------------------


class TestReadBenchmarks:
    def test_bench_is_enabled_known(self, benchmark, flags):
        result = benchmark(flags.is_enabled, "flag-0")
        assert result is True

    def test_bench_is_enabled_unknown(self, benchmark, flags):
        result = benchmark(flags.is_enabled, "no-such-flag")
        assert result is False


# ---------------------------------------------------------------------------
# Re-evaluation
# ---------------------------------------------------------------------------


class TestEvaluationBenchmarks:
    def test_bench_evaluate(self, benchmark, defaults, config):
        subject = Subject("user-3", {"plan": "premium", "region": "region-3", "beta": True})
        result = benchmark(evaluate, defaults, config, subject)
        assert len(result) == len(defaults)

    def test_bench_identify(self, benchmark, flags):
        """Identify alternating users so every call changes the snapshot."""
        users = [("user-1", {"plan": "free"}), ("user-3", {"plan": "premium", "beta": True})]
        state = {"i": 0}

        def identify():
            user_id, props = users[state["i"] % 2]
            state["i"] += 1
            flags.identify(user_id, props)

        benchmark(identify)

    def test_bench_set_config_with_listeners(self, benchmark, defaults, config):
        ff = FlareFlags(defaults)
        ff.identify("user-3", {"plan": "premium", "beta": True})
        calls = []
        for _ in range(10):
            ff.subscribe(lambda: calls.append(1))
        benchmark(ff.set_config, config)
        assert ff.is_enabled("flag-0") is True


# ---------------------------------------------------------------------------
# Wire codec
# ---------------------------------------------------------------------------


class TestCodecBenchmarks:
    def test_bench_decode_config(self, benchmark, wire_config):
        config = benchmark(decode_config, wire_config)
        assert len(config.flags) == 200

    def test_bench_loads(self, benchmark, config):
        text = dumps(config)
        result = benchmark(loads, text)
        assert result == config
