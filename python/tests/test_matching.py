"""Tests for matcher evaluation and cohort resolution."""

import pytest

from flare_flags import (
    CohortMatcher,
    IdentifierMatcher,
    PropertyMatcher,
    Subject,
    matches,
    resolve_cohorts,
)
from flare_flags.models import scalar_equal


class TestScalarEqual:
    @pytest.mark.parametrize(
        "left, right",
        [("a", "a"), (1, 1), (25, 25.0), (True, True), (False, False)],
    )
    def test_equal(self, left, right):
        assert scalar_equal(left, right) is True

    @pytest.mark.parametrize(
        "left, right",
        [(25, "25"), (1, True), (0, False), ("true", True), (None, None), ([1], [1])],
    )
    def test_not_equal(self, left, right):
        assert scalar_equal(left, right) is False


class TestMatches:
    def test_no_subject_never_matches(self):
        assert matches(None, [IdentifierMatcher("u1")]) is False
        assert matches(None, [PropertyMatcher({})]) is False

    def test_empty_list_never_matches(self):
        assert matches(Subject("u1"), []) is False

    def test_identifier(self):
        subject = Subject("u1")
        assert matches(subject, [IdentifierMatcher("u1")]) is True
        assert matches(subject, [IdentifierMatcher("u2")]) is False

    def test_property_extra_subject_properties_ignored(self):
        subject = Subject("u1", {"a": 1, "b": True, "c": "x"})
        assert matches(subject, [PropertyMatcher({"a": 1, "b": True})]) is True

    def test_property_missing_key_fails(self):
        subject = Subject("u1", {"a": 1})
        assert matches(subject, [PropertyMatcher({"a": 1, "b": True})]) is False

    def test_property_type_mismatch_fails(self):
        subject = Subject("u1", {"a": "1", "b": True})
        assert matches(subject, [PropertyMatcher({"a": 1, "b": True})]) is False

    def test_property_bool_is_not_number(self):
        subject = Subject("u1", {"beta": 1})
        assert matches(subject, [PropertyMatcher({"beta": True})]) is False

    def test_property_does_not_see_identifier(self):
        subject = Subject("u1")
        assert matches(subject, [PropertyMatcher({"id": "u1"})]) is False

    def test_cohort_reference_uses_given_memberships(self):
        subject = Subject("u1")
        assert matches(subject, [CohortMatcher("beta")], {"beta"}) is True
        assert matches(subject, [CohortMatcher("beta")], {"alpha"}) is False
        assert matches(subject, [CohortMatcher("beta")]) is False

    def test_or_across_matchers(self):
        subject = Subject("u3", {"plan": "free"})
        matchers = [
            IdentifierMatcher("u1"),
            PropertyMatcher({"plan": "premium"}),
            IdentifierMatcher("u3"),
        ]
        assert matches(subject, matchers) is True
        assert matches(subject, matchers[:2]) is False


class TestResolveCohorts:
    def test_no_subject(self):
        assert resolve_cohorts(None, {"beta": [IdentifierMatcher("u1")]}) == set()

    def test_multiple_cohorts(self):
        cohorts = {
            "beta": [IdentifierMatcher("u1")],
            "premium": [PropertyMatcher({"plan": "premium"})],
            "staff": [PropertyMatcher({"staff": True})],
        }
        subject = Subject("u1", {"plan": "premium"})
        assert resolve_cohorts(subject, cohorts) == {"beta", "premium"}

    def test_cohort_reference_inside_cohort_never_matches(self):
        cohorts = {
            "beta": [IdentifierMatcher("u1")],
            "beta-plus": [CohortMatcher("beta")],
        }
        assert resolve_cohorts(Subject("u1"), cohorts) == {"beta"}
