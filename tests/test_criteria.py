"""Tests for criteria classification."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from jsonb_query.criteria import (
    Equality,
    NumberRange,
    TimeRange,
    classify,
    is_number_query_arguments,
    is_time_query_arguments,
)
from jsonb_query.operators import QueryOperator

# -- is_number_query_arguments / is_time_query_arguments ---------------------


@pytest.mark.parametrize("value", [None, "foo", 12, [], {}])
def test_not_a_map_is_not_a_range(value):
    assert is_number_query_arguments(value) is False
    assert is_time_query_arguments(value) is False


def test_map_that_is_not_a_number_query():
    assert is_number_query_arguments({"before": 12}) is False
    assert is_number_query_arguments({"title": "foo"}) is False


def test_map_that_is_a_number_query():
    assert is_number_query_arguments({"greater_than": 5, "less_than": 10}) is True
    assert is_number_query_arguments({QueryOperator.GT: 5, "<=": 10}) is True


def test_map_that_is_not_a_time_query():
    assert is_time_query_arguments({"greater_than": 12}) is False
    assert is_time_query_arguments({"title": "foo"}) is False


def test_map_that_is_a_time_query():
    assert is_time_query_arguments({"before": 10, "after": 5}) is True


# -- classify ----------------------------------------------------------------


@pytest.mark.parametrize(
    "value",
    [
        None,
        "title",
        0,
        3.5,
        True,
        [1, 2],
        {},
        {"title": "foo"},
        {"gt": 1, "title": "foo"},
        {"gt": 1, "before": 2},
        {"grater_than": 3},
        {1: "one"},
    ],
)
def test_everything_else_is_equality(value):
    result = classify(value)
    assert result == Equality(value)


def test_number_map_is_number_range():
    result = classify({"greater_than": 3, "<": 7})
    assert isinstance(result, NumberRange)
    assert result.bounds == ((QueryOperator.GT, 3), (QueryOperator.LT, 7))


def test_time_map_is_time_range():
    now = datetime.now(timezone.utc)
    result = classify({"before": now, "AFTER": now})
    assert isinstance(result, TimeRange)
    assert result.bounds == ((QueryOperator.BEFORE, now), (QueryOperator.AFTER, now))


def test_duplicate_aliases_are_kept():
    result = classify({">": 1, "gt": 2})
    assert isinstance(result, NumberRange)
    assert result.bounds == ((QueryOperator.GT, 1), (QueryOperator.GT, 2))


@pytest.mark.parametrize(
    "value",
    [None, "x", 1, {}, {"gt": 1}, {"before": 1}, {"gt": 1, "x": 2}, [{"gt": 1}]],
)
def test_classification_is_total(value):
    result = classify(value)
    assert sum(isinstance(result, t) for t in (Equality, NumberRange, TimeRange)) == 1


def test_variants_are_immutable():
    result = classify({"gt": 1})
    with pytest.raises(AttributeError):
        result.bounds = ()  # type: ignore[misc]
