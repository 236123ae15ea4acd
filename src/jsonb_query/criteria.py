"""
Criteria classification.

A criterion attached to a document field is one of three shapes:

* :class:`Equality` -- any value matched literally via containment;
* :class:`NumberRange` -- a non-empty map of numeric comparator tokens;
* :class:`TimeRange` -- a non-empty map of temporal comparator tokens.

:func:`classify` is total: every input lands in exactly one variant.
Maps mixing unknown keys (including a typo'd operator) fall back to
:class:`Equality` and are matched as a literal object.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .operators import (
    NUMBER_OPERATORS_MAP,
    TIME_OPERATORS_MAP,
    QueryOperator,
    normalize_operator_token,
)

Bounds = tuple[tuple[QueryOperator, Any], ...]


@dataclass(frozen=True)
class Equality:
    """Match the field against ``value`` exactly."""

    value: Any


@dataclass(frozen=True)
class NumberRange:
    """Compare the field, cast to a number, against each bound."""

    bounds: Bounds


@dataclass(frozen=True)
class TimeRange:
    """Compare the field, cast to a timestamp, against each bound."""

    bounds: Bounds


Criterion = Equality | NumberRange | TimeRange


def _normalize_bounds(
    value: Any, table: Mapping[str, QueryOperator]
) -> Bounds | None:
    if not isinstance(value, Mapping) or not value:
        return None
    bounds: list[tuple[QueryOperator, Any]] = []
    for key, bound in value.items():
        op = normalize_operator_token(key, table)
        if op is None:
            return None
        bounds.append((op, bound))
    return tuple(bounds)


def is_number_query_arguments(value: Any) -> bool:
    """True if *value* is a non-empty map of numeric comparator tokens only."""
    return _normalize_bounds(value, NUMBER_OPERATORS_MAP) is not None


def is_time_query_arguments(value: Any) -> bool:
    """True if *value* is a non-empty map of temporal comparator tokens only."""
    return _normalize_bounds(value, TIME_OPERATORS_MAP) is not None


def classify(criterion: Any) -> Criterion:
    """Classify a per-field criterion into one of the three variants."""
    bounds = _normalize_bounds(criterion, NUMBER_OPERATORS_MAP)
    if bounds is not None:
        return NumberRange(bounds)
    bounds = _normalize_bounds(criterion, TIME_OPERATORS_MAP)
    if bounds is not None:
        return TimeRange(bounds)
    return Equality(criterion)
