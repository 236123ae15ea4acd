"""
Comparison operators and their accepted spellings.

Every spelling maps to exactly one canonical :class:`QueryOperator`.
Adding an alias is a one-line edit to the relevant table below.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


class QueryOperator(str, Enum):
    """Canonical comparison operators for document fields."""

    # Numeric
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

    # Temporal
    BEFORE = "before"
    AFTER = "after"


NUMBER_OPERATORS_MAP: Mapping[str, QueryOperator] = MappingProxyType(
    {
        "gt": QueryOperator.GT,
        ">": QueryOperator.GT,
        "greater_than": QueryOperator.GT,
        "gte": QueryOperator.GTE,
        ">=": QueryOperator.GTE,
        "greater_than_or_equal_to": QueryOperator.GTE,
        "lt": QueryOperator.LT,
        "<": QueryOperator.LT,
        "less_than": QueryOperator.LT,
        "lte": QueryOperator.LTE,
        "<=": QueryOperator.LTE,
        "less_than_or_equal_to": QueryOperator.LTE,
    }
)

TIME_OPERATORS_MAP: Mapping[str, QueryOperator] = MappingProxyType(
    {
        "before": QueryOperator.BEFORE,
        "after": QueryOperator.AFTER,
    }
)

ALL_OPERATORS_MAP: Mapping[str, QueryOperator] = MappingProxyType(
    {**NUMBER_OPERATORS_MAP, **TIME_OPERATORS_MAP}
)

NUMBER_OPERATORS: frozenset[QueryOperator] = frozenset(NUMBER_OPERATORS_MAP.values())
TIME_OPERATORS: frozenset[QueryOperator] = frozenset(TIME_OPERATORS_MAP.values())


def normalize_operator_token(
    token: Any,
    table: Mapping[str, QueryOperator] = ALL_OPERATORS_MAP,
) -> QueryOperator | None:
    """
    Resolve *token* against *table*.

    Accepts plain strings (``">"``, ``"GT"``, ``" greater_than "``) and
    enum members. Returns ``None`` for anything the table does not know,
    including non-string tokens; never raises.
    """
    if isinstance(token, Enum):
        token = token.value
    if not isinstance(token, str):
        return None
    return table.get(token.strip().lower())
