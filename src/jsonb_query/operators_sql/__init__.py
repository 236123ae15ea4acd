"""
SQL operator implementations and default registry.

Usage::

    from jsonb_query.operators_sql import DEFAULT_JSONB_REGISTRY

    expr = DEFAULT_JSONB_REGISTRY.apply(QueryOperator.GT, document, "rank", 4)
"""

from __future__ import annotations

from ..strategy import JsonbOperatorRegistry
from ._base import FieldComparison
from .containment import contains_clause, excludes_clause
from .numeric import (
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NumberComparison,
)
from .temporal import AfterOperator, BeforeOperator, TimeComparison


def build_default_jsonb_registry() -> JsonbOperatorRegistry:
    """Create a registry with all built-in comparison operators."""
    registry = JsonbOperatorRegistry()
    registry.register_all(
        # Numeric
        GreaterThanOperator(),
        GreaterEqualOperator(),
        LessThanOperator(),
        LessEqualOperator(),
        # Temporal
        BeforeOperator(),
        AfterOperator(),
    )
    return registry


DEFAULT_JSONB_REGISTRY: JsonbOperatorRegistry = build_default_jsonb_registry()

__all__ = [
    "DEFAULT_JSONB_REGISTRY",
    "build_default_jsonb_registry",
    "contains_clause",
    "excludes_clause",
    "FieldComparison",
    "NumberComparison",
    "TimeComparison",
    "GreaterThanOperator",
    "GreaterEqualOperator",
    "LessThanOperator",
    "LessEqualOperator",
    "BeforeOperator",
    "AfterOperator",
]
