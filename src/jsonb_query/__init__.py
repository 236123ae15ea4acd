"""Typed queries over JSONB document columns for SQLAlchemy."""

from __future__ import annotations

from .builder import (
    build_jsonb_filter,
    jsonb_comparison_where,
    jsonb_contains,
    jsonb_excludes,
    jsonb_number_where,
    jsonb_number_where_not,
    jsonb_order,
    jsonb_time_where,
    jsonb_time_where_not,
    jsonb_where,
    jsonb_where_not,
)
from .columns import ColumnReference, resolve_column
from .compiler import (
    CompiledPredicate,
    compile_comparison,
    compile_containment,
    compile_predicate,
)
from .criteria import (
    Criterion,
    Equality,
    NumberRange,
    TimeRange,
    classify,
    is_number_query_arguments,
    is_time_query_arguments,
)
from .exceptions import (
    CriterionContractError,
    InvalidColumnError,
    InvalidDirectionError,
    InvalidOperatorError,
    JsonbQueryError,
)
from .mixins import JsonbQueryMixin
from .operators import (
    ALL_OPERATORS_MAP,
    NUMBER_OPERATORS_MAP,
    TIME_OPERATORS_MAP,
    QueryOperator,
    normalize_operator_token,
)
from .operators_sql import DEFAULT_JSONB_REGISTRY, build_default_jsonb_registry
from .strategy import JsonbOperator, JsonbOperatorRegistry

__all__ = [
    # Query builder
    "jsonb_contains",
    "jsonb_excludes",
    "jsonb_comparison_where",
    "jsonb_number_where",
    "jsonb_number_where_not",
    "jsonb_time_where",
    "jsonb_time_where_not",
    "jsonb_where",
    "jsonb_where_not",
    "jsonb_order",
    "build_jsonb_filter",
    "JsonbQueryMixin",
    # Compiler
    "CompiledPredicate",
    "compile_predicate",
    "compile_containment",
    "compile_comparison",
    "ColumnReference",
    "resolve_column",
    # Classifier
    "Criterion",
    "Equality",
    "NumberRange",
    "TimeRange",
    "classify",
    "is_number_query_arguments",
    "is_time_query_arguments",
    # Operators
    "QueryOperator",
    "NUMBER_OPERATORS_MAP",
    "TIME_OPERATORS_MAP",
    "ALL_OPERATORS_MAP",
    "normalize_operator_token",
    "JsonbOperator",
    "JsonbOperatorRegistry",
    "DEFAULT_JSONB_REGISTRY",
    "build_default_jsonb_registry",
    # Exceptions
    "JsonbQueryError",
    "InvalidOperatorError",
    "InvalidColumnError",
    "InvalidDirectionError",
    "CriterionContractError",
]
