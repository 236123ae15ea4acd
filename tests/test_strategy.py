"""Tests for the comparison operator registry."""

from __future__ import annotations

import pytest
from sample_models import Product
from sqlalchemy import Float

from jsonb_query.columns import resolve_column
from jsonb_query.exceptions import InvalidOperatorError
from jsonb_query.operators import QueryOperator
from jsonb_query.operators_sql import (
    DEFAULT_JSONB_REGISTRY,
    AfterOperator,
    BeforeOperator,
    GreaterThanOperator,
    LessEqualOperator,
)
from jsonb_query.strategy import JsonbOperatorRegistry


def test_default_registry_covers_all_operators():
    assert DEFAULT_JSONB_REGISTRY.supported_operators == set(QueryOperator)


def test_operator_names():
    assert GreaterThanOperator().name is QueryOperator.GT
    assert LessEqualOperator().name is QueryOperator.LTE
    assert BeforeOperator().name is QueryOperator.BEFORE
    assert AfterOperator().name is QueryOperator.AFTER


def test_register_and_unregister():
    registry = JsonbOperatorRegistry()
    assert not registry.has(QueryOperator.GT)
    registry.register_all(GreaterThanOperator(), BeforeOperator())
    assert registry.has(QueryOperator.GT)
    assert registry.get(QueryOperator.BEFORE) is not None
    registry.unregister(QueryOperator.GT)
    assert registry.supported_operators == {QueryOperator.BEFORE}


def test_apply_unregistered_raises():
    document = resolve_column(Product.options).document
    with pytest.raises(InvalidOperatorError) as exc_info:
        JsonbOperatorRegistry().apply(QueryOperator.GT, document, "rank", 1)
    assert exc_info.value.operator == "gt"


def test_cast_type_is_configurable(pg_render):
    document = resolve_column(Product.options).document
    operator = GreaterThanOperator(cast_type=Float())
    sql, _ = pg_render(operator.apply(document, "rank", 1))
    assert "AS FLOAT) > " in sql


def test_default_cast_types(pg_render):
    document = resolve_column(Product.options).document
    number, _ = pg_render(GreaterThanOperator().apply(document, "rank", 1))
    time, _ = pg_render(AfterOperator().apply(document, "made_at", "2024-01-01"))
    assert "AS NUMERIC) > " in number
    assert "AS TIMESTAMP WITH TIME ZONE) > " in time
