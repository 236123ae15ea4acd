"""Shared fixtures for document query tests."""

from __future__ import annotations

from typing import Any

import pytest
from sqlalchemy.dialects import postgresql

from jsonb_query.operators_sql import build_default_jsonb_registry


def render(stmt: Any) -> tuple[str, dict[str, Any]]:
    """Compile a statement or clause for PostgreSQL, returning ``(sql, params)``."""
    compiled = stmt.compile(dialect=postgresql.dialect())
    return str(compiled), dict(compiled.params)


@pytest.fixture
def registry():
    """Fresh default operator registry."""
    return build_default_jsonb_registry()


@pytest.fixture
def pg_render():
    """PostgreSQL renderer for statements and clauses."""
    return render
