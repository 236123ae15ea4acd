"""
Attach document predicates to SQLAlchemy statements.

Every function takes a statement (``Select`` or legacy ``Query``) and
returns a new statement restricted by one additional ANDed predicate. The
input statement is never modified. Empty criteria return the statement
unchanged.

The document column is passed explicitly (``Product.options``,
``(Product, "options")``, ...) so the predicate stays bound to the right
table after joins::

    stmt = select(Product).join(Product.category)
    stmt = jsonb_contains(stmt, Category.options, {"title": "books"})
    stmt = jsonb_where(
        stmt,
        Product.options,
        {"title": "novel", "rank": {">": 3, "<": 7}, "made_at": {"after": t}},
    )
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from sqlalchemy import Text, and_, asc, desc, literal, not_
from sqlalchemy.dialects.postgresql import JSONB

from .columns import ColumnReference, resolve_column
from .compiler import compile_comparison, compile_containment, compile_predicate
from .criteria import Equality, classify
from .exceptions import InvalidDirectionError, InvalidOperatorError
from .operators import (
    ALL_OPERATORS_MAP,
    NUMBER_OPERATORS_MAP,
    TIME_OPERATORS_MAP,
    QueryOperator,
    normalize_operator_token,
)
from .operators_sql import excludes_clause

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import ColumnElement

    from .columns import ColumnTarget
    from .strategy import JsonbOperatorRegistry

logger = logging.getLogger(__name__)

StmtT = TypeVar("StmtT")


def _field_name(field: Any) -> str:
    return field if isinstance(field, str) else str(field)


def _resolve_operator(
    token: Any, table: Mapping[str, QueryOperator]
) -> QueryOperator:
    op = normalize_operator_token(token, table)
    if op is None:
        raise InvalidOperatorError(token, list(table))
    return op


def _attach(stmt: StmtT, clause: ColumnElement[bool], ref: ColumnReference) -> StmtT:
    logger.debug("Attaching document predicate on %s", ref.qualified_name)
    return stmt.where(clause)  # type: ignore[attr-defined,no-any-return]


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------


def jsonb_contains(
    stmt: StmtT, column: ColumnTarget, values: Mapping[str, Any]
) -> StmtT:
    """Restrict to rows whose document contains every ``field: value`` pair."""
    if not values:
        return stmt
    predicate = compile_containment(column, values)
    return _attach(stmt, predicate.clause, predicate.column)


def jsonb_excludes(
    stmt: StmtT, column: ColumnTarget, values: Mapping[str, Any]
) -> StmtT:
    """Restrict to rows whose document does not contain all of *values*."""
    if not values:
        return stmt
    ref = resolve_column(column)
    return _attach(stmt, excludes_clause(ref.document, values), ref)


# ---------------------------------------------------------------------------
# Single-field comparisons
# ---------------------------------------------------------------------------


def _comparison(
    stmt: StmtT,
    column: ColumnTarget,
    field: Any,
    operator: Any,
    bound: Any,
    table: Mapping[str, QueryOperator],
    *,
    negate: bool,
    registry: JsonbOperatorRegistry | None,
) -> StmtT:
    op = _resolve_operator(operator, table)
    predicate = compile_comparison(
        column, _field_name(field), op, bound, registry=registry
    )
    clause = not_(predicate.clause) if negate else predicate.clause
    return _attach(stmt, clause, predicate.column)


def jsonb_comparison_where(
    stmt: StmtT,
    column: ColumnTarget,
    field: Any,
    operator: Any,
    bound: Any,
    *,
    registry: JsonbOperatorRegistry | None = None,
) -> StmtT:
    """
    Compare one field using any numeric or temporal operator token.

    Raises:
        InvalidOperatorError: If *operator* is in neither alias table.
    """
    return _comparison(
        stmt,
        column,
        field,
        operator,
        bound,
        ALL_OPERATORS_MAP,
        negate=False,
        registry=registry,
    )


def jsonb_number_where(
    stmt: StmtT,
    column: ColumnTarget,
    field: Any,
    operator: Any,
    bound: Any,
    *,
    registry: JsonbOperatorRegistry | None = None,
) -> StmtT:
    """
    Compare one field numerically, e.g. ``(..., "rank", ">=", 4)``.

    Raises:
        InvalidOperatorError: If *operator* is not a numeric operator token.
    """
    return _comparison(
        stmt,
        column,
        field,
        operator,
        bound,
        NUMBER_OPERATORS_MAP,
        negate=False,
        registry=registry,
    )


def jsonb_number_where_not(
    stmt: StmtT,
    column: ColumnTarget,
    field: Any,
    operator: Any,
    bound: Any,
    *,
    registry: JsonbOperatorRegistry | None = None,
) -> StmtT:
    """Negation of :func:`jsonb_number_where`."""
    return _comparison(
        stmt,
        column,
        field,
        operator,
        bound,
        NUMBER_OPERATORS_MAP,
        negate=True,
        registry=registry,
    )


def jsonb_time_where(
    stmt: StmtT,
    column: ColumnTarget,
    field: Any,
    operator: Any,
    bound: Any,
    *,
    registry: JsonbOperatorRegistry | None = None,
) -> StmtT:
    """
    Compare one field as a timestamp: ``before`` or ``after`` *bound*.

    Raises:
        InvalidOperatorError: If *operator* is not a temporal operator token.
    """
    return _comparison(
        stmt,
        column,
        field,
        operator,
        bound,
        TIME_OPERATORS_MAP,
        negate=False,
        registry=registry,
    )


def jsonb_time_where_not(
    stmt: StmtT,
    column: ColumnTarget,
    field: Any,
    operator: Any,
    bound: Any,
    *,
    registry: JsonbOperatorRegistry | None = None,
) -> StmtT:
    """Negation of :func:`jsonb_time_where`."""
    return _comparison(
        stmt,
        column,
        field,
        operator,
        bound,
        TIME_OPERATORS_MAP,
        negate=True,
        registry=registry,
    )


# ---------------------------------------------------------------------------
# Mixed criteria
# ---------------------------------------------------------------------------


def build_jsonb_filter(
    column: ColumnTarget,
    criteria: Mapping[Any, Any],
    *,
    registry: JsonbOperatorRegistry | None = None,
) -> ColumnElement[bool] | None:
    """
    Build the conjunctive predicate for a ``field -> criterion`` mapping.

    Plain values are collapsed into a single containment test; range maps
    each compile to their own comparison. Returns ``None`` when *criteria*
    is empty.

    Useful to merge one model's predicate into a statement selecting from
    another model.
    """
    if not criteria:
        return None
    ref = resolve_column(column)
    equality: dict[str, Any] = {}
    clauses: list[ColumnElement[bool]] = []
    for field, criterion in criteria.items():
        classified = classify(criterion)
        if isinstance(classified, Equality):
            equality[_field_name(field)] = classified.value
        else:
            predicate = compile_predicate(
                ref, _field_name(field), classified, registry=registry
            )
            clauses.append(predicate.clause)

    if equality:
        clauses.insert(0, compile_containment(ref, equality).clause)
    if not clauses:
        return None
    return clauses[0] if len(clauses) == 1 else and_(*clauses)


def jsonb_where(
    stmt: StmtT,
    column: ColumnTarget,
    criteria: Mapping[Any, Any],
    *,
    registry: JsonbOperatorRegistry | None = None,
) -> StmtT:
    """
    Restrict by any mix of plain values, numeric ranges and time ranges.

    Example::

        jsonb_where(stmt, Product.options, {
            "title": "novel",
            "rank": {"greater_than": 3, "less_than": 7},
            "made_at": {"before": tomorrow, "after": yesterday},
        })

    A map whose keys are not all operator tokens of one family is matched
    as a literal value.
    """
    if not criteria:
        return stmt
    ref = resolve_column(column)
    clause = build_jsonb_filter(ref, criteria, registry=registry)
    if clause is None:
        return stmt
    return _attach(stmt, clause, ref)


def jsonb_where_not(
    stmt: StmtT,
    column: ColumnTarget,
    criteria: Mapping[Any, Any],
    *,
    registry: JsonbOperatorRegistry | None = None,
) -> StmtT:
    """
    Negated counterpart of :func:`jsonb_where`.

    Plain values are excluded together (:func:`jsonb_excludes`); each range
    bound is negated on its own.
    """
    if not criteria:
        return stmt
    ref = resolve_column(column)
    excluded: dict[str, Any] = {}
    clauses: list[ColumnElement[bool]] = []
    for field, criterion in criteria.items():
        classified = classify(criterion)
        if isinstance(classified, Equality):
            excluded[_field_name(field)] = classified.value
            continue
        for op, bound in classified.bounds:
            predicate = compile_comparison(
                ref, _field_name(field), op, bound, registry=registry
            )
            clauses.append(not_(predicate.clause))

    if excluded:
        clauses.insert(0, excludes_clause(ref.document, excluded))
    if not clauses:
        return stmt
    return _attach(stmt, and_(*clauses), ref)


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def jsonb_order(
    stmt: StmtT,
    column: ColumnTarget,
    field: Any,
    direction: str = "asc",
) -> StmtT:
    """
    Order by a document field (``column -> field``).

    Raises:
        InvalidDirectionError: If *direction* is not ``asc`` or ``desc``.
    """
    normalized = direction.strip().lower() if isinstance(direction, str) else None
    if normalized not in ("asc", "desc"):
        raise InvalidDirectionError(direction)
    ref = resolve_column(column)
    value = ref.document.op("->", return_type=JSONB)(
        literal(_field_name(field), Text)
    )
    ordering = asc(value) if normalized == "asc" else desc(value)
    return stmt.order_by(ordering)  # type: ignore[attr-defined,no-any-return]
