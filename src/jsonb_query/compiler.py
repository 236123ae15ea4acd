"""
Compile classified criteria into SQLAlchemy predicates.

Every predicate references the document column through its table-qualified
form and carries all user-supplied values (field names included) as bind
parameters. No SQL text is ever assembled from input values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_
from sqlalchemy.dialects import postgresql

from .columns import ColumnReference, resolve_column
from .criteria import Criterion, Equality, NumberRange, TimeRange
from .exceptions import CriterionContractError
from .operators_sql import DEFAULT_JSONB_REGISTRY, contains_clause

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import ColumnElement
    from sqlalchemy.engine import Dialect

    from .columns import ColumnTarget
    from .operators import QueryOperator
    from .strategy import JsonbOperatorRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CompiledPredicate:
    """
    One boolean expression over a document column.

    Attributes:
        column: The table-qualified document column.
        fields: Document fields the expression constrains.
        clause: The SQLAlchemy expression, with values as bind parameters.
    """

    column: ColumnReference
    fields: tuple[str, ...]
    clause: ColumnElement[bool]

    def compile(self, dialect: Dialect | None = None) -> tuple[str, dict[str, Any]]:
        """Render to ``(sql, params)``; PostgreSQL dialect by default."""
        compiled = self.clause.compile(dialect=dialect or postgresql.dialect())
        return str(compiled), dict(compiled.params)

    @property
    def sql(self) -> str:
        return self.compile()[0]

    @property
    def params(self) -> dict[str, Any]:
        return self.compile()[1]


def compile_containment(
    column: ColumnTarget, values: Mapping[str, Any]
) -> CompiledPredicate:
    """
    Compile one containment test over the whole *values* mapping.

    All pairs must be present in the document at once.
    """
    ref = resolve_column(column)
    logger.debug(
        "Compiling containment on %s for fields %s",
        ref.qualified_name,
        list(values),
    )
    return CompiledPredicate(
        column=ref,
        fields=tuple(str(k) for k in values),
        clause=contains_clause(ref.document, values),
    )


def compile_comparison(
    column: ColumnTarget,
    field: str,
    operator: QueryOperator,
    bound: Any,
    *,
    registry: JsonbOperatorRegistry | None = None,
) -> CompiledPredicate:
    """Compile a single canonical comparator against one field."""
    reg = registry or DEFAULT_JSONB_REGISTRY
    ref = resolve_column(column)
    logger.debug(
        "Compiling %s comparison on %s field %r",
        operator.value,
        ref.qualified_name,
        field,
    )
    return CompiledPredicate(
        column=ref,
        fields=(field,),
        clause=reg.apply(operator, ref.document, field, bound),
    )


def compile_predicate(
    column: ColumnTarget,
    field: str,
    criterion: Criterion,
    *,
    registry: JsonbOperatorRegistry | None = None,
) -> CompiledPredicate:
    """
    Compile a classified criterion for one field.

    Args:
        column: Anything :func:`resolve_column` accepts.
        field: Top-level document field name.
        criterion: Result of :func:`classify`.
        registry: Optional operator registry. Falls back to
            ``DEFAULT_JSONB_REGISTRY``.

    Raises:
        CriterionContractError: If *criterion* is not one of the three
            classified variants.
    """
    reg = registry or DEFAULT_JSONB_REGISTRY
    ref = resolve_column(column)
    document = ref.document

    if isinstance(criterion, Equality):
        clause = contains_clause(document, {field: criterion.value})
    elif isinstance(criterion, NumberRange | TimeRange):
        clause = and_(
            *[reg.apply(op, document, field, bound) for op, bound in criterion.bounds]
        )
    else:
        raise CriterionContractError(criterion)

    logger.debug(
        "Compiled %s on %s field %r",
        type(criterion).__name__,
        ref.qualified_name,
        field,
    )
    return CompiledPredicate(column=ref, fields=(field,), clause=clause)
