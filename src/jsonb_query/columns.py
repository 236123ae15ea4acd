"""
Resolution of document columns to table-qualified references.

A document column is always identified together with the table (or alias)
that declares it. The owning table is taken from what the caller passes in,
never guessed from the joins of the statement the predicate is attached to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy import type_coerce
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import QueryableAttribute
from sqlalchemy.sql.elements import ColumnClause, ColumnElement
from sqlalchemy.sql.selectable import FromClause

from .exceptions import InvalidColumnError


@dataclass(frozen=True, eq=False)
class ColumnReference:
    """
    A document column bound to a specific table or alias.

    Attributes:
        table_name: Name of the owning table (or alias).
        column_name: Database name of the column.
        expression: The SQLAlchemy column, bound to its table.
    """

    table_name: str
    column_name: str
    expression: ColumnElement[Any]

    @property
    def qualified_name(self) -> str:
        return f"{self.table_name}.{self.column_name}"

    @property
    def document(self) -> ColumnElement[Any]:
        """The column typed as JSONB, exposing ``@>``, ``->`` and ``->>``."""
        return type_coerce(self.expression, JSONB)

    def __repr__(self) -> str:
        return f"ColumnReference({self.qualified_name})"


ColumnTarget = (
    ColumnReference | QueryableAttribute[Any] | ColumnClause[Any] | tuple[Any, str]
)


def _owner_name(owner: Any) -> str:
    name = getattr(owner, "__name__", None) or getattr(owner, "name", None)
    return str(name) if name else repr(owner)


def _from_column(column: ColumnClause[Any], original: Any) -> ColumnReference:
    table = getattr(column, "table", None)
    if table is None:
        raise InvalidColumnError(original)
    return ColumnReference(
        table_name=_owner_name(table),
        column_name=column.name,
        expression=column,
    )


def _from_owner(owner: Any, name: str) -> ColumnReference:
    if isinstance(owner, FromClause):
        column = owner.c.get(name)
        if column is None:
            raise InvalidColumnError(name, _owner_name(owner))
        return _from_column(column, (owner, name))

    attr = getattr(owner, name, None)
    if not isinstance(attr, QueryableAttribute):
        raise InvalidColumnError(name, _owner_name(owner))
    return resolve_column(attr)


def resolve_column(target: ColumnTarget) -> ColumnReference:
    """
    Resolve *target* to a :class:`ColumnReference`.

    Accepts:
        - a :class:`ColumnReference` (returned as-is);
        - a mapped attribute, e.g. ``Product.options`` or
          ``aliased(Product).options``;
        - a ``Column`` bound to a table or alias;
        - a ``(model_or_table, "column_name")`` pair.

    Raises:
        InvalidColumnError: For bare names, unbound columns, or names the
            owner does not define.
    """
    if isinstance(target, ColumnReference):
        return target
    if isinstance(target, QueryableAttribute):
        expression = target.expression
        if not isinstance(expression, ColumnClause):
            raise InvalidColumnError(target)
        return _from_column(expression, target)
    if isinstance(target, ColumnClause):
        return _from_column(target, target)
    if isinstance(target, tuple) and len(target) == 2 and isinstance(target[1], str):
        return _from_owner(target[0], target[1])
    raise InvalidColumnError(target)
