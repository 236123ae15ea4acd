"""
Declarative model mixin exposing document queries as classmethods.

The column name is resolved against the declaring model, so the predicate
is bound to that model's table even when the statement joins others::

    class Product(JsonbQueryMixin, Base):
        __tablename__ = "products"
        id: Mapped[int] = mapped_column(primary_key=True)
        options: Mapped[dict[str, Any]] = mapped_column(JSONB, default=dict)

    stmt = Product.jsonb_where("options", {"rank": {">=": 4}})
    stmt = Category.jsonb_contains(
        "options", {"title": "books"}, stmt=select(Product).join(Product.category)
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from . import builder

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .strategy import JsonbOperatorRegistry


class JsonbQueryMixin:
    """Adds ``jsonb_*`` query classmethods to a mapped model."""

    @classmethod
    def _jsonb_stmt(cls, stmt: Any | None) -> Any:
        return select(cls) if stmt is None else stmt

    @classmethod
    def jsonb_contains(
        cls, column_name: str, values: Mapping[str, Any], *, stmt: Any | None = None
    ) -> Any:
        return builder.jsonb_contains(
            cls._jsonb_stmt(stmt), (cls, column_name), values
        )

    @classmethod
    def jsonb_excludes(
        cls, column_name: str, values: Mapping[str, Any], *, stmt: Any | None = None
    ) -> Any:
        return builder.jsonb_excludes(
            cls._jsonb_stmt(stmt), (cls, column_name), values
        )

    @classmethod
    def jsonb_number_where(
        cls,
        column_name: str,
        field: str,
        operator: Any,
        bound: Any,
        *,
        stmt: Any | None = None,
        registry: JsonbOperatorRegistry | None = None,
    ) -> Any:
        return builder.jsonb_number_where(
            cls._jsonb_stmt(stmt),
            (cls, column_name),
            field,
            operator,
            bound,
            registry=registry,
        )

    @classmethod
    def jsonb_number_where_not(
        cls,
        column_name: str,
        field: str,
        operator: Any,
        bound: Any,
        *,
        stmt: Any | None = None,
        registry: JsonbOperatorRegistry | None = None,
    ) -> Any:
        return builder.jsonb_number_where_not(
            cls._jsonb_stmt(stmt),
            (cls, column_name),
            field,
            operator,
            bound,
            registry=registry,
        )

    @classmethod
    def jsonb_time_where(
        cls,
        column_name: str,
        field: str,
        operator: Any,
        bound: Any,
        *,
        stmt: Any | None = None,
        registry: JsonbOperatorRegistry | None = None,
    ) -> Any:
        return builder.jsonb_time_where(
            cls._jsonb_stmt(stmt),
            (cls, column_name),
            field,
            operator,
            bound,
            registry=registry,
        )

    @classmethod
    def jsonb_time_where_not(
        cls,
        column_name: str,
        field: str,
        operator: Any,
        bound: Any,
        *,
        stmt: Any | None = None,
        registry: JsonbOperatorRegistry | None = None,
    ) -> Any:
        return builder.jsonb_time_where_not(
            cls._jsonb_stmt(stmt),
            (cls, column_name),
            field,
            operator,
            bound,
            registry=registry,
        )

    @classmethod
    def jsonb_where(
        cls,
        column_name: str,
        criteria: Mapping[str, Any],
        *,
        stmt: Any | None = None,
        registry: JsonbOperatorRegistry | None = None,
    ) -> Any:
        return builder.jsonb_where(
            cls._jsonb_stmt(stmt), (cls, column_name), criteria, registry=registry
        )

    @classmethod
    def jsonb_where_not(
        cls,
        column_name: str,
        criteria: Mapping[str, Any],
        *,
        stmt: Any | None = None,
        registry: JsonbOperatorRegistry | None = None,
    ) -> Any:
        return builder.jsonb_where_not(
            cls._jsonb_stmt(stmt), (cls, column_name), criteria, registry=registry
        )

    @classmethod
    def jsonb_order(
        cls,
        column_name: str,
        field: str,
        direction: str = "asc",
        *,
        stmt: Any | None = None,
    ) -> Any:
        return builder.jsonb_order(
            cls._jsonb_stmt(stmt), (cls, column_name), field, direction
        )
