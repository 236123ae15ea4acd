"""Shared base for cast-and-compare operators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import literal
from sqlalchemy import cast as sql_cast

from ..strategy import JsonbOperator

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy import ColumnElement
    from sqlalchemy.types import TypeEngine

    from ..operators import QueryOperator


class FieldComparison(JsonbOperator):
    """
    ``CAST(column ->> field AS <type>) <op> bound``

    The document field is extracted as text and cast explicitly; the bound
    is bound with the same type. Subclasses set ``operator``, ``compare``
    and ``default_cast_type``.
    """

    operator: QueryOperator
    compare: Callable[[Any, Any], Any]
    default_cast_type: Callable[[], TypeEngine[Any]]

    def __init__(self, cast_type: TypeEngine[Any] | None = None) -> None:
        self.cast_type = (
            cast_type if cast_type is not None else type(self).default_cast_type()
        )

    @property
    def name(self) -> QueryOperator:
        return self.operator

    def apply(
        self, document: ColumnElement[Any], field: str, bound: Any
    ) -> ColumnElement[bool]:
        extracted = sql_cast(document[field].astext, self.cast_type)
        return cast(
            "ColumnElement[bool]",
            type(self).compare(extracted, literal(bound, self.cast_type)),
        )
