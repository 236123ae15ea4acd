"""
Comparison compilation strategy.

Provides the ``JsonbOperator`` interface and a registry keyed by
:class:`QueryOperator`. Each comparator is an isolated class in
``operators_sql/``; swapping a registered strategy (for example to cast
numbers to ``FLOAT`` instead of ``NUMERIC``) is the configuration seam
for the compiler.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidOperatorError

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from .operators import QueryOperator


class JsonbOperator(ABC):
    """
    Strategy interface for compiling one comparator on one document field
    into a SQLAlchemy ``ColumnElement[bool]``.
    """

    @property
    @abstractmethod
    def name(self) -> QueryOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def apply(
        self,
        document: ColumnElement[Any],
        field: str,
        bound: Any,
    ) -> ColumnElement[bool]:
        """
        Build a SQLAlchemy filter clause.

        Args:
            document: The JSONB-typed, table-qualified document column.
            field: Top-level field name inside the document.
            bound: The comparison bound; always rendered as a bind parameter.

        Returns:
            A SQLAlchemy boolean expression.
        """
        ...


class JsonbOperatorRegistry:
    """Registry of ``JsonbOperator`` instances keyed by :class:`QueryOperator`."""

    def __init__(self) -> None:
        self._operators: dict[QueryOperator, JsonbOperator] = {}

    def register(self, operator: JsonbOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: JsonbOperator) -> None:
        for op in operators:
            self.register(op)

    def unregister(self, name: QueryOperator) -> None:
        self._operators.pop(name, None)

    def get(self, name: QueryOperator) -> JsonbOperator | None:
        return self._operators.get(name)

    def has(self, name: QueryOperator) -> bool:
        return name in self._operators

    @property
    def supported_operators(self) -> set[QueryOperator]:
        return set(self._operators.keys())

    def apply(
        self,
        name: QueryOperator,
        document: ColumnElement[Any],
        field: str,
        bound: Any,
    ) -> ColumnElement[bool]:
        """
        Look up the operator and apply.

        Raises:
            InvalidOperatorError: If the operator is not registered.
        """
        op = self.get(name)
        if op is None:
            raise InvalidOperatorError(
                name.value, [o.value for o in self.supported_operators]
            )
        return op.apply(document, field, bound)
