"""
Exception hierarchy for document query building.

All exceptions inherit from ``JsonbQueryError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class JsonbQueryError(Exception):
    """Base exception for all document query errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidOperatorError(JsonbQueryError, ValueError):
    """
    Unknown comparison operator token.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: Any, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(
            str(operator), valid_operators, n=3, cutoff=0.6
        )

        message = f"Invalid operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_OPERATOR",
            "operator": str(self.operator),
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class InvalidColumnError(JsonbQueryError, ValueError):
    """
    The document column cannot be resolved to a table-qualified column.

    Raised for bare column names (no owning table) and for names the
    owning model or table does not define.
    """

    def __init__(self, column: Any, owner: str | None = None) -> None:
        self.column = column
        self.owner = owner
        if owner is None:
            message = (
                f"Cannot resolve column {column!r}: a table-bound column, "
                "mapped attribute or (model, name) pair is required"
            )
        else:
            message = f"A column named '{column}' does not exist on '{owner}'"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_COLUMN",
            "column": str(self.column),
            "owner": self.owner,
        }


class InvalidDirectionError(JsonbQueryError, ValueError):
    """Ordering direction is neither ``asc`` nor ``desc``."""

    def __init__(self, direction: Any) -> None:
        self.direction = direction
        super().__init__(
            f"Invalid direction: '{direction}'. Valid directions: asc, desc"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_DIRECTION",
            "direction": str(self.direction),
        }


class CriterionContractError(JsonbQueryError, TypeError):
    """
    The predicate compiler received something that is not a classified
    criterion. Indicates a programming error, not bad user input.
    """

    def __init__(self, criterion: Any) -> None:
        self.criterion = criterion
        super().__init__(
            f"Unclassified criterion of type {type(criterion).__name__}; "
            "expected Equality, NumberRange or TimeRange"
        )
