"""Conversion of Python values to their JSON document form."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic_core import to_jsonable_python


def _decimal_to_number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _numeric_decimals(value: Any) -> Any:
    """Replace ``Decimal`` values with JSON numbers, recursively."""
    if isinstance(value, Decimal):
        if not value.is_finite():
            return value
        return _decimal_to_number(value)
    if isinstance(value, Mapping):
        return {k: _numeric_decimals(v) for k, v in value.items()}
    if isinstance(value, list | tuple | set | frozenset):
        return [_numeric_decimals(v) for v in value]
    return value


def to_document_literal(value: Any) -> Any:
    """
    Return *value* as plain JSON data (dicts, lists, str, numbers, bool, None).

    Datetimes and dates become ISO-8601 strings and UUIDs become strings, so
    they compare equal to the values stored in the document. Decimals
    become numbers. Tuples and sets become lists.
    """
    return to_jsonable_python(_numeric_decimals(value))
