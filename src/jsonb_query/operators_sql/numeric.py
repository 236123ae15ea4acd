"""Numeric comparison operators on document fields."""

from __future__ import annotations

import operator as op_module

from sqlalchemy import Numeric

from ..operators import QueryOperator
from ._base import FieldComparison


class NumberComparison(FieldComparison):
    """``CAST(column ->> field AS NUMERIC) <op> bound``"""

    default_cast_type = Numeric


class GreaterThanOperator(NumberComparison):
    operator = QueryOperator.GT
    compare = op_module.gt


class GreaterEqualOperator(NumberComparison):
    operator = QueryOperator.GTE
    compare = op_module.ge


class LessThanOperator(NumberComparison):
    operator = QueryOperator.LT
    compare = op_module.lt


class LessEqualOperator(NumberComparison):
    operator = QueryOperator.LTE
    compare = op_module.le
