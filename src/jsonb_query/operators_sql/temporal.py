"""Temporal comparison operators on document fields."""

from __future__ import annotations

import operator as op_module
from functools import partial

from sqlalchemy import DateTime

from ..operators import QueryOperator
from ._base import FieldComparison


class TimeComparison(FieldComparison):
    """``CAST(column ->> field AS TIMESTAMP WITH TIME ZONE) <op> bound``"""

    default_cast_type = partial(DateTime, timezone=True)


class BeforeOperator(TimeComparison):
    operator = QueryOperator.BEFORE
    compare = op_module.lt


class AfterOperator(TimeComparison):
    operator = QueryOperator.AFTER
    compare = op_module.gt
