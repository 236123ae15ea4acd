"""Containment operators on whole documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import literal, not_
from sqlalchemy.dialects.postgresql import JSONB

from ..serialization import to_document_literal

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import ColumnElement


def contains_clause(
    document: ColumnElement[Any], values: Mapping[str, Any]
) -> ColumnElement[bool]:
    """``column @> :values`` with the whole object bound as one JSONB value."""
    bound = literal(to_document_literal(dict(values)), JSONB)
    return cast("ColumnElement[bool]", document.contains(bound))


def excludes_clause(
    document: ColumnElement[Any], values: Mapping[str, Any]
) -> ColumnElement[bool]:
    """``NOT (column @> :values)``"""
    return not_(contains_clause(document, values))
