"""Tests for document literal serialization."""

from __future__ import annotations

import enum
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

from jsonb_query.serialization import to_document_literal


class Color(enum.Enum):
    RED = "red"


def test_plain_json_is_unchanged():
    value = {"title": "a", "rank": 4, "tags": ["x"], "ok": True, "none": None}
    assert to_document_literal(value) == value


def test_temporal_values_become_iso_strings():
    result = to_document_literal(
        {
            "at": datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc),
            "on": date(2024, 5, 6),
        }
    )
    assert result["at"].startswith("2024-05-06T07:08:09")
    assert result["on"] == "2024-05-06"


def test_uuid_enum_and_collections():
    uid = UUID("12345678-1234-5678-1234-567812345678")
    result = to_document_literal({"id": uid, "color": Color.RED, "pair": (1, 2)})
    assert result == {
        "id": "12345678-1234-5678-1234-567812345678",
        "color": "red",
        "pair": [1, 2],
    }


def test_decimals_become_numbers():
    result = to_document_literal(
        {"price": Decimal("9.99"), "qty": Decimal("3"), "tiers": [Decimal("0.5")]}
    )
    assert result == {"price": 9.99, "qty": 3, "tiers": [0.5]}
    assert isinstance(result["qty"], int)
    assert not isinstance(result["price"], str)
