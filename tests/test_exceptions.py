"""Tests for exceptions module."""

from __future__ import annotations

from jsonb_query.exceptions import (
    CriterionContractError,
    InvalidColumnError,
    InvalidDirectionError,
    InvalidOperatorError,
    JsonbQueryError,
)

# -- InvalidOperatorError ----------------------------------------------------


def test_invalid_operator_fuzzy_suggestion():
    err = InvalidOperatorError("greater_tan", ["greater_than", "less_than", "gt"])
    assert "greater_tan" in str(err)
    assert "Did you mean: greater_than" in str(err)


def test_invalid_operator_no_matches():
    err = InvalidOperatorError("~", [">", "<"])
    d = err.to_dict()
    assert d["error"] == "INVALID_OPERATOR"
    assert d["suggestions"] == []
    assert d["valid_operators"] == ["<", ">"]


def test_invalid_operator_non_string_token():
    err = InvalidOperatorError(42, ["gt"])
    assert err.operator == 42
    assert err.to_dict()["operator"] == "42"


def test_invalid_operator_is_value_error():
    assert isinstance(InvalidOperatorError("x", []), ValueError)


# -- InvalidColumnError ------------------------------------------------------


def test_invalid_column_without_owner():
    err = InvalidColumnError("options")
    assert "table-bound" in str(err)
    assert err.to_dict() == {
        "error": "INVALID_COLUMN",
        "column": "options",
        "owner": None,
    }


def test_invalid_column_with_owner():
    err = InvalidColumnError("settings", "Product")
    assert str(err) == "A column named 'settings' does not exist on 'Product'"


# -- Others ------------------------------------------------------------------


def test_invalid_direction_to_dict():
    err = InvalidDirectionError("up")
    assert err.to_dict() == {"error": "INVALID_DIRECTION", "direction": "up"}


def test_criterion_contract_error_is_type_error():
    err = CriterionContractError(object())
    assert isinstance(err, TypeError)
    assert err.to_dict()["error"] == "CriterionContractError"


def test_hierarchy():
    for exc_type in (
        InvalidOperatorError,
        InvalidColumnError,
        InvalidDirectionError,
        CriterionContractError,
    ):
        assert issubclass(exc_type, JsonbQueryError)
