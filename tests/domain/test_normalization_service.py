"""Tests for normalization helpers."""

from src.domain.services.normalization import (
    normalize_category,
    normalize_merchant,
    parse_category_list,
)


def test_normalize_category_defaults_to_uncategorized() -> None:
    assert normalize_category(None) == "Uncategorized"
    assert normalize_category("   ") == "Uncategorized"
    assert normalize_category(" Dining ") == "Dining"


def test_normalize_merchant_strips_or_returns_none() -> None:
    assert normalize_merchant(" Costco ") == "Costco"
    assert normalize_merchant("") is None


def test_parse_category_list_splits_commas() -> None:
    assert parse_category_list("Groceries, Dining,,Entertainment ") == (
        "Groceries",
        "Dining",
        "Entertainment",
    )
    assert parse_category_list(None) == ()
