"""
Tests for price extraction, name cleanup and categorization.
"""
import pytest

from models import Category
from utils.text_utils import (
    build_price_pattern,
    clean_item_name,
    extract_price_from_line,
    find_prices,
    guess_category,
    normalize_text,
)


def test_normalize_text_collapses_whitespace_and_case() -> None:
    assert normalize_text("  Fish \n\t AND  Chips ") == "fish and chips"
    assert normalize_text("") == ""


@pytest.mark.parametrize(
    "name, price",
    [
        ("Margherita", 10.95),
        ("Fish and Chips", 14.5),
        ("Tea", 2.0),
        ("Slow Roasted Pork Belly with Apple Sauce", 18.75),
    ],
)
def test_name_and_price_line_yields_one_item(pound_pattern, name: str, price: float) -> None:
    assert extract_price_from_line(f"{name} £{price}", pound_pattern) == (price, name)


@pytest.mark.parametrize("text", ["Water £0", "Feast £200", "Feast £200.01", "Banquet £350"])
def test_prices_outside_window_are_rejected(pound_pattern, text: str) -> None:
    assert extract_price_from_line(text, pound_pattern) == (None, None)


@pytest.mark.parametrize("text, price", [("Mint £0.01", 0.01), ("Tasting Menu £199.99", 199.99)])
def test_prices_inside_window_are_accepted(pound_pattern, text: str, price: float) -> None:
    found, _ = extract_price_from_line(text, pound_pattern)
    assert found == price


def test_short_names_are_rejected(pound_pattern) -> None:
    assert extract_price_from_line("AB £5.00", pound_pattern) == (None, None)
    assert extract_price_from_line("£5.00", pound_pattern) == (None, None)


def test_first_of_several_prices_is_used(pound_pattern) -> None:
    assert extract_price_from_line("Pizza small £8 large £12", pound_pattern) == (8.0, "Pizza small large")


def test_was_price_is_stripped_from_name(pound_pattern) -> None:
    price, name = extract_price_from_line("Margherita £10.95 (was £12.95)", pound_pattern)

    assert price == 10.95
    assert name.startswith("Margherita")
    assert "12.95" not in name


def test_first_price_outside_window_rejects_line(pound_pattern) -> None:
    assert extract_price_from_line("Banquet £350 per table, £35 each", pound_pattern) == (None, None)


def test_line_without_currency_is_ignored(pound_pattern) -> None:
    assert extract_price_from_line("Call us on 01234 567890", pound_pattern) == (None, None)


def test_clean_item_name_trims_bullets_and_separators(pound_pattern) -> None:
    assert clean_item_name("• - Garlic Bread £4.25", pound_pattern) == "Garlic Bread"
    assert clean_item_name("Margherita - £10.95", pound_pattern) == "Margherita"
    assert clean_item_name("  Steak \n  Frites   £19  ", pound_pattern) == "Steak Frites"


def test_clean_item_name_clamps_length(pound_pattern) -> None:
    name = clean_item_name("x" * 150 + " £5", pound_pattern)
    assert len(name) == 100


def test_default_pattern_ignores_dollars(pound_pattern) -> None:
    assert find_prices("Burger $9.50", pound_pattern) == []


def test_pattern_accepts_configured_symbols() -> None:
    pattern = build_price_pattern("£$")
    assert find_prices("Burger $9.50", pattern) == [(9.5, "$9.50")]


def test_suffix_currency_is_opt_in() -> None:
    assert find_prices("Pizza 8.50€", build_price_pattern("€")) == []
    assert find_prices("Pizza 8.50€", build_price_pattern("€", allow_suffix=True)) == [(8.5, "8.50€")]


def test_build_price_pattern_requires_a_symbol() -> None:
    with pytest.raises(ValueError):
        build_price_pattern("")


@pytest.mark.parametrize(
    "name, category",
    [
        ("Tomato Soup", Category.STARTER),
        ("Sharing Starter Platter", Category.STARTER),
        ("Side Salad", Category.STARTER),
        ("House Red Wine", Category.DRINK),
        ("Fresh Orange Juice", Category.DRINK),
        ("Chocolate Fudge Cake", Category.DESSERT),
        ("Vanilla Ice-Cream", Category.DESSERT),
        ("Sticky Toffee Pudding", Category.DESSERT),
        ("Sweet Treat Platter", Category.DESSERT),
        ("Sweet White Wine", Category.DRINK),
        ("Junior Fish Fingers", Category.KIDS),
        ("Kids' Soft Drink", Category.KIDS),
        ("Skinny Fries", Category.SIDE),
        ("Egg Fried Rice", Category.SIDE),
        ("Margherita", Category.MAIN),
        ("Ribeye Steak", Category.MAIN),
    ],
)
def test_guess_category(name: str, category: Category) -> None:
    assert guess_category(name) == category
