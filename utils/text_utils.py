"""
Text processing utilities for menu item name cleanup, price extraction
and categorization.
"""
import re
import unicodedata
from typing import Callable, List, Optional, Tuple

from models import Category

# Exclusive bounds for a plausible menu price. Rejects phone numbers,
# postcodes and other stray numbers next to a currency sign.
MIN_PRICE = 0.0
MAX_PRICE = 200.0

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 100

_AMOUNT = r"(\d+(?:\.\d{0,2})?)"

LEADING_BULLETS = re.compile(r"^[\s\-–—•·*|:>]+")
TRAILING_SEPARATORS = re.compile(r"[\s\-–—•·*|:/,]+$")


def normalize_text(text: str) -> str:
    """
    Normalize text for comparison.

    - Normalize unicode characters
    - Convert to lowercase
    - Collapse whitespace
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKC", text)
    text = text.lower()
    text = re.sub(r"\s+", " ", text)

    return text.strip()


def build_price_pattern(currency_symbols: str = "£", allow_suffix: bool = False) -> re.Pattern:
    """
    Compile the currency-amount pattern.

    Each character of ``currency_symbols`` is accepted as a currency sign.
    Prefix form (``£10.95``) is always matched; suffix form (``10.95£``)
    only when ``allow_suffix`` is set. The amount is in group 1 for the
    prefix form and group 2 for the suffix form.
    """
    if not currency_symbols:
        raise ValueError("At least one currency symbol is required")

    symbols = "".join(re.escape(symbol) for symbol in currency_symbols)
    pattern = rf"[{symbols}]\s?{_AMOUNT}"
    if allow_suffix:
        pattern += rf"|{_AMOUNT}\s?[{symbols}]"

    return re.compile(pattern)


def find_prices(text: str, pattern: re.Pattern) -> List[Tuple[float, str]]:
    """Return every currency amount in text as (price, raw) pairs."""
    prices = []
    for match in pattern.finditer(text):
        amount = next(group for group in match.groups() if group is not None)
        prices.append((float(amount), match.group(0)))
    return prices


def is_valid_price(price: float) -> bool:
    """Check price is inside the exclusive (0, 200) window."""
    return MIN_PRICE < price < MAX_PRICE


def clean_item_name(text: str, pattern: re.Pattern, max_length: int = MAX_NAME_LENGTH) -> str:
    """
    Derive an item name from the text around a price.

    Removes all currency amounts, collapses whitespace, trims bullets and
    dashes from the start (and dangling separators from the end), and
    clamps to ``max_length`` characters.
    """
    name = pattern.sub(" ", text)
    name = re.sub(r"\s+", " ", name).strip()
    name = LEADING_BULLETS.sub("", name)
    name = TRAILING_SEPARATORS.sub("", name)
    return name[:max_length].rstrip()


def extract_price_from_line(text: str, pattern: re.Pattern) -> Tuple[Optional[float], Optional[str]]:
    """
    Extract price and name from a menu line.

    The first currency amount is the price; every amount is stripped from
    the name, so "Pizza small £8.50 large £12.00" gives (8.5, "Pizza small
    large"). Returns (None, None) when there is no amount, the first one is
    outside the price window, or no usable name is left.
    """
    if not text:
        return None, None

    prices = find_prices(text, pattern)
    if not prices:
        return None, None

    price, _ = prices[0]
    if not is_valid_price(price):
        return None, None

    name = clean_item_name(text, pattern)
    if len(name) < MIN_NAME_LENGTH:
        return None, None

    return round(price, 2), name


def _contains_any(*keywords: str) -> Callable[[str], bool]:
    def predicate(name: str) -> bool:
        return any(keyword in name for keyword in keywords)
    return predicate


# Evaluated top to bottom, first match wins. Kids comes first so that
# "Kids' Soft Drink" lands in the kids section.
CATEGORY_RULES: List[Tuple[Callable[[str], bool], Category]] = [
    (_contains_any("kids", "kid's", "junior", "child"), Category.KIDS),
    (_contains_any("starter", "appetizer", "appetiser", "soup", "salad"), Category.STARTER),
    (_contains_any("drink", "beverage", "wine", "beer", "cocktail", "juice", "soft"), Category.DRINK),
    (_contains_any("dessert", "cake", "ice cream", "ice-cream", "pudding", "sweet"), Category.DESSERT),
    (_contains_any("side", "chips", "fries", "rice"), Category.SIDE),
]


def guess_category(name: str) -> Category:
    """Assign a category from keywords in the item name."""
    normalized = normalize_text(name)
    for predicate, category in CATEGORY_RULES:
        if predicate(normalized):
            return category
    return Category.MAIN
