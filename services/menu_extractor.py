"""
Menu extraction from HTML.

Pipeline:
1. Try extraction strategies in order (targeted scan, then generic
   fallbacks); the first one that yields items wins
2. Deduplicate by (name, price), first occurrence wins
3. Categorize by keyword rules
4. Sort by category display order, then price
5. Cap the result
"""
import logging
import re
from typing import Iterable, Iterator, List, Optional, Sequence

from bs4 import BeautifulSoup, Tag

from config import settings
from models import CATEGORY_ORDER, MenuItem
from utils.text_utils import build_price_pattern, extract_price_from_line, guess_category

logger = logging.getLogger(__name__)

# Substrings of class/id values that suggest menu content
MENU_HINTS = ("menu", "product", "dish", "item")

# Elements whose text is never menu content
SKIP_TAGS = ["script", "style", "noscript", "template", "svg"]


def parse_html(html: str) -> BeautifulSoup:
    """Parse HTML and drop non-content elements."""
    soup = BeautifulSoup(html, "lxml")
    for el in soup(SKIP_TAGS):
        el.decompose()
    return soup


def _attribute_text(el: Tag, attribute: str) -> str:
    value = el.get(attribute)
    if not value:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def _flatten(el: Tag) -> str:
    return re.sub(r"\s+", " ", el.get_text(" ")).strip()


class ExtractionStrategy:
    """Produces candidate text spans from a parsed document."""

    name = "base"

    def candidates(self, soup: BeautifulSoup) -> Iterable[str]:
        raise NotImplementedError


class TargetedScan(ExtractionStrategy):
    """Elements whose class or id hints at menu content."""

    name = "targeted"

    def __init__(self, hints: Sequence[str] = MENU_HINTS):
        self.hints = tuple(hint.lower() for hint in hints)

    def _is_menu_element(self, el: Tag) -> bool:
        markers = f"{_attribute_text(el, 'class')} {_attribute_text(el, 'id')}".lower()
        return any(hint in markers for hint in self.hints)

    def candidates(self, soup: BeautifulSoup) -> Iterator[str]:
        for el in soup.find_all(self._is_menu_element):
            yield _flatten(el)


class ElementScan(ExtractionStrategy):
    """Every element inside <body>, within a length window."""

    name = "elements"

    def __init__(self, min_chars: int = 3, max_chars: int = 150):
        self.min_chars = min_chars
        self.max_chars = max_chars

    def candidates(self, soup: BeautifulSoup) -> Iterator[str]:
        root = soup.body or soup
        for el in root.find_all(True):
            text = _flatten(el)
            if self.min_chars <= len(text) <= self.max_chars:
                yield text


class LineScan(ExtractionStrategy):
    """Every line of the body text, within a length window."""

    name = "lines"

    def __init__(self, min_chars: int = 3, max_chars: int = 150):
        self.min_chars = min_chars
        self.max_chars = max_chars

    def candidates(self, soup: BeautifulSoup) -> Iterator[str]:
        root = soup.body or soup
        for line in root.get_text("\n").splitlines():
            line = re.sub(r"\s+", " ", line).strip()
            if self.min_chars <= len(line) <= self.max_chars:
                yield line


class MenuExtractor:
    """
    Extracts menu items from a page.

    Strategies are tried in order; extraction stops at the first strategy
    that yields at least one valid item.
    """

    def __init__(
        self,
        strategies: Optional[Sequence[ExtractionStrategy]] = None,
        price_pattern: Optional[re.Pattern] = None,
        max_items: int = 100,
    ):
        self.strategies = list(strategies) if strategies is not None else [
            TargetedScan(),
            ElementScan(),
            LineScan(),
        ]
        self.price_pattern = price_pattern or build_price_pattern()
        self.max_items = max_items

    def extract(self, html: str) -> List[MenuItem]:
        """Extract, deduplicate, sort and cap menu items from HTML."""
        if not html:
            return []

        soup = parse_html(html)

        for strategy in self.strategies:
            items = self._collect(strategy.candidates(soup))
            if items:
                logger.info(f"[EXTRACT] {strategy.name} scan found {len(items)} items")
                return self._finalize(items)
            logger.debug(f"[EXTRACT] {strategy.name} scan found nothing")

        logger.info("[EXTRACT] No menu items found")
        return []

    def _collect(self, candidates: Iterable[str]) -> List[MenuItem]:
        """Turn candidate spans into unique items, first occurrence wins."""
        items = []
        seen = set()

        for text in candidates:
            price, name = extract_price_from_line(text, self.price_pattern)
            if price is None:
                continue

            key = (name, price)
            if key in seen:
                continue
            seen.add(key)

            items.append(MenuItem(name=name, price=price, category=guess_category(name)))

        return items

    def _finalize(self, items: List[MenuItem]) -> List[MenuItem]:
        ordered = sorted(items, key=lambda item: (CATEGORY_ORDER[item.category], item.price))
        return ordered[:self.max_items]


menu_extractor = MenuExtractor(
    strategies=[
        TargetedScan(),
        ElementScan(settings.fallback_min_chars, settings.fallback_max_chars),
        LineScan(settings.fallback_min_chars, settings.fallback_max_chars),
    ],
    price_pattern=build_price_pattern(
        settings.currency_symbols,
        allow_suffix=settings.currency_suffix_enabled,
    ),
    max_items=settings.max_items,
)
