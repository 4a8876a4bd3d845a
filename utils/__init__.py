from .http_client import HttpClient, http_client, normalize_url
from .text_utils import (
    normalize_text,
    build_price_pattern,
    find_prices,
    clean_item_name,
    extract_price_from_line,
    guess_category,
)

__all__ = [
    "HttpClient",
    "http_client",
    "normalize_url",
    "normalize_text",
    "build_price_pattern",
    "find_prices",
    "clean_item_name",
    "extract_price_from_line",
    "guess_category",
]
