"""
Pytest configuration and fixtures.
"""
import pytest
from fastapi.testclient import TestClient

from api import create_app
from services.menu_extractor import MenuExtractor
from utils.text_utils import build_price_pattern


def _wrap(*blocks: str) -> str:
    return "<html><head><title>Menu</title></head><body>" + "".join(blocks) + "</body></html>"


@pytest.fixture
def extractor() -> MenuExtractor:
    return MenuExtractor()


@pytest.fixture
def pound_pattern():
    return build_price_pattern("£")


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def menu_page():
    """Wrap body markup in a minimal HTML document."""
    return _wrap
