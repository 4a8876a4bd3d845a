"""
Tests for the acquire-then-extract pipeline.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from models import Category
from services.menu_extractor import MenuExtractor
from services.menu_fetcher import MenuFetcher
from utils.errors import HostUnreachable

MENU_HTML = '<html><body><div class="menu-item">Margherita £10.95</div></body></html>'


def make_fetcher(html: str = MENU_HTML, error: Exception = None):
    client = MagicMock()
    client.get_page = AsyncMock(return_value=html, side_effect=error)
    browser = MagicMock()
    browser.render_page = AsyncMock(return_value=html, side_effect=error)
    extractor = MagicMock(wraps=MenuExtractor())
    return MenuFetcher(client=client, browser=browser, extractor=extractor)


@pytest.mark.asyncio
async def test_fetch_menu_builds_result() -> None:
    fetcher = make_fetcher()

    result = await fetcher.fetch_menu("example.com/menu")

    fetcher.client.get_page.assert_awaited_once_with("https://example.com/menu")
    assert result.success is True
    assert result.source == "https://example.com/menu"
    assert result.count == 1
    assert result.method is None
    assert result.items[0].name == "Margherita"
    assert result.items[0].category == Category.MAIN


@pytest.mark.asyncio
async def test_rendered_fetch_reports_method() -> None:
    fetcher = make_fetcher()

    result = await fetcher.fetch_menu_rendered("https://example.com")

    fetcher.browser.render_page.assert_awaited_once_with("https://example.com")
    fetcher.client.get_page.assert_not_awaited()
    assert result.method == "playwright"
    assert result.count == 1


@pytest.mark.asyncio
async def test_page_without_menu_is_empty_success() -> None:
    fetcher = make_fetcher(html="<html><body><p>Closed for refurbishment</p></body></html>")

    result = await fetcher.fetch_menu("https://example.com")

    assert result.success is True
    assert result.items == []
    assert result.count == 0


@pytest.mark.asyncio
async def test_failed_acquisition_skips_extraction() -> None:
    fetcher = make_fetcher(error=HostUnreachable("https://no-such-restaurant.invalid"))

    with pytest.raises(HostUnreachable):
        await fetcher.fetch_menu("no-such-restaurant.invalid")

    fetcher.extractor.extract.assert_not_called()
