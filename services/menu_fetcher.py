"""
Menu fetch service - acquires a page and extracts its menu.
"""
import logging
from typing import Optional

from models import FetchResult
from services.browser_service import BrowserService, browser_service
from services.menu_extractor import MenuExtractor, menu_extractor
from utils.http_client import HttpClient, http_client, normalize_url

logger = logging.getLogger(__name__)

RENDER_METHOD = "playwright"


class MenuFetcher:
    """
    Service for fetching restaurant menus.

    Pipeline:
    1. Normalize URL
    2. Acquire HTML (plain GET or browser render)
    3. Extract menu items

    A failed acquisition raises and skips extraction. A page with no
    recognizable items is still a successful, empty result.
    """

    def __init__(
        self,
        client: Optional[HttpClient] = None,
        browser: Optional[BrowserService] = None,
        extractor: Optional[MenuExtractor] = None,
    ):
        self.client = client or http_client
        self.browser = browser or browser_service
        self.extractor = extractor or menu_extractor

    async def fetch_menu(self, url: str) -> FetchResult:
        """Fetch a menu with a plain HTTP request."""
        url = normalize_url(url)
        logger.info(f"[MENU] Fetching: {url}")

        html = await self.client.get_page(url)
        return self._build_result(url, html)

    async def fetch_menu_rendered(self, url: str) -> FetchResult:
        """Fetch a menu after rendering the page in a headless browser."""
        url = normalize_url(url)
        logger.info(f"[MENU] Rendering: {url}")

        html = await self.browser.render_page(url)
        return self._build_result(url, html, method=RENDER_METHOD)

    def _build_result(self, url: str, html: str, method: Optional[str] = None) -> FetchResult:
        items = self.extractor.extract(html)
        logger.info(f"[MENU] {len(items)} items from {url}")
        return FetchResult(
            success=True,
            items=items,
            source=url,
            count=len(items),
            method=method,
        )


menu_fetcher = MenuFetcher()
