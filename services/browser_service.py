"""
Browser service for JS-heavy websites.

Uses Playwright to render JavaScript and return the full HTML, which is
then analyzed statically for menu content.

Each render launches its own headless Chromium and closes it before
returning, on success and on every error path. Nothing is shared between
requests.
"""
import asyncio
import logging
from typing import Optional

from playwright.async_api import (
    Error as PlaywrightError,
    TimeoutError as PlaywrightTimeoutError,
    async_playwright,
)

from config import settings
from utils.errors import FetchError, FetchFailed, FetchTimeout, HostUnreachable
from utils.http_client import raise_for_target_status

logger = logging.getLogger(__name__)

BLOCKED_RESOURCES = "**/*.{png,jpg,jpeg,gif,webp,svg,ico,woff,woff2,ttf,eot,mp4,webm,ogg,mp3,wav}"

LAUNCH_ARGS = [
    "--disable-dev-shm-usage",
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-gpu",
]

# Chromium network errors that mean the host name did not resolve
DNS_ERRORS = ("ERR_NAME_NOT_RESOLVED", "ERR_NAME_RESOLUTION_FAILED")


class BrowserService:
    """Renders pages in a request-scoped headless browser."""

    def __init__(
        self,
        timeout_ms: Optional[int] = None,
        settle_ms: Optional[int] = None,
        block_resources: Optional[bool] = None,
    ):
        self.timeout_ms = settings.browser_timeout_ms if timeout_ms is None else timeout_ms
        self.settle_ms = settings.browser_settle_ms if settle_ms is None else settle_ms
        self.block_resources = (
            settings.browser_block_resources if block_resources is None else block_resources
        )

    async def render_page(self, url: str) -> str:
        """
        Render a page and return its full HTML.

        Waits for network idle plus a fixed settle delay so deferred
        content has a chance to appear.

        Raises:
            FetchError subclass describing why the page could not be loaded
        """
        try:
            async with async_playwright() as playwright:
                logger.info("[BROWSER] Launching Chromium")
                browser = await playwright.chromium.launch(headless=True, args=LAUNCH_ARGS)
                try:
                    return await self._render(browser, url)
                finally:
                    await browser.close()
                    logger.debug("[BROWSER] Browser closed")
        except FetchError:
            raise
        except (PlaywrightTimeoutError, asyncio.TimeoutError):
            logger.warning(f"[BROWSER] Timeout for: {url}")
            raise FetchTimeout(url)
        except PlaywrightError as e:
            message = str(e)
            if any(code in message for code in DNS_ERRORS):
                logger.warning(f"[BROWSER] DNS error for {url}")
                raise HostUnreachable(url)
            logger.error(f"[BROWSER] Error rendering {url}: {message}")
            raise FetchFailed(url, details=message, debug_info=type(e).__name__)

    async def _render(self, browser, url: str) -> str:
        page = await browser.new_page(
            viewport={"width": 1280, "height": 720},
            user_agent=settings.user_agent,
            java_script_enabled=True,
            ignore_https_errors=True,
        )

        # Block heavy resources for faster loading
        if self.block_resources:
            await page.route(BLOCKED_RESOURCES, lambda route: route.abort())

        logger.info(f"[BROWSER] Loading: {url}")

        response = await page.goto(url, wait_until="networkidle", timeout=self.timeout_ms)
        if response is None:
            raise FetchFailed(url, details="No response from server", debug_info="NO_RESPONSE")

        raise_for_target_status(url, response.status)

        # Additional wait for JS rendering
        await page.wait_for_timeout(self.settle_ms)

        html = await page.content()
        logger.info(f"[BROWSER] Rendered {len(html)} chars HTML")
        return html


browser_service = BrowserService()
