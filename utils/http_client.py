"""
Async HTTP client for plain page fetches with timeout and error mapping.
"""
import asyncio
import logging
import re
import socket
from typing import Optional

import aiohttp
from aiohttp import ClientTimeout, ClientError

from config import settings
from utils.errors import (
    FetchFailed,
    FetchTimeout,
    Forbidden,
    HostUnreachable,
    PageNotFound,
)

logger = logging.getLogger(__name__)

REDIRECT_STATUSES = (301, 302, 303, 307, 308)

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")


def normalize_url(url: str) -> str:
    """Strip whitespace and prepend https:// when the URL has no scheme."""
    url = url.strip()
    if not _SCHEME_RE.match(url):
        url = f"https://{url}"
    return url


def raise_for_target_status(url: str, status: int) -> None:
    """Map an unusable HTTP status from the target site to a fetch error."""
    if status == 403:
        raise Forbidden(url)
    if status == 404:
        raise PageNotFound(url)
    if status >= 400:
        raise FetchFailed(
            url,
            details=f"The website responded with HTTP {status}.",
            debug_info=f"HTTP_{status}",
        )


class HttpClient:
    """Async HTTP client with browser-like headers and error mapping."""

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        max_redirects: Optional[int] = None,
    ):
        self._session: Optional[aiohttp.ClientSession] = None
        self.timeout_seconds = (
            settings.request_timeout_seconds if timeout_seconds is None else timeout_seconds
        )
        self.max_redirects = settings.max_redirects if max_redirects is None else max_redirects

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = ClientTimeout(total=self.timeout_seconds)
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers={
                    "User-Agent": settings.user_agent,
                    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
                    "Accept-Language": "en-GB,en;q=0.9",
                }
            )
        return self._session

    def _too_many_redirects(self, url: str) -> FetchFailed:
        logger.warning(f"[FETCH] Too many redirects for {url}")
        return FetchFailed(
            url,
            details=f"The website redirected more than {self.max_redirects} times.",
            debug_info="ERR_TOO_MANY_REDIRECTS",
        )

    async def get_page(self, url: str) -> str:
        """
        Fetch a page with a single GET request.

        Follows up to ``max_redirects`` redirects and accepts any 2xx/3xx
        final status. There are no retries.

        Returns:
            Response body as text

        Raises:
            HostUnreachable: DNS lookup failed
            FetchTimeout: no complete response within the timeout
            Forbidden: target answered 403
            PageNotFound: target answered 404
            FetchFailed: any other failure
        """
        session = await self._get_session()
        logger.debug(f"[FETCH] GET {url}")

        try:
            async with session.get(
                url,
                allow_redirects=self.max_redirects > 0,
                max_redirects=self.max_redirects,
            ) as response:
                logger.debug(f"[FETCH] Response: {response.status} from {url}")
                # aiohttp reads max_redirects=0 as unlimited, so 0 is enforced here
                if response.status in REDIRECT_STATUSES and self.max_redirects == 0:
                    raise self._too_many_redirects(url)
                raise_for_target_status(url, response.status)
                return await response.text(errors="replace")

        except asyncio.TimeoutError:
            logger.warning(f"[FETCH] Timeout for {url}")
            raise FetchTimeout(url)

        except aiohttp.TooManyRedirects:
            raise self._too_many_redirects(url)

        except aiohttp.ClientConnectorError as e:
            # DNS failures surface as connector errors wrapping socket.gaierror
            if isinstance(e.os_error, socket.gaierror):
                logger.warning(f"[FETCH] DNS error for {url}: {e}")
                raise HostUnreachable(url)
            logger.warning(f"[FETCH] Connection error for {url}: {e}")
            raise FetchFailed(url, details=str(e), debug_info=type(e).__name__)

        except socket.gaierror as e:
            logger.warning(f"[FETCH] DNS error for {url}: {e}")
            raise HostUnreachable(url)

        except ClientError as e:
            logger.error(f"[FETCH] Client error for {url}: {e}")
            raise FetchFailed(url, details=str(e) or type(e).__name__, debug_info=type(e).__name__)

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()


# Global client instance
http_client = HttpClient()
