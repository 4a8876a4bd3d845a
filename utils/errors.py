"""
Error taxonomy for page acquisition.

Every failure carries a short user-facing summary (``error``), a longer
explanation (``details``) and a raw code for debugging (``debug_info``).
"""
from typing import Optional


class MissingInput(ValueError):
    """Request did not include a URL."""

    error = "URL required"


class FetchError(Exception):
    """Base class for failures while acquiring a page."""

    error = "Failed to fetch menu"
    details = "The website could not be loaded."
    code = "UNKNOWN"

    def __init__(
        self,
        url: str,
        details: Optional[str] = None,
        debug_info: Optional[str] = None,
    ) -> None:
        self.url = url
        if details is not None:
            self.details = details
        self.debug_info = debug_info or self.code
        super().__init__(f"{self.error}: {url} ({self.debug_info})")


class HostUnreachable(FetchError):
    error = "Website not found"
    details = "Could not resolve the website address. Check that the URL is correct."
    code = "ENOTFOUND"


class FetchTimeout(FetchError):
    error = "Website took too long to respond"
    details = "The website did not respond in time. Try again later."
    code = "ETIMEDOUT"


class Forbidden(FetchError):
    error = "Website blocked access"
    details = "The website refused automated access (HTTP 403)."
    code = "HTTP_403"


class PageNotFound(FetchError):
    error = "Menu page not found"
    details = "The page does not exist on this website (HTTP 404)."
    code = "HTTP_404"


class FetchFailed(FetchError):
    """Any other acquisition failure."""
