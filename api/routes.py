"""
HTTP route handlers.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException

from models import FetchMenuRequest
from services import menu_fetcher, PRESET_MENUS, get_preset_menu
from utils.errors import MissingInput

logger = logging.getLogger(__name__)

SERVICE_NAME = "menu-fetch-service"
SERVICE_VERSION = "1.0.0"

router = APIRouter()


def _require_url(payload: Optional[FetchMenuRequest]) -> str:
    url = payload.url if payload else None
    if not url or not url.strip():
        raise MissingInput()
    return url


# --- Service info ---

@router.get("/")
async def describe_service():
    """List available endpoints."""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "endpoints": {
            "POST /fetch-menu": "Fetch a menu with a plain HTTP request. Body: {\"url\": \"...\"}",
            "POST /fetch-menu-js": "Fetch a menu after rendering the page in a headless browser",
            "GET /preset-menus": "Hard-coded menus for known restaurants",
            "GET /health": "Health check",
        },
    }


@router.get("/health")
async def health():
    """Health check."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# --- Menu fetching ---

@router.post("/fetch-menu")
async def fetch_menu(payload: Optional[FetchMenuRequest] = None):
    """Fetch a page with a plain GET and extract its menu."""
    url = _require_url(payload)
    result = await menu_fetcher.fetch_menu(url)
    return result.model_dump(mode="json", exclude_none=True)


@router.post("/fetch-menu-js")
async def fetch_menu_js(payload: Optional[FetchMenuRequest] = None):
    """Render a page in a headless browser and extract its menu."""
    url = _require_url(payload)
    result = await menu_fetcher.fetch_menu_rendered(url)
    return result.model_dump(mode="json", exclude_none=True)


# --- Static data ---

@router.get("/preset-menus")
async def preset_menus(restaurant: Optional[str] = None):
    """Return hard-coded menus, optionally for a single restaurant."""
    if restaurant:
        menu = get_preset_menu(restaurant)
        if menu is None:
            raise HTTPException(status_code=404, detail=f"Unknown restaurant: {restaurant}")
        return {"success": True, "restaurants": {restaurant.strip().lower(): menu.model_dump(mode="json")}}

    return {
        "success": True,
        "restaurants": {
            slug: menu.model_dump(mode="json") for slug, menu in PRESET_MENUS.items()
        },
    }
