from .browser_service import BrowserService, browser_service
from .menu_extractor import (
    MenuExtractor,
    menu_extractor,
    ExtractionStrategy,
    TargetedScan,
    ElementScan,
    LineScan,
)
from .menu_fetcher import MenuFetcher, menu_fetcher
from .preset_menus import PRESET_MENUS, get_preset_menu

__all__ = [
    "BrowserService",
    "browser_service",
    "MenuExtractor",
    "menu_extractor",
    "ExtractionStrategy",
    "TargetedScan",
    "ElementScan",
    "LineScan",
    "MenuFetcher",
    "menu_fetcher",
    "PRESET_MENUS",
    "get_preset_menu",
]
