"""
Data models for the menu fetch service.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Coarse menu section an item is filed under."""
    STARTER = "starter"
    MAIN = "main"
    SIDE = "side"
    DESSERT = "dessert"
    DRINK = "drink"
    KIDS = "kids"


# Display order used when sorting extracted items
CATEGORY_ORDER = {
    Category.STARTER: 0,
    Category.MAIN: 1,
    Category.SIDE: 2,
    Category.DESSERT: 3,
    Category.DRINK: 4,
    Category.KIDS: 5,
}


class MenuItem(BaseModel):
    """Menu item extracted from a restaurant page."""
    name: str = Field(min_length=3, max_length=100)
    price: float = Field(gt=0, lt=200)
    category: Category = Category.MAIN

    model_config = ConfigDict(frozen=True)


class FetchResult(BaseModel):
    """Successful response of a menu fetch."""
    success: bool = True
    items: List[MenuItem] = Field(default_factory=list, max_length=100)
    source: str
    count: int = 0
    method: Optional[str] = None  # Set for rendered fetches only


class FetchMenuRequest(BaseModel):
    """Body of POST /fetch-menu and /fetch-menu-js."""
    url: Optional[str] = None


class ErrorResponse(BaseModel):
    """Body returned when a fetch fails."""
    success: bool = False
    error: str
    details: str
    debug_info: str = Field(serialization_alias="debugInfo")


class PresetMenu(BaseModel):
    """Hard-coded menu for a known restaurant."""
    name: str
    items: List[MenuItem]
