from .schemas import (
    Category,
    CATEGORY_ORDER,
    MenuItem,
    FetchResult,
    FetchMenuRequest,
    ErrorResponse,
    PresetMenu,
)

__all__ = [
    "Category",
    "CATEGORY_ORDER",
    "MenuItem",
    "FetchResult",
    "FetchMenuRequest",
    "ErrorResponse",
    "PresetMenu",
]
