"""
Static menus for a fixed set of restaurants.

Served as-is by GET /preset-menus; unrelated to live extraction.
"""
from typing import Dict, Optional

from models import Category, MenuItem, PresetMenu


def _item(name: str, price: float, category: Category) -> MenuItem:
    return MenuItem(name=name, price=price, category=category)


PRESET_MENUS: Dict[str, PresetMenu] = {
    "the-red-lion": PresetMenu(
        name="The Red Lion",
        items=[
            _item("Soup of the Day", 5.95, Category.STARTER),
            _item("Garlic Mushrooms", 6.50, Category.STARTER),
            _item("Beer Battered Fish & Chips", 14.95, Category.MAIN),
            _item("Steak & Ale Pie", 15.50, Category.MAIN),
            _item("Sunday Roast Beef", 17.95, Category.MAIN),
            _item("Onion Rings", 3.95, Category.SIDE),
            _item("Sticky Toffee Pudding", 6.95, Category.DESSERT),
            _item("Pint of Bitter", 4.80, Category.DRINK),
            _item("Kids Sausage & Mash", 7.50, Category.KIDS),
        ],
    ),
    "bella-italia": PresetMenu(
        name="Bella Italia",
        items=[
            _item("Bruschetta", 5.75, Category.STARTER),
            _item("Margherita", 10.95, Category.MAIN),
            _item("Spaghetti Carbonara", 12.45, Category.MAIN),
            _item("Lasagne al Forno", 13.25, Category.MAIN),
            _item("Garlic Bread", 4.25, Category.SIDE),
            _item("Tiramisu", 6.25, Category.DESSERT),
            _item("House Red Wine (175ml)", 6.10, Category.DRINK),
            _item("Junior Pasta Pomodoro", 6.95, Category.KIDS),
        ],
    ),
    "spice-garden": PresetMenu(
        name="Spice Garden",
        items=[
            _item("Onion Bhaji", 4.50, Category.STARTER),
            _item("Chicken Tikka Masala", 11.95, Category.MAIN),
            _item("Lamb Rogan Josh", 12.95, Category.MAIN),
            _item("Pilau Rice", 3.25, Category.SIDE),
            _item("Peshwari Naan", 3.50, Category.SIDE),
            _item("Mango Kulfi", 4.95, Category.DESSERT),
            _item("Mango Lassi", 3.95, Category.DRINK),
        ],
    ),
}


def get_preset_menu(slug: str) -> Optional[PresetMenu]:
    """Look up a preset menu by restaurant slug."""
    return PRESET_MENUS.get(slug.strip().lower())
