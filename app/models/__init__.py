# app/models/__init__.py
from .inventory import InventoryCategory, InventoryItem
from .menu import MenuItem, RecipeIngredient
from .order import Order, OrderLine

# Export all models
__all__ = [
    "InventoryCategory",
    "InventoryItem",
    "MenuItem",
    "Order",
    "OrderLine",
    "RecipeIngredient",
]
