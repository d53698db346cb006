from typing import Dict, Union
from app.models.inventory import InventoryCategory
from app.services.exceptions import UnknownInventoryCategoryError

# Recipe quantities are declared in ounces; inventory is counted in storage units
# (pounds for bulk food, gallons for sauces, each for packaged goods).
CONVERSION_FACTORS: Dict[InventoryCategory, float] = {
    InventoryCategory.PROTEIN: 0.0625,
    InventoryCategory.SIDES: 0.0625,
    InventoryCategory.PRODUCE: 0.0625,
    InventoryCategory.OTHER: 0.0625,
    InventoryCategory.SAUCES: 0.0078125,
    InventoryCategory.CONSUMABLES: 1.0,
    InventoryCategory.SUPPLIES: 1.0,
    InventoryCategory.DRINKS: 1.0,
}


def conversion_factor(category: Union[str, InventoryCategory], inventory_name: str = "") -> float:
    """Returns the multiplier for a category, raising for anything outside the table."""
    try:
        return CONVERSION_FACTORS[InventoryCategory(category)]
    except (ValueError, KeyError):
        raise UnknownInventoryCategoryError(inventory_name, str(category))


def consumed_units(
    quantity_per_unit: float,
    category: Union[str, InventoryCategory],
    quantity_sold: int,
    inventory_name: str = "",
) -> float:
    """Inventory units consumed by selling `quantity_sold` of a product."""
    return quantity_per_unit * conversion_factor(category, inventory_name) * quantity_sold
