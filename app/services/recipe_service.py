from typing import Any, List, Tuple
from app.models.menu import RecipeIngredient


async def resolve_recipe(product_name: str, conn: Any = None) -> List[Tuple[str, float]]:
    """
    Returns the (inventory_name, quantity_per_unit) pairs for a sold product.
    A product without recipe rows consumes nothing, so an unknown name yields [].
    """
    rows = await RecipeIngredient.filter(product_name=product_name).using_db(conn).order_by("id")
    return [(row.inventory_name, row.inventory_quantity) for row in rows]
