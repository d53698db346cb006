# scripts/seed_data.py
import asyncio
import logging
from app.core.db import init_db, close_db
from app.core.config import FIXED_CONSUMABLES
from app.models.inventory import InventoryItem, InventoryCategory
from app.models.menu import MenuItem, RecipeIngredient

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
log = logging.getLogger("seed_data")

# inventory_name: (category, quantity, batch, recommended, gameday)
INVENTORY = {
    "orange_chicken": (InventoryCategory.PROTEIN, 40.0, 5.0, 10.0, 25.0),
    "chow_mein_noodles": (InventoryCategory.SIDES, 30.0, 4.0, 8.0, 20.0),
    "cabbage": (InventoryCategory.PRODUCE, 12.0, 2.0, 3.0, 6.0),
    "orange_sauce": (InventoryCategory.SAUCES, 6.0, 1.0, 2.0, 4.0),
    "fountain_cups": (InventoryCategory.DRINKS, 500.0, 50.0, 100.0, 300.0),
    "bags": (InventoryCategory.SUPPLIES, 1000.0, None, 200.0, 500.0),
    "napkins": (InventoryCategory.SUPPLIES, 5000.0, None, 500.0, 2000.0),
    "flatware": (InventoryCategory.CONSUMABLES, 2000.0, None, 300.0, 800.0),
    "fortune_cookies": (InventoryCategory.CONSUMABLES, 1500.0, None, 200.0, 600.0),
}

# product_name: (price, type, calories, {inventory_name: quantity_per_unit})
MENU = {
    "L_orange_chicken": ("5.20", "entree", 490, {"orange_chicken": 8, "orange_sauce": 2}),
    "M_orange_chicken": ("4.40", "entree", 380, {"orange_chicken": 6, "orange_sauce": 1.5}),
    "L_chow_mein": ("4.40", "side", 510, {"chow_mein_noodles": 9.4, "cabbage": 1.5}),
    "M_fountain_drink": ("2.10", "drink", 0, {"fountain_cups": 1}),
}

async def seed():
    for name, (category, qty, batch, recommended, gameday) in INVENTORY.items():
        item, _ = await InventoryItem.get_or_create(
            inventory_name=name,
            defaults={"inventory_type": category.value, "batch_quantity": batch},
        )
        # If existing, reset quantities (idempotent)
        item.quantity = qty
        item.recommended_quantity = recommended
        item.gameday_quantity = gameday
        await item.save()

    missing = [name for name in FIXED_CONSUMABLES if name not in INVENTORY]
    if missing:
        log.warning(f"Fixed consumables without an inventory row: {missing}")

    for product_name, (price, kind, calories, recipe) in MENU.items():
        await MenuItem.get_or_create(
            product_name=product_name,
            defaults={"price": price, "type": kind, "calories": calories},
        )
        for inventory_name, per_unit in recipe.items():
            await RecipeIngredient.update_or_create(
                product_name=product_name,
                inventory_name=inventory_name,
                defaults={"inventory_quantity": per_unit},
            )

    log.info(f"Seeded {len(INVENTORY)} inventory rows and {len(MENU)} menu items.")

async def main():
    await init_db()
    await seed()
    await close_db()

if __name__ == "__main__":
    asyncio.run(main())
