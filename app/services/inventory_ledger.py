import logging
from typing import Any, Iterable, Optional
from tortoise.expressions import F
from app.models.inventory import InventoryItem
from app.services.conversion import consumed_units

log = logging.getLogger("inventory_ledger")


def rollover_deduction(consumed: float, batch_size: Optional[float]) -> float:
    """
    Total amount to take off on-hand stock for one consumption event.

    The consumed amount is deducted once, then every full batch contained in it
    is deducted a second time.
    A missing or non-positive batch size disables the rollover.
    """
    deduction = consumed
    if batch_size is None or batch_size <= 0:
        return deduction

    remaining = consumed
    while remaining >= batch_size:
        deduction += batch_size
        remaining -= batch_size
    return deduction


def apply_batch_rollover(on_hand: float, consumed: float, batch_size: Optional[float]) -> float:
    """New on-hand quantity after one consumption event. No floor is applied."""
    return on_hand - rollover_deduction(consumed, batch_size)


def check_for_low_stock(inventory_name: str, new_quantity: float, threshold: float) -> None:
    """Logs a warning when stock drops to or below the recommended quantity."""
    if new_quantity <= threshold:
        log.warning(f"Low stock detected for {inventory_name}! Qty: {new_quantity} (recommended: {threshold})")


async def apply_consumption(
    inventory_name: str,
    quantity_per_unit: float,
    quantity_sold: int,
    conn: Any = None,
) -> Optional[float]:
    """
    Deducts the stock consumed by one recipe ingredient of one cart line.

    Returns the new on-hand quantity, or None when no inventory row carries that
    name (nothing is changed in that case).
    """
    # CRITICAL: Lock the row so a concurrent terminal cannot change the batch
    # size or category between the read and the decrement below.
    inventory = await InventoryItem.filter(inventory_name=inventory_name).using_db(conn).select_for_update().first()
    if not inventory:
        log.debug(f"No inventory row for ingredient {inventory_name}, skipping.")
        return None

    consumed = consumed_units(quantity_per_unit, inventory.inventory_type, quantity_sold, inventory_name)
    deduction = rollover_deduction(consumed, inventory.batch_quantity)

    # Relative update: the decrement is computed by the database, never from a stale read
    await InventoryItem.filter(inventory_name=inventory_name).using_db(conn).update(
        quantity=F("quantity") - deduction
    )

    new_quantity = inventory.quantity - deduction
    check_for_low_stock(inventory_name, new_quantity, inventory.recommended_quantity)
    return new_quantity


async def decrement_fixed_consumables(names: Iterable[str], conn: Any = None) -> None:
    """Takes one unit of each per-order supply item. Missing rows are a no-op."""
    for name in names:
        await InventoryItem.filter(inventory_name=name).using_db(conn).update(quantity=F("quantity") - 1)
