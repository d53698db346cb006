import logging
import random
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo

from tortoise.exceptions import IntegrityError
from tortoise.transactions import in_transaction

from app.core.config import FIXED_CONSUMABLES, KIOSK_LABEL, ORDER_ID_MAX_ATTEMPTS, REFERENCE_TIMEZONE
from app.models.order import Order, OrderLine
from app.services.exceptions import OrderIdAllocationError
from app.services.inventory_ledger import apply_consumption, decrement_fixed_consumables
from app.services.order_ids import generate_order_id
from app.services.recipe_service import resolve_recipe

log = logging.getLogger("order_service")

SIZE_PREFIXES = {
    "M": "Medium",
    "N": "Normal",
    "K": "Kid",
    "F": "Family",
    "L": "Large",
    "S": "Small",
}


class _OrderIdTaken(Exception):
    """A concurrent transaction committed the same order id first."""


def now_in_reference_tz() -> datetime:
    return datetime.now(ZoneInfo(REFERENCE_TIMEZONE))


def to_reference_tz(value: datetime) -> datetime:
    """Timestamps are stored as UTC instants; naive values read back are UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(ZoneInfo(REFERENCE_TIMEZONE))


def _money(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def parse_price(value: Any) -> Optional[Decimal]:
    """Returns the price as a Decimal, or None when it is missing or not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        price = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return price if price.is_finite() else None


def compute_total(items: List[Dict]) -> Decimal:
    """Sum of price x quantity over the raw cart, rounded to cents. Unusable prices count as 0."""
    total = Decimal("0")
    for it in items:
        price = parse_price(it.get("price"))
        if price is not None:
            total += price * int(it["quantity"])
    return _money(total)


def line_price(raw_price: Any, order_total: Decimal) -> Decimal:
    """
    Price persisted on an order line. A non-numeric price falls back to the
    whole order total, not to a per-line value.
    """
    price = parse_price(raw_price)
    if price is None:
        price = order_total
    return _money(price)


def describe_product_name(product_name: str) -> str:
    """'M_orange_chicken' -> 'Medium orange chicken'."""
    parts = product_name.split("_")
    if parts[0] in SIZE_PREFIXES:
        parts[0] = SIZE_PREFIXES[parts[0]]
    return " ".join(parts)


async def _process_payment_once(
    items: List[Dict],
    employee_name: str,
    fixed_consumables: Iterable[str],
    rng: Optional[random.Random],
) -> int:
    async with in_transaction() as conn:
        total = compute_total(items)
        order_id = await generate_order_id(conn, rng)

        # 1. Create the Order header
        try:
            await Order.create(
                id=order_id,
                name=employee_name,
                total=total,
                time_stamp=datetime.now(timezone.utc),
                using_db=conn,
            )
        except IntegrityError as e:
            raise _OrderIdTaken(order_id) from e

        # 2. Create the Order lines
        for it in items:
            await OrderLine.create(
                order_id=order_id,
                product_name=it["name"],
                quantity=int(it["quantity"]),
                price=line_price(it.get("price"), total),
                using_db=conn,
            )

        # 3. Deduct inventory for every ingredient of every sold product
        for it in items:
            qty = int(it["quantity"])
            for inventory_name, quantity_per_unit in await resolve_recipe(it["name"], conn):
                await apply_consumption(inventory_name, quantity_per_unit, qty, conn)

        # 4. Per-order supplies, once regardless of the cart
        await decrement_fixed_consumables(fixed_consumables, conn)

    return order_id


async def process_payment(
    items: List[Dict],
    employee_name: str,
    fixed_consumables: Iterable[str] = FIXED_CONSUMABLES,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Records a paid order and depletes inventory in one transaction.

    Each item is a dict with "name", "quantity" and "price". Returns the new
    order id. Any failure rolls back the order, its lines and every inventory
    change. Losing an order id race to another terminal restarts the whole
    attempt with a new id, up to ORDER_ID_MAX_ATTEMPTS times.
    """
    fixed_consumables = tuple(fixed_consumables)
    for attempt in range(1, ORDER_ID_MAX_ATTEMPTS + 1):
        try:
            order_id = await _process_payment_once(items, employee_name, fixed_consumables, rng)
        except _OrderIdTaken as e:
            log.warning(f"Order id {e} already taken (attempt {attempt}/{ORDER_ID_MAX_ATTEMPTS}), retrying.")
            continue
        log.info(f"Order {order_id} paid by {employee_name} with {len(items)} line(s).")
        return order_id

    raise OrderIdAllocationError(f"Could not allocate an unused order id after {ORDER_ID_MAX_ATTEMPTS} attempts.")


async def get_order_by_id(order_id: int) -> Optional[Order]:
    """Fetches an order with its lines."""
    return await Order.get_or_none(id=order_id).prefetch_related("lines")


async def list_current_kiosk_orders() -> List[Order]:
    """Kiosk orders placed today (reference timezone), oldest first, lines prefetched."""
    start = now_in_reference_tz().replace(hour=0, minute=0, second=0, microsecond=0)
    end = start + timedelta(days=1)
    return await Order.filter(
        name=KIOSK_LABEL,
        time_stamp__gte=start.astimezone(timezone.utc),
        time_stamp__lt=end.astimezone(timezone.utc),
    ).order_by("time_stamp").prefetch_related("lines")
