import random
from typing import Any, Optional
from app.core.config import ORDER_ID_MIN, ORDER_ID_MAX
from app.models.order import Order

_system_random = random.SystemRandom()


async def generate_order_id(conn: Any = None, rng: Optional[random.Random] = None) -> int:
    """
    Draws random 6-digit ids until one is not used by any order visible to `conn`.

    There is no cap on the number of draws: if the id space ever fills up this
    loops forever. The check alone does not protect against a concurrent
    transaction taking the same id before commit; the orders primary key does,
    and the caller retries on the resulting integrity error.
    """
    rng = rng or _system_random
    while True:
        candidate = rng.randint(ORDER_ID_MIN, ORDER_ID_MAX)
        if not await Order.filter(id=candidate).using_db(conn).exists():
            return candidate
