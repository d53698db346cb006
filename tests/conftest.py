import pytest
import pytest_asyncio
import httpx
from fastapi.testclient import TestClient

from app.core.db import init_db, close_db
from app.main import app
from app.models.inventory import InventoryItem, InventoryCategory
from app.models.menu import RecipeIngredient


@pytest.fixture
def client():
    return TestClient(app)


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory SQLite database per test, same models and timezone settings as production."""
    await init_db("sqlite://:memory:")
    yield
    await close_db()


@pytest_asyncio.fixture
async def api(db):
    """HTTP client running the app on the test's event loop, so it shares the test database."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def stocked(db):
    """
    A small kitchen:
    one large orange chicken consumes 8 oz chicken (0.5 lb) and 2 oz sauce (0.015625 gal).
    """
    await InventoryItem.create(
        inventory_name="orange_chicken", inventory_type=InventoryCategory.PROTEIN.value,
        quantity=40.0, batch_quantity=5.0, recommended_quantity=10.0,
    )
    await InventoryItem.create(
        inventory_name="orange_sauce", inventory_type=InventoryCategory.SAUCES.value,
        quantity=6.0, batch_quantity=1.0, recommended_quantity=2.0,
    )
    await InventoryItem.create(
        inventory_name="fountain_cups", inventory_type=InventoryCategory.DRINKS.value,
        quantity=500.0, batch_quantity=50.0, recommended_quantity=100.0,
    )
    for name in ("bags", "napkins", "flatware", "fortune_cookies"):
        await InventoryItem.create(
            inventory_name=name, inventory_type=InventoryCategory.SUPPLIES.value, quantity=100.0,
        )

    await RecipeIngredient.create(product_name="L_orange_chicken", inventory_name="orange_chicken", inventory_quantity=8)
    await RecipeIngredient.create(product_name="L_orange_chicken", inventory_name="orange_sauce", inventory_quantity=2)
    await RecipeIngredient.create(product_name="M_fountain_drink", inventory_name="fountain_cups", inventory_quantity=1)
