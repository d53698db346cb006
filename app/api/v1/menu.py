import logging
from fastapi import APIRouter, HTTPException, status
from tortoise.transactions import in_transaction
from app.models.menu import MenuItem, RecipeIngredient
from app.schemas.menu import MenuItemRequest, MenuItemResponse, MenuItemUpdate, RecipeIngredientRequest, RecipeResponse
from app.schemas.response import SuccessResponse
from app.services.recipe_service import resolve_recipe
from typing import List

log = logging.getLogger("uvicorn")
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

router = APIRouter()


def _to_response(item: MenuItem) -> dict:
    return MenuItemResponse(
        product_name=item.product_name,
        price=item.price,
        type=item.type,
        calories=item.calories,
    ).model_dump()


def _recipe_response(product_name: str, pairs) -> dict:
    return RecipeResponse(
        product_name=product_name,
        ingredients=[
            RecipeIngredientRequest(inventory_name=name, inventory_quantity=qty)
            for name, qty in pairs
        ],
    ).model_dump()


@router.get("/", response_model=SuccessResponse)
async def list_menu_items():
    """Lists every menu row."""
    try:
        items = await MenuItem.all().order_by("product_name")
        return SuccessResponse(data=[_to_response(i) for i in items])
    except Exception as e:
        log.error(f"Error fetching menu items: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch menu items.")


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def add_menu_item(item_data: MenuItemRequest):
    """Adds a new menu row. Its recipe is set separately."""
    try:
        if await MenuItem.exists(product_name=item_data.product_name):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Menu item '{item_data.product_name}' already exists."
            )
        item = await MenuItem.create(**item_data.model_dump())
        return SuccessResponse(data=_to_response(item))
    except HTTPException:
        raise
    except Exception as e:
        log.error(f"Error adding menu item: {e}")
        raise HTTPException(status_code=500, detail="Server failed to add menu item.")


@router.put("/{product_name}", response_model=SuccessResponse)
async def update_menu_item(product_name: str, payload: MenuItemUpdate):
    """Updates price and calories of a menu row."""
    try:
        item = await MenuItem.get_or_none(product_name=product_name)
        if not item:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Menu item not found")
        item.price = payload.price
        item.calories = payload.calories
        await item.save(update_fields=["price", "calories"])
        return SuccessResponse(data=_to_response(item))
    except HTTPException:
        raise
    except Exception as e:
        log.error(f"Error updating menu item {product_name}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to update menu item.")


@router.delete("/{product_name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_menu_item(product_name: str):
    """Deletes a menu row together with its recipe."""
    try:
        async with in_transaction() as conn:
            await RecipeIngredient.filter(product_name=product_name).using_db(conn).delete()
            await MenuItem.filter(product_name=product_name).using_db(conn).delete()
    except Exception as e:
        log.error(f"Error deleting menu item {product_name}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to delete menu item.")


@router.get("/{product_name}/ingredients", response_model=SuccessResponse)
async def get_recipe(product_name: str):
    """Returns the recipe of a product (empty when none is configured)."""
    try:
        pairs = await resolve_recipe(product_name)
        return SuccessResponse(data=_recipe_response(product_name, pairs))
    except Exception as e:
        log.error(f"Error fetching recipe for {product_name}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch recipe.")


@router.put("/{product_name}/ingredients", response_model=SuccessResponse)
async def replace_recipe(product_name: str, ingredients: List[RecipeIngredientRequest]):
    """Replaces the whole recipe of a product in one transaction."""
    try:
        names = [i.inventory_name for i in ingredients]
        if len(set(names)) != len(names):
            raise ValueError("Each inventory item may appear only once in a recipe.")

        async with in_transaction() as conn:
            await RecipeIngredient.filter(product_name=product_name).using_db(conn).delete()
            for ingredient in ingredients:
                await RecipeIngredient.create(
                    product_name=product_name,
                    inventory_name=ingredient.inventory_name,
                    inventory_quantity=ingredient.inventory_quantity,
                    using_db=conn,
                )
        log.info(f"Recipe for {product_name} replaced with {len(ingredients)} ingredient(s).")
        return SuccessResponse(data=_recipe_response(product_name, [(i.inventory_name, i.inventory_quantity) for i in ingredients]))
    except ValueError as e:
        log.error(f"Value error replacing recipe for {product_name}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        log.error(f"Error replacing recipe for {product_name}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to replace recipe.")
