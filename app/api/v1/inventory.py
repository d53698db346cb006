import logging
from fastapi import APIRouter, HTTPException, status
from app.models.inventory import InventoryItem
from app.schemas.inventory import InventoryItemRequest, InventoryItemResponse, InventoryUpdateRequest, RestockRequest
from app.schemas.response import SuccessResponse
from typing import Optional

log = logging.getLogger("uvicorn")
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

router = APIRouter()

LOW_STOCK_FILTER = "Low Stock"


def _to_response(item: InventoryItem) -> dict:
    return InventoryItemResponse(
        inventory_name=item.inventory_name,
        inventory_type=item.inventory_type,
        quantity=item.quantity,
        recommended_quantity=item.recommended_quantity,
        gameday_quantity=item.gameday_quantity,
        batch_quantity=item.batch_quantity,
    ).model_dump()


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def add_inventory_item(item_data: InventoryItemRequest):
    """Adds a new inventory item."""
    try:
        if await InventoryItem.exists(inventory_name=item_data.inventory_name):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Inventory item '{item_data.inventory_name}' already exists."
            )

        item = await InventoryItem.create(
            inventory_name=item_data.inventory_name,
            inventory_type=item_data.inventory_type.value,
            quantity=item_data.quantity,
            recommended_quantity=item_data.recommended_quantity,
            gameday_quantity=item_data.gameday_quantity,
            batch_quantity=item_data.batch_quantity,
        )
        return SuccessResponse(data=_to_response(item))

    except HTTPException:
        # Re-raise explicit HTTP exceptions (like 409)
        raise
    except Exception as e:
        log.error(f"Error adding inventory item: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server failed to add inventory item."
        )


@router.get("/items", response_model=SuccessResponse)
async def list_inventory_items(filter: Optional[str] = None):
    """
    Lists inventory rows. `filter` is "All" (or absent), "Low Stock" for rows at
    or below their recommended quantity, or a category name.
    """
    try:
        if not filter or filter == "All":
            items = await InventoryItem.all().order_by("inventory_name")
        elif filter == LOW_STOCK_FILTER:
            items = [
                i for i in await InventoryItem.all().order_by("inventory_name")
                if i.quantity <= i.recommended_quantity
            ]
        else:
            items = await InventoryItem.filter(inventory_type=filter).order_by("inventory_name")
        return SuccessResponse(data=[_to_response(i) for i in items])
    except Exception as e:
        log.error(f"Error fetching inventory items: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch inventory items.")


@router.get("/types", response_model=SuccessResponse)
async def list_inventory_types():
    """Distinct categories currently present in the inventory."""
    try:
        types = await InventoryItem.all().distinct().order_by("inventory_type").values_list("inventory_type", flat=True)
        return SuccessResponse(data=list(types))
    except Exception as e:
        log.error(f"Error fetching inventory types: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch inventory types.")


@router.get("/{inventory_name}", response_model=SuccessResponse)
async def get_inventory_item(inventory_name: str):
    """Fetches one inventory row by name."""
    try:
        item = await InventoryItem.get_or_none(inventory_name=inventory_name)
        if not item:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inventory item not found")
        return SuccessResponse(data=_to_response(item))
    except HTTPException:
        raise
    except Exception as e:
        log.error(f"Error fetching inventory: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch inventory.")


@router.put("/{inventory_name}", response_model=SuccessResponse)
async def update_inventory_item(inventory_name: str, payload: InventoryUpdateRequest):
    """Overwrites quantities and thresholds of an inventory row. The category is not editable."""
    try:
        item = await InventoryItem.get_or_none(inventory_name=inventory_name)
        if not item:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")

        item.update_from_dict(payload.model_dump())
        await item.save(update_fields=["quantity", "recommended_quantity", "gameday_quantity", "batch_quantity"])
        return SuccessResponse(data=_to_response(item))
    except HTTPException:
        raise
    except Exception as e:
        log.error(f"Error updating inventory item {inventory_name}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update item")


@router.post("/{inventory_name}/restock", response_model=SuccessResponse)
async def restock_inventory_item(inventory_name: str, payload: RestockRequest):
    """Sets the on-hand quantity after a delivery."""
    try:
        updated = await InventoryItem.filter(inventory_name=inventory_name).update(quantity=payload.quantity)
        if not updated:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inventory item not found")
        item = await InventoryItem.get(inventory_name=inventory_name)
        log.info(f"Restocked {inventory_name} to {payload.quantity}.")
        return SuccessResponse(data=_to_response(item))
    except HTTPException:
        raise
    except Exception as e:
        log.error(f"Error restocking {inventory_name}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to restock item.")


@router.delete("/{inventory_name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inventory_item(inventory_name: str):
    """Deletes an inventory row. Recipes naming it simply stop consuming it."""
    try:
        await InventoryItem.filter(inventory_name=inventory_name).delete()
    except Exception as e:
        log.error(f"Error deleting inventory item {inventory_name}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to delete inventory item.")
