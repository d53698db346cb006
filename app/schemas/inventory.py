from pydantic import BaseModel, Field
from typing import Optional
from app.models.inventory import InventoryCategory


class InventoryItemResponse(BaseModel):
    """Schema for an inventory row."""
    inventory_name: str
    inventory_type: str
    quantity: float
    recommended_quantity: float
    gameday_quantity: float
    batch_quantity: Optional[float] = None

class InventoryItemRequest(BaseModel):
    inventory_name: str = Field(..., max_length=128, description="Unique name of the inventory item (e.g., orange_chicken).")
    inventory_type: InventoryCategory = Field(..., description="Category, which decides the unit conversion at payment time.")
    quantity: float = Field(0, description="Current on-hand quantity.")
    recommended_quantity: float = Field(0, ge=0, description="Stock level at or below which the item counts as low stock.")
    gameday_quantity: float = Field(0, ge=0, description="Target quantity for game days.")
    batch_quantity: Optional[float] = Field(None, gt=0, description="Batch size used by the rollover rule.")

class InventoryUpdateRequest(BaseModel):
    quantity: float
    recommended_quantity: float = Field(..., ge=0)
    gameday_quantity: float = Field(..., ge=0)
    batch_quantity: Optional[float] = Field(None, gt=0)

class RestockRequest(BaseModel):
    quantity: float = Field(..., description="New on-hand quantity after restocking.")
