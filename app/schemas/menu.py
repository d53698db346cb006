from pydantic import BaseModel, Field
from typing import List, Optional
from decimal import Decimal


class MenuItemRequest(BaseModel):
    product_name: str = Field(..., max_length=128, description="Size prefix plus item, e.g. L_orange_chicken.")
    price: Decimal = Field(..., ge=0)
    type: str = Field(..., max_length=32, description="entree, side, appetizer, drink, ...")
    calories: Optional[int] = Field(None, ge=0)

class MenuItemUpdate(BaseModel):
    price: Decimal = Field(..., ge=0)
    calories: Optional[int] = Field(None, ge=0)

class MenuItemResponse(BaseModel):
    product_name: str
    price: Decimal
    type: str
    calories: Optional[int] = None

class RecipeIngredientRequest(BaseModel):
    inventory_name: str = Field(..., max_length=128)
    inventory_quantity: float = Field(..., ge=0, description="Amount consumed per unit sold, in recipe units.")

class RecipeResponse(BaseModel):
    product_name: str
    ingredients: List[RecipeIngredientRequest]
