from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List
from decimal import Decimal


class CartLineRequest(BaseModel):
    """Schema for a single line of the cart being paid."""
    name: str
    quantity: int = Field(..., ge=1)
    # Any value is accepted; non-numeric prices are replaced when the line is stored
    price: Any = None

class PaymentRequest(BaseModel):
    """Schema for the payment request body sent by cashier and kiosk terminals."""
    model_config = ConfigDict(populate_by_name=True)

    items: List[CartLineRequest] = Field(default_factory=list)
    employee_name: str = Field(..., alias="employeeName", max_length=64)

class PaymentResponse(BaseModel):
    """Response schema for a processed payment."""
    order_id: int
    message: str

class OrderLineResponse(BaseModel):
    """Schema for a line inside the detailed order response."""
    product_name: str
    quantity: int
    price: str  # Use string for Decimal type serialization

class OrderDetailResponse(BaseModel):
    """Schema for fetching detailed order information."""
    order_id: int
    name: str
    total: Decimal
    time_stamp: str
    items: List[OrderLineResponse]
