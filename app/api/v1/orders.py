import logging
from fastapi import APIRouter, HTTPException, status
from app.schemas.response import SuccessResponse
from app.services.exceptions import PaymentError
from app.services.order_service import (
    process_payment,
    get_order_by_id,
    list_current_kiosk_orders,
    describe_product_name,
    to_reference_tz,
)
from app.schemas.order import PaymentRequest, PaymentResponse, OrderDetailResponse, OrderLineResponse

router = APIRouter()
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
log = logging.getLogger("uvicorn")


def _order_detail(order, readable_names: bool = False) -> dict:
    items = [
        OrderLineResponse(
            product_name=describe_product_name(line.product_name) if readable_names else line.product_name,
            quantity=line.quantity,
            price=str(line.price),
        )
        for line in order.lines
    ]
    return OrderDetailResponse(
        order_id=order.id,
        name=order.name,
        total=order.total,
        time_stamp=to_reference_tz(order.time_stamp).isoformat(),
        items=items,
    ).model_dump()


@router.post("/pay", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def pay_endpoint(request_data: PaymentRequest):
    """
    Processes a payment: records the order and its lines and depletes inventory,
    all in one transaction.
    """
    try:
        items_data = [
            {"name": item.name, "quantity": item.quantity, "price": item.price}
            for item in request_data.items
        ]
        order_id = await process_payment(items=items_data, employee_name=request_data.employee_name)
        data = PaymentResponse(
            order_id=order_id,
            message="Payment processed successfully",
        ).model_dump()
        return SuccessResponse(data=data)
    except PaymentError:
        # Rendered by the payment exception handler
        raise
    except Exception as e:
        # Nothing was committed; the terminal keeps the cart and may resubmit
        log.error(f"Error processing payment for {request_data.employee_name}: {e}")
        raise HTTPException(status_code=500, detail="Payment processing failed")


@router.get("/current", response_model=SuccessResponse)
async def current_orders_endpoint():
    """Today's kiosk orders for the kitchen display, with readable product names."""
    try:
        orders = await list_current_kiosk_orders()
        return SuccessResponse(data=[_order_detail(o, readable_names=True) for o in orders])
    except Exception as e:
        log.error(f"Error fetching current orders: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch current orders.")


@router.get("/{order_id}", response_model=SuccessResponse)
async def get_order_endpoint(order_id: int):
    """Fetches details for a specific order."""
    try:
        order = await get_order_by_id(order_id)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found")
        return SuccessResponse(data=_order_detail(order))
    except HTTPException:
        raise
    except Exception as e:
        log.error(f"Error fetching order {order_id}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch order details.")
