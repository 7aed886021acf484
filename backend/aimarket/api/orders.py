"""
Orders API Endpoints

PayPal checkout: order creation from the button widget's createOrder
callback and capture from its onApprove callback.

Provider statuses and payloads are forwarded verbatim, including
provider-side error statuses.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from ..models.orders import OrderRequest
from ..services.state import MarketState, get_market_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/orders")
async def create_order_endpoint(
    body: Optional[OrderRequest] = None,
    state: MarketState = Depends(get_market_state)
) -> JSONResponse:
    """
    Create a PayPal order for a module.

    Request Body:
        {
            "itemId": str,    # module id
            "itemName": str,  # module name
            "amount": str     # e.g. "79.00"
        }

    Returns:
        PayPal order JSON with the PayPal status code (201 on success)

    Errors:
        400 {"error": "Missing item data"}
        500 {"error": "..."} on token, network or provider errors
    """
    body = body or OrderRequest()
    logger.info(f"Order requested: item={body.item_id}, amount={body.amount}")

    status, payload = await state.orders.create_order(
        body.item_id, body.item_name, body.amount
    )
    return JSONResponse(status_code=status, content=payload)


@router.post("/orders/{order_id}/capture")
async def capture_order_endpoint(
    order_id: str,
    state: MarketState = Depends(get_market_state)
) -> JSONResponse:
    """
    Capture an approved PayPal order.

    Path Parameters:
        order_id: PayPal order id

    Returns:
        PayPal capture JSON with the PayPal status code; on success the body
        also carries "activation"

    Errors:
        500 {"error": "..."} on token, network or provider errors
    """
    logger.info(f"Capture requested for order: {order_id}")

    status, payload = await state.orders.capture_order(order_id)
    return JSONResponse(status_code=status, content=payload)
