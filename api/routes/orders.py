"""Order intake routes"""

from fastapi import APIRouter, Depends, Request, status
import json
import logging

from api.dependencies import get_order_service
from domain.schemas.order_schemas import MessageResponse
from services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])
logger = logging.getLogger("foodorder.api.orders")


async def _read_order(request: Request):
    """Return body['order'], or None when the body is not a JSON object."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.info("Order body is not valid JSON")
        return None
    if not isinstance(body, dict):
        return None
    return body.get("order")


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
async def create_order(request: Request, orders: OrderService = Depends(get_order_service)):
    """
    Accept an order of the form {"order": {"items": [...], "customer": {...}}}.

    Rejected orders get 400 with a fixed message and are never written.
    Accepted orders are stored with a generated id after the processing delay.
    """
    order = await _read_order(request)
    await orders.place_order(order)
    return MessageResponse(message="Order created!")
