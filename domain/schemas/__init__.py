"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.meal_schemas import MealItem
from domain.schemas.order_schemas import (
    CartLine,
    Customer,
    Order,
    MessageResponse,
)

__all__ = [
    # Meal schemas
    "MealItem",
    # Order schemas
    "CartLine",
    "Customer",
    "Order",
    "MessageResponse",
]
