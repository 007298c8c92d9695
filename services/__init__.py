"""Services package - Business logic layer"""

from services.cart_service import CartStore, CartAction, cart_reducer
from services.meal_service import MealService
from services.order_service import OrderService
from services.order_validation import validate_order, check_order
from services.progress_service import UserProgressState
from services.request_state import RequestState

__all__ = [
    "CartStore",
    "CartAction",
    "cart_reducer",
    "MealService",
    "OrderService",
    "validate_order",
    "check_order",
    "UserProgressState",
    "RequestState",
]
