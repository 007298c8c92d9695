"""
Domain enums for the FoodOrder application.
Contains the enumeration types used by the cart, checkout and request state.
"""

import enum


class CartActionType(str, enum.Enum):
    """Actions understood by the cart reducer"""

    ADD_ITEM = "add-item"
    REMOVE_ITEM = "remove-item"
    CLEAR_CART = "clear-cart"


class UserProgress(str, enum.Enum):
    """Which ordering step the user is currently looking at"""

    NONE = ""
    CART = "cart"
    CHECKOUT = "checkout"


class RequestStatus(str, enum.Enum):
    """Lifecycle of a single client request"""

    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"
