"""API routes package"""

from . import meals, orders, static

__all__ = ["meals", "orders", "static"]
