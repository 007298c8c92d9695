"""
Repositories package - Data access layer.
"""

from repositories.base import JsonFileRepository
from repositories.meal_repository import MealRepository
from repositories.order_repository import OrderRepository

__all__ = [
    "JsonFileRepository",
    "MealRepository",
    "OrderRepository",
]
