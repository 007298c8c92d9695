"""
API dependencies for dependency injection
"""

from pathlib import Path

from fastapi import Depends

from app.config import Settings, get_settings
from repositories import MealRepository, OrderRepository
from services.meal_service import MealService
from services.order_service import OrderService


def get_meal_service(settings: Settings = Depends(get_settings)) -> MealService:
    """
    Meal service bound to the configured catalog file.

    Usage:
        @router.get("/example")
        def example(meals: MealService = Depends(get_meal_service)):
            pass
    """
    return MealService(MealRepository(settings.meals_path))


def get_order_service(settings: Settings = Depends(get_settings)) -> OrderService:
    """Order service bound to the configured orders file and processing delay."""
    return OrderService(
        OrderRepository(settings.orders_path),
        processing_delay=settings.order_processing_delay_sec,
    )


def get_public_dir(settings: Settings = Depends(get_settings)) -> Path:
    return settings.public_dir
