"""Meal catalog routes"""

from fastapi import APIRouter, Depends
import logging
from typing import List

from api.dependencies import get_meal_service
from domain.schemas.meal_schemas import MealItem
from domain.schemas.order_schemas import MessageResponse
from services.meal_service import MealService

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("foodorder.api.meals")


@router.get(
    "",
    responses={
        200: {"model": List[MealItem], "description": "The meal catalog"},
        500: {"model": MessageResponse},
    },
)
async def get_meals(meals: MealService = Depends(get_meal_service)):
    """List every available meal as stored in the catalog file"""
    return await meals.list_meals()
