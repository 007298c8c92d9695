"""Schemas for the meal catalog"""

from pydantic import BaseModel, Field


class MealItem(BaseModel):
    """A meal as listed in the catalog file"""

    id: str = Field(..., description="Meal identifier, e.g. 'm1'")
    name: str
    price: float = Field(..., ge=0)
    description: str = ""
    image: str = Field("", description="Image path relative to the public directory")

    model_config = {"frozen": True, "extra": "allow"}
