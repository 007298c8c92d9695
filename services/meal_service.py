from typing import Any, Dict, List
import logging

import anyio.to_thread
from pydantic import TypeAdapter, ValidationError

from app.exceptions import StorageError
from domain.schemas.meal_schemas import MealItem
from repositories import MealRepository

logger = logging.getLogger("foodorder.meals")

_meal_list = TypeAdapter(List[MealItem])


class MealService:
    def __init__(self, repository: MealRepository):
        self.repository = repository

    async def list_meals(self) -> List[Dict[str, Any]]:
        """
        Return the catalog entries in file order, exactly as stored.

        Every entry is checked against MealItem first; the stored dicts are
        returned so numbers and optional keys reach the client unchanged.

        Raises:
            StorageError: If the file cannot be read or an entry is not a meal
        """
        raw = await anyio.to_thread.run_sync(self.repository.list_all)
        try:
            _meal_list.validate_python(raw)
        except ValidationError as e:
            raise StorageError(
                f"Meal catalog has malformed entries: {e.error_count()} error(s)",
                path=str(self.repository.path),
            ) from e
        logger.debug("Loaded %d meals from %s", len(raw), self.repository.path)
        return raw
