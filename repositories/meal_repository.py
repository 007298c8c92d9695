"""
Meal Repository - Read-only access to the meal catalog file
"""

from typing import Any, Dict, List

from repositories.base import JsonFileRepository


class MealRepository(JsonFileRepository):
    """Repository for the available meals catalog"""

    def list_all(self) -> List[Dict[str, Any]]:
        """Return every meal in file order"""
        return self._read_all()
