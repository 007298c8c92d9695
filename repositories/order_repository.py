"""
Order Repository - Append-only access to the orders file
"""

import uuid
from typing import Any, Dict, List, Mapping

from repositories.base import JsonFileRepository


class OrderRepository(JsonFileRepository):
    """
    Repository for accepted orders.

    append() is a read-modify-write of the whole file without locking: two
    writers racing on the same file can lose an order. One writer per file
    is assumed.
    """

    def list_all(self) -> List[Dict[str, Any]]:
        """Return all persisted orders, oldest first"""
        return self._read_all()

    def append(self, order: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Persist a validated order with a freshly generated id.

        Args:
            order: Order payload as submitted (items, customer, ...)

        Returns:
            The stored order including its new 'id'

        Raises:
            StorageError: If the file cannot be read, parsed or written
        """
        orders = self._read_all()
        new_order = {**order, "id": str(uuid.uuid4())}
        orders.append(new_order)
        self._write_all(orders)
        return new_order
