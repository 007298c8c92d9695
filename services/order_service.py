from typing import Any, Dict
import logging

import anyio
import anyio.to_thread

from repositories import OrderRepository
from services.order_validation import validate_order

logger = logging.getLogger("foodorder.orders")


class OrderService:
    """
    Accepts orders: validate, wait the processing delay, then persist.

    Nothing is written unless validation passed. The delay runs after
    validation and before the write, so every accepted order takes at least
    `processing_delay` seconds to answer.
    """

    def __init__(self, repository: OrderRepository, processing_delay: float = 1.0):
        self.repository = repository
        self.processing_delay = processing_delay

    async def place_order(self, order: Any) -> Dict[str, Any]:
        """
        Validate and store an order.

        Args:
            order: The value under 'order' in the request body

        Returns:
            The persisted order including its generated id

        Raises:
            ServiceValidationError: If the order is incomplete
            StorageError: If the orders file cannot be read or written
        """
        validate_order(order)

        if self.processing_delay > 0:
            await anyio.sleep(self.processing_delay)

        stored = await anyio.to_thread.run_sync(self.repository.append, order)
        logger.info(
            "Order %s accepted with %d line(s)", stored["id"], len(stored["items"])
        )
        return stored
