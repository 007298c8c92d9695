"""
Checkout flow over an explicitly passed cart, progress state and API client.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from app.exceptions import ClientRequestError
from client.ordering_client import OrderingClient
from core.utils.formatting import format_currency
from domain.enums import RequestStatus
from domain.schemas.order_schemas import Customer
from services.cart_service import CartStore
from services.progress_service import UserProgressState
from services.request_state import RequestState

logger = logging.getLogger("foodorder.checkout")


class CheckoutSession:
    """
    Drives one checkout: submit the cart with the customer's details, then
    on success close the dialog and empty the cart.

    A failed submission keeps the cart and records the error in `request`.
    """

    def __init__(
        self,
        cart: CartStore,
        progress: UserProgressState,
        api: OrderingClient,
        request: Optional[RequestState] = None,
        locale: str = "en-IN",
    ):
        self.cart = cart
        self.progress = progress
        self.api = api
        self.request: RequestState = request or RequestState()
        self.locale = locale

    @property
    def cart_total(self) -> float:
        return self.cart.total_price

    @property
    def formatted_total(self) -> str:
        return format_currency(self.cart_total, locale=self.locale)

    @property
    def is_sending(self) -> bool:
        return self.request.is_loading

    @property
    def succeeded(self) -> bool:
        return self.request.status == RequestStatus.SUCCESS

    def submit(self, customer: Union[Customer, Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        """
        Send the current cart as an order.

        Returns:
            The server response on success, None when the request failed
            (the message is then in self.request.error)
        """
        try:
            return self.api.submit_order(self.cart.items, customer, state=self.request)
        except ClientRequestError as e:
            logger.info("Checkout failed: %s", e.message)
            return None

    def finish(self) -> None:
        """Acknowledge a successful order: hide checkout, empty cart, reset request."""
        self.progress.hide_checkout()
        self.cart.clear_cart()
        self.request.clear_data()

    def close(self) -> None:
        """Dismiss the checkout dialog and keep the cart as it is."""
        self.progress.hide_checkout()
