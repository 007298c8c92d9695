"""
HTTP client for the FoodOrder API.

Wraps the two endpoints and records each call in a RequestState so callers
can show loading, error and data without tracking the request themselves.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from app.exceptions import ClientRequestError
from domain.schemas.meal_schemas import MealItem
from domain.schemas.order_schemas import CartLine, Customer
from services.request_state import RequestState

logger = logging.getLogger("foodorder.client")

REJECTED_MESSAGE = "Something went wrong, failed to send request."
TRANSPORT_MESSAGE = "Something went wrong!"

_meal_list = TypeAdapter(List[MealItem])


class OrderingClient:
    """
    Client for GET /meals and POST /orders.

    Example:
        >>> with OrderingClient("http://localhost:3000") as api:
        ...     meals = api.fetch_meals()
    """

    TIMEOUT_S = 10.0

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """Use http_client when given (e.g. a FastAPI TestClient), else own one."""
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(
            base_url=base_url, timeout=httpx.Timeout(self.TIMEOUT_S)
        )

    def __enter__(self) -> "OrderingClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def fetch_meals(self, state: Optional[RequestState] = None) -> List[MealItem]:
        """Load the catalog. Raises ClientRequestError on any failure."""
        return self._send("GET", "/meals", state=state, parse=_meal_list.validate_python)

    def submit_order(
        self,
        items: Sequence[Union[CartLine, Mapping[str, Any]]],
        customer: Union[Customer, Mapping[str, Any]],
        state: Optional[RequestState] = None,
    ) -> Dict[str, Any]:
        """
        Post an order built from cart lines and checkout fields.

        Returns:
            The server's response body, e.g. {"message": "Order created!"}

        Raises:
            ClientRequestError: With the server's message on 4xx/5xx
        """
        body = {
            "order": {
                "items": [_as_dict(item) for item in items],
                "customer": (
                    customer.to_payload()
                    if isinstance(customer, Customer)
                    else dict(customer)
                ),
            }
        }
        return self._send("POST", "/orders", json=body, state=state)

    def _send(
        self,
        method: str,
        url: str,
        state: Optional[RequestState] = None,
        parse: Optional[Callable[[Any], Any]] = None,
        **kwargs: Any,
    ) -> Any:
        """Run one request; the state settles once, with the parsed payload or the error."""
        if state is not None:
            state.start()
        try:
            response = self._http.request(method, url, **kwargs)
            payload = _json_or_none(response)
            if response.is_error:
                message = REJECTED_MESSAGE
                if isinstance(payload, dict) and payload.get("message"):
                    message = payload["message"]
                raise ClientRequestError(message, status_code=response.status_code)
            if parse is not None:
                try:
                    payload = parse(payload)
                except (ValidationError, TypeError) as e:
                    raise ClientRequestError(
                        REJECTED_MESSAGE, status_code=response.status_code
                    ) from e
        except ClientRequestError as e:
            logger.warning("%s %s rejected: %s", method, url, e)
            _record_failure(state, e.message)
            raise
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            _record_failure(state, TRANSPORT_MESSAGE)
            raise ClientRequestError(TRANSPORT_MESSAGE) from e

        if state is not None:
            state.succeed(payload)
        return payload


def _as_dict(item: Union[CartLine, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(item, CartLine):
        return item.model_dump()
    return dict(item)


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _record_failure(state: Optional[RequestState], message: str) -> None:
    if state is not None:
        state.fail(message)
