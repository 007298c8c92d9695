"""
Client-side flow tests: OrderingClient and CheckoutSession driven against the
real app through FastAPI's TestClient.
"""

import httpx
import pytest

from app.exceptions import ClientRequestError
from client.checkout import CheckoutSession
from client.ordering_client import OrderingClient, REJECTED_MESSAGE, TRANSPORT_MESSAGE
from domain.enums import RequestStatus, UserProgress
from domain.schemas.order_schemas import Customer
from services.cart_service import CartStore
from services.progress_service import UserProgressState
from services.request_state import RequestState
from test_fixtures import VALID_CUSTOMER, meal, read_orders


@pytest.fixture
def api(client):
    return OrderingClient(http_client=client)


@pytest.fixture
def session(api):
    cart = CartStore()
    cart.add_item(meal("m1"))
    cart.add_item(meal("m1"))
    cart.add_item(meal("m2"))
    progress = UserProgressState()
    progress.show_cart()
    progress.show_checkout()
    return CheckoutSession(cart, progress, api)


# =============================================================================
# ORDERING CLIENT
# =============================================================================


def test_fetch_meals_records_success(api):
    state = RequestState(initial_data=[])

    meals = api.fetch_meals(state)

    assert [m.id for m in meals] == ["m1", "m2"]
    assert state.status == RequestStatus.SUCCESS
    assert state.data == meals


def test_fetch_meals_server_error_recorded(api, test_settings):
    test_settings.meals_path.unlink()
    state = RequestState(initial_data=[])

    with pytest.raises(ClientRequestError) as exc_info:
        api.fetch_meals(state)

    assert exc_info.value.status_code == 500
    assert state.status == RequestStatus.FAILED
    assert state.error == "An unknown error occurred!"
    assert state.data == []


def test_submit_order_accepts_models(api, test_settings):
    cart = CartStore()
    cart.add_item(meal("m1"))
    customer = Customer.model_validate(VALID_CUSTOMER)

    body = api.submit_order(cart.items, customer)

    assert body == {"message": "Order created!"}
    stored = read_orders(test_settings)[0]
    assert stored["customer"] == VALID_CUSTOMER
    assert stored["items"][0]["quantity"] == 1
    assert stored["items"][0]["image"] == "sushi.jpg"


def test_submit_order_rejection_message_surfaces(api):
    state = RequestState()
    with pytest.raises(ClientRequestError) as exc_info:
        api.submit_order([], VALID_CUSTOMER, state=state)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Missing data."
    assert state.error == "Missing data."


def test_error_without_message_uses_fallback():
    def handler(request):
        return httpx.Response(502, text="Bad gateway")

    http = httpx.Client(base_url="http://test", transport=httpx.MockTransport(handler))
    state = RequestState()

    with pytest.raises(ClientRequestError) as exc_info:
        OrderingClient(http_client=http).fetch_meals(state)

    assert exc_info.value.message == REJECTED_MESSAGE
    assert state.error == REJECTED_MESSAGE


def test_transport_failure_is_wrapped():
    def handler(request):
        raise httpx.ConnectError("connection refused")

    http = httpx.Client(base_url="http://test", transport=httpx.MockTransport(handler))
    state = RequestState()

    with pytest.raises(ClientRequestError) as exc_info:
        OrderingClient(http_client=http).fetch_meals(state)

    assert exc_info.value.status_code is None
    assert exc_info.value.message == TRANSPORT_MESSAGE
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert state.status == RequestStatus.FAILED
    assert state.error == TRANSPORT_MESSAGE


@pytest.mark.parametrize(
    "body",
    [{"oops": 1}, [{"id": "m1"}], ["sushi"], None],
)
def test_fetch_meals_unexpected_payload_is_a_failure(body):
    def handler(request):
        if body is None:
            return httpx.Response(200, text="<html>not json</html>")
        return httpx.Response(200, json=body)

    http = httpx.Client(base_url="http://test", transport=httpx.MockTransport(handler))
    state = RequestState(initial_data=[])

    with pytest.raises(ClientRequestError) as exc_info:
        OrderingClient(http_client=http).fetch_meals(state)

    assert exc_info.value.message == REJECTED_MESSAGE
    assert exc_info.value.status_code == 200
    assert state.status == RequestStatus.FAILED
    assert state.error == REJECTED_MESSAGE
    assert state.data == []


def test_client_closes_only_its_own_http_client(client):
    with OrderingClient(http_client=client) as api:
        pass
    assert not client.is_closed

    owned = OrderingClient("http://localhost:9")
    owned.close()
    assert owned._http.is_closed


# =============================================================================
# CHECKOUT SESSION
# =============================================================================


def test_checkout_totals(session):
    assert session.cart_total == pytest.approx(15.99 * 2 + 16.5)
    assert session.formatted_total == "$48.48"


def test_checkout_success_then_finish(session, test_settings):
    result = session.submit(VALID_CUSTOMER)

    assert result == {"message": "Order created!"}
    assert session.succeeded
    assert not session.is_sending
    orders = read_orders(test_settings)
    assert len(orders) == 1
    assert [(i["id"], i["quantity"]) for i in orders[0]["items"]] == [("m1", 2), ("m2", 1)]

    session.finish()

    assert session.progress.progress == UserProgress.NONE
    assert session.cart.is_empty()
    assert session.request.status == RequestStatus.IDLE
    assert session.request.data is None


def test_checkout_failure_keeps_cart(session, test_settings):
    result = session.submit({**VALID_CUSTOMER, "email": "invalid"})

    assert result is None
    assert session.request.status == RequestStatus.FAILED
    assert session.request.error == (
        "Missing data: Email, name, street, postal code or city is missing."
    )
    assert session.cart.total_quantity == 3
    assert session.progress.is_checkout_open
    assert read_orders(test_settings) == []


def test_checkout_retry_after_failure(session):
    session.submit({**VALID_CUSTOMER, "city": ""})
    assert session.request.status == RequestStatus.FAILED

    assert session.submit(VALID_CUSTOMER) == {"message": "Order created!"}
    assert session.request.error is None


def test_checkout_close_keeps_cart(session):
    session.close()
    assert session.progress.progress == UserProgress.NONE
    assert session.cart.total_quantity == 3


def test_empty_cart_checkout_rejected(api):
    session = CheckoutSession(CartStore(), UserProgressState(), api)
    assert session.submit(VALID_CUSTOMER) is None
    assert session.request.error == "Missing data."
    assert session.formatted_total == "$0.00"
