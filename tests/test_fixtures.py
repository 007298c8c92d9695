"""
Shared test data for the FoodOrder test suite.

Payloads mirror what the checkout form actually sends so endpoint, service
and validator tests all exercise the same shapes.
"""

import copy
import json

MOCK_MEALS = [
    {
        "id": "m1",
        "name": "Sushi",
        "price": 15.99,
        "description": "Finest fish and veggies",
        "image": "sushi.jpg",
    },
    {
        "id": "m2",
        "name": "Schnitzel",
        "price": 16.5,
        "description": "A german specialty!",
        "image": "schnitzel.jpg",
    },
]

MOCK_INDEX_HTML = (
    "<html><head><title>Test Page</title></head>"
    "<body><h1>Welcome to the App</h1></body></html>"
)

VALID_CUSTOMER = {
    "email": "test@example.com",
    "name": "Test User",
    "street": "123 Test St",
    "postal-code": "12345",
    "city": "Test City",
}

VALID_ORDER = {
    "items": [{"id": "m1", "name": "Sushi", "quantity": 2, "price": 15.99}],
    "customer": VALID_CUSTOMER,
}

VALID_ORDER_PAYLOAD = {"order": VALID_ORDER}

MISSING_DATA = {"message": "Missing data."}
MISSING_CUSTOMER_DATA = {
    "message": "Missing data: Email, name, street, postal code or city is missing."
}
GENERIC_ERROR = {"message": "An unknown error occurred!"}
NOT_FOUND = {"message": "Not found"}


def make_order(**customer_overrides) -> dict:
    """
    Deep copy of VALID_ORDER with some customer fields replaced.

    Example:
        >>> make_order(email="no-at-sign")["customer"]["email"]
        'no-at-sign'
    """
    order = copy.deepcopy(VALID_ORDER)
    for field, value in customer_overrides.items():
        order["customer"][field.replace("_", "-")] = value
    return order


def meal(meal_id: str = "m1") -> dict:
    return next(copy.deepcopy(m) for m in MOCK_MEALS if m["id"] == meal_id)


def read_orders(settings) -> list:
    """Orders currently persisted for the given settings"""
    return json.loads(settings.orders_path.read_text())
