"""
Order payload validation.

Works on the raw decoded JSON so the two client-facing messages stay exact.
Checks short-circuit: structure and items first, then customer fields.
"""

from typing import Any, Mapping, Optional

from app.exceptions import ServiceValidationError

MISSING_DATA = "Missing data."
MISSING_CUSTOMER_DATA = (
    "Missing data: Email, name, street, postal code or city is missing."
)

CUSTOMER_FIELDS = ("email", "name", "street", "postal-code", "city")


def _has_items(order: Any) -> bool:
    if not isinstance(order, Mapping):
        return False
    items = order.get("items")
    return isinstance(items, list) and len(items) > 0


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _has_valid_customer(customer: Any) -> bool:
    if not isinstance(customer, Mapping):
        return False
    if not all(_is_filled(customer.get(field)) for field in CUSTOMER_FIELDS):
        return False
    return "@" in customer["email"]


def validate_order(order: Any) -> None:
    """
    Validate a submitted order, accepting it as a whole or not at all.

    Args:
        order: The value found under 'order' in the request body (may be None)

    Raises:
        ServiceValidationError: With MISSING_DATA when the order or its items
            are absent or empty, otherwise with MISSING_CUSTOMER_DATA when a
            customer field is absent, blank or not a string, or the email has
            no '@'
    """
    if not _has_items(order):
        raise ServiceValidationError(MISSING_DATA, code="MISSING_DATA")

    if not _has_valid_customer(order.get("customer")):
        raise ServiceValidationError(
            MISSING_CUSTOMER_DATA, code="MISSING_CUSTOMER_DATA"
        )


def check_order(order: Any) -> Optional[str]:
    """Return the rejection message for an order, or None when it is valid."""
    try:
        validate_order(order)
    except ServiceValidationError as e:
        return e.message
    return None
