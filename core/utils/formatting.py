"""
Display formatting helpers
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

# Locales whose digit grouping is 3 then 2 (12,34,567)
INDIAN_GROUPING_LOCALES = {"en-IN", "hi-IN"}


def _group_western(digits: str) -> str:
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return ",".join(groups)


def _group_indian(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(
    amount: Union[int, float, Decimal], locale: str = "en-IN", symbol: str = "$"
) -> str:
    """
    Format an amount as a currency string with two decimals.

    en-IN groups the last three digits then pairs (the browser's
    Intl.NumberFormat("en-IN", currency "USD") output); other locales use
    groups of three.

    >>> format_currency(1234567.5)
    '$12,34,567.50'
    >>> format_currency(15.99, locale="en-US")
    '$15.99'
    >>> format_currency(-3)
    '-$3.00'
    """
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, cents = f"{abs(value):.2f}".split(".")
    if locale in INDIAN_GROUPING_LOCALES:
        whole = _group_indian(whole)
    else:
        whole = _group_western(whole)
    return f"{sign}{symbol}{whole}.{cents}"
