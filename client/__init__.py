"""
Client package - Headless ordering session state and the HTTP client.
"""

from client.ordering_client import OrderingClient
from client.checkout import CheckoutSession

__all__ = ["OrderingClient", "CheckoutSession"]
