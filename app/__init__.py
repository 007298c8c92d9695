"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings, get_settings
from app.exceptions import (
    ServiceValidationError,
    NotFoundError,
    StorageError,
    InvalidStateTransition,
    ClientRequestError,
)

__all__ = [
    "settings",
    "get_settings",
    "ServiceValidationError",
    "NotFoundError",
    "StorageError",
    "InvalidStateTransition",
    "ClientRequestError",
]
