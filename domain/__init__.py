"""
Domain layer - Business entities, schemas, and enums.
"""

from domain import enums, schemas

__all__ = ["enums", "schemas"]
