"""Domain entities for internal representation.

These are plain values used by services and handlers. They are NOT
API contracts - use DTOs from the dto package for that.
"""

from .product import Product, has_valid_id
from .result import Failure, Result, Success

__all__ = ["Product", "has_valid_id", "Success", "Failure", "Result"]
