"""
Domain models and value objects.

Contains the shopping cart aggregate, Product and the cart snapshot.
"""

from src.core.domain.cart import (
    CartConfig,
    CartError,
    ProductNotInCartError,
    ShoppingCart,
)
from src.core.domain.product import Product
from src.core.domain.snapshot import CartSnapshot

__all__ = [
    # Cart
    "ShoppingCart",
    "CartConfig",
    "CartError",
    "ProductNotInCartError",
    # Product model
    "Product",
    # Snapshot
    "CartSnapshot",
]
