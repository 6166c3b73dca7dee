"""
Contract Validation Module

Валидация JSON контрактов корзины (сериализованный CartSnapshot).
"""

from .validators import (
    CartStateValidator,
    SchemaLoader,
    validate_cart_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "CartStateValidator",
    # Functions
    "validate_cart_state",
]
