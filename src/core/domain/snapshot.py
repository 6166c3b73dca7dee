"""
CartSnapshot — Снапшот состояния корзины

Immutable Pydantic модель для инспекции и сериализации.
JSON-форма (model_dump(mode="json")) соответствует контракту cart_state
(src/core/contracts/schema/cart_state.json): Decimal сериализуется строкой.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from .product import Product


class CartSnapshot(BaseModel):
    """
    Снапшот корзины на момент вызова ShoppingCart.snapshot().

    count может быть меньше len(items) или отрицательным только вследствие
    удаления отсутствующего товара, поэтому здесь не ограничивается.
    """

    total: Decimal = Field(..., description="Сумма корзины после скидок")
    count: int = Field(..., description="Счётчик товаров")
    items: tuple[Product, ...] = Field(default=(), description="Товары в порядке добавления")

    model_config = {"frozen": True}  # Immutable

    def subtotal(self) -> Decimal:
        """Сумма цен без учёта применённых скидок."""
        return sum((item.price for item in self.items), Decimal(0))
