"""
Product — Модель товара в корзине

Immutable Pydantic модель товара. Единственный обязательный атрибут: цена
в Decimal. Внутри корзины товар идентифицируется по ссылке (``is``),
а не по равенству значений: два Product(price=20) считаются разными позициями.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# PRODUCT MODEL
# =============================================================================


class Product(BaseModel):
    """
    Модель товара.

    Immutable модель (frozen=True). Цена может быть любой конечной
    десятичной величиной, включая ноль и отрицательные значения.
    int/str/float приводятся к Decimal, NaN/Inf отклоняются.
    """

    price: Decimal = Field(..., allow_inf_nan=False, description="Цена товара")
    name: Optional[str] = Field(None, description="Отображаемое имя (только для логов и снапшотов)")

    model_config = {"frozen": True}  # Immutable

    def label(self) -> str:
        """Короткое представление для логов."""
        if self.name:
            return f"{self.name}@{self.price}"
        return f"product@{self.price}"
