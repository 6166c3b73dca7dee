"""
ShoppingCart — In-memory корзина покупок

Корзина хранит упорядоченный список ссылок на Product (дубликаты допустимы),
накопленную сумму total и счётчик count. Изменяется только через
add / remove / apply_discount.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. count == число удерживаемых ссылок (кроме quirk в remove, см. ниже)
2. total == сумма цен, изменённая уже применёнными скидками
3. Скидка не хранится и не переприменяется при последующих add/remove
4. remove сопоставляет товар по ссылке (is), не по равенству цены

QUIRK (по умолчанию сохраняется):
remove() уменьшает total и count даже если товара в корзине нет.
CartConfig(strict_remove=True) включает исправленное поведение:
ProductNotInCartError без каких-либо изменений состояния.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, List, Optional

from src.core.domain.product import Product
from src.core.domain.snapshot import CartSnapshot
from src.core.pricing.discounts import apply_discount

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CartError(Exception):
    """Базовая ошибка корзины."""
    pass


class ProductNotInCartError(CartError):
    """
    Попытка удалить товар, которого нет в корзине (только strict_remove=True).
    """

    def __init__(self, product: Product):
        self.product = product
        super().__init__(f"Product {product.label()} is not in the cart")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CartConfig:
    """Конфигурация корзины.

    strict_remove=False воспроизводит безусловное уменьшение total/count
    в remove(); True: уменьшение только при реальном удалении.
    """

    strict_remove: bool = False


# =============================================================================
# SHOPPING CART
# =============================================================================


class ShoppingCart:
    """Корзина покупок.

    Пассивный агрегат, наблюдаемое состояние: тройка (total, count, products).
    Потокобезопасность не обеспечивается: при конкурентном доступе владелец
    должен сам синхронизировать вызовы add/remove/apply_discount.
    """

    def __init__(self, config: Optional[CartConfig] = None):
        """
        Args:
            config: конфигурация корзины (default CartConfig())
        """
        self.config = config or CartConfig()

        self._products: List[Product] = []
        self._total: Decimal = Decimal(0)
        self._count: int = 0

    # -------------------------------------------------------------------
    # Read-only aggregates
    # -------------------------------------------------------------------

    @property
    def total(self) -> Decimal:
        return self._total

    @property
    def count(self) -> int:
        return self._count

    @property
    def products(self) -> tuple[Product, ...]:
        """Товары в порядке добавления (копия, не живой список)."""
        return tuple(self._products)

    def __len__(self) -> int:
        # Удерживаемые ссылки, а не count: после quirk в remove count может быть < 0
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(tuple(self._products))

    def __repr__(self) -> str:
        return f"ShoppingCart(total={self._total}, count={self._count})"

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------

    def add(self, *products: Product) -> None:
        """
        Добавление товаров в порядке передачи.

        Для каждого товара: count += 1, total += price.
        Вызов без аргументов ничего не делает.

        Все аргументы проверяются до любых изменений.

        Raises:
            ValueError: если среди товаров есть None
            TypeError: если среди товаров есть не-Product
        """
        if any(product is None for product in products):
            raise ValueError("Cannot add None to the cart")
        for product in products:
            if not isinstance(product, Product):
                raise TypeError(f"Expected Product, got {type(product).__name__}")

        for product in products:
            self._products.append(product)
            self._total += product.price
            self._count += 1

        if products:
            logger.debug(
                "Added %d product(s): total=%s count=%d",
                len(products), self._total, self._count,
            )

    def remove(self, product: Product) -> None:
        """
        Удаление первого вхождения именно этого экземпляра товара.

        total -= price и count -= 1 выполняются всегда, даже если экземпляра
        в корзине нет (кроме strict_remove=True).

        Raises:
            ValueError: если product is None
            ProductNotInCartError: strict_remove=True и товара нет в корзине
        """
        if product is None:
            raise ValueError("Cannot remove None from the cart")

        index = self._find(product)

        if index is None:
            if self.config.strict_remove:
                raise ProductNotInCartError(product)
            logger.warning(
                "Removing %s which is not in the cart; totals adjusted anyway",
                product.label(),
            )
        else:
            del self._products[index]

        self._total -= product.price
        self._count -= 1

        logger.debug(
            "Removed %s: total=%s count=%d", product.label(), self._total, self._count
        )

    def apply_discount(self, discount: int, is_percentage: bool) -> None:
        """
        Применение скидки к текущему total (заменяет его).

        При discount <= 0 ничего не меняется. Повторные вызовы компаундятся.

        Args:
            discount: проценты (is_percentage=True) или абсолютная сумма
            is_percentage: тип скидки
        """
        before = self._total
        self._total = apply_discount(before, discount, is_percentage)

        if self._total != before:
            logger.debug(
                "Applied %s discount %d: total %s -> %s",
                "percentage" if is_percentage else "flat",
                discount, before, self._total,
            )

    # -------------------------------------------------------------------
    # Read model
    # -------------------------------------------------------------------

    def snapshot(self) -> CartSnapshot:
        """Immutable снапшот текущего состояния."""
        return CartSnapshot(
            total=self._total,
            count=self._count,
            items=tuple(self._products),
        )

    def _find(self, product: Product) -> Optional[int]:
        # Pydantic-модели сравниваются по значению, поэтому только is
        for index, held in enumerate(self._products):
            if held is product:
                return index
        return None
