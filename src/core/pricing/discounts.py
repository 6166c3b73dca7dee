"""
Discounts — Применение одноразовой скидки к сумме корзины

Скидка не хранится как ставка: функция возвращает новую сумму, а корзина
просто заменяет ей текущий total. Повторные вызовы компаундятся.

ПРАВИЛА:
1. discount <= 0 → сумма не меняется (отрицательная скидка игнорируется)
2. процентная скидка → total * discount / PERCENT_BASE
3. фиксированная скидка → total - discount (без ограничения снизу нулём)
"""

from decimal import Decimal
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# База для процентной скидки
PERCENT_BASE: Final[int] = 100


# =============================================================================
# DISCOUNT
# =============================================================================


def apply_discount(total: Decimal, discount: int, is_percentage: bool) -> Decimal:
    """
    Вычисление суммы после скидки.

    Args:
        total: Текущая сумма корзины
        discount: Размер скидки (целое; проценты или абсолютная величина)
        is_percentage: True для процентной скидки, False для фиксированной

    Returns:
        Новая сумма (Decimal). При discount <= 0 возвращается total без изменений.

    Raises:
        TypeError: Если discount не int (bool тоже отклоняется)

    Examples:
        >>> apply_discount(Decimal("50"), 15, True)
        Decimal('7.5')
        >>> apply_discount(Decimal("50"), 15, False)
        Decimal('35')
        >>> apply_discount(Decimal("50"), -56, True)
        Decimal('50')
    """
    if isinstance(discount, bool) or not isinstance(discount, int):
        raise TypeError(f"discount must be int, got {type(discount).__name__}")

    if discount <= 0:
        return total

    if is_percentage:
        return total * discount / PERCENT_BASE

    # Без floor: сумма может уйти в минус
    return total - discount
