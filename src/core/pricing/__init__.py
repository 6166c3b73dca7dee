"""
Pricing — чистые функции расчёта суммы корзины.
"""

from src.core.pricing.discounts import PERCENT_BASE, apply_discount

__all__ = [
    "PERCENT_BASE",
    "apply_discount",
]
