"""
Тесты для доменных моделей: Product, CartSnapshot

Проверяет:
1. Создание и приведение цены к Decimal
2. Immutability (frozen=True)
3. Отклонение NaN/Inf
4. Сериализацию снапшота в JSON
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.domain import CartSnapshot, Product


# =============================================================================
# PRODUCT TESTS
# =============================================================================


class TestProduct:
    """Тесты для модели Product"""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (20, Decimal("20")),
            ("19.99", Decimal("19.99")),
            (Decimal("0.10"), Decimal("0.10")),
            (0, Decimal("0")),
            (-3, Decimal("-3")),
        ],
    )
    def test_price_coerced_to_decimal(self, raw, expected: Decimal) -> None:
        product = Product(price=raw)
        assert isinstance(product.price, Decimal)
        assert product.price == expected

    def test_name_optional(self) -> None:
        assert Product(price=1).name is None
        assert Product(price=1, name="Mug").name == "Mug"

    def test_product_immutable(self) -> None:
        product = Product(price=20)
        with pytest.raises(ValidationError):
            product.price = Decimal("30")  # type: ignore

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_price_rejected(self, raw: str) -> None:
        with pytest.raises(ValidationError):
            Product(price=raw)

    def test_price_required(self) -> None:
        with pytest.raises(ValidationError):
            Product()  # type: ignore[call-arg]

    def test_equal_by_value_but_distinct_instances(self) -> None:
        a = Product(price=20)
        b = Product(price=20)
        assert a == b
        assert a is not b

    def test_label(self) -> None:
        assert Product(price=20).label() == "product@20"
        assert Product(price="2.50", name="Tea").label() == "Tea@2.50"


# =============================================================================
# SNAPSHOT TESTS
# =============================================================================


class TestCartSnapshot:
    """Тесты для модели CartSnapshot"""

    def test_json_dump_renders_decimals_as_strings(self) -> None:
        snapshot = CartSnapshot(
            total=Decimal("7.5"),
            count=2,
            items=(Product(price=20, name="A"), Product(price=30)),
        )
        data = snapshot.model_dump(mode="json")

        assert data == {
            "total": "7.5",
            "count": 2,
            "items": [
                {"price": "20", "name": "A"},
                {"price": "30", "name": None},
            ],
        }

    def test_subtotal_ignores_discount(self) -> None:
        snapshot = CartSnapshot(
            total=Decimal("35"),
            count=2,
            items=(Product(price=20), Product(price=30)),
        )
        assert snapshot.subtotal() == Decimal("50")

    def test_empty_snapshot(self) -> None:
        snapshot = CartSnapshot(total=Decimal(0), count=0)
        assert snapshot.items == ()
        assert snapshot.subtotal() == Decimal(0)

    def test_snapshot_immutable(self) -> None:
        snapshot = CartSnapshot(total=Decimal(0), count=0)
        with pytest.raises(ValidationError):
            snapshot.count = 1  # type: ignore
