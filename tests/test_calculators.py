"""
Unit tests for the default revenue and bonus strategies.
"""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from sales_report.calculators import calculate_bonus_by_profit, calculate_simple_revenue
from sales_report.models import Product, PurchaseItem

PRODUCT = Product(sku="A", purchase_price=Decimal("50"))


def with_profit(profit):
    return SimpleNamespace(profit=Decimal(profit))


class TestSimpleRevenue:
    def test_discounted_item(self):
        item = PurchaseItem(sku="A", quantity=2, sale_price=Decimal("100"), discount=Decimal("10"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("180")

    def test_no_discount(self):
        item = PurchaseItem(sku="A", quantity=3, sale_price=Decimal("19.99"), discount=Decimal("0"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("59.97")

    def test_full_discount(self):
        item = PurchaseItem(sku="A", quantity=4, sale_price=Decimal("25"), discount=Decimal("100"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("0")

    def test_discount_defaults_to_zero(self):
        item = PurchaseItem(sku="A", quantity=1, sale_price=Decimal("7.50"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("7.50")


class TestBonusByProfit:
    @pytest.mark.parametrize("rank, expected", [
        (0, Decimal("150")),
        (1, Decimal("100")),
        (2, Decimal("100")),
        (3, Decimal("50")),
        (4, Decimal("0")),
    ])
    def test_tiers_for_five_sellers(self, rank, expected):
        assert calculate_bonus_by_profit(rank, 5, with_profit("1000")) == expected

    def test_middle_ranks_get_five_percent(self):
        for rank in range(3, 9):
            assert calculate_bonus_by_profit(rank, 10, with_profit("200")) == Decimal("10")

    @pytest.mark.parametrize("rank, total", [(0, 1), (1, 2), (2, 3)])
    def test_last_rank_overrides_tier_table(self, rank, total):
        assert calculate_bonus_by_profit(rank, total, with_profit("1000")) == 0

    def test_negative_profit_is_not_clamped(self):
        assert calculate_bonus_by_profit(0, 3, with_profit("-200")) == Decimal("-30")
