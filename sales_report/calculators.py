from decimal import Decimal

from sales_report.models import Product, PurchaseItem

_HUNDRED = Decimal("100")

# rank (0-based, by profit desc) → share of profit paid as bonus
_BONUS_RATES: dict[int, Decimal] = {
    0: Decimal("0.15"),
    1: Decimal("0.10"),
    2: Decimal("0.10"),
}
_DEFAULT_BONUS_RATE = Decimal("0.05")


def calculate_simple_revenue(item: PurchaseItem, product: Product) -> Decimal:
    """Net revenue of one line item after its percentage discount."""
    return item.sale_price * item.quantity * (1 - item.discount / _HUNDRED)


def calculate_bonus_by_profit(rank: int, total: int, seller) -> Decimal:
    """Tiered bonus for the seller at `rank` out of `total`.

    The last-ranked seller always gets nothing, even when it also sits in
    the top three (so a lone seller earns no bonus). Negative profit gives
    a negative bonus.
    """
    if rank == total - 1:
        return Decimal("0")
    rate = _BONUS_RATES.get(rank, _DEFAULT_BONUS_RATE)
    return seller.profit * rate
