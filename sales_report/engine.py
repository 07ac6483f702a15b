import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Optional

from pydantic import ValidationError

from sales_report.config import ReportSettings, get_settings
from sales_report.errors import InvalidDataError, MissingOptionsError, UnknownReferenceError
from sales_report.index import SalesIndex, SellerTally
from sales_report.models import Product, PurchaseItem, SalesDataset, SellerReport, TopProduct
from sales_report.money import round_money, to_decimal

logger = logging.getLogger(__name__)

REQUIRED_DATA_KEYS = ("customers", "products", "sellers", "purchase_records")

RevenueStrategy = Callable[[PurchaseItem, Product], Any]
BonusStrategy = Callable[[int, int, SellerTally], Any]


@dataclass(frozen=True)
class AnalysisOptions:
    calculate_revenue: RevenueStrategy
    calculate_bonus: BonusStrategy


def _validate_data(data: Mapping[str, Any] | SalesDataset | None) -> SalesDataset:
    if isinstance(data, SalesDataset):
        data = data.model_dump()
    if not isinstance(data, Mapping) or not data:
        raise InvalidDataError("Invalid data: expected a mapping of sales collections")

    keys = set(data)
    missing = [k for k in REQUIRED_DATA_KEYS if k not in keys]
    extra = sorted(str(k) for k in keys - set(REQUIRED_DATA_KEYS))
    if missing or extra:
        raise InvalidDataError(f"Invalid data: missing keys {missing}, unexpected keys {extra}")

    for key in REQUIRED_DATA_KEYS:
        value = data[key]
        if not isinstance(value, (list, tuple)):
            raise InvalidDataError(f"Invalid data: '{key}' must be a list, got {type(value).__name__}")
        if not value:
            raise InvalidDataError(f"Invalid data: '{key}' is empty")

    try:
        return SalesDataset.model_validate(dict(data))
    except ValidationError as exc:
        raise InvalidDataError(f"Invalid data: {exc.error_count()} malformed record field(s)") from exc


def _resolve_options(options: AnalysisOptions | Mapping[str, Any] | None) -> AnalysisOptions:
    if isinstance(options, AnalysisOptions):
        revenue_fn, bonus_fn = options.calculate_revenue, options.calculate_bonus
    elif isinstance(options, Mapping):
        revenue_fn = options.get("calculate_revenue")
        bonus_fn = options.get("calculate_bonus")
    else:
        raise MissingOptionsError("Options not configured")

    # both strategies are invoked on every run, so both are required
    missing = [
        name for name, fn in (("calculate_revenue", revenue_fn), ("calculate_bonus", bonus_fn))
        if not callable(fn)
    ]
    if missing:
        raise MissingOptionsError(f"Options not configured: {', '.join(missing)} must be callable")
    return AnalysisOptions(calculate_revenue=revenue_fn, calculate_bonus=bonus_fn)


def _top_products(tally: SellerTally, limit: int) -> list[TopProduct]:
    # sorted() is stable, so equal quantities keep first-sale order
    ranked = sorted(tally.products_sold.items(), key=lambda entry: entry[1], reverse=True)
    return [TopProduct(sku=sku, quantity=qty) for sku, qty in ranked[:limit]]


def analyze_sales_data(
    data: Mapping[str, Any] | SalesDataset,
    options: AnalysisOptions | Mapping[str, Any],
    settings: Optional[ReportSettings] = None,
) -> list[SellerReport]:
    """Aggregate purchase records into one report per seller, ranked by profit.

    Raises InvalidDataError / MissingOptionsError before any work is done, and
    UnknownSellerError / UnknownProductError when a record references something
    absent from the catalogs.
    """
    dataset = _validate_data(data)
    strategies = _resolve_options(options)
    settings = settings or get_settings()

    # ── 1. Indexes ───────────────────────────────────────────────────────────
    index = SalesIndex.build(dataset)
    logger.debug(
        "Indexed %d sellers and %d products; folding %d purchase records",
        len(index.tallies), len(index.products), len(dataset.purchase_records),
    )

    # ── 2. Fold purchase records into seller tallies ─────────────────────────
    try:
        for record in dataset.purchase_records:
            tally = index.get_tally(record.seller_id)
            tally.sales_count += 1
            for item in record.items:
                product = index.get_product(item.sku)
                revenue = to_decimal(strategies.calculate_revenue(item, product))
                tally.revenue += revenue
                tally.profit += revenue - product.purchase_price * item.quantity
                tally.add_quantity(item.sku, item.quantity)
    except UnknownReferenceError as exc:
        logger.warning("Aborting sales analysis: %s (receipt %s)", exc, record.receipt_id)
        raise

    # ── 3. Rank and finalize ─────────────────────────────────────────────────
    ranked = sorted(index.list_tallies(), key=lambda t: t.profit, reverse=True)
    total = len(ranked)

    reports: list[SellerReport] = []
    for rank, tally in enumerate(ranked):
        bonus = to_decimal(strategies.calculate_bonus(rank, total, tally))
        reports.append(SellerReport(
            seller_id=tally.seller_id,
            name=tally.name,
            revenue=round_money(tally.revenue),
            profit=round_money(tally.profit),
            sales_count=tally.sales_count,
            top_products=_top_products(tally, settings.top_products_limit),
            bonus=round_money(bonus),
        ))

    logger.debug("Ranking by profit: %s", [(r.seller_id, str(r.profit)) for r in reports])
    logger.info(
        "Analyzed %d purchase records for %d sellers; total revenue %s",
        len(dataset.purchase_records), total,
        sum((r.revenue for r in reports), Decimal("0")),
    )
    return reports
