from dataclasses import dataclass, field
from decimal import Decimal

from sales_report.errors import UnknownProductError, UnknownSellerError
from sales_report.models import Product, SalesDataset, Seller


@dataclass
class SellerTally:
    """Running totals for one seller while purchase records are folded in."""

    seller_id: str
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    # sku → quantity sold, in order of first sale
    products_sold: dict[str, int] = field(default_factory=dict)

    @classmethod
    def for_seller(cls, seller: Seller) -> "SellerTally":
        return cls(seller_id=seller.id, name=seller.full_name)

    def add_quantity(self, sku: str, quantity: int) -> None:
        self.products_sold[sku] = self.products_sold.get(sku, 0) + quantity


class SalesIndex:
    """Lookup tables for a single analysis run."""

    def __init__(self) -> None:
        self.tallies: dict[str, SellerTally] = {}
        self.products: dict[str, Product] = {}

    @classmethod
    def build(cls, dataset: SalesDataset) -> "SalesIndex":
        index = cls()
        for seller in dataset.sellers:
            index.add_seller(seller)
        for product in dataset.products:
            index.add_product(product)
        return index

    # ── writes ────────────────────────────────────────────────────────────────

    def add_seller(self, seller: Seller) -> None:
        self.tallies[seller.id] = SellerTally.for_seller(seller)

    def add_product(self, product: Product) -> None:
        self.products[product.sku] = product

    # ── reads ─────────────────────────────────────────────────────────────────

    def get_tally(self, seller_id: str) -> SellerTally:
        tally = self.tallies.get(seller_id)
        if tally is None:
            raise UnknownSellerError(f"Seller '{seller_id}' not found")
        return tally

    def get_product(self, sku: str) -> Product:
        product = self.products.get(sku)
        if product is None:
            raise UnknownProductError(f"Product '{sku}' not found")
        return product

    def list_tallies(self) -> list[SellerTally]:
        return list(self.tallies.values())
