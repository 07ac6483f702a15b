from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal
from typing import Any, Optional


class InputRecord(BaseModel):
    # ids and SKUs may arrive as numbers; they are used as opaque string keys
    model_config = ConfigDict(coerce_numbers_to_str=True)


class Product(InputRecord):
    sku: str
    purchase_price: Decimal = Field(ge=0)
    name: Optional[str] = None
    category: Optional[str] = None
    sale_price: Optional[Decimal] = None


class Seller(InputRecord):
    id: str
    first_name: str
    last_name: str
    start_date: Optional[str] = None
    position: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class PurchaseItem(InputRecord):
    sku: str
    quantity: int = Field(gt=0)
    sale_price: Decimal = Field(ge=0)
    discount: Decimal = Field(default=Decimal("0"), ge=0, le=100)  # percent


class PurchaseRecord(InputRecord):
    seller_id: str
    items: list[PurchaseItem]
    receipt_id: Optional[str] = None
    date: Optional[str] = None
    customer_id: Optional[str] = None
    total_amount: Optional[Decimal] = None
    total_discount: Optional[Decimal] = None


class SalesDataset(BaseModel):
    # customers are only checked for presence
    customers: list[Any]
    products: list[Product]
    sellers: list[Seller]
    purchase_records: list[PurchaseRecord]


# ── Response models ──────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    sku: str
    quantity: int


class SellerReport(BaseModel):
    seller_id: str
    name: str
    # accumulated over all purchase records, rounded to 2 dp
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: list[TopProduct]
    bonus: Decimal
