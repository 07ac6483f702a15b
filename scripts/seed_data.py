"""
Deterministic sample-data generator.

Produces a raw dataset in the shape analyze_sales_data expects:
  - 5 sellers
  - 20 products across 4 categories, purchase price 40-80 % of list price
  - 30 customers
  - 200 purchase records of 1-5 items each, ~30 % of items discounted
"""

import random
from datetime import date, timedelta
from decimal import Decimal

from sales_report.calculators import calculate_simple_revenue
from sales_report.models import PurchaseItem

SEED = 42
START = date(2024, 1, 1)
END   = date(2024, 3, 31)

_FIRST_NAMES = ["Alexey", "Maria", "Ivan", "Olga", "Dmitry", "Elena", "Sergey", "Anna"]
_LAST_NAMES  = ["Petrov", "Ivanova", "Smirnov", "Kuznetsova", "Popov", "Sokolova", "Lebedev"]
_CATEGORIES  = ["Electronics", "Home", "Garden", "Toys"]


def _rand_date(rng: random.Random, lo: date = START, hi: date = END) -> date:
    return lo + timedelta(days=rng.randint(0, (hi - lo).days))


def build_dataset(
    seed: int = SEED,
    n_sellers: int = 5,
    n_products: int = 20,
    n_customers: int = 30,
    n_records: int = 200,
) -> dict:
    rng = random.Random(seed)

    # ── sellers ──────────────────────────────────────────────────────────────
    sellers = [
        {
            "id": f"seller_{i}",
            "first_name": rng.choice(_FIRST_NAMES),
            "last_name": rng.choice(_LAST_NAMES),
            "start_date": str(_rand_date(rng, date(2020, 1, 1), date(2023, 12, 31))),
            "position": rng.choice(["Junior Seller", "Seller", "Senior Seller"]),
        }
        for i in range(1, n_sellers + 1)
    ]

    # ── products ─────────────────────────────────────────────────────────────
    products = []
    for i in range(1, n_products + 1):
        sale_price = round(rng.uniform(5, 500), 2)
        products.append({
            "sku": f"SKU_{i:03d}",
            "name": f"Product {i}",
            "category": rng.choice(_CATEGORIES),
            "sale_price": f"{sale_price:.2f}",
            "purchase_price": f"{sale_price * rng.uniform(0.4, 0.8):.2f}",
        })

    # ── customers ────────────────────────────────────────────────────────────
    customers = [
        {
            "id": f"customer_{i}",
            "first_name": rng.choice(_FIRST_NAMES),
            "last_name": rng.choice(_LAST_NAMES),
        }
        for i in range(1, n_customers + 1)
    ]

    # ── purchase records ─────────────────────────────────────────────────────
    purchase_records = []
    for i in range(1, n_records + 1):
        items = []
        for product in rng.sample(products, rng.randint(1, min(5, len(products)))):
            items.append({
                "sku": product["sku"],
                "quantity": rng.randint(1, 10),
                "sale_price": product["sale_price"],
                "discount": rng.choice([0, 5, 10, 15]) if rng.random() < 0.3 else 0,
            })
        full = sum(Decimal(it["sale_price"]) * it["quantity"] for it in items)
        net = sum(calculate_simple_revenue(PurchaseItem(**it), None) for it in items)
        purchase_records.append({
            "receipt_id": f"receipt_{i:04d}",
            "date": str(_rand_date(rng)),
            "seller_id": rng.choice(sellers)["id"],
            "customer_id": rng.choice(customers)["id"],
            "items": items,
            "total_amount": f"{net:.2f}",
            "total_discount": f"{full - net:.2f}",
        })

    return {
        "customers": customers,
        "products": products,
        "sellers": sellers,
        "purchase_records": purchase_records,
    }
