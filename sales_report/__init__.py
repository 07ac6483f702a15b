from sales_report.calculators import calculate_bonus_by_profit, calculate_simple_revenue
from sales_report.engine import AnalysisOptions, analyze_sales_data
from sales_report.errors import (
    AnalysisError,
    InvalidDataError,
    MissingOptionsError,
    UnknownProductError,
    UnknownReferenceError,
    UnknownSellerError,
)
from sales_report.models import SellerReport, TopProduct

__all__ = [
    "AnalysisError",
    "AnalysisOptions",
    "InvalidDataError",
    "MissingOptionsError",
    "SellerReport",
    "TopProduct",
    "UnknownProductError",
    "UnknownReferenceError",
    "UnknownSellerError",
    "analyze_sales_data",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
]
