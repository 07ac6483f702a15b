import logging

import pytest
from pydantic import ValidationError

from sales_report.calculators import calculate_bonus_by_profit, calculate_simple_revenue
from sales_report.config import ReportSettings, configure_logging
from sales_report.engine import AnalysisOptions, analyze_sales_data


class TestReportSettings:
    def test_defaults(self):
        settings = ReportSettings()
        assert settings.top_products_limit == 10
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SALES_REPORT_TOP_PRODUCTS_LIMIT", "3")
        assert ReportSettings().top_products_limit == 3

    def test_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            ReportSettings(top_products_limit=0)


class TestConfigureLogging:
    def test_sets_package_level(self):
        logger = logging.getLogger("sales_report")
        previous = logger.level
        try:
            configure_logging(ReportSettings(log_level="debug"))
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)

    def test_engine_logs_summary(self, caplog):
        data = {
            "customers": [{"id": "customer_1"}],
            "products": [{"sku": "A", "purchase_price": "1"}],
            "sellers": [{"id": "S-1", "first_name": "Olga", "last_name": "Popova"}],
            "purchase_records": [
                {"seller_id": "S-1", "items": [{"sku": "A", "quantity": 2, "sale_price": "5"}]},
            ],
        }
        with caplog.at_level(logging.INFO, logger="sales_report"):
            analyze_sales_data(data, AnalysisOptions(calculate_simple_revenue, calculate_bonus_by_profit))
        assert "1 purchase records for 1 sellers" in caplog.text
