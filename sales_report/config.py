import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportSettings(BaseSettings):
    top_products_limit: int = Field(10, gt=0, description="Entries kept in each seller's top_products")
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SALES_REPORT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> ReportSettings:
    return ReportSettings()


def configure_logging(settings: ReportSettings | None = None) -> None:
    """Set up logging for scripts that run an analysis. Never called on import."""
    settings = settings or get_settings()
    level = settings.log_level.upper()
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("sales_report").setLevel(level)
