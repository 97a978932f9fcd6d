import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))
    environment: str = os.getenv("ENVIRONMENT", "production").lower()
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    cors_origins: list = [
        o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
    ]

    default_page_limit: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "100"))

    # KPI mock series bounds, half-open [min, max)
    kpi_stock_min: int = int(os.getenv("KPI_STOCK_MIN", "300"))
    kpi_stock_max: int = int(os.getenv("KPI_STOCK_MAX", "400"))
    kpi_demand_min: int = int(os.getenv("KPI_DEMAND_MIN", "250"))
    kpi_demand_max: int = int(os.getenv("KPI_DEMAND_MAX", "330"))

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


settings = Settings()
