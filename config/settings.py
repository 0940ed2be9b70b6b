"""
config/settings.py
──────────────────
Runtime settings, each overridable through an environment variable of the
same name.
"""
import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class Settings:
    # Dev server
    DEBUG: bool = _env_flag("DEBUG", "false")
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8050"))

    # Directory holding the six CSV record sets
    DATA_DIR: str = os.getenv("DATA_DIR", "data")

    # Browser refresh period; service and rental-due alerts depend on the clock
    UPDATE_INTERVAL_MS: int = int(os.getenv("UPDATE_INTERVAL_MS", "60000"))

    # Demand forecasting
    FORECAST_SEED: int = int(os.getenv("FORECAST_SEED", "42"))
    FORECAST_HISTORY_MONTHS: int = int(os.getenv("FORECAST_HISTORY_MONTHS", "12"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
