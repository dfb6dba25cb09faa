"""
Runtime settings read from the environment at startup.
"""
import os
from dataclasses import dataclass, field

from aggregator import MOCK_DELAY_SECONDS, SCAN_LIMIT


DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:8000",
]


@dataclass(frozen=True)
class Settings:
    scan_limit: int = SCAN_LIMIT
    mock_delay: float = MOCK_DELAY_SECONDS
    include_spend: bool = False
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """
    Build settings from CUSTOMER_MAP_* environment variables.

    Unset variables fall back to the defaults on Settings.
    """
    scan_limit = os.environ.get("CUSTOMER_MAP_SCAN_LIMIT")
    mock_delay = os.environ.get("CUSTOMER_MAP_MOCK_DELAY")
    cors = os.environ.get("CUSTOMER_MAP_CORS_ORIGINS")

    return Settings(
        scan_limit=int(scan_limit) if scan_limit else SCAN_LIMIT,
        mock_delay=float(mock_delay) if mock_delay else MOCK_DELAY_SECONDS,
        include_spend=_env_flag("CUSTOMER_MAP_INCLUDE_SPEND"),
        cors_origins=[o.strip() for o in cors.split(",") if o.strip()] if cors else list(DEFAULT_CORS_ORIGINS),
    )
