from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dealer_catalog.domain.paging import DEFAULT_MAX_PER_PAGE

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PRODUCTS_PATH = Path("assets") / "products_real.json"
DEFAULT_LOG_LEVEL = "INFO"


def _positive_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def _list_env(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if not raw:
        return default
    items = [item.strip() for item in raw.split(",") if item.strip()]
    return items or default


@dataclass(frozen=True, slots=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    max_per_page: int = DEFAULT_MAX_PER_PAGE
    products_path: Path = DEFAULT_PRODUCTS_PATH
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> Settings:
        """
        Read settings from the environment.

        Missing or unusable numeric values fall back to their defaults
        rather than failing startup.
        """
        return cls(
            port=_positive_int_env("PORT", DEFAULT_PORT),
            host=os.getenv("HOST") or DEFAULT_HOST,
            max_per_page=_positive_int_env("MAX_PER_PAGE", DEFAULT_MAX_PER_PAGE),
            products_path=Path(os.getenv("PRODUCTS_PATH") or DEFAULT_PRODUCTS_PATH),
            log_level=(os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            cors_origins=_list_env("CORS_ORIGINS", ["*"]),
        )
