from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from product_catalog.core.constants import DEFAULT_CATALOG_PATH

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUE_VALUES


@dataclass
class Settings:
    """
    Configuración leída del entorno (y de .env si existe).

    Env vars:
      - CATALOG_PATH                  (default: products.json)
      - CATALOG_LOG_LEVEL             (default: INFO)
      - CATALOG_REJECT_ZERO_PRICE     (default: true, price=0 se rechaza)
      - CATALOG_UNIQUE_CODE_ON_UPDATE (default: false)
    """
    catalog_path: str = DEFAULT_CATALOG_PATH
    log_level: str = "INFO"
    reject_zero_price: bool = True
    unique_code_on_update: bool = False


def get_settings() -> Settings:
    load_dotenv()
    return Settings(
        catalog_path=os.getenv("CATALOG_PATH", DEFAULT_CATALOG_PATH).strip() or DEFAULT_CATALOG_PATH,
        log_level=os.getenv("CATALOG_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        reject_zero_price=_env_bool("CATALOG_REJECT_ZERO_PRICE", True),
        unique_code_on_update=_env_bool("CATALOG_UNIQUE_CODE_ON_UPDATE", False),
    )
