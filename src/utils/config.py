# src/utils/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from src.pricing.config import PricingConfig


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    return v if v is not None and v != "" else default


def _env_int(key: str, default: int) -> int:
    raw = _env(key)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got: {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    base_rate: int
    currency: str
    log_level: str
    log_format: str

    def pricing_config(self) -> PricingConfig:
        return PricingConfig(currency=self.currency, base_rate=self.base_rate)


def get_settings() -> Settings:
    """
    Runtime defaults from environment variables.
    Everything is optional so local runs need no setup.

    Env:
      QUOTE_BASE_RATE (default: 5000)
      QUOTE_CURRENCY  (default: INR)
      LOG_LEVEL       (default: WARNING)
      LOG_FORMAT      (text | json, default: text)
    """
    defaults = PricingConfig()
    return Settings(
        base_rate=_env_int("QUOTE_BASE_RATE", defaults.base_rate),
        currency=_env("QUOTE_CURRENCY", defaults.currency) or defaults.currency,
        log_level=(_env("LOG_LEVEL", "WARNING") or "WARNING").upper(),
        log_format=(_env("LOG_FORMAT", "text") or "text").lower(),
    )
