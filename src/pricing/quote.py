# src/pricing/quote.py
"""
Premium calculation and quote generation.

Provides:
- the older-model predicate shared with reporting
- premium calculation for one vehicle
- quote output object

Notes:
- The calculator only needs to read a vehicle's year; anything exposing
  an integer `year` attribute can be priced.
- Year and price are not range-checked.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Protocol

from src.pricing.config import MODEL_YEAR_CUTOFF, OLDER_MODEL_MULTIPLIER, PricingConfig

logger = logging.getLogger(__name__)


class SupportsYear(Protocol):
    year: int


@dataclass(frozen=True)
class QuoteResult:
    currency: str
    year: int
    base_rate: int
    premium: int
    doubled: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def is_older_model(year: int) -> bool:
    """
    True when the model year falls on or before the cutoff (inclusive).
    """
    return year <= MODEL_YEAR_CUTOFF


def calculate(vehicle: SupportsYear, base_rate: int) -> int:
    """
    Premium for one vehicle.

    premium = base_rate * 2   if vehicle.year <= 2020
            = base_rate       otherwise
    """
    if is_older_model(vehicle.year):
        return base_rate * OLDER_MODEL_MULTIPLIER
    return base_rate


def generate_quote(
    vehicle: SupportsYear,
    base_rate: Optional[int] = None,
    cfg: Optional[PricingConfig] = None,
) -> QuoteResult:
    """
    Generate a quote for a vehicle. Falls back to the config's base rate.
    """
    cfg = cfg or PricingConfig()
    rate = cfg.base_rate if base_rate is None else base_rate
    premium = calculate(vehicle, rate)

    logger.debug("Quoted year=%s base_rate=%s premium=%s", vehicle.year, rate, premium)

    return QuoteResult(
        currency=cfg.currency,
        year=vehicle.year,
        base_rate=rate,
        premium=premium,
        doubled=is_older_model(vehicle.year),
    )
