# src/pricing/service.py
"""
End-to-end quote service.

vehicle -> premium calculation -> report line on stdout
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from src.pricing.config import PricingConfig
from src.pricing.quote import QuoteResult, SupportsYear, generate_quote
from src.reporting.report import report_premium

logger = logging.getLogger(__name__)


def quote_vehicle(
    vehicle: SupportsYear,
    base_rate: Optional[int] = None,
    *,
    cfg: Optional[PricingConfig] = None,
    stream: Optional[TextIO] = None,
) -> QuoteResult:
    """
    Price one vehicle, print the report line and return the quote.
    """
    q = generate_quote(vehicle, base_rate=base_rate, cfg=cfg)
    report_premium(q.premium, q.year, stream=stream)
    logger.info("Reported premium %s %s for model year %s", q.premium, q.currency, q.year)
    return q
