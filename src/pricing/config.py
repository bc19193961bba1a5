# src/pricing/config.py
"""
Pricing configuration.

The rule itself is fixed:
- vehicles of model year MODEL_YEAR_CUTOFF or earlier pay OLDER_MODEL_MULTIPLIER x base rate
- newer vehicles pay the base rate

Only the default base rate and the currency label are carried in PricingConfig.
"""

from __future__ import annotations

from dataclasses import dataclass

MODEL_YEAR_CUTOFF = 2020
OLDER_MODEL_MULTIPLIER = 2


@dataclass(frozen=True)
class PricingConfig:
    currency: str = "INR"

    # Unscaled premium before the model-year adjustment
    base_rate: int = 5000
