# src/vehicles/record.py
"""
Vehicle record.

A plain data holder: model, brand, year and price of one car.
Nothing here knows about insurance; pricing lives in src.pricing.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Vehicle:
    model: str
    brand: str
    year: int
    # Listed price in whole currency units
    price: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
