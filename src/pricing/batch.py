# src/pricing/batch.py
"""
Vectorised premium calculation.

Same rule as src.pricing.quote.calculate, applied to many vehicles at once:
- calculate_many: array of model years -> array of premiums
- quote_frame: in-memory vehicle table -> copy with premium columns

Premiums are int64 unless the base rate (or its doubled value) does not fit,
in which case the array holds Python ints (dtype=object).
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

import numpy as np
import pandas as pd

from src.pricing.config import MODEL_YEAR_CUTOFF, OLDER_MODEL_MULTIPLIER
from src.vehicles.record import Vehicle

VEHICLE_COLUMNS = ["model", "brand", "year", "price"]

_INT64 = np.iinfo(np.int64)


def _fits_int64(*values: int) -> bool:
    return all(_INT64.min <= v <= _INT64.max for v in values)


def calculate_many(years: Union[Sequence[int], np.ndarray, pd.Series], base_rate: int) -> np.ndarray:
    # Years are compared as given; float years are not truncated
    doubled = np.asarray(years) <= MODEL_YEAR_CUTOFF
    older_rate = base_rate * OLDER_MODEL_MULTIPLIER

    if _fits_int64(base_rate, older_rate):
        return np.where(doubled, np.int64(older_rate), np.int64(base_rate)).astype(np.int64)

    out = np.full(doubled.shape, base_rate, dtype=object)
    out[doubled] = older_rate
    return out


def vehicles_to_frame(vehicles: Iterable[Vehicle]) -> pd.DataFrame:
    return pd.DataFrame([v.to_dict() for v in vehicles], columns=VEHICLE_COLUMNS)


def quote_frame(vehicles: pd.DataFrame, base_rate: int) -> pd.DataFrame:
    """
    Price every row of a vehicle table.

    Only the `year` column is required. Returns a copy with:
    - premium: int64 (object for base rates beyond int64)
    - doubled: bool (older-model branch taken)
    """
    if "year" not in vehicles.columns:
        raise KeyError(f"Vehicle table missing columns: ['year']. Found columns: {list(vehicles.columns)}")

    out = vehicles.copy()
    years = out["year"].to_numpy()
    out["premium"] = calculate_many(years, base_rate)
    out["doubled"] = years <= MODEL_YEAR_CUTOFF
    return out
