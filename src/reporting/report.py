# src/reporting/report.py
"""
Human-readable premium report.

One line per quote, written to stdout:
- older model : "The insurance for this car of the model year {year} is: {premium}"
- newer model : "The insurance for this car model is: {premium}"
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from src.pricing.quote import is_older_model


def format_premium_line(premium: int, year: int) -> str:
    if is_older_model(year):
        return f"The insurance for this car of the model year {year} is: {premium}"
    return f"The insurance for this car model is: {premium}"


def report_premium(premium: int, year: int, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    print(format_premium_line(premium, year), file=out)
