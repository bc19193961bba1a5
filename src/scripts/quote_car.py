# src/scripts/quote_car.py
"""
Quote the insurance premium for one car and print it.

Usage:
  python -m src.scripts.quote_car

Optional:
  python -m src.scripts.quote_car --model Civic --brand Honda --year 2021 \
    --price 250000 --base_rate 6000 --json

Env (optional):
  QUOTE_BASE_RATE=5000
  QUOTE_CURRENCY=INR
  LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import argparse
import json
from typing import Optional, Sequence

from src.pricing.quote import generate_quote
from src.pricing.service import quote_vehicle
from src.utils.config import get_settings
from src.utils.observability import setup_logging
from src.vehicles.record import Vehicle

DEFAULT_VEHICLE = Vehicle(model="City", brand="Honda", year=2013, price=170000)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print the insurance premium for one car.")
    p.add_argument("--model", type=str, default=DEFAULT_VEHICLE.model, help="Car model (default: City)")
    p.add_argument("--brand", type=str, default=DEFAULT_VEHICLE.brand, help="Car brand (default: Honda)")
    p.add_argument("--year", type=int, default=DEFAULT_VEHICLE.year, help="Model year (default: 2013)")
    p.add_argument("--price", type=int, default=DEFAULT_VEHICLE.price, help="Listed price (default: 170000)")
    p.add_argument("--base_rate", type=int, default=None, help="Base rate. Default: QUOTE_BASE_RATE or 5000")
    p.add_argument("--json", action="store_true", help="Print the quote as JSON instead of the report line")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    vehicle = Vehicle(model=args.model, brand=args.brand, year=args.year, price=args.price)
    cfg = settings.pricing_config()

    if args.json:
        q = generate_quote(vehicle, base_rate=args.base_rate, cfg=cfg)
        print(json.dumps({"vehicle": vehicle.to_dict(), "quote": q.to_dict()}, indent=2))
    else:
        quote_vehicle(vehicle, base_rate=args.base_rate, cfg=cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
