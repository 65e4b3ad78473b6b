from __future__ import annotations

from typing import Literal

from .calculator import PricingCalculator
from .interface import PricingService


def get_pricing_service(kind: Literal["static"] = "static") -> PricingService:
    if kind == "static":
        # Prices against the built-in coupon table
        return PricingCalculator()
    raise ValueError(f"Unknown pricing service kind: {kind}")
