from __future__ import annotations

from typing import Optional, Protocol

import pandas as pd

from .models import CouponList, DiscountQuote


# ---- Pricing protocol ----

class PricingService(Protocol):
    """
    Contract for anything that prices an order line for a caller surface.

    Implementations MUST be pure: no I/O, no shared mutable state, and the
    price check always precedes the discount or coupon check.
    """

    def calculate(self, price: float, discount_percent: float) -> float:
        """Return ``price`` reduced by ``discount_percent`` (0-100)."""
        ...

    def apply_coupon(self, price: float, coupon_code: str) -> float:
        """Return ``price`` reduced by the percentage mapped to ``coupon_code``."""
        ...

    def list_coupons(self) -> CouponList:
        """List the coupon codes this service accepts."""
        ...

    def quote(self, price: float, discount_percent: float, coupon_code: Optional[str] = None) -> DiscountQuote:
        """Return a DiscountQuote for a percentage discount."""
        ...

    def quote_coupon(self, price: float, coupon_code: str) -> DiscountQuote:
        """Return a DiscountQuote for a coupon code."""
        ...

    def coupon_price_table(self, price: float) -> pd.DataFrame:
        """Price ``price`` under every coupon, one row per coupon."""
        ...
