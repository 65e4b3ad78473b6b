"""Error taxonomy for discount pricing.

Both kinds are caller-input errors: they are raised on the first violated
precondition and never retried.
"""
from __future__ import annotations

from typing import Optional


class PricingError(ValueError):
    """Base class for all pricing input errors."""


class InvalidInputError(PricingError):
    """Raised for a negative or non-numeric price, or an out-of-range discount."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class UnknownCouponError(PricingError):
    """Raised when a coupon code has no entry in the coupon table."""

    def __init__(self, coupon_code: str) -> None:
        super().__init__(f"Unknown coupon code: {coupon_code!r}")
        self.coupon_code = coupon_code
