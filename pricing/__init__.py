from .calculator import PricingCalculator
from .coupons import COUPON_TABLE
from .errors import InvalidInputError, PricingError, UnknownCouponError
from .util import get_pricing_service

_default = PricingCalculator()


def calculate(price: float, discount_percent: float) -> float:
    """Module-level shortcut for PricingCalculator().calculate."""
    return _default.calculate(price, discount_percent)


def apply_coupon(price: float, coupon_code: str) -> float:
    """Module-level shortcut for PricingCalculator().apply_coupon."""
    return _default.apply_coupon(price, coupon_code)


__all__ = [
    "COUPON_TABLE",
    "PricingCalculator",
    "PricingError",
    "InvalidInputError",
    "UnknownCouponError",
    "apply_coupon",
    "calculate",
    "get_pricing_service",
]
