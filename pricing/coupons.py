from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pricing.errors import UnknownCouponError

# Codes are matched verbatim; lookups are case-sensitive.
COUPON_TABLE: Mapping[str, float] = MappingProxyType({
    "SUMMER10": 10,
    "WINTER15": 15,
    "SPRING20": 20,
    "BLACKFRIDAY": 30,
    "NEWYEAR": 25,
})


def get_coupon_percent(coupon_code: str) -> float:
    """Return the discount percentage for ``coupon_code``.

    Raises:
        UnknownCouponError: If the code is not in the table (including "").
    """
    try:
        return COUPON_TABLE[coupon_code]
    except (KeyError, TypeError):
        raise UnknownCouponError(coupon_code) from None
