from .quotes import DiscountQuote
from .coupons import CouponResponse
from .list_response import (
    StringList,
    CouponList,
)

__all__ = [
    # Response models
    "DiscountQuote",
    "CouponResponse",
    # List response models
    "StringList",
    "CouponList",
]
