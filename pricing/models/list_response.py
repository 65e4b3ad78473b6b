from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .coupons import CouponResponse


class StringList(BaseModel):
    """Generic container for lists of unique string values."""
    values: List[str] = Field(description="List of unique string values")


class CouponList(BaseModel):
    """Container for the coupon table rows."""
    values: List[CouponResponse] = Field(description="Coupons ordered by discount percentage")

    def codes(self) -> StringList:
        return StringList(values=[c.coupon_code for c in self.values])
