from __future__ import annotations

from pydantic import BaseModel, Field


class CouponResponse(BaseModel):
    """Response model for coupon data."""
    coupon_code: str = Field(description="Case-sensitive coupon code")
    discount_pct: float = Field(description="Discount percentage")
