import pytest

import pricing
from pricing.coupons import COUPON_TABLE, get_coupon_percent
from pricing.errors import UnknownCouponError


def test_table_contents():
    assert dict(COUPON_TABLE) == {
        "SUMMER10": 10,
        "WINTER15": 15,
        "SPRING20": 20,
        "BLACKFRIDAY": 30,
        "NEWYEAR": 25,
    }
    assert all(0 <= pct <= 100 for pct in COUPON_TABLE.values())


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COUPON_TABLE["FREE"] = 100
    with pytest.raises(TypeError):
        del COUPON_TABLE["SUMMER10"]


def test_get_coupon_percent():
    assert get_coupon_percent("NEWYEAR") == 25


@pytest.mark.parametrize("code", ["", "newyear", "FREE", None, ["SUMMER10"]])
def test_get_coupon_percent_unknown(code):
    with pytest.raises(UnknownCouponError):
        get_coupon_percent(code)


def test_module_shortcuts():
    assert pricing.calculate(100.0, 10.0) == pytest.approx(90.0)
    assert pricing.apply_coupon(400.0, "BLACKFRIDAY") == pytest.approx(280.0)
    with pytest.raises(pricing.UnknownCouponError):
        pricing.apply_coupon(100.0, "summer10")
