import pytest

import pricing.config
from pricing.cli import main
from pricing.config import set_config_for_test


@pytest.fixture(autouse=True)
def cli_config(monkeypatch):
    monkeypatch.setattr(pricing.config, "_config", None)
    set_config_for_test(log_level="ERROR", display_decimals=2)
    yield


def test_calculate(capsys):
    assert main(["calculate", "100", "10"]) == 0
    assert capsys.readouterr().out.strip() == "90.00"


def test_coupon(capsys):
    assert main(["coupon", "400", "BLACKFRIDAY"]) == 0
    assert capsys.readouterr().out.strip() == "280.00"


def test_display_decimals(capsys):
    set_config_for_test(log_level="ERROR", display_decimals=3)
    assert main(["calculate", "100", "66.67"]) == 0
    assert capsys.readouterr().out.strip() == "33.330"


def test_coupons_listing(capsys):
    assert main(["coupons"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "SUMMER10\t10%"
    assert lines[-1] == "BLACKFRIDAY\t30%"
    assert len(lines) == 5


@pytest.mark.parametrize(
    "argv, message",
    [
        (["calculate", "-1", "10"], "Price cannot be negative"),
        (["calculate", "100", "150"], "Discount must be between 0 and 100"),
        (["calculate", "abc", "10"], "price must be a number"),
        (["coupon", "100", "summer10"], "Unknown coupon code: 'summer10'"),
        (["coupon", "100", ""], "Unknown coupon code: ''"),
        (["coupon", "-100", "SUMMER10"], "Price cannot be negative"),
    ],
)
def test_rejected_input(capsys, argv, message):
    assert main(argv) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert message in captured.err


def test_missing_command():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2
