import pytest

from donation_ledger.amount import Amount, ZERO, format_near, parse_near
from donation_ledger.errors import InvalidAmount


def test_amount_holds_values_wider_than_64_bits():
    big = Amount(2**100)
    assert big + 1 == 2**100 + 1
    assert isinstance(big + 1, Amount)
    assert str(big) == str(2**100)


def test_amount_rejects_negative_values():
    with pytest.raises(InvalidAmount):
        Amount(-1)


def test_subtraction_below_zero_fails():
    with pytest.raises(InvalidAmount):
        Amount(5) - Amount(6)
    assert Amount(6) - Amount(5) == 1


def test_amount_rejects_floats_and_junk():
    with pytest.raises(InvalidAmount):
        Amount(1.5)
    with pytest.raises(InvalidAmount):
        Amount("12abc")
    assert Amount(" 42 ") == 42


def test_sum_starting_from_zero_stays_an_amount():
    total = sum([Amount(1), Amount(2), Amount(3)], ZERO)
    assert total == 6
    assert isinstance(total, Amount)


def test_format_near():
    assert format_near(15 * 10**23) == "1.5"
    assert format_near(0) == "0"
    assert format_near(10**27) == "1,000"
    assert format_near(1) == "0.000000000000000000000001"
    assert format_near(10**21, 5) == "0.001"
    assert format_near(123456 * 10**18, 2) == "0.12"
    assert format_near(5 * 10**21, 2) == "0.01"


def test_format_near_keeps_precision_for_huge_amounts():
    amount = 123456789012345678901234567890123456789
    assert format_near(amount) == "123,456,789,012,345.678901234567890123456789"


def test_parse_near():
    assert parse_near("1.5") == 15 * 10**23
    assert parse_near("1,000") == 10**27
    assert parse_near("0") == 0


def test_parse_near_rejects_bad_input():
    for text in ["abc", "-1", "0.0000000000000000000000001", "Infinity"]:
        with pytest.raises(InvalidAmount):
            parse_near(text)


def test_amount_rejects_non_decimal_digits():
    with pytest.raises(InvalidAmount):
        Amount("²")
