import pytest

from xmidictrl.conversions import int_to_string


def test_pads_with_zeros():
    assert int_to_string(7, 3) == "007"


def test_longer_number_is_not_cut():
    assert int_to_string(12345, 3) == "12345"


def test_zero_length_gives_plain_number():
    assert int_to_string(42, 0) == "42"


@pytest.mark.parametrize("number", [0, 1, 9, 10, 99, 123, 4567])
def test_round_trip_and_width(number):
    result = int_to_string(number, 6)
    assert len(result) == 6
    assert int(result) == number