import datetime as dt

import pytest

from gdp_graph.charting.formatting import (
    amount_label,
    format_number,
    get_quarter,
    group_digits,
    number_string,
    quarter_label,
)


@pytest.mark.parametrize("n", [0, 7, 42, 999, -1, -999])
def test_small_numbers_unchanged(n):
    assert format_number(n) == str(n)


def test_thousands():
    assert format_number(1234) == "1,234"
    assert format_number(1000) == "1,000"
    assert format_number(100000) == "100,000"


def test_millions():
    assert format_number(1234567) == "1,234,567"


def test_negative_numbers():
    assert format_number(-1234) == "-1,234"
    assert format_number(-123) == "-123"
    assert format_number(-123456) == "-123,456"


def test_fraction_is_kept_verbatim():
    assert format_number(1234.5) == "1,234.5"
    assert format_number(18064.7) == "18,064.7"
    assert format_number(0.125) == "0.125"


def test_integral_floats_drop_trailing_zero():
    assert number_string(243.0) == "243"
    assert format_number(17000.0) == "17,000"


def test_exponent_notation_left_alone():
    assert format_number(1e22) == str(1e22)


def test_quarter_from_zero_indexed_month():
    assert get_quarter(0) == 1
    assert get_quarter(2) == 1
    assert get_quarter(3) == 2
    assert get_quarter(11) == 4


def test_labels():
    assert quarter_label(dt.date(1947, 1, 1)) == "1947 Q1"
    assert quarter_label(dt.date(2015, 7, 1)) == "2015 Q3"
    assert amount_label(18064.7) == "$18,064.7 Billion"
    assert amount_label(75.0) == "$75 Billion"


def test_small_fractions_stay_in_fixed_notation():
    assert number_string(0.00001) == "0.00001"
    assert format_number(0.00001) == "0.00001"
    assert number_string(1.5e-07) == "0.00000015"
    assert number_string(1e-08) == "1e-08"


def test_group_digits_keeps_formatted_fraction():
    assert group_digits("1234.50") == "1,234.50"
    assert group_digits("-1000.0") == "-1,000.0"
    assert group_digits("0.0") == "0.0"
