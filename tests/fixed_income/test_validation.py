# tests/fixed_income/test_validation.py
import datetime as dt
import math

import pytest

from bond_yield.fixed_income.validation import (
    BondInputs,
    BondQuote,
    merge_bond_quote,
    parse_maturity_date,
    parse_number,
)


def make_inputs():
    return BondInputs(
        face_value=1000,
        market_price=994,
        coupon_rate=9,
        coupon_frequency=12,
        maturity_date=dt.date(2027, 10, 18),
        tds_rate=10,
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        (1200, 1200.0),
        (99.5, 99.5),
        ("1050", 1050.0),
        ("9.5%", 9.5),
        ("  7.25 p.a.", 7.25),
        ("abc", -1.0),
        ("", -1.0),
        (None, -1.0),
        (True, -1.0),
        (math.nan, -1.0),
        ("nan", -1.0),
        ([1, 2], -1.0),
    ],
)
def test_parse_number(value, expected):
    assert parse_number(value, -1.0) == expected


def test_parse_number_keeps_infinity():
    assert parse_number("inf", 0.0) == math.inf


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2030-06-15", dt.date(2030, 6, 15)),
        ("2030-06-15T00:00:00Z", dt.date(2030, 6, 15)),
        (dt.date(2030, 6, 15), dt.date(2030, 6, 15)),
        (dt.datetime(2030, 6, 15, 9, 30), dt.date(2030, 6, 15)),
        ("15/06/2030", None),
        ("2030-13-01", None),
        (20300615, None),
        (None, None),
    ],
)
def test_parse_maturity_date(value, expected):
    assert parse_maturity_date(value) == expected


def test_merge_camel_case_record():
    record = {
        "isin": "INE000000001",
        "name": "Example 9% 2030",
        "faceValue": "1000",
        "marketPrice": 1012.5,
        "couponRate": "9%",
        "couponFrequency": 2,
        "maturityDate": "2030-06-15",
    }
    merged = merge_bond_quote(record, make_inputs())

    assert merged.face_value == 1000.0
    assert merged.market_price == 1012.5
    assert merged.coupon_rate == 9.0
    assert merged.coupon_frequency == 2.0
    assert merged.maturity_date == dt.date(2030, 6, 15)
    assert merged.tds_rate == 10


def test_merge_falls_back_field_by_field():
    current = make_inputs()
    quote = BondQuote(
        face_value=None,
        market_price="n/a",
        coupon_rate=7.5,
        maturity_date="soon",
    )
    merged = merge_bond_quote(quote, current)

    assert merged.face_value == current.face_value
    assert merged.market_price == current.market_price
    assert merged.coupon_rate == 7.5
    assert merged.coupon_frequency == current.coupon_frequency
    assert merged.maturity_date == current.maturity_date


def test_merge_none_returns_current():
    current = make_inputs()
    assert merge_bond_quote(None, current) is current


def test_quote_coerces_numeric_identifiers():
    quote = BondQuote.model_validate({"isin": 12345, "unexpected": "ignored"})
    assert quote.isin == "12345"


@pytest.mark.parametrize(
    "record",
    [
        {"isin": ["x"], "faceValue": 500},
        {"name": {"a": 1}, "faceValue": 500},
        {"isin": None, "name": True, "faceValue": "500"},
    ],
)
def test_malformed_labels_do_not_block_merge(record):
    merged = merge_bond_quote(record, make_inputs())
    assert merged.face_value == 500.0
    assert merged.market_price == 994


def test_malformed_labels_become_none():
    quote = BondQuote.model_validate({"isin": ["x"], "name": {"a": 1}})
    assert quote.isin is None
    assert quote.name is None


def test_parse_number_long_junk_string():
    assert parse_number("1" + "x" * 40000, 0.0) == 1.0
    assert parse_number("x" * 40000, -1.0) == -1.0


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1_000", 1.0),
        ("-2.5e3 bp", -2500.0),
        (".75", 0.75),
        ("1e", 1.0),
        ("Infinity", math.inf),
        (10**400, -1.0),
    ],
)
def test_parse_number_reads_leading_decimal(value, expected):
    assert parse_number(value, -1.0) == expected
