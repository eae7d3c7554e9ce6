# tests/fixed_income/test_bond_pricing.py
import math

import numpy as np

from bond_yield.fixed_income.pricing import (
    UNBOUNDED_PRICE,
    bond_price,
    coupon_payment,
    period_count,
)
from bond_yield.fixed_income.schemas import BondParameters


def make_bond(face=1000.0, price=994.0, coupon=9.0, freq=12, years=1.0):
    return BondParameters(
        face_value=face,
        market_price=price,
        coupon_rate=coupon,
        coupon_frequency=freq,
        years_to_maturity=years,
    )


def test_coupon_payment_per_period():
    assert np.isclose(coupon_payment(make_bond()), 7.5)
    assert np.isclose(coupon_payment(make_bond(coupon=6, freq=2)), 30.0)


def test_period_count_rounds_half_up():
    """Python's round() would give 0 and 2 here."""
    assert period_count(make_bond(freq=4, years=0.125)) == 1
    assert period_count(make_bond(freq=4, years=2.625)) == 11
    assert period_count(make_bond(freq=12, years=1.0)) == 12
    assert period_count(make_bond(freq=1, years=0.1)) == 0


def test_price_at_coupon_rate_is_par():
    bond = make_bond()
    assert np.isclose(bond_price(0.0075, bond, 12), 1000.0, rtol=0, atol=1e-9)


def test_zero_rate_is_undiscounted_sum():
    bond = make_bond()
    assert bond_price(0.0, bond, 12) == 1090.0
    # inside the zero-rate precision band
    assert bond_price(5e-8, bond, 12) == 1090.0
    assert bond_price(-5e-8, bond, 12) == 1090.0


def test_rate_at_or_below_minus_one_is_unbounded():
    bond = make_bond()
    assert bond_price(-1.0, bond, 12) == UNBOUNDED_PRICE
    assert bond_price(-1.5, bond, 12) == UNBOUNDED_PRICE
    assert math.isinf(UNBOUNDED_PRICE) and UNBOUNDED_PRICE > 0


def test_matches_discounted_cash_flows():
    bond = make_bond(coupon=6, freq=2, years=3)
    rate = 0.031
    expected = sum(30.0 / (1 + rate) ** t for t in range(1, 7))
    expected += 1000.0 / (1 + rate) ** 6
    assert np.isclose(bond_price(rate, bond, 6), expected, rtol=1e-12)


def test_price_is_decreasing_in_rate():
    bond = make_bond(coupon=5, freq=2, years=10)
    rates = np.linspace(-0.99, 5.0, 200)
    prices = np.array([bond_price(r, bond, 20) for r in rates])
    assert np.all(np.diff(prices) < 0)


def test_extreme_rates_do_not_raise():
    bond = make_bond(freq=12, years=100)
    # (1 - 0.9999)^1200 underflows to zero
    assert bond_price(-0.9999, bond, 1200) == UNBOUNDED_PRICE
    # 6^1200 overflows; only the coupon annuity limit c / r is left
    assert np.isclose(bond_price(5.0, bond, 1200), 7.5 / 5.0)
