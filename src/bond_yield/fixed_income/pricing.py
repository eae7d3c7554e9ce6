# src/bond_yield/fixed_income/pricing.py
from __future__ import annotations

import math

from bond_yield.fixed_income.schemas import BondParameters

# Rates closer to zero than this are priced with the undiscounted sum.
PRECISION = 1e-7

# Price reported for a discount rate at or below -100%. Present value is
# unbounded there; returning +inf keeps the bisection direction rule
# ("price above market -> raise the rate") uniform across the whole bracket.
UNBOUNDED_PRICE = math.inf


def coupon_payment(bond: BondParameters) -> float:
    """Cash paid per coupon period."""
    return bond.face_value * (bond.coupon_rate / 100.0) / bond.coupon_frequency


def period_count(bond: BondParameters) -> int:
    """
    Number of coupon periods remaining, rounded half-up.

    May be zero or negative; callers decide whether that is an error.
    """
    return int(math.floor(bond.years_to_maturity * bond.coupon_frequency + 0.5))


def bond_price(
    rate: float,
    bond: BondParameters,
    periods: int,
    precision: float = PRECISION,
) -> float:
    """
    Present value of a level coupon stream plus principal.

    Args:
        rate: Flat discount rate per coupon period (decimal).
        bond: Bond parameters (face value, coupon rate, frequency).
        periods: Number of coupon periods to discount.
        precision: |rate| below this is treated as exactly zero.

    Returns:
        Price per unit. UNBOUNDED_PRICE when rate <= -1.

    The result is strictly decreasing in ``rate`` for rate > -1.
    """
    coupon = coupon_payment(bond)

    if abs(rate) < precision:
        return coupon * periods + bond.face_value

    if rate <= -1.0:
        return UNBOUNDED_PRICE

    try:
        growth = (1.0 + rate) ** periods
    except OverflowError:
        growth = math.inf

    # (1 + rate)^periods underflowed: every cash flow is inflated without bound
    if growth == 0.0:
        return UNBOUNDED_PRICE

    pv_coupons = coupon * (1.0 - 1.0 / growth) / rate
    pv_face = bond.face_value / growth
    return pv_coupons + pv_face
