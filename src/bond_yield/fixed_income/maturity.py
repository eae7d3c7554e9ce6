# src/bond_yield/fixed_income/maturity.py
from __future__ import annotations

import datetime as _dt

from bond_yield.fixed_income.schemas import BondParameters

DAYS_PER_YEAR = 365.25

_SECONDS_PER_YEAR = DAYS_PER_YEAR * 24 * 60 * 60


def _as_datetime(value: _dt.date | _dt.datetime) -> _dt.datetime:
    if isinstance(value, _dt.datetime):
        return value
    return _dt.datetime.combine(value, _dt.time.min)


def years_to_maturity(
    maturity: _dt.date | _dt.datetime, as_of: _dt.date | _dt.datetime
) -> float:
    """
    Fractional years between ``as_of`` and ``maturity`` (365.25-day year).

    Plain dates are taken at midnight. The result is negative once the bond
    has matured; the yield solver rejects that as an invalid maturity.
    """
    delta = _as_datetime(maturity) - _as_datetime(as_of)
    return delta.total_seconds() / _SECONDS_PER_YEAR


def bond_from_maturity_date(
    face_value: float,
    market_price: float,
    coupon_rate: float,
    coupon_frequency: float,
    maturity: _dt.date | _dt.datetime,
    as_of: _dt.date | _dt.datetime,
) -> BondParameters:
    return BondParameters(
        face_value=face_value,
        market_price=market_price,
        coupon_rate=coupon_rate,
        coupon_frequency=coupon_frequency,
        years_to_maturity=years_to_maturity(maturity, as_of),
    )
