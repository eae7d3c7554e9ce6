# src/bond_yield/fixed_income/schedule.py
from __future__ import annotations

import datetime as _dt
import math

import pandas as pd

SCHEDULE_COLUMNS = ["payout_date", "interest", "principal", "total"]


def _empty_schedule() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "payout_date": pd.Series(dtype="datetime64[ns]"),
            "interest": pd.Series(dtype=float),
            "principal": pd.Series(dtype=float),
            "total": pd.Series(dtype=float),
        }
    )


def payment_dates(
    maturity_date: _dt.date, as_of: _dt.date, coupon_frequency: int
) -> list[pd.Timestamp]:
    """
    Coupon dates strictly after ``as_of``, stepping back from maturity.

    Each date is maturity minus k whole coupon periods, so month-end
    maturities stay on month ends (31 Mar -> 30 Sep -> 31 Mar ...).
    """
    if 12 % coupon_frequency != 0:
        raise ValueError(
            f"coupon_frequency must divide 12 to build a monthly schedule, "
            f"got {coupon_frequency}"
        )
    months = 12 // coupon_frequency

    maturity = pd.Timestamp(maturity_date)
    start = pd.Timestamp(as_of)

    dates = []
    k = 0
    while True:
        d = maturity - pd.DateOffset(months=months * k)
        if d <= start:
            break
        dates.append(d)
        k += 1
    dates.reverse()
    return dates


def payout_schedule(
    face_value: float,
    coupon_rate: float,
    coupon_frequency: int,
    maturity_date: _dt.date,
    as_of: _dt.date,
    quantity: int = 1,
) -> pd.DataFrame:
    """
    Projected coupon and principal cash flows for a holding.

    This is a display projection: every remaining date pays a full coupon
    (no accrued / stub handling) and principal is paid on the maturity date.

    Args:
        face_value: Redemption amount per unit.
        coupon_rate: Annual coupon in percent (e.g. 9 -> 9%).
        coupon_frequency: Payments per year; must divide 12.
        maturity_date: Redemption date.
        as_of: Valuation date; only dates strictly after it are listed.
        quantity: Number of units held.

    Returns:
        DataFrame with columns payout_date, interest, principal, total.
        Empty when the inputs cannot produce a schedule (matured bond,
        non-positive frequency or quantity, non-finite amounts).
    """
    if (
        coupon_frequency <= 0
        or not math.isfinite(face_value)
        or not math.isfinite(coupon_rate)
        or not math.isfinite(quantity)
        or quantity <= 0
    ):
        return _empty_schedule()

    if pd.Timestamp(maturity_date) <= pd.Timestamp(as_of):
        return _empty_schedule()

    dates = payment_dates(maturity_date, as_of, int(coupon_frequency))
    coupon = face_value * (coupon_rate / 100.0) / coupon_frequency
    maturity = pd.Timestamp(maturity_date)

    rows = []
    for d in dates:
        principal = face_value * quantity if d == maturity else 0.0
        interest = coupon * quantity
        rows.append(
            {
                "payout_date": d,
                "interest": interest,
                "principal": principal,
                "total": interest + principal,
            }
        )

    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def payouts_by_year(schedule: pd.DataFrame) -> pd.DataFrame:
    """
    Sum a payout schedule per calendar year (index: year, ascending).
    """
    if schedule.empty:
        return pd.DataFrame(
            columns=["interest", "principal", "total"], dtype=float
        ).rename_axis("year")

    years = schedule["payout_date"].dt.year.rename("year")
    return schedule.groupby(years)[["interest", "principal", "total"]].sum()
