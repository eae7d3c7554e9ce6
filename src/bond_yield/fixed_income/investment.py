# src/bond_yield/fixed_income/investment.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bond_yield.fixed_income.schemas import BondParameters, YieldFailure, YieldResult


class InvestmentSummary(BaseModel):
    """
    Cash view of holding ``quantity`` units to maturity.

    Coupons are shown before and after TDS (tax deducted at source); the
    face value is returned in full.
    """

    model_config = ConfigDict(frozen=True)

    amount_to_invest: float = 0.0
    total_coupon_payments: float = 0.0
    tds_amount: float = 0.0
    maturity_amount: float = 0.0
    total_receivable: float = 0.0
    profit: float = 0.0
    monthly_rate: float = Field(
        default=0.0, description="Monthly equivalent of the effective annual yield."
    )


def investment_summary(
    bond: BondParameters,
    result: YieldResult | YieldFailure | None,
    quantity: int = 1,
    tds_rate: float = 10.0,
) -> InvestmentSummary:
    """
    Scale a yield result to a holding and apply TDS to the coupons.

    A failed (or missing) yield result gives an all-zero summary, so stale
    figures are never shown next to an invalid bond.
    """
    if quantity < 1:
        raise ValueError(f"quantity must be at least 1, got {quantity}")

    if not isinstance(result, YieldResult):
        return InvestmentSummary()

    amount_to_invest = bond.market_price * quantity
    total_coupons = result.total_coupon_payments * quantity
    tds_amount = total_coupons * (tds_rate / 100.0)
    maturity_amount = bond.face_value * quantity
    total_receivable = (total_coupons - tds_amount) + maturity_amount

    return InvestmentSummary(
        amount_to_invest=amount_to_invest,
        total_coupon_payments=total_coupons,
        tds_amount=tds_amount,
        maturity_amount=maturity_amount,
        total_receivable=total_receivable,
        profit=total_receivable - amount_to_invest,
        monthly_rate=(1.0 + result.ytm_effective_annual) ** (1.0 / 12.0) - 1.0,
    )
