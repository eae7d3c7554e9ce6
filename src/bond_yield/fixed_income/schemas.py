# src/bond_yield/fixed_income/schemas.py
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BondParameters(BaseModel):
    """
    Inputs for a single yield calculation.

    Values are accepted as given (including NaN / inf and non-positive
    numbers). The yield solver is responsible for rejecting them and reports
    each problem as a YieldFailure instead of raising.
    """

    model_config = ConfigDict(frozen=True)

    face_value: float = Field(..., description="Redemption amount per unit.")
    market_price: float = Field(..., description="Current traded price per unit.")
    coupon_rate: float = Field(
        ..., description="Annual coupon rate in percent (e.g. 9.0 means 9%)."
    )
    coupon_frequency: float = Field(
        ..., description="Coupon payments per year (1, 2, 4, 12 ...)."
    )
    years_to_maturity: float = Field(
        ..., description="Time remaining until redemption, in years."
    )


class YieldResult(BaseModel):
    """
    Solved yield plus the return figures derived from it.

    All rates are decimals (0.0955 means 9.55%).
    """

    model_config = ConfigDict(frozen=True)

    ytm_periodic: float = Field(..., description="Discount rate per coupon period.")
    ytm_annual: float = Field(
        ..., description="Nominal annual rate: periodic rate x frequency."
    )
    ytm_effective_annual: float = Field(
        ..., description="Compounded annual rate: (1 + periodic)^frequency - 1."
    )
    current_yield: float = Field(
        ..., description="Annual coupon income divided by market price."
    )
    total_coupon_payments: float = Field(
        ..., description="Coupon per period x number of periods."
    )
    total_return: float = Field(
        ..., description="Coupons + face value - market price."
    )
    return_on_investment: float = Field(
        ..., description="Total return divided by market price."
    )
    periods: int = Field(..., ge=1, description="Coupon periods remaining.")
    iterations: int = Field(
        default=0, ge=0, description="Bisection iterations (0 for closed form)."
    )


# ============================================================
# Failures
# ============================================================


class FailureReason(str, Enum):
    INVALID_INPUT = "invalid_input"
    INVALID_SCHEDULE = "invalid_schedule"
    INVALID_PRICE = "invalid_price"
    INVALID_MATURITY = "invalid_maturity"
    ABOVE_PAR_ZERO_COUPON = "above_par_zero_coupon"
    NO_CONVERGENCE = "no_convergence"


class YieldFailure(BaseModel):
    """
    Structured "no result" returned by the solver.
    """

    model_config = ConfigDict(frozen=True)

    reason: FailureReason
    message: str = ""


class YieldCalculationError(ValueError):
    """
    Raised by require_ytm when the solver returns a YieldFailure.
    """

    def __init__(self, failure: YieldFailure):
        self.failure = failure
        super().__init__(f"{failure.reason.value}: {failure.message}")
