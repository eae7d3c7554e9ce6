from bond_yield.fixed_income.investment import InvestmentSummary, investment_summary
from bond_yield.fixed_income.maturity import bond_from_maturity_date, years_to_maturity
from bond_yield.fixed_income.pricing import (
    PRECISION,
    UNBOUNDED_PRICE,
    bond_price,
    coupon_payment,
    period_count,
)
from bond_yield.fixed_income.schedule import payout_schedule, payouts_by_year
from bond_yield.fixed_income.schemas import (
    BondParameters,
    FailureReason,
    YieldCalculationError,
    YieldFailure,
    YieldResult,
)
from bond_yield.fixed_income.validation import BondInputs, BondQuote, merge_bond_quote
from bond_yield.fixed_income.ytm import require_ytm, solve_ytm

__all__ = [
    "BondInputs",
    "BondParameters",
    "BondQuote",
    "FailureReason",
    "InvestmentSummary",
    "PRECISION",
    "UNBOUNDED_PRICE",
    "YieldCalculationError",
    "YieldFailure",
    "YieldResult",
    "bond_from_maturity_date",
    "bond_price",
    "coupon_payment",
    "investment_summary",
    "merge_bond_quote",
    "payout_schedule",
    "payouts_by_year",
    "period_count",
    "require_ytm",
    "solve_ytm",
    "years_to_maturity",
]
