# src/bond_yield/fixed_income/ytm.py
from __future__ import annotations

import logging
import math
from typing import Optional, Union

from bond_yield.config.models import DEFAULT_SOLVER_CONFIG, SolverConfig
from bond_yield.fixed_income.pricing import bond_price, coupon_payment, period_count
from bond_yield.fixed_income.schemas import (
    BondParameters,
    FailureReason,
    YieldCalculationError,
    YieldFailure,
    YieldResult,
)

LOGGER = logging.getLogger(__name__)

YieldOutcome = Union[YieldResult, YieldFailure]


# ============================================================
# Preconditions
# ============================================================


def _check_inputs(bond: BondParameters) -> Optional[YieldFailure]:
    fields = {
        "face_value": bond.face_value,
        "market_price": bond.market_price,
        "coupon_rate": bond.coupon_rate,
        "coupon_frequency": bond.coupon_frequency,
        "years_to_maturity": bond.years_to_maturity,
    }
    bad = [name for name, value in fields.items() if not math.isfinite(value)]
    if bad:
        return YieldFailure(
            reason=FailureReason.INVALID_INPUT,
            message=f"non-finite value(s): {', '.join(bad)}",
        )

    if bond.years_to_maturity <= 0:
        return YieldFailure(
            reason=FailureReason.INVALID_MATURITY,
            message=f"years_to_maturity must be positive, got {bond.years_to_maturity}",
        )

    if not math.isfinite(bond.years_to_maturity * bond.coupon_frequency):
        return YieldFailure(
            reason=FailureReason.INVALID_SCHEDULE,
            message="coupon period count is not representable",
        )

    periods = period_count(bond)
    if periods <= 0:
        return YieldFailure(
            reason=FailureReason.INVALID_SCHEDULE,
            message=(
                f"{bond.years_to_maturity} years at frequency "
                f"{bond.coupon_frequency} gives {periods} coupon periods"
            ),
        )

    if bond.market_price <= 0:
        return YieldFailure(
            reason=FailureReason.INVALID_PRICE,
            message=f"market_price must be positive, got {bond.market_price}",
        )

    return None


# ============================================================
# Result assembly
# ============================================================


def _compound(rate: float, frequency: float) -> float:
    try:
        return (1.0 + rate) ** frequency
    except OverflowError:
        return math.inf


def _build_result(
    bond: BondParameters,
    ytm_periodic: float,
    periods: int,
    total_coupon_payments: float,
    iterations: int,
) -> YieldResult:
    frequency = bond.coupon_frequency
    total_return = total_coupon_payments + bond.face_value - bond.market_price
    annual_coupon = bond.face_value * bond.coupon_rate / 100.0

    return YieldResult(
        ytm_periodic=ytm_periodic,
        ytm_annual=ytm_periodic * frequency,
        ytm_effective_annual=_compound(ytm_periodic, frequency) - 1.0,
        current_yield=annual_coupon / bond.market_price,
        total_coupon_payments=total_coupon_payments,
        total_return=total_return,
        return_on_investment=total_return / bond.market_price,
        periods=periods,
        iterations=iterations,
    )


def _solve_zero_coupon(bond: BondParameters, periods: int) -> YieldOutcome:
    # Closed form; a discount bond above par would need a negative yield.
    if bond.market_price > bond.face_value:
        return YieldFailure(
            reason=FailureReason.ABOVE_PAR_ZERO_COUPON,
            message=(
                f"zero-coupon price {bond.market_price} exceeds "
                f"face value {bond.face_value}"
            ),
        )

    ytm_periodic = (bond.face_value / bond.market_price) ** (1.0 / periods) - 1.0
    if not math.isfinite(ytm_periodic):
        return YieldFailure(
            reason=FailureReason.NO_CONVERGENCE,
            message=(
                f"face/price ratio {bond.face_value}/{bond.market_price} "
                f"gives a non-finite yield"
            ),
        )
    return _build_result(bond, ytm_periodic, periods, 0.0, iterations=0)


def _bisect(
    bond: BondParameters, periods: int, config: SolverConfig
) -> tuple[float, int]:
    """
    Bisection on price(rate) - market_price.

    Returns the last midpoint and the number of iterations used.
    Price falls as the rate rises, so a model price above market means the
    root lies above ``mid``.
    """
    target = bond.market_price
    low, high = config.lower_bound, config.upper_bound
    mid = 0.0
    iterations = 0

    for iterations in range(1, config.max_iterations + 1):
        mid = (low + high) / 2.0
        if mid == low or mid == high:
            break

        model_price = bond_price(mid, bond, periods, config.zero_rate_precision)
        if abs(model_price - target) < config.tolerance:
            break

        if model_price > target:
            low = mid
        else:
            high = mid

    return mid, iterations


# ============================================================
# Public API
# ============================================================


def solve_ytm(
    bond: BondParameters, config: SolverConfig | None = None
) -> YieldOutcome:
    """
    Solve a bond's yield to maturity.

    Args:
        bond: Bond parameters. Values are not trusted; every precondition is
            checked here.
        config: Solver settings. Defaults to DEFAULT_SOLVER_CONFIG.

    Returns:
        YieldResult on success, otherwise a YieldFailure naming the first
        failed check. Never raises for bad numeric input.

    Zero-coupon bonds use the closed form (face / price)^(1/n) - 1. Coupon
    bonds are solved by bisection inside [config.lower_bound,
    config.upper_bound]; a yield outside that bracket is reported as
    NO_CONVERGENCE.
    """
    config = config or DEFAULT_SOLVER_CONFIG

    failure = _check_inputs(bond)
    if failure is not None:
        LOGGER.debug("Rejected bond %s: %s", bond, failure.message)
        return failure

    periods = period_count(bond)

    if bond.coupon_rate == 0:
        outcome = _solve_zero_coupon(bond, periods)
        if isinstance(outcome, YieldFailure):
            LOGGER.debug("Rejected bond %s: %s", bond, outcome.message)
        return outcome

    ytm_periodic, iterations = _bisect(bond, periods, config)

    error = abs(
        bond_price(ytm_periodic, bond, periods, config.zero_rate_precision)
        - bond.market_price
    )
    if not error < config.acceptance_threshold:
        LOGGER.warning(
            "Yield search did not converge after %d iterations "
            "(rate=%.6g, price error=%.3g, bracket=[%g, %g])",
            iterations,
            ytm_periodic,
            error,
            config.lower_bound,
            config.upper_bound,
        )
        return YieldFailure(
            reason=FailureReason.NO_CONVERGENCE,
            message=(
                f"price error {error:.3g} after {iterations} iterations; "
                f"yield likely outside [{config.lower_bound}, {config.upper_bound}]"
            ),
        )

    LOGGER.debug(
        "Converged in %d iterations: periodic=%.8f periods=%d",
        iterations,
        ytm_periodic,
        periods,
    )
    total_coupons = coupon_payment(bond) * periods
    return _build_result(bond, ytm_periodic, periods, total_coupons, iterations)


def require_ytm(
    bond: BondParameters, config: SolverConfig | None = None
) -> YieldResult:
    """
    Same as solve_ytm but raises YieldCalculationError on failure.
    """
    outcome = solve_ytm(bond, config)
    if isinstance(outcome, YieldFailure):
        raise YieldCalculationError(outcome)
    return outcome
