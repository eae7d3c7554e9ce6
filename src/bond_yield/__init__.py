"""bond_yield: yield-to-maturity and return metrics for fixed-coupon bonds."""

__version__ = "0.1.0"

from .config import DEFAULT_SOLVER_CONFIG, SolverConfig, load_config
from .fixed_income.pricing import bond_price
from .fixed_income.schemas import (
    BondParameters,
    FailureReason,
    YieldCalculationError,
    YieldFailure,
    YieldResult,
)
from .fixed_income.ytm import require_ytm, solve_ytm

__all__ = [
    "BondParameters",
    "YieldResult",
    "YieldFailure",
    "FailureReason",
    "YieldCalculationError",
    "bond_price",
    "solve_ytm",
    "require_ytm",
    "SolverConfig",
    "DEFAULT_SOLVER_CONFIG",
    "load_config",
]
