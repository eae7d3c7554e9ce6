from __future__ import annotations

import argparse
import datetime as _dt
import logging
import sys
from typing import Optional, Sequence

from bond_yield import __version__
from bond_yield.config import DEFAULT_SOLVER_CONFIG, load_config
from bond_yield.fixed_income.investment import investment_summary
from bond_yield.fixed_income.maturity import years_to_maturity
from bond_yield.fixed_income.schedule import payout_schedule, payouts_by_year
from bond_yield.fixed_income.schemas import BondParameters, YieldCalculationError
from bond_yield.fixed_income.ytm import require_ytm

LOGGER = logging.getLogger(__name__)


def _parse_date(value: str) -> _dt.date:
    try:
        return _dt.date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from e


def _as_of(args) -> _dt.datetime:
    if args.as_of is not None:
        return _dt.datetime.combine(args.as_of, _dt.time.min)
    return _dt.datetime.now()


# ============================================================
# Command: ytm
# ============================================================


def cmd_ytm(args) -> int:
    config = load_config(args.config) if args.config else DEFAULT_SOLVER_CONFIG

    if args.years is not None:
        years = args.years
    else:
        years = years_to_maturity(args.maturity_date, _as_of(args))
    LOGGER.info("Years to maturity: %.6f", years)

    bond = BondParameters(
        face_value=args.face,
        market_price=args.price,
        coupon_rate=args.coupon,
        coupon_frequency=args.frequency,
        years_to_maturity=years,
    )

    try:
        result = require_ytm(bond, config)
    except YieldCalculationError as e:
        print(f"[bondy] No yield: {e.failure.reason.value} ({e.failure.message})")
        return 1

    summary = None
    if args.quantity > 1 or args.tds is not None:
        try:
            summary = investment_summary(
                bond,
                result,
                quantity=args.quantity,
                tds_rate=args.tds if args.tds is not None else 10.0,
            )
        except ValueError as e:
            print(f"[bondy] Invalid holding: {e}")
            return 1

    print("\n========== Yield to Maturity ==========")
    print(f"Periods:               {result.periods}")
    print(f"YTM (periodic):        {result.ytm_periodic:.6%}")
    print(f"YTM (nominal annual):  {result.ytm_annual:.4%}")
    print(f"YTM (effective):       {result.ytm_effective_annual:.4%}")
    print(f"Current yield:         {result.current_yield:.4%}")
    print(f"Total coupons:         {result.total_coupon_payments:.4f}")
    print(f"Total return:          {result.total_return:.4f}")
    print(f"Return on investment:  {result.return_on_investment:.4%}")

    if summary is not None:
        print("---------- Holding ----------")
        print(f"Amount to invest:      {summary.amount_to_invest:.2f}")
        print(f"Coupons (gross):       {summary.total_coupon_payments:.2f}")
        print(f"TDS:                   {summary.tds_amount:.2f}")
        print(f"Maturity amount:       {summary.maturity_amount:.2f}")
        print(f"Total receivable:      {summary.total_receivable:.2f}")
        print(f"Profit:                {summary.profit:.2f}")
        print(f"Monthly rate:          {summary.monthly_rate:.4%}")
    print("=======================================\n")
    return 0


# ============================================================
# Command: schedule
# ============================================================


def cmd_schedule(args) -> int:
    as_of = _as_of(args).date()
    try:
        schedule = payout_schedule(
            face_value=args.face,
            coupon_rate=args.coupon,
            coupon_frequency=args.frequency,
            maturity_date=args.maturity_date,
            as_of=as_of,
            quantity=args.quantity,
        )
    except ValueError as e:
        print(f"[bondy] Cannot build schedule: {e}")
        return 1

    if schedule.empty:
        print("[bondy] No future payouts for the selected maturity date.")
        return 0

    print(f"[bondy] Payout schedule as of {as_of.isoformat()}")
    print(schedule.to_string(index=False))
    print("\nBy year:")
    print(payouts_by_year(schedule).to_string())
    return 0


# ============================================================
# Command: version
# ============================================================


def cmd_version(args) -> int:
    print(__version__)
    return 0


# ============================================================
# Main CLI
# ============================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bondy", description="Bond yield calculator")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # ------------------------------------------------------------------
    # ytm
    # ------------------------------------------------------------------
    p_ytm = sub.add_parser("ytm", help="Solve yield to maturity")
    p_ytm.add_argument("--face", type=float, required=True, help="Face value")
    p_ytm.add_argument("--price", type=float, required=True, help="Market price")
    p_ytm.add_argument(
        "--coupon", type=float, required=True, help="Annual coupon rate in percent"
    )
    p_ytm.add_argument(
        "--frequency", type=int, default=2, help="Coupon payments per year"
    )
    when = p_ytm.add_mutually_exclusive_group(required=True)
    when.add_argument("--years", type=float, help="Years to maturity")
    when.add_argument(
        "--maturity-date", type=_parse_date, help="Maturity date (YYYY-MM-DD)"
    )
    p_ytm.add_argument(
        "--as-of", type=_parse_date, default=None, help="Valuation date (default: now)"
    )
    p_ytm.add_argument("--quantity", type=int, default=1, help="Units held")
    p_ytm.add_argument("--tds", type=float, default=None, help="TDS rate in percent")
    p_ytm.add_argument(
        "--config", default=None, help="Path to solver config JSON/YAML"
    )
    p_ytm.set_defaults(func=cmd_ytm)

    # ------------------------------------------------------------------
    # schedule
    # ------------------------------------------------------------------
    p_sch = sub.add_parser("schedule", help="Show projected payouts")
    p_sch.add_argument("--face", type=float, required=True, help="Face value")
    p_sch.add_argument(
        "--coupon", type=float, required=True, help="Annual coupon rate in percent"
    )
    p_sch.add_argument(
        "--frequency", type=int, default=2, help="Coupon payments per year"
    )
    p_sch.add_argument(
        "--maturity-date",
        type=_parse_date,
        required=True,
        help="Maturity date (YYYY-MM-DD)",
    )
    p_sch.add_argument(
        "--as-of", type=_parse_date, default=None, help="Valuation date (default: today)"
    )
    p_sch.add_argument("--quantity", type=int, default=1, help="Units held")
    p_sch.set_defaults(func=cmd_schedule)

    # ------------------------------------------------------------------
    # version
    # ------------------------------------------------------------------
    p_ver = sub.add_parser("version", help="Show version")
    p_ver.set_defaults(func=cmd_version)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
