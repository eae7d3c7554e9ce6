from __future__ import annotations

from pathlib import Path

from bond_yield import __version__
from bond_yield.cli import main


def test_ytm_command(capsys):
    code = main(
        ["ytm", "--face", "1000", "--price", "994", "--coupon", "9",
         "--frequency", "12", "--years", "1"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "YTM (nominal annual)" in out
    assert "Periods:               12" in out


def test_ytm_with_maturity_date_and_holding(capsys):
    code = main(
        ["ytm", "--face", "1000", "--price", "994", "--coupon", "9",
         "--frequency", "12", "--maturity-date", "2027-10-18",
         "--as-of", "2026-10-18", "--quantity", "10", "--tds", "10"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "Amount to invest:      9940.00" in out
    assert "TDS:                   90.00" in out


def test_ytm_failure_exit_code(capsys):
    code = main(
        ["ytm", "--face", "1000", "--price", "1001", "--coupon", "0",
         "--frequency", "1", "--years", "1"]
    )
    out = capsys.readouterr().out
    assert code == 1
    assert "above_par_zero_coupon" in out


def test_ytm_with_config(tmp_path: Path, capsys):
    cfg_path = tmp_path / "solver.yaml"
    cfg_path.write_text("upper_bound: 0.005\nlower_bound: 0.0\n")
    code = main(
        ["ytm", "--face", "1000", "--price", "994", "--coupon", "9",
         "--frequency", "12", "--years", "1", "--config", str(cfg_path)]
    )
    assert code == 1
    assert "no_convergence" in capsys.readouterr().out


def test_schedule_command(capsys):
    code = main(
        ["schedule", "--face", "1000", "--coupon", "9", "--frequency", "4",
         "--maturity-date", "2028-03-31", "--as-of", "2026-10-18"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "2028-03-31" in out
    assert "By year:" in out


def test_schedule_matured(capsys):
    code = main(
        ["schedule", "--face", "1000", "--coupon", "9",
         "--maturity-date", "2020-01-01", "--as-of", "2026-10-18"]
    )
    assert code == 0
    assert "No future payouts" in capsys.readouterr().out


def test_version(capsys):
    assert main(["version"]) == 0
    assert __version__ in capsys.readouterr().out


def test_schedule_rejects_frequency_not_dividing_twelve(capsys):
    code = main(
        ["schedule", "--face", "1000", "--coupon", "9", "--frequency", "5",
         "--maturity-date", "2028-03-31", "--as-of", "2026-10-18"]
    )
    assert code == 1
    assert "[bondy] Cannot build schedule" in capsys.readouterr().out


def test_ytm_rejects_non_positive_quantity(capsys):
    code = main(
        ["ytm", "--face", "1000", "--price", "994", "--coupon", "9",
         "--frequency", "12", "--years", "1", "--quantity", "0", "--tds", "10"]
    )
    out = capsys.readouterr().out
    assert code == 1
    assert "[bondy] Invalid holding" in out
    assert "Yield to Maturity" not in out
