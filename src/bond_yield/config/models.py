from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ============================================================
# Yield solver settings
# ============================================================


class SolverConfig(BaseModel):
    """
    Bisection settings for the yield solver.

    Defaults reproduce the calculator's historical behaviour: a per-period
    bracket of [-99.99%, +500%], 100 iterations, an absolute price tolerance
    of 1e-7 and a post-loop acceptance threshold of 10x that tolerance.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    lower_bound: float = Field(
        default=-0.9999,
        gt=-1.0,
        description="Lowest periodic rate searched (must stay above -100%).",
    )
    upper_bound: float = Field(
        default=5.0, description="Highest periodic rate searched."
    )
    max_iterations: int = Field(default=100, ge=1)
    tolerance: float = Field(
        default=1e-7, gt=0.0, description="Absolute price error for early exit."
    )
    convergence_factor: float = Field(
        default=10.0,
        ge=1.0,
        description="Result rejected if final error >= factor x tolerance.",
    )
    zero_rate_precision: float = Field(
        default=1e-7,
        gt=0.0,
        description="|rate| below this is priced as an undiscounted sum.",
    )

    @model_validator(mode="after")
    def _check_bracket(self) -> "SolverConfig":
        if self.upper_bound <= self.lower_bound:
            raise ValueError(
                f"upper_bound ({self.upper_bound}) must exceed "
                f"lower_bound ({self.lower_bound})"
            )
        return self

    @property
    def acceptance_threshold(self) -> float:
        return self.convergence_factor * self.tolerance


DEFAULT_SOLVER_CONFIG = SolverConfig()
