from bond_yield.config.loader import load_config
from bond_yield.config.models import DEFAULT_SOLVER_CONFIG, SolverConfig

__all__ = ["DEFAULT_SOLVER_CONFIG", "SolverConfig", "load_config"]
