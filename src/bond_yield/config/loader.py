from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from bond_yield.config.models import SolverConfig


def load_config(path: str | Path) -> SolverConfig:
    """
    Load a SolverConfig from YAML or JSON.

    The settings may sit at the top level or under a ``solver:`` key.
    An empty file gives the default configuration.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    text = path.read_text()

    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            raw = yaml.safe_load(text)
        elif path.suffix.lower() == ".json":
            raw = json.loads(text) if text.strip() else None
        else:
            raise ValueError("Config path must be YAML or JSON.")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Failed to parse config: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config must be a mapping, got {type(raw).__name__}")

    if "solver" in raw:
        raw = raw["solver"] or {}

    try:
        return SolverConfig.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid SolverConfig: {e}") from e
