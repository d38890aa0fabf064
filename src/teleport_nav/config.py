# src/teleport_nav/config.py
"""
Pathfinder configuration.

PathfinderConfig carries the search knobs; load_pathfinder_config() reads
them from YAML (config/pathfinder.yaml by default). Missing keys fall back
to the defaults below.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .oracle import DEFAULT_EYE_OFFSET, DEFAULT_SEARCH_RADIUS

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_ROOT / "pathfinder.yaml"

DEFAULT_BUDGET_MS = 1000.0


class PathfinderConfigError(ValueError):
    """Raised when a configuration value is out of range or malformed."""


@dataclass
class PathfinderConfig:
    """Tunable search parameters."""

    # wall-clock cutoff for one compute() call
    budget_ms: float = DEFAULT_BUDGET_MS
    # radius handed to the reachability oracle
    search_radius: float = DEFAULT_SEARCH_RADIUS
    # added to the ceiled hub position to form the oracle origin
    eye_offset: Tuple[float, float, float] = DEFAULT_EYE_OFFSET

    # Off by default: re-promotion keeps the hub's original heuristic.
    recompute_heuristic_on_repromote: bool = False
    # Off by default: expanded hubs may be re-expanded after re-promotion.
    use_closed_set: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not _is_finite_number(self.budget_ms) or self.budget_ms < 0:
            raise PathfinderConfigError(
                f"budget_ms must be a non-negative number, got {self.budget_ms!r}"
            )
        if not _is_finite_number(self.search_radius) or self.search_radius <= 0:
            raise PathfinderConfigError(
                f"search_radius must be positive, got {self.search_radius!r}"
            )
        offset = tuple(self.eye_offset)
        if len(offset) != 3 or not all(_is_finite_number(v) for v in offset):
            raise PathfinderConfigError(
                f"eye_offset must be three numbers, got {self.eye_offset!r}"
            )
        self.eye_offset = (float(offset[0]), float(offset[1]), float(offset[2]))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PathfinderConfig":
        """Convenience constructor from a plain dict (e.g. YAML)."""
        eye_offset = data.get("eye_offset", DEFAULT_EYE_OFFSET)
        if not isinstance(eye_offset, (list, tuple)):
            raise PathfinderConfigError(
                f"eye_offset must be a list of three numbers, got {eye_offset!r}"
            )
        return cls(
            budget_ms=data.get("budget_ms", DEFAULT_BUDGET_MS),
            search_radius=data.get("search_radius", DEFAULT_SEARCH_RADIUS),
            eye_offset=tuple(eye_offset),  # type: ignore[arg-type]
            recompute_heuristic_on_repromote=bool(
                data.get("recompute_heuristic_on_repromote", False)
            ),
            use_closed_set=bool(data.get("use_closed_set", False)),
        )


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def load_pathfinder_config(path: Optional[Path] = None) -> PathfinderConfig:
    """
    Load PathfinderConfig from YAML.

    The file may either hold the keys at top level or under a
    `pathfinder:` section. Without `path`, config/pathfinder.yaml is read;
    if that file is absent (installed without the repo tree) the built-in
    defaults are returned. An explicit `path` must exist.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return PathfinderConfig()
        path = DEFAULT_CONFIG_PATH
    data = _load_yaml(path)
    section = data.get("pathfinder", data)
    if not isinstance(section, dict):
        raise ValueError(f"'pathfinder' section must be a mapping, got {type(section)}")
    return PathfinderConfig.from_dict(section)
