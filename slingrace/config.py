"""slingrace/config.py — Target world configuration and YAML loading."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import yaml

from slingrace.constants import SCREEN_HEIGHT, SCREEN_WIDTH


class BoundaryPolicy(Enum):
    """How perimeter bodies are generated around the track bounds."""
    NONE = "none"
    PERIMETER_STRIPS = "perimeter-strips"


VALID_BOUNDARY_POLICIES: frozenset[str] = frozenset(p.value for p in BoundaryPolicy)


@dataclass
class GameConfig:
    """Target world the imported track is fitted into."""
    world_width: float = SCREEN_WIDTH
    world_height: float = SCREEN_HEIGHT
    boundary_policy: BoundaryPolicy = BoundaryPolicy.NONE


def parse_boundary_policy(value: str | BoundaryPolicy) -> BoundaryPolicy:
    if isinstance(value, BoundaryPolicy):
        return value
    if value not in VALID_BOUNDARY_POLICIES:
        raise ValueError(f"Unknown boundary policy: {value!r}")
    return BoundaryPolicy(value)


def create_game_config(
    world_width: float,
    world_height: float,
    boundary_policy: str | BoundaryPolicy = BoundaryPolicy.NONE,
) -> GameConfig:
    """Build a GameConfig from viewport dimensions.

    Raises:
        ValueError: If a dimension is not positive or the policy is unknown.
    """
    if world_width <= 0 or world_height <= 0:
        raise ValueError(
            f"World dimensions must be positive, got {world_width}x{world_height}"
        )
    return GameConfig(
        world_width=float(world_width),
        world_height=float(world_height),
        boundary_policy=parse_boundary_policy(boundary_policy),
    )


def _parse_config(data: dict) -> GameConfig:
    """Parse a raw YAML dict into a GameConfig."""
    missing = [key for key in ("world_width", "world_height") if key not in data]
    if missing:
        raise ValueError(f"Game config missing keys: {', '.join(missing)}")
    return create_game_config(
        world_width=float(data["world_width"]),
        world_height=float(data["world_height"]),
        boundary_policy=data.get("boundary_policy", BoundaryPolicy.NONE.value),
    )


def load_game_config(path: Path) -> GameConfig:
    """Load a GameConfig from a YAML file.

    Expected keys: ``world_width``, ``world_height`` and optionally
    ``boundary_policy`` (``none`` or ``perimeter-strips``).
    """
    with open(path) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Game config {path} must be a mapping")
    return _parse_config(data)
