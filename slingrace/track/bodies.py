"""slingrace/track/bodies.py — Compiled track shapes to static physics bodies.

The body factory and the world are passed in explicitly; any engine offering
rectangle/circle construction and add/remove can back them.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Protocol

from slingrace.constants import (
    BOUNDARY_FRICTION,
    BOUNDARY_FRICTION_STATIC,
    BOUNDARY_RESTITUTION,
    BOUNDARY_THICKNESS,
    OBSTACLE_FRICTION,
    OBSTACLE_FRICTION_STATIC,
    OBSTACLE_RESTITUTION,
    WALL_FRICTION,
    WALL_FRICTION_STATIC,
    WALL_RESTITUTION,
)
from slingrace.physics import BodyConfig
from slingrace.track.errors import PhysicsError
from slingrace.track.transformer import create_boundary_walls
from slingrace.track.types import (
    BoundaryPolicy,
    GameRect,
    Obstacle,
    TrackBounds,
    Wall,
    is_game_circle,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Collaborator protocols
# ---------------------------------------------------------------------------

class BodyFactory(Protocol):
    def rectangle(
        self, cx: float, cy: float, width: float, height: float,
        config: BodyConfig | None = None,
    ) -> Any: ...

    def circle(
        self, x: float, y: float, radius: float,
        config: BodyConfig | None = None,
    ) -> Any: ...


class PhysicsWorld(Protocol):
    def add(self, body: Any) -> None: ...

    def remove(self, body: Any) -> None: ...

    def __contains__(self, body: object) -> bool: ...


# ---------------------------------------------------------------------------
# Role configs
# ---------------------------------------------------------------------------

def get_wall_body_config() -> BodyConfig:
    return BodyConfig(
        is_static=True,
        restitution=WALL_RESTITUTION,
        friction=WALL_FRICTION,
        friction_static=WALL_FRICTION_STATIC,
        label="wall",
    )


def get_obstacle_body_config() -> BodyConfig:
    return BodyConfig(
        is_static=True,
        restitution=OBSTACLE_RESTITUTION,
        friction=OBSTACLE_FRICTION,
        friction_static=OBSTACLE_FRICTION_STATIC,
        label="obstacle",
    )


def get_boundary_body_config() -> BodyConfig:
    return BodyConfig(
        is_static=True,
        restitution=BOUNDARY_RESTITUTION,
        friction=BOUNDARY_FRICTION,
        friction_static=BOUNDARY_FRICTION_STATIC,
        label="boundary",
        is_sensor=False,
    )


# ---------------------------------------------------------------------------
# Body construction
# ---------------------------------------------------------------------------

def create_rectangle_body(
    factory: BodyFactory,
    rect: GameRect,
    config: BodyConfig | None = None,
) -> Any:
    """Rectangle body centred on *rect* (which is positioned by its corner)."""
    center_x = rect.x + rect.width / 2
    center_y = rect.y + rect.height / 2
    return factory.rectangle(center_x, center_y, rect.width, rect.height, config)


def create_circle_body(
    factory: BodyFactory,
    x: float,
    y: float,
    radius: float,
    config: BodyConfig | None = None,
) -> Any:
    return factory.circle(x, y, radius, config)


def create_wall_bodies(factory: BodyFactory, walls: list[Wall]) -> list[Any]:
    config = get_wall_body_config()
    bodies = []
    for wall in walls:
        body = create_rectangle_body(factory, wall.shape, config)
        if wall.id:
            body.label = f"wall-{wall.id}"
        bodies.append(body)
    return bodies


def create_obstacle_bodies(factory: BodyFactory, obstacles: list[Obstacle]) -> list[Any]:
    config = get_obstacle_body_config()
    bodies = []
    for obstacle in obstacles:
        shape = obstacle.shape
        if is_game_circle(shape):
            body = create_circle_body(factory, shape.x, shape.y, shape.radius, config)
        else:
            body = create_rectangle_body(factory, shape, config)
        if obstacle.id:
            body.label = f"obstacle-{obstacle.id}"
        bodies.append(body)
    return bodies


def create_boundary_bodies(factory: BodyFactory, boundaries: list[GameRect]) -> list[Any]:
    config = get_boundary_body_config()
    bodies = []
    for index, rect in enumerate(boundaries):
        body = create_rectangle_body(factory, rect, config)
        body.label = f"boundary-{index}"
        bodies.append(body)
    return bodies


def create_invisible_boundary(
    factory: BodyFactory,
    track_bounds: TrackBounds,
    policy: BoundaryPolicy = BoundaryPolicy.NONE,
    thickness: float = BOUNDARY_THICKNESS,
) -> list[Any]:
    """Perimeter bodies for *policy*.

    NONE leaves the perimeter to the walls, so gaps between walls stay open
    as passages. PERIMETER_STRIPS closes the track with four strips just
    outside its bounds.
    """
    if policy is BoundaryPolicy.PERIMETER_STRIPS:
        return create_boundary_bodies(factory, create_boundary_walls(track_bounds, thickness))
    return []


# ---------------------------------------------------------------------------
# World registration
# ---------------------------------------------------------------------------

def add_bodies_with_physics(world: PhysicsWorld | None, bodies: Iterable[Any]) -> None:
    """Add *bodies* to *world*, skipping any it already holds.

    Raises:
        PhysicsError: If there is no world.
    """
    if world is None:
        raise PhysicsError("Physics world not initialized")
    for body in bodies:
        if body not in world:
            world.add(body)


def remove_bodies_from_physics(world: PhysicsWorld | None, bodies: Iterable[Any]) -> None:
    """Remove *bodies* from *world*; missing worlds or bodies are ignored."""
    if world is None:
        return
    for body in bodies:
        if body in world:
            world.remove(body)
