"""slingrace/physics.py — Minimal rigid-body world for static track geometry.

Provides a body factory and a world container that satisfy the protocols in
slingrace/track/bodies.py. Collision response is out of scope; bodies only
carry their shape, material values and velocity.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass
class BodyConfig:
    """Material and role settings applied to a new body."""
    is_static: bool = True
    restitution: float = 0.0
    friction: float = 0.1
    friction_static: float = 0.5
    label: str = "body"
    is_sensor: bool = False


@dataclass(eq=False)
class Body:
    """A rectangle or circle body, positioned by its centre.

    Bodies compare by identity so a world can hold equal-looking bodies.
    """
    label: str
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0
    circle_radius: float | None = None
    is_static: bool = True
    restitution: float = 0.0
    friction: float = 0.1
    friction_static: float = 0.5
    is_sensor: bool = False
    x_vel: float = 0.0
    y_vel: float = 0.0

    @property
    def is_circle(self) -> bool:
        return self.circle_radius is not None

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) of the body."""
        if self.circle_radius is not None:
            r = self.circle_radius
            return (self.x - r, self.y - r, self.x + r, self.y + r)
        hw = self.width / 2
        hh = self.height / 2
        return (self.x - hw, self.y - hh, self.x + hw, self.y + hh)


def _apply_config(body: Body, config: BodyConfig | None) -> Body:
    if config is None:
        return body
    body.is_static = config.is_static
    body.restitution = config.restitution
    body.friction = config.friction
    body.friction_static = config.friction_static
    body.is_sensor = config.is_sensor
    body.label = config.label
    return body


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

class Bodies:
    """Body factory: rectangles by centre and size, circles by centre and radius."""

    def rectangle(
        self,
        cx: float,
        cy: float,
        width: float,
        height: float,
        config: BodyConfig | None = None,
    ) -> Body:
        body = Body(label="rectangle", x=cx, y=cy, width=width, height=height)
        return _apply_config(body, config)

    def circle(
        self,
        x: float,
        y: float,
        radius: float,
        config: BodyConfig | None = None,
    ) -> Body:
        body = Body(
            label="circle", x=x, y=y,
            width=radius * 2, height=radius * 2, circle_radius=radius,
        )
        return _apply_config(body, config)


# ---------------------------------------------------------------------------
# World
# ---------------------------------------------------------------------------

@dataclass
class World:
    """Ordered set of bodies taking part in the simulation."""
    bodies: list[Body] = field(default_factory=list)

    def __contains__(self, body: object) -> bool:
        return any(b is body for b in self.bodies)

    def __len__(self) -> int:
        return len(self.bodies)

    def add(self, body: Body) -> None:
        if body not in self:
            self.bodies.append(body)

    def remove(self, body: Body) -> None:
        """Remove *body*; unknown bodies are ignored."""
        self.bodies = [b for b in self.bodies if b is not body]

    def static_bodies(self) -> list[Body]:
        return [b for b in self.bodies if b.is_static]

    def find(self, label: str) -> list[Body]:
        return [b for b in self.bodies if b.label == label]
