"""Tests for slingrace/track/bodies.py — role configs, body creation, world registration."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from slingrace.physics import Bodies, World
from slingrace.track.bodies import (
    add_bodies_with_physics,
    create_boundary_bodies,
    create_circle_body,
    create_invisible_boundary,
    create_obstacle_bodies,
    create_rectangle_body,
    create_wall_bodies,
    get_boundary_body_config,
    get_obstacle_body_config,
    get_wall_body_config,
    remove_bodies_from_physics,
)
from slingrace.track.errors import PhysicsError
from slingrace.track.types import (
    BoundaryPolicy,
    GameCircle,
    GameRect,
    Obstacle,
    TrackBounds,
    Wall,
)


class TestRoleConfigs:
    def test_wall(self):
        c = get_wall_body_config()
        assert c.is_static
        assert (c.restitution, c.friction, c.friction_static) == (0.8, 0.1, 0.5)
        assert c.label == "wall"

    def test_obstacle(self):
        c = get_obstacle_body_config()
        assert c.is_static
        assert (c.restitution, c.friction, c.friction_static) == (0.9, 0.1, 0.5)
        assert c.label == "obstacle"

    def test_boundary(self):
        c = get_boundary_body_config()
        assert c.is_static
        assert (c.restitution, c.friction, c.friction_static) == (0.0, 1.0, 1.0)
        assert c.label == "boundary"
        assert not c.is_sensor


class TestBodyCreation:
    def test_rectangle_centred(self):
        factory = MagicMock()
        config = get_wall_body_config()
        create_rectangle_body(factory, GameRect(100, 200, 50, 30), config)
        factory.rectangle.assert_called_once_with(125, 215, 50, 30, config)

    def test_circle_at_centre(self):
        factory = MagicMock()
        create_circle_body(factory, 10, 20, 5)
        factory.circle.assert_called_once_with(10, 20, 5, None)

    def test_wall_bodies(self):
        bodies = create_wall_bodies(Bodies(), [
            Wall(shape=GameRect(0, 0, 100, 10), id="north"),
            Wall(shape=GameRect(0, 90, 100, 10), id="wall-1"),
        ])
        assert [b.label for b in bodies] == ["wall-north", "wall-wall-1"]
        assert (bodies[0].x, bodies[0].y) == (50, 5)
        assert bodies[0].restitution == 0.8
        assert all(b.is_static for b in bodies)

    def test_wall_without_id_keeps_role_label(self):
        bodies = create_wall_bodies(Bodies(), [Wall(shape=GameRect(0, 0, 1, 1), id="")])
        assert bodies[0].label == "wall"

    def test_obstacle_bodies(self):
        bodies = create_obstacle_bodies(Bodies(), [
            Obstacle(shape=GameCircle(30, 40, 5), id="rock"),
            Obstacle(shape=GameRect(0, 0, 20, 10), id="crate"),
        ])
        assert [b.label for b in bodies] == ["obstacle-rock", "obstacle-crate"]
        assert bodies[0].circle_radius == 5
        assert (bodies[0].x, bodies[0].y) == (30, 40)
        assert (bodies[1].x, bodies[1].y) == (10, 5)
        assert all(b.restitution == 0.9 for b in bodies)

    def test_boundary_bodies(self):
        bodies = create_boundary_bodies(Bodies(), [GameRect(0, 0, 1, 1)] * 3)
        assert [b.label for b in bodies] == ["boundary-0", "boundary-1", "boundary-2"]


class TestBoundaryPolicy:
    BOUNDS = TrackBounds(0, 0, 400, 200)

    def test_none_yields_nothing(self):
        assert create_invisible_boundary(Bodies(), self.BOUNDS) == []

    def test_perimeter_strips(self):
        bodies = create_invisible_boundary(
            Bodies(), self.BOUNDS, BoundaryPolicy.PERIMETER_STRIPS, thickness=50,
        )
        assert len(bodies) == 4
        top = bodies[0]
        assert top.bounds == (-50, -50, 450, 0)
        right = bodies[3]
        assert right.bounds == (400, 0, 450, 200)


class TestWorldRegistration:
    def test_add(self):
        world = World()
        bodies = create_boundary_bodies(Bodies(), [GameRect(0, 0, 1, 1)] * 2)
        add_bodies_with_physics(world, bodies)
        assert len(world) == 2

    def test_add_idempotent(self):
        world = World()
        bodies = create_boundary_bodies(Bodies(), [GameRect(0, 0, 1, 1)])
        add_bodies_with_physics(world, bodies)
        add_bodies_with_physics(world, bodies)
        assert len(world) == 1

    def test_add_without_world_raises(self):
        with pytest.raises(PhysicsError, match="not initialized"):
            add_bodies_with_physics(None, [])

    def test_remove_absent_is_noop(self):
        world = World()
        bodies = create_boundary_bodies(Bodies(), [GameRect(0, 0, 1, 1)])
        remove_bodies_from_physics(world, bodies)
        assert len(world) == 0

    def test_remove_without_world(self):
        remove_bodies_from_physics(None, [object()])

    def test_remove_only_given_bodies(self):
        world = World()
        keep, drop = create_boundary_bodies(Bodies(), [GameRect(0, 0, 1, 1)] * 2)
        add_bodies_with_physics(world, [keep, drop])
        remove_bodies_from_physics(world, [drop])
        assert keep in world
        assert drop not in world
