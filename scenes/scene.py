from dataclasses import dataclass

from primitives.tuples import Point3D, Vector3D
from utils.constants import GRAVITY, WIND, START_POSITION, LAUNCH_DIRECTION, LAUNCH_SPEED


@dataclass(frozen=True)
class World:
    gravity: Vector3D
    wind: Vector3D

    @classmethod
    def default(cls):
        return cls(Vector3D.from_array(GRAVITY), Vector3D.from_array(WIND))


@dataclass(frozen=True)
class Projectile:
    position: Point3D
    velocity: Vector3D

    @classmethod
    def launch(cls, speed=LAUNCH_SPEED, position=None, direction=None):
        if position is None:
            position = Point3D.from_array(START_POSITION)
        if direction is None:
            direction = Vector3D.from_array(LAUNCH_DIRECTION)
        return cls(position, direction.normalize() * speed)


def tick(projectile, world):
    return Projectile(
        position=projectile.position + projectile.velocity,
        velocity=projectile.velocity + world.gravity + world.wind
    )


def simulate(projectile, world, max_ticks=100000):
    """
    Yield each successive projectile state until it hits the ground
    (y <= 0) or `max_ticks` states have been produced.
    """
    for _ in range(max_ticks):
        projectile = tick(projectile, world)
        if projectile.position.y <= 0.0:
            return
        yield projectile
