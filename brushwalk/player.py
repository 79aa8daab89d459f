"""The player's movement model driven by the set of held keys."""

from __future__ import annotations

import enum
from collections.abc import Collection
from dataclasses import dataclass, field

from brushwalk.camera import Camera
from brushwalk.vectors import Vec2, Vec3

SPEED = 80.0
ACCEL = 30.0
TURN_RATE = 90.0
DRAG = 5.0


class Key(enum.Enum):
    """Keys the player responds to."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    Q = "q"
    E = "e"
    LCONTROL = "lcontrol"
    SPACE = "space"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


def input_vector(pressed: Collection[Key]) -> Vec2:
    """Planar movement direction from the WASD keys (not normalized)."""
    x = 0.0
    y = 0.0
    if Key.D in pressed:
        x += 1.0
    if Key.A in pressed:
        x -= 1.0
    if Key.W in pressed:
        y -= 1.0
    if Key.S in pressed:
        y += 1.0
    return Vec2(x, y)


_ROTATION_KEYS = {
    Key.LEFT: Vec3(-1.0, 0.0, 0.0),
    Key.RIGHT: Vec3(1.0, 0.0, 0.0),
    Key.UP: Vec3(0.0, -1.0, 0.0),
    Key.DOWN: Vec3(0.0, 1.0, 0.0),
    Key.Q: Vec3(0.0, 0.0, -1.0),
    Key.E: Vec3(0.0, 0.0, 1.0),
}


@dataclass
class Player:
    """A free-flying player with position, rotation in degrees and velocity."""

    position: Vec3 = field(default_factory=Vec3)
    rotation: Vec3 = field(default_factory=Vec3)
    velocity: Vec3 = field(default_factory=Vec3)

    def step(self, delta_time: float, pressed: Collection[Key] = frozenset()) -> None:
        """Apply controls for the held keys, then move by the velocity."""
        self._controls(delta_time, pressed)
        self.position = self.position + self.velocity * delta_time

    def place_camera(self, camera: Camera) -> None:
        """Move the camera to the player's position and rotation."""
        camera.position = self.position
        camera.rotation = self.rotation

    def _controls(self, delta_time: float, pressed: Collection[Key]) -> None:
        speed_time = SPEED * delta_time
        accel_time = ACCEL * ACCEL * delta_time

        direction = input_vector(pressed)
        if direction:
            direction = direction.normalized().rotated_by(self.rotation.x)

        self.velocity = Vec3(
            self.velocity.x + direction.x * accel_time,
            self.velocity.y,
            self.velocity.z + direction.y * accel_time,
        )

        if Key.LCONTROL in pressed:
            self.position = self.position - Vec3(0.0, speed_time, 0.0)
        if Key.SPACE in pressed:
            self.position = self.position + Vec3(0.0, speed_time, 0.0)

        for key, axis in _ROTATION_KEYS.items():
            if key in pressed:
                self.rotation = self.rotation + axis * (TURN_RATE * delta_time)

        self.velocity = self.velocity * (1.0 - DRAG * delta_time)
        speed = self.velocity.length()
        if speed > SPEED:
            self.velocity = self.velocity * (SPEED / speed)