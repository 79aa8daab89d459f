"""The viewpoint used to render a frame."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from brushwalk.vectors import Vec3


@dataclass
class Camera:
    """Position, rotation in degrees (yaw, pitch, roll) and field-of-view scale."""

    position: Vec3 = field(default_factory=Vec3)
    rotation: Vec3 = field(default_factory=Vec3)
    fov: float = 1.0

    def copy(self) -> Camera:
        """An independent copy of this camera."""
        return dataclasses.replace(self)