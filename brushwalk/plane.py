"""Textured quads stored as two triangles of interleaved vertex data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from brushwalk.vectors import Vec3

FLOATS_PER_VERTEX = 8
VERTEX_COUNT = 6
FLOAT_COUNT = FLOATS_PER_VERTEX * VERTEX_COUNT


@dataclass(frozen=True)
class Plane:
    """Six vertices of (x, y, z, nx, ny, nz, u, v) plus the texture to draw with."""

    texture: Any
    vertices: tuple[float, ...]

    def __post_init__(self) -> None:
        vertices = tuple(float(value) for value in self.vertices)
        if len(vertices) != FLOAT_COUNT:
            raise ValueError(
                f"a plane needs {FLOAT_COUNT} floats, got {len(vertices)}"
            )
        object.__setattr__(self, "vertices", vertices)

    def vertex(self, index: int) -> tuple[float, ...]:
        """The eight floats of one vertex."""
        start = index * FLOATS_PER_VERTEX
        if not 0 <= index < VERTEX_COUNT:
            raise IndexError(index)
        return self.vertices[start:start + FLOATS_PER_VERTEX]

    def normal(self) -> Vec3:
        """The normal stored with the first vertex."""
        return Vec3(*self.vertices[3:6])

    def is_floor(self) -> bool:
        """True when the normal points straight up."""
        return self.normal() == Vec3(0.0, 1.0, 0.0)


def make_plane(x1, z1, x2, z2, texture, y, height, h_repeat, v_repeat) -> Plane:
    """A vertical wall from (x1, z1) to (x2, z2), rising from y by height."""
    vr = float(v_repeat)
    hr = float(h_repeat)
    nx = z1 - z2
    nz = x2 - x1
    ny = 0.0
    top = y + height
    return Plane(
        texture,
        (
            x1, y, z1, nx, ny, nz, 0, 0,
            x2, y, z2, nx, ny, nz, hr, 0,
            x1, top, z1, nx, ny, nz, 0, vr,
            x1, top, z1, nx, ny, nz, 0, vr,
            x2, y, z2, nx, ny, nz, hr, 0,
            x2, top, z2, nx, ny, nz, hr, vr,
        ),
    )


def make_floor_plane_center(size, texture, repeat) -> Plane:
    """A square floor at y = 0 centred on the origin."""
    s = size
    r = repeat
    return Plane(
        texture,
        (
            -s, 0, -s, 0, 1, 0, -r, -r,
            -s, 0, s, 0, 1, 0, -r, r,
            s, 0, -s, 0, 1, 0, r, -r,
            -s, 0, s, 0, 1, 0, -r, r,
            s, 0, s, 0, 1, 0, r, r,
            s, 0, -s, 0, 1, 0, r, -r,
        ),
    )


def make_floor_plane(x1, z1, x2, z2, texture, y, h_repeat, v_repeat) -> Plane:
    """A horizontal rectangle at height y spanning the two corners."""
    vr = float(v_repeat)
    hr = float(h_repeat)
    return Plane(
        texture,
        (
            x1, y, z1, 0, 1, 0, 0, 0,
            x1, y, z2, 0, 1, 0, 0, vr,
            x2, y, z1, 0, 1, 0, hr, 0,
            x1, y, z2, 0, 1, 0, 0, vr,
            x2, y, z2, 0, 1, 0, hr, vr,
            x2, y, z1, 0, 1, 0, hr, 0,
        ),
    )