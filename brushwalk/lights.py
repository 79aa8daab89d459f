"""Light descriptions and their shader uniform values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from brushwalk.vectors import Vec3


@dataclass(frozen=True)
class PointLight:
    """A light radiating from a point."""

    position: Vec3
    color: Vec3
    falloff: float


@dataclass(frozen=True)
class SpotLight:
    """A directed light; carries the same data as a point light."""

    position: Vec3
    color: Vec3
    falloff: float


def light_uniforms(lights: Iterable[PointLight | SpotLight]) -> dict[str, object]:
    """Map indexed shader uniform names to the values of each light."""
    uniforms: dict[str, object] = {}
    for index, light in enumerate(lights):
        uniforms[f"lightPosition[{index}]"] = light.position.as_tuple()
        uniforms[f"lightColor[{index}]"] = light.color.as_tuple()
        uniforms[f"lightFalloff[{index}]"] = light.falloff
    return uniforms