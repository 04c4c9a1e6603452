"""
Light sources for the ray tracer.

Two kinds of light, modelled as a closed set of variants tagged by
LightKind:
- Directional lights (sun): parallel rays, no falloff
- Sphere lights: a point source with inverse-square falloff

Shading dispatches on the ``kind`` tag in one place
(see spherecast.shading.get_light).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .color import Color
from .vec3 import Vec3, Point3


class LightKind(Enum):
    """Tag identifying the light variant."""
    DIRECTIONAL = "directional"
    SPHERE = "sphere"


@dataclass(frozen=True)
class DirectionalLight:
    """A directional light (like the sun).

    Attributes:
        direction: Direction the light travels in; normalized on creation
        color: Color of the light
        intensity: Brightness, independent of distance
    """
    direction: Vec3
    color: Color
    intensity: float = 1.0
    kind: LightKind = field(default=LightKind.DIRECTIONAL, init=False)

    def __post_init__(self):
        object.__setattr__(self, 'direction', self.direction.normalize())


@dataclass(frozen=True)
class SphereLight:
    """A point light with physically based inverse-square falloff.

    Attributes:
        position: Position of the light
        color: Color of the light
        intensity: Total emitted power, spread over a sphere of radius d
    """
    position: Point3
    color: Color
    intensity: float = 1.0
    kind: LightKind = field(default=LightKind.SPHERE, init=False)


Light = Union[DirectionalLight, SphereLight]
