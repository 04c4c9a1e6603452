"""
Scene description: camera parameters plus the objects and lights to render.

A Scene is built once and then only read. Rendering takes it as its single
configuration value.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence
from operator import attrgetter

from .ray import Ray
from .shapes import Sphere, Collision
from .lights import Light


class SceneError(ValueError):
    """Invalid scene configuration."""
    pass


@dataclass(frozen=True)
class Scene:
    """Immutable render configuration.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        fov: Field of view in degrees, in (0, 180)
        objects: Spheres in the scene (stored as a tuple)
        lights: Lights in the scene (stored as a tuple)
        shadow_bias: Offset applied to shadow ray origins along the light
            direction to avoid re-hitting the surface they start on
    """
    width: int
    height: int
    fov: float
    objects: Sequence[Sphere] = ()
    lights: Sequence[Light] = ()
    shadow_bias: float = 1e-13

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise SceneError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )
        if not 0 < self.fov < 180:
            raise SceneError(f"Field of view must be in (0, 180) degrees, got {self.fov}")
        object.__setattr__(self, 'objects', tuple(self.objects))
        object.__setattr__(self, 'lights', tuple(self.lights))

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def trace(self, ray: Ray) -> Optional[Collision]:
        """Find the nearest object hit by a ray.

        Every object is tested. When two hits are at exactly the same
        distance the object that comes first in ``objects`` wins, since
        min() keeps the first minimal element.

        Returns:
            Collision for the nearest hit, None if nothing is hit
        """
        collisions = []
        for obj in self.objects:
            distance = obj.intersect(ray)
            if distance is not None:
                collisions.append(Collision(distance, obj))
        return min(collisions, key=attrgetter('distance'), default=None)
