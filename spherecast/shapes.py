"""
Geometric shapes for the ray tracer.

Each shape implements the Intersectable protocol: a distance along a ray
for the nearest hit, and the outward normal at a surface point.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import math

from .color import Color
from .vec3 import Vec3, Point3
from .ray import Ray


class Intersectable(ABC):
    """Abstract base class for all objects that can be hit by rays."""

    @abstractmethod
    def intersect(self, ray: Ray) -> Optional[float]:
        """Test if ray intersects this object.

        Args:
            ray: The ray to test (direction must be normalized)

        Returns:
            Distance along the ray to the hit, None if there is none
        """
        pass

    @abstractmethod
    def surface_normal(self, hit_point: Point3) -> Vec3:
        """Unit normal pointing out of the surface at hit_point."""
        pass


@dataclass(frozen=True, eq=False)
class Sphere(Intersectable):
    """A shaded sphere.

    Attributes:
        center: Center point of the sphere
        radius: Radius; spheres with radius <= 0 are never hit
        color: Base surface color
        albedo: Diffuse reflectivity, expected in [0, 1]
        ks: Scale applied to the diffuse term
        kd: Scale applied to the specular term
    """
    center: Point3
    radius: float
    color: Color
    albedo: float = 0.5
    ks: float = 0.5
    kd: float = 0.05

    def intersect(self, ray: Ray) -> Optional[float]:
        """Analytic ray-sphere test.

        Projects the center onto the ray to get the closest approach, then
        steps back and forth by half the chord length. Returns the smaller
        root even when it is negative, i.e. when the ray starts inside the
        sphere; only rays with both roots behind the origin are rejected.
        """
        if self.radius <= 0:
            return None

        hypotenuse = self.center - ray.origin
        adjacent = hypotenuse.dot(ray.direction)
        # Squared distance from the center to the ray's line
        d2 = hypotenuse.dot(hypotenuse) - adjacent * adjacent
        radius_sq = self.radius * self.radius

        if d2 > radius_sq:
            return None

        thickness = math.sqrt(radius_sq - d2)
        t0 = adjacent - thickness
        t1 = adjacent + thickness

        if t0 < 0 and t1 < 0:
            return None

        return min(t0, t1)

    def surface_normal(self, hit_point: Point3) -> Vec3:
        return (hit_point - self.center).normalize()

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


@dataclass(frozen=True)
class Collision:
    """Nearest hit found by a trace.

    Attributes:
        distance: Distance along the ray to the hit
        obj: The object that was hit
    """
    distance: float
    obj: Sphere
