"""
Camera module for generating primary rays.

The camera is a pinhole fixed at the world origin looking down -Z. Pixel
centers are mapped onto an image plane at z = -1, scaled by the field of
view and the aspect ratio.
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING

from .vec3 import Vec3, Point3
from .ray import Ray

if TYPE_CHECKING:
    from .scene import Scene


class Camera:
    """Pinhole camera at the origin."""

    def __init__(self, width: int, height: int, fov: float):
        """Create a camera.

        Args:
            width: Image width in pixels
            height: Image height in pixels
            fov: Field of view in degrees
        """
        self.width = width
        self.height = height
        self.aspect_ratio = width / height
        self.fov_adjustment = math.tan(math.radians(fov) / 2)
        self.origin = Point3(0, 0, 0)

    @classmethod
    def from_scene(cls, scene: Scene) -> Camera:
        return cls(scene.width, scene.height, scene.fov)

    def get_ray(self, x: int, y: int) -> Ray:
        """Generate the ray through the center of pixel (x, y).

        Args:
            x: Column, 0 = left
            y: Row, 0 = top

        Returns:
            A ray from the camera origin with a normalized direction
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        sensor_x = (((x + 0.5) / self.width) * 2.0 - 1.0) * self.aspect_ratio * self.fov_adjustment
        sensor_y = (1.0 - ((y + 0.5) / self.height) * 2.0) * self.fov_adjustment

        return Ray(self.origin, Vec3(sensor_x, sensor_y, -1.0).normalize())

    def __repr__(self) -> str:
        return f"Camera({self.width}x{self.height}, aspect_ratio={self.aspect_ratio:.4f})"


def create_prime_ray(x: int, y: int, scene: Scene) -> Ray:
    """Camera ray through pixel (x, y) of the scene's image."""
    return Camera.from_scene(scene).get_ray(x, y)
