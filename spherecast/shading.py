"""
Direct lighting: shadow tests, per-light intensity and Blinn-Phong shading.

Every light is evaluated once per primary hit. There is no recursion; the
tracer only follows camera rays and shadow rays.
"""

from __future__ import annotations
import math
from typing import Tuple

from .color import Color
from .vec3 import Vec3, Point3
from .ray import Ray
from .lights import Light, LightKind
from .scene import Scene

SPECULAR_EXPONENT = 25


def get_light(light: Light, scene: Scene, hit_point: Point3) -> Tuple[float, Vec3]:
    """Compute the light reaching a point and the direction toward it.

    A shadow ray is started slightly off the surface, shifted by the
    scene's shadow bias along the light direction. Directional lights are
    blocked by any hit. Sphere lights are only blocked by hits strictly
    closer than the light itself, and fall off with 1 / (4 pi d^2). A
    sphere light placed exactly on hit_point contributes no light.

    Args:
        light: The light to evaluate
        scene: Scene to trace shadow rays against
        hit_point: Point being shaded

    Returns:
        Tuple of (effective intensity, unit direction from hit_point to light)
    """
    if light.kind is LightKind.DIRECTIONAL:
        direction_to_light = -light.direction
        shadow_ray = Ray(hit_point + direction_to_light * scene.shadow_bias, direction_to_light)
        in_light = scene.trace(shadow_ray) is None

        return (light.intensity if in_light else 0.0), direction_to_light

    if light.kind is LightKind.SPHERE:
        to_light = light.position - hit_point
        distance = to_light.length()
        direction_to_light = to_light.normalize()

        # A light on the surface itself has no direction; it contributes nothing
        if distance == 0:
            return 0.0, direction_to_light

        shadow_ray = Ray(hit_point + direction_to_light * scene.shadow_bias, direction_to_light)
        shadow_hit = scene.trace(shadow_ray)
        in_light = shadow_hit is None or not shadow_hit.distance < distance

        if not in_light:
            return 0.0, direction_to_light
        return light.intensity / (4.0 * math.pi * to_light.length_squared()), direction_to_light

    raise TypeError(f"Unsupported light kind: {light.kind!r}")


def get_color(scene: Scene, ray: Ray) -> Color:
    """Shade a primary ray.

    Rays that hit nothing are black. For a hit, each light adds a
    Lambertian diffuse term scaled by the object's ``ks`` and a Blinn-Phong
    specular term scaled by its ``kd``. The specular term is added to all
    three channels as a plain number, without the light's color.

    Returns:
        The summed color, clamped to [0, 1]
    """
    color = Color(0.0, 0.0, 0.0)

    collision = scene.trace(ray)
    if collision is not None:
        obj = collision.obj
        hit_point = ray.at(collision.distance)
        surface_normal = obj.surface_normal(hit_point)
        view_vector = -ray.direction.normalize()
        light_reflected = obj.albedo / math.pi

        for light in scene.lights:
            light_intensity, direction_to_light = get_light(light, scene, hit_point)

            diffuse = max(surface_normal.dot(direction_to_light), 0.0) * light_intensity

            half_vector = (direction_to_light + view_vector).normalize()
            specular = surface_normal.dot(half_vector) ** SPECULAR_EXPONENT * obj.kd * light_intensity

            light_color = light.color * (diffuse * obj.ks) * light_reflected
            color = color + obj.color * light_color + specular

    color.clamp()
    return color
