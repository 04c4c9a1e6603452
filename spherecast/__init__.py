"""
SphereCast - A Whitted-style Python ray tracer

Renders scenes of spheres lit by directional and sphere lights:
- One camera ray per pixel through a pinhole camera
- Analytic ray-sphere intersection
- Hard shadows from shadow rays
- Lambertian diffuse plus Blinn-Phong specular shading
- PNG (or any Pillow format) output
"""

__version__ = "0.1.0"
__author__ = "SphereCast Team"

from .vec3 import Vec3, Point3
from .color import Color, ColorRangeError
from .ray import Ray
from .camera import Camera, create_prime_ray
from .shapes import Intersectable, Sphere, Collision
from .lights import Light, LightKind, DirectionalLight, SphereLight
from .scene import Scene, SceneError
from .shading import get_light, get_color
from .renderer import Renderer, RenderSettings, render
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene
