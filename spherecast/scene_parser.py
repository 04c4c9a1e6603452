"""
Scene description language parser.

Supports a YAML (or JSON) scene description format with:
- Camera configuration (image size, field of view, shadow bias)
- Objects (shaded spheres)
- Lights (directional and sphere lights)

Example scene file:
```yaml
camera:
  width: 800
  height: 800
  fov: 90
  shadow_bias: 1.0e-13

objects:
  - type: sphere
    center: [0, 0, -5]
    radius: 1
    color: [1, 0, 0.4]
    albedo: 0.5
    ks: 0.5
    kd: 0.05

lights:
  - type: directional
    direction: [0, -0.3, 1]
    color: [1, 1, 1]
    intensity: 1

  - type: sphere
    position: [-1.2, 0, -4.5]
    color: [1, 1, 1]
    intensity: 30
```
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Any, List
import json

import yaml

from .color import Color
from .vec3 import Vec3
from .shapes import Sphere
from .lights import Light, DirectionalLight, SphereLight
from .scene import Scene, SceneError


class SceneParseError(Exception):
    """Error during scene parsing."""
    pass


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.objects: List[Sphere] = []
        self.lights: List[Light] = []

    def parse_file(self, filepath: str) -> Scene:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            The parsed Scene
        """
        path = Path(filepath)
        if not path.exists():
            raise SceneParseError(f"Scene file not found: {filepath}")

        content = path.read_text()

        try:
            if path.suffix == '.json':
                data = json.loads(content)
            else:
                # YAML is a superset of JSON, so this covers both
                data = yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SceneParseError(f"Cannot read scene file {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise SceneParseError(f"Scene file must contain a mapping: {filepath}")

        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> Scene:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            The parsed Scene
        """
        if 'objects' in data:
            self._parse_objects(self._entries(data['objects'], 'objects'))

        if 'lights' in data:
            self._parse_lights(self._entries(data['lights'], 'lights'))

        camera_data = data.get('camera') or {}
        if not isinstance(camera_data, dict):
            raise SceneParseError(f"Invalid camera settings: expected a mapping, got {camera_data!r}")
        try:
            return Scene(
                width=int(camera_data.get('width', 800)),
                height=int(camera_data.get('height', 800)),
                fov=float(camera_data.get('fov', 90.0)),
                objects=self.objects,
                lights=self.lights,
                shadow_bias=float(camera_data.get('shadow_bias', 1e-13)),
            )
        except (SceneError, TypeError, ValueError) as e:
            raise SceneParseError(f"Invalid camera settings: {e}") from e

    @staticmethod
    def _entries(section: Any, name: str) -> List[Dict[str, Any]]:
        """Check that a section is a list of mappings."""
        if section is None:
            return []
        if not isinstance(section, list):
            raise SceneParseError(f"'{name}' must be a list, got {section!r}")
        for entry in section:
            if not isinstance(entry, dict):
                raise SceneParseError(f"Entries in '{name}' must be mappings, got {entry!r}")
        return section

    @staticmethod
    def _parse_float(value: Any, what: str) -> float:
        """Convert a scalar, reporting bad values as parse errors."""
        if isinstance(value, bool):
            raise SceneParseError(f"{what} must be a number, got {value!r}")
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"{what} must be a number, got {value!r}") from e

    @staticmethod
    def _parse_type(entry: Dict[str, Any], default: str) -> str:
        type_name = entry.get('type', default)
        if not isinstance(type_name, str):
            raise SceneParseError(f"'type' must be a string, got {type_name!r}")
        return type_name.lower()

    def _parse_vec3(self, data: Any) -> Vec3:
        """Parse a Vec3 from various formats."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Vec3 must have 3 components, got {len(data)}")
            return Vec3(*(self._parse_float(c, "Vec3 component") for c in data))
        elif isinstance(data, dict):
            return Vec3(*(self._parse_float(data.get(axis, 0), f"Vec3 component {axis}")
                          for axis in ('x', 'y', 'z')))
        else:
            raise SceneParseError(f"Cannot parse Vec3 from: {data}")

    def _parse_color(self, data: Any) -> Color:
        """Parse a Color from various formats."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Color must have 3 components, got {len(data)}")
            return Color(*(self._parse_float(c, "Color channel") for c in data))
        elif isinstance(data, dict):
            return Color(*(self._parse_float(data.get(channel, 0), f"Color channel {channel}")
                           for channel in ('r', 'g', 'b')))
        elif isinstance(data, str):
            # Handle hex colors
            if data.startswith('#'):
                hex_color = data[1:]
                if len(hex_color) == 6:
                    try:
                        r, g, b = (int(hex_color[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
                    except ValueError as e:
                        raise SceneParseError(f"Cannot parse color from string: {data}") from e
                    return Color(r, g, b)
            raise SceneParseError(f"Cannot parse color from string: {data}")
        else:
            raise SceneParseError(f"Cannot parse Color from: {data}")

    def _parse_objects(self, objects_data: List[Dict[str, Any]]) -> None:
        """Parse objects section."""
        for obj_data in objects_data:
            obj_type = self._parse_type(obj_data, 'sphere')

            if obj_type == 'sphere':
                self.objects.append(Sphere(
                    center=self._parse_vec3(obj_data.get('center', [0, 0, 0])),
                    radius=self._parse_float(obj_data.get('radius', 1.0), "radius"),
                    color=self._parse_color(obj_data.get('color', [1, 1, 1])),
                    albedo=self._parse_float(obj_data.get('albedo', 0.5), "albedo"),
                    ks=self._parse_float(obj_data.get('ks', 0.5), "ks"),
                    kd=self._parse_float(obj_data.get('kd', 0.05), "kd"),
                ))

            else:
                raise SceneParseError(f"Unknown object type: {obj_type}")

    def _parse_lights(self, lights_data: List[Dict[str, Any]]) -> None:
        """Parse lights section."""
        for light_data in lights_data:
            light_type = self._parse_type(light_data, 'sphere')
            color = self._parse_color(light_data.get('color', [1, 1, 1]))
            intensity = self._parse_float(light_data.get('intensity', 1.0), "intensity")

            if light_type == 'directional':
                direction = self._parse_vec3(light_data.get('direction', [0, -1, 0]))
                if direction.length_squared() == 0:
                    raise SceneParseError("Directional light needs a non-zero direction")
                self.lights.append(DirectionalLight(direction, color, intensity))

            elif light_type in ('sphere', 'point'):
                position = self._parse_vec3(light_data.get('position', [0, 5, 0]))
                self.lights.append(SphereLight(position, color, intensity))

            else:
                raise SceneParseError(f"Unknown light type: {light_type}")


def load_scene(filepath: str) -> Scene:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        The parsed Scene
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Scene:
    """Convenience function to parse a scene from a dictionary.

    Args:
        data: Scene description dictionary

    Returns:
        The parsed Scene
    """
    parser = SceneParser()
    return parser.parse_dict(data)
