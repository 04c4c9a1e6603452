"""Tests for the scene description parser."""

import pytest
import json
from pathlib import Path

from spherecast.vec3 import Vec3, Point3
from spherecast.color import Color
from spherecast.lights import LightKind
from spherecast.scene import Scene
from spherecast.scene_parser import SceneParser, SceneParseError, load_scene, parse_scene

SCENES_DIR = Path(__file__).parent.parent / "scenes"

SCENE_DATA = {
    'camera': {'width': 320, 'height': 240, 'fov': 60, 'shadow_bias': 1e-9},
    'objects': [
        {'type': 'sphere', 'center': [0, 0, -5], 'radius': 1.5,
         'color': [1, 0, 0.4], 'albedo': 0.4, 'ks': 0.6, 'kd': 0.1},
    ],
    'lights': [
        {'type': 'directional', 'direction': [0, -2, 0], 'color': [1, 1, 1], 'intensity': 10},
        {'type': 'sphere', 'position': [-1.2, 0, -4.5], 'intensity': 30},
    ],
}


class TestParseDict:
    """Test parsing a scene from a dictionary."""

    def test_camera(self):
        scene = parse_scene(SCENE_DATA)
        assert isinstance(scene, Scene)
        assert scene.width == 320
        assert scene.height == 240
        assert scene.fov == 60.0
        assert scene.shadow_bias == 1e-9

    def test_sphere(self):
        sphere = parse_scene(SCENE_DATA).objects[0]
        assert sphere.center == Point3(0, 0, -5)
        assert sphere.radius == 1.5
        assert sphere.color == Color(1, 0, 0.4)
        assert sphere.albedo == 0.4
        assert sphere.ks == 0.6
        assert sphere.kd == 0.1

    def test_lights(self):
        directional, point = parse_scene(SCENE_DATA).lights
        assert directional.kind is LightKind.DIRECTIONAL
        assert directional.direction == Vec3(0, -1, 0)
        assert directional.intensity == 10.0
        assert point.kind is LightKind.SPHERE
        assert point.position == Point3(-1.2, 0, -4.5)
        assert point.color == Color(1, 1, 1)

    def test_point_alias(self):
        scene = parse_scene({'lights': [{'type': 'point', 'position': [0, 1, 0]}]})
        assert scene.lights[0].kind is LightKind.SPHERE

    def test_defaults(self):
        scene = parse_scene({})
        assert scene.width == 800
        assert scene.height == 800
        assert scene.fov == 90.0
        assert scene.shadow_bias == 1e-13
        assert scene.objects == ()
        assert scene.lights == ()

    def test_sphere_defaults(self):
        sphere = parse_scene({'objects': [{'type': 'sphere'}]}).objects[0]
        assert sphere.radius == 1.0
        assert sphere.albedo == 0.5
        assert sphere.ks == 0.5
        assert sphere.kd == 0.05

    def test_vec_and_color_formats(self):
        scene = parse_scene({
            'objects': [{'center': {'x': 1, 'z': -3}, 'color': '#ff8000'}],
            'lights': [{'type': 'sphere', 'position': [0, 0, 0], 'color': {'r': 0.5, 'g': 0.25}}],
        })
        assert scene.objects[0].center == Point3(1, 0, -3)
        assert scene.objects[0].color == Color(1.0, 128 / 255.0, 0.0)
        assert scene.lights[0].color == Color(0.5, 0.25, 0)

    def test_parser_instance(self):
        parser = SceneParser()
        scene = parser.parse_dict(SCENE_DATA)
        assert len(parser.objects) == len(scene.objects) == 1


class TestParseErrors:
    """Test error reporting."""

    def test_unknown_object_type(self):
        with pytest.raises(SceneParseError, match="Unknown object type"):
            parse_scene({'objects': [{'type': 'cube'}]})

    def test_unknown_light_type(self):
        with pytest.raises(SceneParseError, match="Unknown light type"):
            parse_scene({'lights': [{'type': 'area'}]})

    def test_bad_vector(self):
        with pytest.raises(SceneParseError):
            parse_scene({'objects': [{'center': [1, 2]}]})

    def test_bad_color(self):
        with pytest.raises(SceneParseError):
            parse_scene({'objects': [{'color': 'blue'}]})

    def test_zero_light_direction(self):
        with pytest.raises(SceneParseError):
            parse_scene({'lights': [{'type': 'directional', 'direction': [0, 0, 0]}]})

    @pytest.mark.parametrize("camera", [
        {'width': 0},
        {'height': -1},
        {'fov': 180},
    ])
    def test_invalid_camera(self, camera):
        with pytest.raises(SceneParseError, match="Invalid camera"):
            parse_scene({'camera': camera})

    @pytest.mark.parametrize("data", [
        {'objects': [{'center': ['a', 0, -5]}]},
        {'objects': [{'center': {'x': 'left'}}]},
        {'objects': [{'color': {'r': 'red'}}]},
        {'objects': [{'color': [None, 0, 0]}]},
        {'objects': [{'color': '#zzzzzz'}]},
        {'objects': [{'radius': 'big'}]},
        {'objects': [{'albedo': [0.5]}]},
        {'objects': [{'radius': True}]},
        {'objects': [{'type': 7}]},
        {'objects': ['sphere']},
        {'objects': {'type': 'sphere'}},
        {'lights': [{'intensity': 'bright'}]},
        {'lights': [{'type': None}]},
        {'lights': ['x']},
        {'lights': 'sun'},
        {'camera': [800, 600]},
        {'camera': {'width': 'wide'}},
    ])
    def test_malformed_values(self, data):
        with pytest.raises(SceneParseError):
            parse_scene(data)

    def test_null_sections_are_empty(self):
        scene = parse_scene({'objects': None, 'lights': None})
        assert scene.objects == ()
        assert scene.lights == ()


class TestLoadScene:
    """Test loading scene files."""

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "scene.yaml"
        path.write_text(
            "camera:\n"
            "  width: 64\n"
            "  height: 32\n"
            "objects:\n"
            "  - type: sphere\n"
            "    center: [0, 0, -5]\n"
            "lights:\n"
            "  - type: directional\n"
            "    direction: [0, 0, -1]\n"
        )
        scene = load_scene(str(path))
        assert (scene.width, scene.height) == (64, 32)
        assert len(scene.objects) == 1
        assert len(scene.lights) == 1

    def test_json_file(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text(json.dumps(SCENE_DATA))
        scene = load_scene(str(path))
        assert scene.width == 320
        assert len(scene.lights) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(SceneParseError, match="not found"):
            load_scene(str(tmp_path / "nope.yaml"))

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("objects: [unclosed\n")
        with pytest.raises(SceneParseError):
            load_scene(str(path))

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{\"camera\": ")
        with pytest.raises(SceneParseError):
            load_scene(str(path))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(SceneParseError):
            load_scene(str(path))

    def test_demo_scene_file(self):
        scene = load_scene(str(SCENES_DIR / "demo.yaml"))
        assert (scene.width, scene.height, scene.fov) == (800, 800, 90.0)
        assert len(scene.objects) == 3
        assert [light.kind for light in scene.lights] == [
            LightKind.DIRECTIONAL, LightKind.DIRECTIONAL, LightKind.DIRECTIONAL, LightKind.SPHERE
        ]
