"""Tests for the built-in scene and JSON scene files."""

import json

import pytest

from core.color import Color
from core.vector import Vector3
from lights.light import Ambient, Directional, Point
from scenes.default import create_default_scene
from scenes.loader import load_scene, save_scene, scene_from_dict, scene_to_dict


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestDefaultScene:

    def test_contents(self):
        scene = create_default_scene()
        assert scene.background_color == Color(0.0, 0.0, 0.0)
        assert [type(light.source) for light in scene.lights] == [Ambient, Point, Directional]
        assert len(scene.spheres) == 4
        floor = scene.spheres[-1]
        assert floor.radius == 5000.0
        assert floor.material.reflective == 0.5


class TestSceneFiles:

    def test_round_trip(self, tmp_path):
        scene = create_default_scene()
        path = tmp_path / "scene.json"
        save_scene(scene, str(path))
        assert load_scene(str(path)) == scene

    def test_dict_round_trip(self):
        scene = create_default_scene()
        assert scene_from_dict(scene_to_dict(scene)) == scene

    def test_minimal_scene(self, tmp_path):
        path = write_json(tmp_path / "scene.json", {
            "lights": [{"type": "ambient", "intensity": 1}],
            "spheres": [{"center": [0, 0, 3], "radius": 1, "material": {"color": [1, 0, 0]}}],
        })
        scene = load_scene(path)
        assert scene.background_color == Color(0.0, 0.0, 0.0)
        sphere = scene.spheres[0]
        assert sphere.center == Vector3(0.0, 0.0, 3.0)
        assert sphere.material.specular is None
        assert sphere.material.reflective == 0.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_scene(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Error parsing scene"):
            load_scene(str(path))

    @pytest.mark.parametrize("data,message", [
        ([], "JSON object"),
        ({"lights": [{"type": "spot", "intensity": 1}]}, "unknown type"),
        ({"lights": [{"type": "ambient"}]}, "missing 'intensity'"),
        ({"lights": [{"type": "point", "intensity": 1, "position": [0, 0]}]}, "position"),
        ({"lights": ["ambient"]}, "must be an object"),
        ({"spheres": [{"center": [0, 0, 3], "radius": 0, "material": {"color": [1, 1, 1]}}]}, "positive"),
        ({"spheres": [{"center": [0, 0, 3], "radius": 1}]}, "color"),
        ({"spheres": [{"center": [0, 0, 3], "radius": 1,
                       "material": {"color": [1, 1, 1], "specular": 1.5}}]}, "specular"),
        ({"spheres": [{"center": [0, 0, 3], "radius": "big",
                       "material": {"color": [1, 1, 1]}}]}, "must be a number"),
        ({"background_color": ["a", "b", "c"]}, "background_color"),
        ({"spheres": None}, "'spheres' must be a list"),
        ({"lights": 5}, "'lights' must be a list"),
        ({"spheres": {"center": [0, 0, 3]}}, "'spheres' must be a list"),
    ])
    def test_invalid_scene(self, tmp_path, data, message):
        path = write_json(tmp_path / "scene.json", data)
        with pytest.raises(ValueError, match=message):
            load_scene(path)
