"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Make the packages under src/ importable without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from core.color import Color  # noqa: E402
from core.vector import Vector3  # noqa: E402
from geometry.sphere import Sphere  # noqa: E402
from geometry.world import Scene  # noqa: E402
from lights.light import LightPresets  # noqa: E402
from materials.material import Material  # noqa: E402

RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
MATTE_BLACK = Material(Color(0.0, 0.0, 0.0))


def approx_color(color: Color):
    return pytest.approx(color.to_tuple())


def with_sphere_material(scene: Scene, index: int, material: Material) -> Scene:
    """Copy of ``scene`` with sphere ``index`` given a new material."""
    spheres = list(scene.spheres)
    old = spheres[index]
    spheres[index] = Sphere(old.center, old.radius, material)
    return Scene(scene.background_color, scene.lights, spheres)


def with_reflective(scene: Scene, index: int, reflective: float) -> Scene:
    material = scene.spheres[index].material
    return with_sphere_material(scene, index, Material(material.color, material.specular, reflective))


@pytest.fixture
def two_sphere_scene():
    """Spheres at z=3 (radius 1) and z=7 (radius 2) with no lights."""
    return Scene(
        Color(0.0, 0.0, 0.0),
        [],
        [
            Sphere(Vector3(0.0, 0.0, 3.0), 1.0, MATTE_BLACK),
            Sphere(Vector3(0.0, 0.0, 7.0), 2.0, MATTE_BLACK),
        ],
    )


@pytest.fixture
def mirror_scene():
    """
    A green sphere at z=-2 and a red one at z=2 around the origin, lit only
    by ambient light of intensity 0.8, against a blue background.
    """
    return Scene(
        BLUE,
        [LightPresets.ambient(0.8)],
        [
            Sphere(Vector3(0.0, 0.0, -2.0), 1.0, Material(GREEN)),
            Sphere(Vector3(0.0, 0.0, 2.0), 1.0, Material(RED)),
        ],
    )
