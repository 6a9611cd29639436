# scenes/loader.py
import json
import logging
import os
from core.color import Color
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import Scene
from lights.light import Ambient, Directional, Light, Point
from materials.material import Material

logger = logging.getLogger(__name__)

def _triple(value, what: str):
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"{what} must be a list of three numbers, got {value!r}")
    try:
        return tuple(float(c) for c in value)
    except (TypeError, ValueError):
        raise ValueError(f"{what} must be a list of three numbers, got {value!r}") from None

def _number(data: dict, key: str, what: str, default=None) -> float:
    if key not in data:
        if default is None:
            raise ValueError(f"{what} is missing '{key}'")
        return default
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{what} '{key}' must be a number, got {value!r}")
    return float(value)

def light_from_dict(data: dict, index: int = 0) -> Light:
    what = f"light {index}"
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be an object, got {data!r}")
    kind = data.get("type")
    intensity = _number(data, "intensity", what)
    if kind == "ambient":
        source = Ambient()
    elif kind == "point":
        source = Point(Vector3(*_triple(data.get("position"), f"{what} position")))
    elif kind == "directional":
        source = Directional(Vector3(*_triple(data.get("direction"), f"{what} direction")))
    else:
        raise ValueError(f"{what} has unknown type {kind!r}")
    return Light(intensity, source)

def material_from_dict(data: dict, what: str = "material") -> Material:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be an object, got {data!r}")
    color = Color(*_triple(data.get("color"), f"{what} color"))
    specular = data.get("specular")
    if specular is not None and (isinstance(specular, bool) or not isinstance(specular, int)):
        raise ValueError(f"{what} specular must be an integer or null, got {specular!r}")
    reflective = _number(data, "reflective", what, default=0.0)
    return Material(color, specular, reflective)

def sphere_from_dict(data: dict, index: int = 0) -> Sphere:
    what = f"sphere {index}"
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be an object, got {data!r}")
    center = Vector3(*_triple(data.get("center"), f"{what} center"))
    radius = _number(data, "radius", what)
    if radius <= 0:
        raise ValueError(f"{what} radius must be positive, got {radius}")
    return Sphere(center, radius, material_from_dict(data.get("material", {}), f"{what} material"))

def _list(data: dict, key: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be a list, got {value!r}")
    return value

def scene_from_dict(data: dict) -> Scene:
    """
    Build a Scene from plain data, as produced by ``scene_to_dict``.

    Raises:
        ValueError: If a field is missing or malformed
    """
    if not isinstance(data, dict):
        raise ValueError("Scene description must be a JSON object")
    background = Color(*_triple(data.get("background_color", [0.0, 0.0, 0.0]), "background_color"))
    lights = [light_from_dict(item, i) for i, item in enumerate(_list(data, "lights"))]
    spheres = [sphere_from_dict(item, i) for i, item in enumerate(_list(data, "spheres"))]
    return Scene(background, lights, spheres)

def light_to_dict(light: Light) -> dict:
    source = light.source
    if isinstance(source, Ambient):
        return {"type": "ambient", "intensity": light.intensity}
    if isinstance(source, Point):
        return {"type": "point", "intensity": light.intensity, "position": list(source.position.to_tuple())}
    if isinstance(source, Directional):
        return {"type": "directional", "intensity": light.intensity, "direction": list(source.direction.to_tuple())}
    raise TypeError(f"Unknown light source: {source!r}")

def scene_to_dict(scene: Scene) -> dict:
    return {
        "background_color": list(scene.background_color.to_tuple()),
        "lights": [light_to_dict(light) for light in scene.lights],
        "spheres": [
            {
                "center": list(s.center.to_tuple()),
                "radius": s.radius,
                "material": {
                    "color": list(s.material.color.to_tuple()),
                    "specular": s.material.specular,
                    "reflective": s.material.reflective,
                },
            }
            for s in scene.spheres
        ],
    }

def load_scene(path: str) -> Scene:
    """
    Load a scene from a JSON file.

    Args:
        path: Path to the scene file

    Returns:
        The parsed Scene

    Raises:
        FileNotFoundError: If the scene file doesn't exist
        ValueError: If the file is not valid JSON or describes an invalid scene
        OSError: If the file exists but cannot be read
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Scene file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error parsing scene {path}: {e}") from e

    scene = scene_from_dict(data)
    logger.info("Loaded scene %s: %d lights, %d spheres", path, len(scene.lights), len(scene.spheres))
    return scene

def save_scene(scene: Scene, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(scene_to_dict(scene), f, indent=2)
