# scenes/default.py
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import Scene
from lights.light import LightPresets
from materials.material import Material
from materials.presets import ColorPresets, MaterialPresets

def create_default_scene() -> Scene:
    """
    Three colored spheres resting on a huge yellow sphere that acts as the
    floor, lit by ambient, point and directional lights.
    """
    lights = [
        LightPresets.ambient(0.2),
        LightPresets.point(0.6, Vector3(2.0, 1.0, 0.0)),
        LightPresets.directional(0.2, Vector3(1.0, 4.0, 4.0)),
    ]
    spheres = [
        Sphere(Vector3(0.0, -1.0, 3.0), 1.0, MaterialPresets.shiny(ColorPresets.RED)),
        Sphere(Vector3(2.0, 0.0, 4.0), 1.0, Material(ColorPresets.BLUE, specular=500, reflective=0.3)),
        Sphere(Vector3(-2.0, 0.0, 4.0), 1.0, Material(ColorPresets.GREEN, specular=10, reflective=0.4)),
        Sphere(Vector3(0.0, -5001.0, 0.0), 5000.0, MaterialPresets.polished(ColorPresets.YELLOW)),
    ]
    return Scene(ColorPresets.BLACK, lights, spheres)
