# src/geometry/world.py
from typing import Iterable, Optional, Tuple
from core.color import Color
from core.ray import Ray
from geometry.hittable import HitRecord
from geometry.sphere import Sphere
from lights.light import Light

class Scene:
    """
    A read-only scene: a background color, the lights and the spheres.

    Lights and spheres are stored as tuples so the order used for closest-hit
    tie-breaking is fixed for the lifetime of the scene.
    """
    def __init__(self, background_color: Color, lights: Iterable[Light], spheres: Iterable[Sphere]):
        self._background_color = background_color
        self._lights: Tuple[Light, ...] = tuple(lights)
        self._spheres: Tuple[Sphere, ...] = tuple(spheres)

    @property
    def background_color(self) -> Color:
        return self._background_color

    @property
    def lights(self) -> Tuple[Light, ...]:
        return self._lights

    @property
    def spheres(self) -> Tuple[Sphere, ...]:
        return self._spheres

    def __eq__(self, other) -> bool:
        if not isinstance(other, Scene):
            return NotImplemented
        return (self._background_color == other._background_color
                and self._lights == other._lights
                and self._spheres == other._spheres)

    def __hash__(self) -> int:
        return hash((self._background_color, self._lights, self._spheres))

    def __repr__(self) -> str:
        return f"Scene({self._background_color!r}, {len(self._lights)} lights, {len(self._spheres)} spheres)"


def closest_intersection(scene: Scene, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
    """
    Find the nearest sphere hit by ``ray`` with ``t_min <= t < t_max``.

    Every sphere is scanned; a later hit replaces the current one only when it
    is strictly closer, so equal ``t`` resolves to the first sphere in scene
    order. Returns None when nothing in range is hit.
    """
    hit_record = None
    closest_so_far = t_max
    for sphere in scene.spheres:
        for t in sphere.intersect_ray(ray):
            if t_min <= t < closest_so_far:
                closest_so_far = t
                hit_record = HitRecord(sphere, t)
    return hit_record
