# renderer/lighting.py
import math
from typing import Optional
from core.ray import Ray
from core.utils import reflect
from core.vector import Vector3
from geometry.world import Scene, closest_intersection
from lights.light import Ambient, Directional, Point

# Minimum t for shadow rays, keeps a surface from shadowing itself.
SHADOW_EPSILON = 0.001

def compute_lighting(scene: Scene, p: Vector3, n: Vector3, v: Vector3,
                     specular: Optional[int]) -> float:
    """
    Compute the light intensity at a surface point, with shadows but without
    reflections.

    Parameters:
        scene: The scene whose lights and spheres are queried
        p: The point on the surface
        n: The surface normal at ``p``
        v: Direction from ``p`` toward the viewer
        specular: The material's specular exponent, or None for no highlight

    Returns:
        The summed intensity. It is not clamped and may exceed 1.
    """
    total = 0.0
    for light in scene.lights:
        source = light.source
        intensity = light.intensity

        if isinstance(source, Ambient):
            total += intensity
            continue
        if isinstance(source, Point):
            l = source.position - p
            t_max = 1.0
        elif isinstance(source, Directional):
            l = source.direction
            t_max = math.inf
        else:
            raise TypeError(f"Unknown light source: {source!r}")

        # Shadow check
        if closest_intersection(scene, Ray(p, l), SHADOW_EPSILON, t_max) is not None:
            continue

        # Diffuse
        n_dot_l = n.dot(l)
        if n_dot_l > 0:
            total += intensity * n_dot_l / (n.length() * l.length())

        # Specular
        if specular is not None:
            r = reflect(-l, n)
            r_dot_v = r.dot(v)
            if r_dot_v > 0:
                total += intensity * (r_dot_v / (r.length() * v.length())) ** specular

    return total
