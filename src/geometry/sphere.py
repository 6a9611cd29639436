# geometry/sphere.py
import math
from typing import List
from core.vector import Vector3
from core.ray import Ray
from materials.material import Material

class Sphere:
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material: Material):
        self.center = center
        self.radius = radius
        self.material = material

    def intersect_ray(self, ray: Ray) -> List[float]:
        """
        Returns the values of ``t`` where the ray meets the sphere, sorted
        ascending: none, one (tangent) or two. No range filtering is done.
        """
        co = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * co.dot(ray.direction)
        c = co.dot(co) - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0:
            return []
        if discriminant == 0:
            return [-b / (2.0 * a)]

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2.0 * a)
        t2 = (-b + sqrt_disc) / (2.0 * a)
        # a > 0, so t1 < t2 except when rounding collapses them
        return [t1, t2] if t1 <= t2 else [t2, t1]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sphere):
            return NotImplemented
        return (self.center == other.center
                and self.radius == other.radius
                and self.material == other.material)

    def __hash__(self) -> int:
        return hash((self.center, self.radius, self.material))

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
