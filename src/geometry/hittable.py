# geometry/hittable.py
from geometry.sphere import Sphere

class HitRecord:
    """
    Records the closest ray-object intersection: the sphere that was hit and
    the ray parameter at the hit.
    """
    def __init__(self, sphere: Sphere, t: float):
        self.sphere = sphere
        self.t = t

    def __iter__(self):
        # allows ``sphere, t = hit``
        yield self.sphere
        yield self.t

    def __repr__(self) -> str:
        return f"HitRecord({self.sphere!r}, t={self.t})"
