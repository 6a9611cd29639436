# core/utils.py
from core.vector import Vector3

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.

    Used both for mirror bounces (v is the incoming ray direction) and for
    specular highlights (v is the negated light vector).
    """
    return v - n * 2 * n.dot(v)
