# materials/material.py
from typing import Optional
from core.color import Color

class Material:
    """
    Describes how a surface responds to light.

    ``specular`` is the shininess exponent, or None for a surface without a
    highlight. ``reflective`` goes from 0.0 (no mirror contribution) to 1.0
    (perfect mirror).
    """
    def __init__(self, color: Color, specular: Optional[int] = None, reflective: float = 0.0):
        self.color = color
        self.specular = specular
        self.reflective = reflective

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color
                and self.specular == other.specular
                and self.reflective == other.reflective)

    def __hash__(self) -> int:
        return hash((self.color, self.specular, self.reflective))

    def __repr__(self) -> str:
        return f"Material({self.color!r}, specular={self.specular}, reflective={self.reflective})"

