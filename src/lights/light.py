# lights/light.py
from typing import Union
from core.vector import Vector3

class Ambient:
    """Ambient light has the same intensity everywhere in the scene."""

    def __eq__(self, other) -> bool:
        return isinstance(other, Ambient)

    def __hash__(self) -> int:
        return hash(Ambient)

    def __repr__(self) -> str:
        return "Ambient()"

class Point:
    """A point light shines from a single position."""

    def __init__(self, position: Vector3):
        self.position = position

    def __eq__(self, other) -> bool:
        return isinstance(other, Point) and self.position == other.position

    def __hash__(self) -> int:
        return hash((Point, self.position))

    def __repr__(self) -> str:
        return f"Point({self.position!r})"

class Directional:
    """
    A directional light shines along a fixed direction. ``direction`` points
    from the surface toward the light.
    """

    def __init__(self, direction: Vector3):
        self.direction = direction

    def __eq__(self, other) -> bool:
        return isinstance(other, Directional) and self.direction == other.direction

    def __hash__(self) -> int:
        return hash((Directional, self.direction))

    def __repr__(self) -> str:
        return f"Directional({self.direction!r})"

LightSource = Union[Ambient, Point, Directional]

class Light:
    """
    A source of white light. ``intensity`` is a free scalar weight and is not
    normalized against the other lights in the scene.
    """
    def __init__(self, intensity: float, source: LightSource):
        self.intensity = intensity
        self.source = source

    def __eq__(self, other) -> bool:
        if not isinstance(other, Light):
            return NotImplemented
        return self.intensity == other.intensity and self.source == other.source

    def __hash__(self) -> int:
        return hash((self.intensity, self.source))

    def __repr__(self) -> str:
        return f"Light({self.intensity}, {self.source!r})"

class LightPresets:
    """Shortcuts for building the three kinds of light."""

    @staticmethod
    def ambient(intensity: float) -> Light:
        return Light(intensity, Ambient())

    @staticmethod
    def point(intensity: float, position: Vector3) -> Light:
        return Light(intensity, Point(position))

    @staticmethod
    def directional(intensity: float, direction: Vector3) -> Light:
        return Light(intensity, Directional(direction))
