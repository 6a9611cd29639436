# core/color.py
from typing import Tuple


def channel_to_u8(c: float) -> int:
    """
    Maps a channel value in [0, 1] to [0, 255]; values outside the range clamp.
    """
    if c <= 0.0:
        return 0
    return min(255, int(256.0 * c))


class Color:
    """
    An RGB color. Channels are conceptually in [0, 1] but are not clamped
    until the color is converted to bytes.
    """
    def __init__(self, r: float, g: float, b: float):
        self.r = r
        self.g = g
        self.b = b

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, k: float) -> "Color":
        return Color(self.r * k, self.g * k, self.b * k)

    def __rmul__(self, k: float) -> "Color":
        return self.__mul__(k)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def to_u8(self) -> Tuple[int, int, int]:
        return (channel_to_u8(self.r), channel_to_u8(self.g), channel_to_u8(self.b))

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
