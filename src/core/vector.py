# core/vector.py
import math

class Vector3:
    """
    A simple 3D vector class supporting the affine and metric operations
    the tracer needs: arithmetic, dot product, length and normalization.
    """
    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, t: float) -> "Vector3":
        return Vector3(self.x * t, self.y * t, self.z * t)

    def __rmul__(self, t: float) -> "Vector3":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        # Callers never pass a zero vector; dividing by zero raises.
        return self / self.length()

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
