# camera/camera.py
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    A pinhole eye at ``position`` looking down +z through a viewport of
    ``viewport_width`` x ``viewport_height`` placed ``projection_distance``
    in front of it.

    Canvas coordinates are centered: x grows to the right, y grows upward.
    """
    def __init__(self, canvas_width: int, canvas_height: int,
                 viewport_width: float = 1.0, viewport_height: float = 1.0,
                 projection_distance: float = 1.0, position: Vector3 = None):
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.projection_distance = projection_distance
        self.position = position if position is not None else Vector3(0.0, 0.0, 0.0)

    def canvas_to_viewport(self, x: float, y: float) -> Vector3:
        """Maps a (possibly fractional) canvas coordinate to a ray direction."""
        return Vector3(
            x * self.viewport_width / self.canvas_width,
            y * self.viewport_height / self.canvas_height,
            self.projection_distance,
        )

    def get_ray(self, x: float, y: float) -> Ray:
        return Ray(self.position, self.canvas_to_viewport(x, y))
