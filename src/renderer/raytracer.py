# renderer/raytracer.py
import logging
import math
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Sequence, Tuple
from camera.camera import Camera
from core.color import Color
from core.ray import Ray
from core.utils import reflect
from geometry.world import Scene, closest_intersection
from renderer.canvas import Canvas
from renderer.lighting import SHADOW_EPSILON, compute_lighting

logger = logging.getLogger(__name__)

RECURSION_DEPTH = 3
PRIMARY_T_MIN = 1.0
REFLECTION_T_MIN = SHADOW_EPSILON
# 5x5 grid of sub-pixel offsets used for anti-aliasing
SUBPIXEL_OFFSETS = (-0.4, -0.2, 0.0, 0.2, 0.4)
CENTER_OFFSET = (0.0,)

def trace_ray(scene: Scene, ray: Ray, t_min: float, t_max: float, depth: int) -> Color:
    """
    Trace ``ray`` through ``scene`` and return the color it sees.

    Only hits with ``t_min <= t < t_max`` count. ``depth`` is the number of
    mirror bounces still allowed; at 0 only local shading is returned.
    """
    hit = closest_intersection(scene, ray, t_min, t_max)
    if hit is None:
        return scene.background_color

    sphere, t = hit
    p = ray.at(t)
    n = (p - sphere.center).normalize()
    material = sphere.material
    local_color = material.color * compute_lighting(scene, p, n, -ray.direction, material.specular)

    r = material.reflective
    if depth <= 0 or r <= 0:
        return local_color

    reflected_color = trace_ray(
        scene,
        Ray(p, reflect(ray.direction, n)),
        REFLECTION_T_MIN,
        math.inf,
        depth - 1,
    )
    return local_color * (1 - r) + reflected_color * r


def _render_rows(scene: Scene, camera: Camera, rows: Sequence[int], offsets: Sequence[float],
                 max_depth: int) -> List[Tuple[int, List[Color]]]:
    """
    Render whole canvas rows. Module-level so worker processes can unpickle it.
    """
    half_w = camera.canvas_width // 2
    weight = 1.0 / (len(offsets) * len(offsets))
    out = []
    for y in rows:
        colors = []
        for x in range(-half_w, half_w):
            r = g = b = 0.0
            for dx in offsets:
                for dy in offsets:
                    ray = camera.get_ray(x + dx, y + dy)
                    c = trace_ray(scene, ray, PRIMARY_T_MIN, math.inf, max_depth)
                    r += c.r
                    g += c.g
                    b += c.b
            colors.append(Color(r * weight, g * weight, b * weight))
        out.append((y, colors))
    return out


class Renderer:
    """
    Renders one frame of a scene to a Canvas.

    Each pixel is traced independently, so rows can be spread across worker
    processes. The scene is copied to each worker and never modified.
    """
    def __init__(self, scene: Scene, width: int, height: int, camera: Optional[Camera] = None,
                 max_depth: int = RECURSION_DEPTH, antialias: bool = True, workers: int = 1,
                 chunk_rows: int = 16):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        if max_depth < 0:
            raise ValueError(f"Recursion depth must be non-negative, got {max_depth}")
        self.scene = scene
        self.width = width
        self.height = height
        self.camera = camera if camera is not None else Camera(width, height)
        self.max_depth = max_depth
        self.antialias = antialias
        self.workers = workers
        self.chunk_rows = max(1, chunk_rows)

    @property
    def offsets(self) -> Tuple[float, ...]:
        return SUBPIXEL_OFFSETS if self.antialias else CENTER_OFFSET

    @property
    def samples_per_pixel(self) -> int:
        return len(self.offsets) ** 2

    def _row_chunks(self) -> List[List[int]]:
        half_h = self.height // 2
        rows = list(range(-half_h, half_h))
        return [rows[i:i + self.chunk_rows] for i in range(0, len(rows), self.chunk_rows)]

    def render(self) -> Canvas:
        canvas = Canvas(self.width, self.height)
        chunks = self._row_chunks()
        logger.info("Rendering %dx%d, %d samples per pixel, depth %d, %d worker(s)",
                    self.width, self.height, self.samples_per_pixel, self.max_depth, self.workers)
        start = time.perf_counter()

        if self.workers <= 1:
            results = (_render_rows(self.scene, self.camera, rows, self.offsets, self.max_depth)
                       for rows in chunks)
            self._collect(canvas, results, len(chunks))
        else:
            with ProcessPoolExecutor(max_workers=self.workers) as executor:
                futures = [
                    executor.submit(_render_rows, self.scene, self.camera, rows, self.offsets, self.max_depth)
                    for rows in chunks
                ]
                self._collect(canvas, (f.result() for f in futures), len(chunks))

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return canvas

    def _collect(self, canvas: Canvas, results, total: int) -> None:
        half_w = self.width // 2
        for done, rows in enumerate(results, start=1):
            for y, colors in rows:
                for i, color in enumerate(colors):
                    canvas.put_pixel(i - half_w, y, color)
            logger.debug("Finished chunk %d/%d", done, total)
