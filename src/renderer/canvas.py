# renderer/canvas.py
import logging
import os
import numpy as np
from PIL import Image
from core.color import Color
from renderer.tone_mapping import to_u8

logger = logging.getLogger(__name__)

class Canvas:
    """
    A rectangular grid of RGB colors addressed in centered coordinates.

    ``x`` runs from ``-width // 2`` on the left to ``width // 2 - 1`` on the
    right and ``y`` from ``-height // 2`` at the bottom to ``height // 2 - 1``
    at the top. Pixels are stored top row first.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def in_bounds(self, x: int, y: int) -> bool:
        w2 = self.width // 2
        h2 = self.height // 2
        return -w2 <= x < w2 and -h2 <= y < h2

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        """Set a pixel; writes outside the canvas are ignored."""
        if not self.in_bounds(x, y):
            return
        row = self.height // 2 - 1 - y
        col = self.width // 2 + x
        self.pixels[row, col] = (color.r, color.g, color.b)

    def get_pixel(self, x: int, y: int) -> Color:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) is outside the {self.width}x{self.height} canvas")
        row = self.height // 2 - 1 - y
        col = self.width // 2 + x
        r, g, b = self.pixels[row, col]
        return Color(float(r), float(g), float(b))

    def to_u8(self) -> np.ndarray:
        return to_u8(self.pixels)

    def to_ppm_bytes(self) -> bytes:
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        return header + self.to_u8().tobytes()

    def save(self, path: str) -> None:
        """
        Write the canvas to ``path``. ``.ppm`` files are written as binary PPM;
        any other extension is handed to Pillow.

        Raises:
            OSError: If the file cannot be created or written.
            ValueError: If Pillow does not recognise the extension.
        """
        ext = os.path.splitext(path)[1].lower()
        if ext == ".ppm":
            with open(path, "wb") as f:
                f.write(self.to_ppm_bytes())
        else:
            Image.fromarray(self.to_u8()).save(path)
        logger.info("Saved %dx%d image to %s", self.width, self.height, path)
