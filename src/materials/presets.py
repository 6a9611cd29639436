# materials/presets.py
from core.color import Color
from materials.material import Material

class MaterialPresets:
    """Predefined materials covering the usual diffuse, shiny and mirror looks."""

    @staticmethod
    def matte(color: Color) -> Material:
        return Material(color)

    @staticmethod
    def shiny(color: Color) -> Material:
        return Material(color, specular=500, reflective=0.2)

    @staticmethod
    def polished(color: Color) -> Material:
        return Material(color, specular=1000, reflective=0.5)

    @staticmethod
    def mirror() -> Material:
        return Material(Color(1.0, 1.0, 1.0), specular=1000, reflective=1.0)

class ColorPresets:
    """Common base colors."""
    RED = Color(1.0, 0.0, 0.0)
    GREEN = Color(0.0, 1.0, 0.0)
    BLUE = Color(0.0, 0.0, 1.0)
    YELLOW = Color(1.0, 1.0, 0.0)
    WHITE = Color(1.0, 1.0, 1.0)
    BLACK = Color(0.0, 0.0, 0.0)
