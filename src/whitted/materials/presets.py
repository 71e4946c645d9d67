# materials/presets.py
from whitted.core.vector import Vector3
from whitted.materials.material import Material

class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Vector3(0.9, 0.2, 0.2)
    ORANGE = Vector3(0.9, 0.6, 0.1)
    YELLOW = Vector3(0.9, 0.9, 0.1)

    # Cool colors
    BLUE = Vector3(0.2, 0.3, 0.9)
    GREEN = Vector3(0.2, 0.8, 0.2)
    PURPLE = Vector3(0.6, 0.2, 0.8)

    # Neutral colors
    WHITE = Vector3(0.9, 0.9, 0.9)
    GRAY = Vector3(0.5, 0.5, 0.5)
    BLACK = Vector3(0.1, 0.1, 0.1)

class MaterialPresets:
    """Predefined Phong materials with realistic refractive indices."""

    @staticmethod
    def matte(color: Vector3) -> Material:
        """Create a matte material with the given color."""
        return Material(ambient_color=color * 0.1, diffuse_color=color)

    @staticmethod
    def plastic(color: Vector3, shininess: float = 32.0) -> Material:
        return Material(ambient_color=color * 0.1, diffuse_color=color,
                        specular_color=Vector3(0.5, 0.5, 0.5), shininess=shininess)

    @staticmethod
    def mirror() -> Material:
        return Material(diffuse_color=Vector3(0.0, 0.0, 0.0), reflectivity=1.0)

    @staticmethod
    def glass() -> Material:
        return Material(diffuse_color=Vector3(0.0, 0.0, 0.0),
                        specular_color=Vector3(1.0, 1.0, 1.0), shininess=128.0,
                        transmissivity=1.0, refractive_index=1.52)  # Common glass

    @staticmethod
    def water() -> Material:
        return Material(diffuse_color=Vector3(0.0, 0.0, 0.0),
                        transmissivity=1.0, refractive_index=1.33)

    @staticmethod
    def diamond() -> Material:
        return Material(diffuse_color=Vector3(0.0, 0.0, 0.0),
                        transmissivity=1.0, refractive_index=2.42)
