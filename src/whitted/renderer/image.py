# renderer/image.py
import numpy as np
from PIL import Image as PILImage
from whitted.core.vector import Vector3
from whitted.renderer.tone_mapping import TONE_MAPPERS

class Image:
    """
    Linear RGB output buffer. Pixel (0, 0) is the top-left corner and rows
    are stored top to bottom, matching the order the renderer writes them.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.data = np.zeros((height, width, 3), dtype=np.float64)

    def set_pixel(self, x: int, y: int, color: Vector3):
        self.data[y, x] = (color.x, color.y, color.z)

    def get_pixel(self, x: int, y: int) -> Vector3:
        return Vector3.from_sequence(self.data[y, x])

    def commit(self, buffer: np.ndarray):
        """Replace the whole frame at once."""
        if buffer.shape != self.data.shape:
            raise ValueError(f"Buffer shape {buffer.shape} does not match image {self.data.shape}")
        self.data[...] = buffer

    def to_uint8(self, tone_mapping: str = "clamp", **params) -> np.ndarray:
        try:
            mapper = TONE_MAPPERS[tone_mapping]
        except KeyError:
            raise ValueError(f"Unknown tone mapping {tone_mapping!r}; "
                             f"expected one of {sorted(TONE_MAPPERS)}") from None
        return mapper(self.data, **params)

    def save(self, filepath: str, tone_mapping: str = "clamp", **params):
        """Encode the image with Pillow; the format follows the file extension."""
        PILImage.fromarray(self.to_uint8(tone_mapping, **params)).save(filepath)
