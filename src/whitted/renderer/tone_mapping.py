# renderer/tone_mapping.py
import numpy as np

def clamp_tone_mapping(linear: np.ndarray, gamma: float = 1.0) -> np.ndarray:
    """
    Clip a linear radiance image to [0, 1], apply gamma and quantize to 8 bits.
    """
    mapped = np.clip(linear, 0.0, 1.0)
    if gamma != 1.0:
        mapped = mapped ** (1.0 / gamma)
    return (mapped * 255.0 + 0.5).astype(np.uint8)

def reinhard_tone_mapping(linear: np.ndarray, exposure: float = 1.0,
                          white_point: float = 1.0, gamma: float = 2.2) -> np.ndarray:
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.maximum(linear, 0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    return (mapped * 255).clip(0, 255).astype(np.uint8)

TONE_MAPPERS = {
    "clamp": clamp_tone_mapping,
    "reinhard": reinhard_tone_mapping,
}
