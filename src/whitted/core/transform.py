# core/transform.py
from typing import Optional, Union
import numpy as np
from whitted.core.vector import Vector3
from whitted.core.quaternion import Quaternion

class Transform:
    """
    Position + rotation + scale. Points are scaled, then rotated, then
    translated, the same order the OBJ loader uses to place a model.
    """
    def __init__(self, position: Optional[Vector3] = None,
                 rotation: Optional[Quaternion] = None,
                 scale: Union[float, Vector3] = 1.0):
        self.position = position if position is not None else Vector3(0.0, 0.0, 0.0)
        self.rotation = rotation if rotation is not None else Quaternion.identity()
        if isinstance(scale, Vector3):
            self.scale = scale
        else:
            self.scale = Vector3(scale, scale, scale)

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    def apply(self, point: Vector3) -> Vector3:
        return self.rotation.rotate(point * self.scale) + self.position

    def apply_points(self, points: np.ndarray) -> np.ndarray:
        """Batch version of apply() for an (N, 3) array."""
        if len(points) == 0:
            return points.reshape(0, 3).astype(np.float64)
        scaled = points * np.array(self.scale.to_tuple())
        rotated = scaled @ self.rotation.to_matrix().T
        return rotated + np.array(self.position.to_tuple())

    def __repr__(self) -> str:
        return f"Transform(position={self.position}, rotation={self.rotation}, scale={self.scale})"
