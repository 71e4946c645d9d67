# core/quaternion.py
import math
import numpy as np
from whitted.core.vector import Vector3

class Quaternion:
    """
    Unit quaternion used for rigid rotations (camera orientation and
    per-frame mesh animation). Components are stored as (w, x, y, z).
    """
    __slots__ = ("w", "x", "y", "z")

    def __init__(self, w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.w = w
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> "Quaternion":
        """Rotation of `angle` radians about `axis` (right-handed)."""
        a = axis.normalize()
        s = math.sin(angle / 2.0)
        return cls(math.cos(angle / 2.0), a.x * s, a.y * s, a.z * s)

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        # Hamilton product: (self * other) applies `other` first, then `self`.
        return Quaternion(
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    def conjugate(self) -> "Quaternion":
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def norm(self) -> float:
        return math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Quaternion":
        n = self.norm()
        if n == 0:
            return Quaternion.identity()
        return Quaternion(self.w / n, self.x / n, self.y / n, self.z / n)

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate a vector: v' = q v q*, expanded for a unit quaternion."""
        u = Vector3(self.x, self.y, self.z)
        t = u.cross(v) * 2.0
        return v + t * self.w + u.cross(t)

    def to_matrix(self) -> np.ndarray:
        """3x3 rotation matrix, for rotating many points at once with numpy."""
        w, x, y, z = self.w, self.x, self.y, self.z
        return np.array([
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ], dtype=np.float64)

    def __repr__(self) -> str:
        return f"Quaternion({self.w}, {self.x}, {self.y}, {self.z})"
