# core/aabb.py
import numpy as np
from whitted.core.vector import Vector3

# Reciprocal used in place of 1/d when a direction component is ~0
SAFE_INV = 1e12
SAFE_DIR_EPS = 1e-12
T_EPS = 1e-6

def _safe_inv(d: float) -> float:
    return SAFE_INV if abs(d) < SAFE_DIR_EPS else 1.0 / d

class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    @classmethod
    def from_points(cls, points: np.ndarray) -> "AABB":
        """Tightest box around an (N, 3) array of points (N > 0)."""
        return cls(Vector3.from_sequence(points.min(axis=0)),
                   Vector3.from_sequence(points.max(axis=0)))

    def hit(self, ray) -> bool:
        # Slab method: intersect the per-axis [t0, t1] intervals.
        # Near-zero direction components use a large finite reciprocal
        # instead of dividing by zero.
        t_min = -float("inf")
        t_max = float("inf")
        for a in ("x", "y", "z"):
            inv_d = _safe_inv(getattr(ray.direction, a))
            o = getattr(ray.origin, a)
            t0 = (getattr(self.minimum, a) - o) * inv_d
            t1 = (getattr(self.maximum, a) - o) * inv_d
            if t0 > t1:
                t0, t1 = t1, t0
            t_min = max(t_min, t0)
            t_max = min(t_max, t1)
        return t_max > max(t_min, T_EPS)

    def contains(self, point: Vector3, tol: float = 0.0) -> bool:
        return (self.minimum.x - tol <= point.x <= self.maximum.x + tol and
                self.minimum.y - tol <= point.y <= self.maximum.y + tol and
                self.minimum.z - tol <= point.z <= self.maximum.z + tol)

    def center(self) -> Vector3:
        return (self.minimum + self.maximum) * 0.5

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
