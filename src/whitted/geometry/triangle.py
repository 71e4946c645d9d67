from typing import Optional
from whitted.core.vector import Vector3
from whitted.core.ray import Ray
from whitted.geometry.hittable import Hittable, RayHit

TRIANGLE_EPS = 1e-4

class Triangle(Hittable):
    """Represents a single triangle in 3D space.

    The normal is the flat face normal (v1-v0)x(v2-v0), so it follows the
    winding order. Per-vertex normals are never interpolated.
    """
    __slots__ = ("v0", "v1", "v2", "material", "_e1", "_e2", "_normal")

    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3, material=None):
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.material = material
        self._e1 = v1 - v0
        self._e2 = v2 - v0
        self._normal = self._e1.cross(self._e2).normalize()

    @property
    def normal(self) -> Vector3:
        return self._normal

    def intersect(self, ray: Ray) -> Optional[RayHit]:
        # Möller–Trumbore intersection algorithm
        e1 = self._e1
        e2 = self._e2
        pvec = ray.direction.cross(e2)
        det = e1.dot(pvec)

        # Ray is (nearly) parallel to the triangle
        if abs(det) < TRIANGLE_EPS:
            return None

        inv_det = 1.0 / det
        tvec = ray.origin - self.v0
        u = tvec.dot(pvec) * inv_det
        if u < 0.0 or u > 1.0:
            return None

        qvec = tvec.cross(e1)
        v = ray.direction.dot(qvec) * inv_det
        if v < 0.0 or u + v > 1.0:
            return None

        t = e2.dot(qvec) * inv_det
        if t <= TRIANGLE_EPS:
            return None

        return RayHit(ray.at(t), self._normal, ray.direction, self.material)

    def __repr__(self) -> str:
        return f"Triangle({self.v0}, {self.v1}, {self.v2})"
