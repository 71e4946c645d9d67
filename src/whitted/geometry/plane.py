from typing import Optional
from whitted.core.vector import Vector3
from whitted.core.ray import Ray
from whitted.geometry.hittable import Hittable, RayHit

PLANE_EPS = 1e-6

class Plane(Hittable):
    """
    Infinite plane through `center` facing `normal`. The hit normal is always
    the plane's own normal, whichever side the ray arrives from.
    """
    def __init__(self, center: Vector3, normal: Vector3, material):
        self.center = center
        self.normal = normal.normalize()
        self.material = material

    def intersect(self, ray: Ray) -> Optional[RayHit]:
        denom = ray.direction.dot(self.normal)
        if abs(denom) < PLANE_EPS:
            return None  # parallel

        t = (self.center - ray.origin).dot(self.normal) / denom
        if t <= PLANE_EPS:
            return None

        return RayHit(ray.at(t), self.normal, ray.direction, self.material)

    def __repr__(self) -> str:
        return f"Plane(center={self.center}, normal={self.normal})"
