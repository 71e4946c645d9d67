import math
from typing import Optional
from whitted.core.vector import Vector3
from whitted.core.ray import Ray
from whitted.geometry.hittable import Hittable, RayHit

SPHERE_EPS = 1e-4

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def intersect(self, ray: Ray) -> Optional[RayHit]:
        # |O + tD - c|^2 = r^2  ->  a t^2 + b t + c = 0
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0 or a == 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        inv_2a = 0.5 / a
        t0 = (-b - sqrt_disc) * inv_2a
        t1 = (-b + sqrt_disc) * inv_2a

        # Nearest root in front of the origin; the far root when starting inside
        if t0 > SPHERE_EPS:
            t = t0
        elif t1 > SPHERE_EPS:
            t = t1
        else:
            return None

        p = ray.at(t)
        normal = (p - self.center).normalize()
        return RayHit(p, normal, ray.direction, self.material)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"
