# geometry/hittable.py
from typing import Optional
from whitted.core.vector import Vector3
from whitted.core.ray import Ray

class RayHit:
    """
    Records details of a ray-object intersection.

    Produced fresh for every query and never mutated afterwards. The normal is
    the primitive's own outward normal; it is not flipped to face the ray.
    """
    __slots__ = ("position", "normal", "incident", "material")

    def __init__(self, position: Vector3, normal: Vector3, incident: Vector3, material):
        self.position = position    # Intersection point (world space)
        self.normal = normal        # Unit surface normal
        self.incident = incident    # Direction of the ray that produced the hit
        self.material = material

    def distance_from(self, point: Vector3) -> float:
        return (self.position - point).length()

    def __repr__(self) -> str:
        return f"RayHit(position={self.position}, normal={self.normal})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray. Each scene entity
    owns its geometry and exactly one material.
    """
    material = None

    def intersect(self, ray: Ray) -> Optional[RayHit]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")
