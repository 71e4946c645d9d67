import math
from typing import Optional, Tuple
from whitted.core.vector import Vector3
from whitted.core.quaternion import Quaternion
from whitted.core.ray import Ray
from whitted.core.utils import random_in_unit_disk

MIN_FOCAL_LENGTH = 1e-6

class Camera:
    """
    Camera looking down its local +Z axis with +Y up. `rotation` takes
    camera-local directions to world space.
    """
    def __init__(self, position: Optional[Vector3] = None,
                 rotation: Optional[Quaternion] = None,
                 fov: float = math.pi / 3.0):
        self.position = position if position is not None else Vector3(0.0, 0.0, 0.0)
        self.rotation = rotation if rotation is not None else Quaternion.identity()
        self.fov = fov  # Vertical field of view in radians
        self.half_tan = math.tan(fov * 0.5)

    def image_plane_point(self, x: float, y: float, width: int, height: int) -> Tuple[float, float]:
        """Map a (sub-)pixel position to the z=1 image plane in camera space."""
        aspect = width / height
        ndc_x = (x / width) * 2.0 - 1.0
        ndc_y = 1.0 - (y / height) * 2.0
        return ndc_x * self.half_tan * aspect, ndc_y * self.half_tan

    def get_ray(self, x: float, y: float, width: int, height: int,
                rng=None, focal_length: float = 1.0, aperture_radius: float = 0.0) -> Ray:
        """
        Generates the world-space ray through the image position (x, y),
        given in pixels with fractional sub-pixel offsets already added.

        With a positive aperture the origin is sampled on the lens disk and
        the ray is aimed at the point's focus on the plane z=focal_length
        (thin-lens depth of field); otherwise it is a pinhole ray.
        """
        px, py = self.image_plane_point(x, y, width, height)

        if aperture_radius > 0.0:
            f = max(MIN_FOCAL_LENGTH, focal_length)
            focus_world = self.position + self.rotation.rotate(Vector3(px * f, py * f, f))
            lens_local = random_in_unit_disk(rng, aperture_radius)
            origin = self.position + self.rotation.rotate(lens_local)
            return Ray(origin, (focus_world - origin).normalize())

        direction_local = Vector3(px, py, 1.0).normalize()
        return Ray(self.position, self.rotation.rotate(direction_local).normalize())

    def __repr__(self) -> str:
        return f"Camera(position={self.position}, rotation={self.rotation}, fov={self.fov})"
