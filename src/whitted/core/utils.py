# core/utils.py
import math
from whitted.core.vector import Vector3

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2.0 * v.dot(n))

def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))

def random_in_unit_disk(rng, radius: float = 1.0) -> Vector3:
    """
    Uniform point on a disk of the given radius in the z=0 plane.
    Uses r = R*sqrt(U), theta = 2*pi*U' so no samples are rejected.
    """
    theta = 2.0 * math.pi * rng.random()
    r = radius * math.sqrt(rng.random())
    return Vector3(r * math.cos(theta), r * math.sin(theta), 0.0)
