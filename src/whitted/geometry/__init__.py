from .hittable import Hittable, RayHit
from .sphere import Sphere
from .plane import Plane
from .triangle import Triangle
from .mesh import Face, Mesh, load_obj, parse_obj

__all__ = [
    "Hittable",
    "RayHit",
    "Sphere",
    "Plane",
    "Triangle",
    "Face",
    "Mesh",
    "load_obj",
    "parse_obj",
]
