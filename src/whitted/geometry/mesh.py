from typing import Iterable, List, NamedTuple, Optional, Tuple
import os
import numpy as np
from whitted.core.vector import Vector3
from whitted.core.quaternion import Quaternion
from whitted.core.transform import Transform
from whitted.core.ray import Ray
from whitted.core.aabb import AABB
from whitted.geometry.hittable import Hittable, RayHit
from whitted.geometry.triangle import Triangle

MESH_T_EPS = 1e-6

class Face(NamedTuple):
    """Three 0-based vertex indices plus optional normal indices (None when absent)."""
    v0: int
    v1: int
    v2: int
    n0: Optional[int] = None
    n1: Optional[int] = None
    n2: Optional[int] = None

class BoundingSphere(NamedTuple):
    center: Vector3
    radius: float

class Mesh(Hittable):
    """Represents a 3D mesh composed of triangles in world space.

    The vertex array is the source of truth. Triangles, the AABB and the
    bounding sphere are derived from it and are always rebuilt together.
    """
    def __init__(self, vertices, faces: Iterable[Face], material,
                 normals=None):
        if material is None:
            raise ValueError("Mesh requires a material")
        self.material = material
        self.vertices = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
        if normals is None:
            self.normals = np.zeros((0, 3), dtype=np.float64)
        else:
            self.normals = np.asarray(normals, dtype=np.float64).reshape(-1, 3)
        self.faces: List[Face] = list(faces)
        self._validate_faces()
        self.triangles: List[Triangle] = []
        self.aabb: Optional[AABB] = None
        self.bounding_sphere: Optional[BoundingSphere] = None
        self.rebuild()

    def _validate_faces(self):
        nv = len(self.vertices)
        nn = len(self.normals)
        for face in self.faces:
            for idx in (face.v0, face.v1, face.v2):
                if not 0 <= idx < nv:
                    raise ValueError(f"Face {face} references missing vertex {idx}")
            for idx in (face.n0, face.n1, face.n2):
                if idx is not None and not 0 <= idx < nn:
                    raise ValueError(f"Face {face} references missing normal {idx}")

    def rebuild(self):
        """Recompute triangles, AABB and bounding sphere from the vertices."""
        material = self.material
        points = [Vector3.from_sequence(row) for row in self.vertices]
        self.triangles = [
            Triangle(points[f.v0], points[f.v1], points[f.v2], material)
            for f in self.faces
        ]

        if len(self.vertices) == 0:
            self.aabb = None
            self.bounding_sphere = None
            return

        self.aabb = AABB.from_points(self.vertices)
        center = self.aabb.center()
        offsets = self.vertices - np.array(center.to_tuple())
        radius = float(np.sqrt((offsets * offsets).sum(axis=1)).max())
        self.bounding_sphere = BoundingSphere(center, radius)

    def apply_rigid_delta(self, translation: Vector3, rotation: Quaternion):
        """
        Rotate every vertex about the current bounding-sphere center, then
        translate, and rebuild all derived geometry.
        """
        if len(self.vertices) == 0:
            return
        pivot = np.array(self.bounding_sphere.center.to_tuple())
        matrix = rotation.to_matrix()
        self.vertices = (self.vertices - pivot) @ matrix.T + pivot + np.array(translation.to_tuple())
        if len(self.normals):
            self.normals = self.normals @ matrix.T
        self.rebuild()

    def intersect(self, ray: Ray) -> Optional[RayHit]:
        # Fast rejection: no triangle is tested if the box is missed
        if self.aabb is None or not self.aabb.hit(ray):
            return None

        closest_hit = None
        best_t = float("inf")
        for triangle in self.triangles:
            h = triangle.intersect(ray)
            if h is None:
                continue
            t = h.distance_from(ray.origin)
            if MESH_T_EPS < t < best_t:
                best_t = t
                closest_hit = h
        return closest_hit

    def __repr__(self) -> str:
        return f"Mesh({len(self.vertices)} vertices, {len(self.triangles)} triangles)"


class ObjData(NamedTuple):
    positions: np.ndarray
    normals: np.ndarray
    faces: List[Face]
    skipped: int

def _resolve_index(token: str, count: int) -> int:
    """OBJ indices are 1-based; negative indices count back from the end."""
    i = int(token)
    if i < 0:
        return count + i
    return i - 1

def _parse_face_vertex(token: str, n_vertices: int, n_normals: int) -> Tuple[int, Optional[int]]:
    # v, v/vt, v//vn, v/vt/vn
    parts = token.split('/')
    v_idx = _resolve_index(parts[0], n_vertices)
    n_idx = None
    if len(parts) > 2 and parts[2]:
        n_idx = _resolve_index(parts[2], n_normals)
    return v_idx, n_idx

def parse_obj(lines: Iterable[str]) -> ObjData:
    """
    Parse OBJ text into local-space positions, normals and triangular faces.

    Faces with fewer than three vertex references are skipped; polygons are
    fan-triangulated. Unknown record kinds are ignored.
    """
    positions: List[Tuple[float, float, float]] = []
    normals: List[Tuple[float, float, float]] = []
    faces: List[Face] = []
    skipped = 0

    for line_num, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line or line.startswith('#'):
            continue

        values = line.split()
        kind = values[0]
        try:
            if kind == 'v':
                z = float(values[3]) if len(values) > 3 else 0.0
                positions.append((float(values[1]), float(values[2]), z))
            elif kind == 'vn':
                n = np.array([float(values[1]), float(values[2]), float(values[3])])
                length = np.linalg.norm(n)
                if length > 0:
                    n = n / length
                normals.append(tuple(n))
            elif kind == 'f':
                if len(values) < 4:
                    skipped += 1
                    continue
                refs = [_parse_face_vertex(tok, len(positions), len(normals)) for tok in values[1:]]
                v_first, n_first = refs[0]
                for i in range(1, len(refs) - 1):
                    v_b, n_b = refs[i]
                    v_c, n_c = refs[i + 1]
                    faces.append(Face(v_first, v_b, v_c, n_first, n_b, n_c))
        except (ValueError, IndexError) as e:
            raise ValueError(f"Malformed OBJ record on line {line_num}: {line!r} ({e})") from e

    return ObjData(
        positions=np.array(positions, dtype=np.float64).reshape(-1, 3),
        normals=np.array(normals, dtype=np.float64).reshape(-1, 3),
        faces=faces,
        skipped=skipped,
    )

def load_obj(filename: str, transform: Optional[Transform], material) -> Mesh:
    """Load an OBJ file, place it in world space with `transform`, and build a Mesh."""
    if material is None:
        raise ValueError("load_obj requires a material")
    if filename is None or not str(filename).strip():
        raise ValueError("OBJ path is empty")
    if not os.path.exists(filename):
        raise FileNotFoundError(f"OBJ file not found: {filename}")
    if transform is None:
        transform = Transform.identity()

    print(f"Opening file: {filename}")
    with open(filename, 'r') as f:
        data = parse_obj(f)

    vertices = transform.apply_points(data.positions)
    normals = data.normals @ transform.rotation.to_matrix().T if len(data.normals) else data.normals

    print(f"Loaded {len(vertices)} vertices, {len(normals)} normals, {len(data.faces)} triangles"
          f" ({data.skipped} malformed faces skipped)")
    return Mesh(vertices, data.faces, material, normals=normals)
