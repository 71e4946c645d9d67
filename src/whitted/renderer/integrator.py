"""Whitted-style recursive integrator.

Local Phong illumination with hard shadows, plus mirror reflection and
refraction. Transmissive surfaces split energy between the reflected and
refracted rays with Schlick's Fresnel approximation and total internal
reflection. The local term is weighted by whatever energy is left after
reflection and transmission, so no bounce adds energy.
"""
import math
from typing import NamedTuple, Optional, Sequence, Tuple

from whitted.core.vector import Vector3
from whitted.core.ray import Ray
from whitted.core.utils import reflect, clamp01
from whitted.geometry.hittable import Hittable, RayHit

MAX_DEPTH = 5
RAY_EPS = 1e-4
HIT_EPS = 1e-6
LIGHT_EPS = 1e-8
KT_SCALE = 1.5

BACKGROUND_COLOR = Vector3(0.0, 0.0, 0.0)


def closest_hit(entities: Sequence[Hittable], ray: Ray) -> Tuple[Optional[Hittable], Optional[RayHit]]:
    """Nearest intersection over all entities, measured as |hit - origin| > HIT_EPS."""
    closest_t = math.inf
    hit_entity = None
    best_hit = None
    for entity in entities:
        h = entity.intersect(ray)
        if h is None:
            continue
        t = h.distance_from(ray.origin)
        if HIT_EPS < t < closest_t:
            closest_t = t
            hit_entity = entity
            best_hit = h
    return hit_entity, best_hit


def is_occluded(entities: Sequence[Hittable], shadow_ray: Ray, distance: float,
                exclude: Optional[Hittable] = None) -> bool:
    """True if anything other than `exclude` lies strictly between the ray origin and `distance`."""
    for entity in entities:
        if entity is exclude:
            continue
        h = entity.intersect(shadow_ray)
        if h is None:
            continue
        t = h.distance_from(shadow_ray.origin)
        if RAY_EPS < t < distance - RAY_EPS:
            return True
    return False


def shade_local(scene, hit: RayHit, entity: Hittable, view_ray: Ray) -> Vector3:
    """Ambient + per-light Phong diffuse/specular, with one hard-shadow ray per light."""
    p = hit.position
    n = hit.normal.normalize()
    m = entity.material

    result = Vector3(0.0, 0.0, 0.0)
    if scene.options.ambient_lighting_enabled:
        result = result + m.ambient_color * scene.ambient_light_color

    v = (-view_ray.direction).normalize()

    for light in scene.lights:
        to_light = light.position - p
        dist = to_light.length()
        if dist <= LIGHT_EPS:
            continue
        l = to_light / dist

        # A light behind the surface neither lights it nor needs a shadow ray
        ndotl = n.dot(l)
        if ndotl <= 0.0:
            continue

        shadow_ray = Ray(p + n * RAY_EPS, l)
        if is_occluded(scene.entities, shadow_ray, dist, exclude=entity):
            continue

        diffuse = m.diffuse_color * light.color * max(0.0, ndotl)
        r = reflect(-l, n)
        rdotv = max(0.0, r.dot(v))
        specular = m.specular_color * light.color * math.pow(rdotv, m.shininess)
        result = result + diffuse + specular

    return result


class FresnelSplit(NamedTuple):
    kr: float           # weight of the reflected ray
    kt: float           # weight of the refracted ray
    tir: bool           # total internal reflection
    normal: Vector3     # normal facing the incident medium
    cosi: float
    eta: float          # n1 / n2
    k: float            # 1 - eta^2 (1 - cosi^2)


def fresnel_split(kr: float, kt: float, refractive_index: float,
                  direction: Vector3, normal: Vector3) -> FresnelSplit:
    """
    Split reflected/transmitted weights at a dielectric interface.

    `direction` is the unit incident direction and `normal` the unit
    geometric normal. If the ray is leaving the medium the normal is flipped
    and the indices swapped.
    """
    n1, n2 = 1.0, refractive_index
    cosi = -direction.dot(normal)
    if cosi < 0.0:
        normal = -normal
        cosi = -direction.dot(normal)
        n1, n2 = n2, 1.0
    eta = n1 / n2

    r0 = ((n1 - n2) / (n1 + n2)) ** 2
    fr = r0 + (1.0 - r0) * math.pow(1.0 - cosi, 5.0)

    k = 1.0 - eta * eta * (1.0 - cosi * cosi)
    tir = k <= 0.0

    kr_use = min(1.0, kr + (1.0 - kr) * (1.0 if tir else fr))
    kt_use = 0.0 if tir else kt * (1.0 - fr)
    return FresnelSplit(kr_use, kt_use, tir, normal, cosi, eta, k)


def refract_direction(direction: Vector3, split: FresnelSplit) -> Vector3:
    """Snell's law in vector form: T = eta*D + (eta*cosi - sqrt(k))*N."""
    eta = split.eta
    return (direction * eta + split.normal * (eta * split.cosi - math.sqrt(split.k))).normalize()


def trace(scene, ray: Ray, depth: int = 0) -> Vector3:
    """Color seen along `ray`; recursion stops once depth reaches MAX_DEPTH."""
    hit_entity, hit = closest_hit(scene.entities, ray)
    if hit_entity is None:
        return BACKGROUND_COLOR

    local = shade_local(scene, hit, hit_entity, ray)

    material = hit_entity.material
    kr = material.reflectivity
    kt = clamp01(material.transmissivity * KT_SCALE)
    remain = max(0.0, 1.0 - min(1.0, kr + kt))
    local = local * remain

    can_recurse = depth < MAX_DEPTH
    geo_normal = hit.normal.normalize()
    d = ray.direction.normalize()

    if kt > 0.0:
        entering = ray.direction.dot(hit.normal) < 0.0
        split = fresnel_split(kr, kt, material.refractive_index, d, geo_normal)

        if split.kr > 0.0 and can_recurse:
            r = reflect(d, split.normal).normalize()
            refl_ray = Ray(hit.position + split.normal * RAY_EPS, r)
            local = local + trace(scene, refl_ray, depth + 1) * split.kr

        if split.kt > 0.0 and can_recurse and not split.tir:
            t_dir = refract_direction(d, split)
            # The refracted ray crosses the surface: bias into the far side
            bias = (-geo_normal if entering else geo_normal) * RAY_EPS
            refr_ray = Ray(hit.position + bias, t_dir)
            local = local + trace(scene, refr_ray, depth + 1) * split.kt
    elif kr > 0.0 and can_recurse:
        r = reflect(d, geo_normal).normalize()
        refl_ray = Ray(hit.position + geo_normal * RAY_EPS, r)
        local = local + trace(scene, refl_ray, depth + 1) * kr

    return local
