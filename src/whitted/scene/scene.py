from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from whitted.core.vector import Vector3
from whitted.core.ray import Ray
from whitted.camera.camera import Camera
from whitted.geometry.hittable import Hittable, RayHit
from whitted.renderer.image import Image
from whitted.renderer.integrator import closest_hit
from whitted.renderer.raytracer import Renderer
from whitted.scene.animation import Animation


@dataclass
class SceneOptions:
    """Render settings handed over by the scene description.

    Attributes:
        aa_multiplier: Samples per pixel axis (aa x aa per pixel). Values
            below 1 are treated as 1.
        ambient_lighting_enabled: Whether the ambient term is added.
        focal_length: Distance of the focus plane along the view axis.
        aperture_radius: Lens radius; 0 gives a pinhole camera.
        seed: Base seed for the per-row random streams.
        workers: Number of processes used to trace rows.
        debug_mode: Print a summary for every rendered frame.
    """
    aa_multiplier: int = 1
    ambient_lighting_enabled: bool = True
    focal_length: float = 1.0
    aperture_radius: float = 0.0
    seed: int = 1337
    workers: int = 1
    debug_mode: bool = False


class PointLight:
    """Zero-size emitter; only hard shadows are possible."""
    def __init__(self, position: Vector3, color: Vector3):
        self.position = position
        self.color = color

    def __repr__(self) -> str:
        return f"PointLight(position={self.position}, color={self.color})"


class Scene:
    """
    Entities, lights, camera and animations for one render. Entities are
    read-only while tracing; meshes change only through animations, which
    run before any pixel of a frame is traced.
    """
    def __init__(self, options: Optional[SceneOptions] = None):
        self.options = options if options is not None else SceneOptions()
        self.camera = Camera()
        self.ambient_light_color = Vector3(0.0, 0.0, 0.0)
        self.entities: List[Hittable] = []
        self.lights: List[PointLight] = []
        self.animations: List[Animation] = []

    def set_camera(self, camera: Camera):
        self.camera = camera

    def set_ambient_light_color(self, color: Vector3):
        self.ambient_light_color = color

    def add_entity(self, entity: Hittable):
        if getattr(entity, "material", None) is None:
            raise ValueError(f"{entity!r} has no material")
        self.entities.append(entity)

    def add_point_light(self, light: PointLight):
        self.lights.append(light)

    def add_animation(self, animation: Animation):
        self.animations.append(animation)

    def apply_animations(self):
        for animation in self.animations:
            animation.apply()

    def intersect(self, ray: Ray) -> Tuple[Optional[Hittable], Optional[RayHit]]:
        return closest_hit(self.entities, ray)

    def render(self, image: Image, time: float = 0.0):
        """Advance animations by one frame, then render into `image`."""
        self.apply_animations()
        Renderer(self.options).render(self, image)

    def render_frames(self, count: int, width: int, height: int) -> Iterator[Image]:
        for frame in range(count):
            image = Image(width, height)
            self.render(image, time=float(frame))
            yield image
