from whitted.core.vector import Vector3
from whitted.core.quaternion import Quaternion

class Animation:
    """Base class for per-frame scene changes."""
    def apply(self):
        raise NotImplementedError("apply() must be implemented by subclasses.")

class SimpleAnimation(Animation):
    """
    Constant rigid motion of one mesh: every frame the mesh turns by
    `rotation_per_frame` about its own center and moves by
    `translation_per_frame`.
    """
    def __init__(self, entity, translation_per_frame: Vector3, rotation_per_frame: Quaternion):
        if not hasattr(entity, "apply_rigid_delta"):
            raise TypeError(f"{type(entity).__name__} cannot be animated; expected a Mesh")
        self.entity = entity
        self.translation_per_frame = translation_per_frame
        self.rotation_per_frame = rotation_per_frame

    def apply(self):
        self.entity.apply_rigid_delta(self.translation_per_frame, self.rotation_per_frame)
