from .animation import Animation, SimpleAnimation
from .scene import PointLight, Scene, SceneOptions

__all__ = ["Animation", "SimpleAnimation", "PointLight", "Scene", "SceneOptions"]
