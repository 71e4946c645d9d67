# materials/material.py
from typing import Optional
from whitted.core.vector import Vector3
from whitted.core.utils import clamp01

class Material:
    """
    Phong surface description shared by every primitive of an entity.

    Reflectivity (kr) and transmissivity (kt) are clamped to [0, 1]
    independently; their sum may exceed 1. Energy is balanced when shading,
    not here.
    """
    def __init__(self,
                 ambient_color: Optional[Vector3] = None,
                 diffuse_color: Optional[Vector3] = None,
                 specular_color: Optional[Vector3] = None,
                 shininess: float = 1.0,
                 reflectivity: float = 0.0,
                 transmissivity: float = 0.0,
                 refractive_index: float = 1.0):
        if refractive_index <= 0:
            raise ValueError(f"refractive_index must be positive, got {refractive_index}")
        self.ambient_color = ambient_color if ambient_color is not None else Vector3(0.0, 0.0, 0.0)
        self.diffuse_color = diffuse_color if diffuse_color is not None else Vector3(1.0, 1.0, 1.0)
        self.specular_color = specular_color if specular_color is not None else Vector3(0.0, 0.0, 0.0)
        self.shininess = shininess
        self.reflectivity = clamp01(reflectivity)
        self.transmissivity = clamp01(transmissivity)
        self.refractive_index = refractive_index

    def __repr__(self) -> str:
        return (f"Material(diffuse={self.diffuse_color}, kr={self.reflectivity}, "
                f"kt={self.transmissivity}, n={self.refractive_index})")
