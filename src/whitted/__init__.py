"""Recursive (Whitted-style) CPU ray tracer.

Subpackages:
    core: vectors, quaternions, transforms, rays and bounding boxes
    geometry: spheres, planes, triangles, meshes and the OBJ loader
    materials: Phong materials and presets
    camera: pinhole / thin-lens camera
    renderer: shading, recursive integrator, sampler, image output
    scene: scene container, lights and animations
"""

__version__ = "0.1.0"
