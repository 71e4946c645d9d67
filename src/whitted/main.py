# main.py
import math
from whitted.core.vector import Vector3
from whitted.core.quaternion import Quaternion
from whitted.core.transform import Transform
from whitted.camera.camera import Camera
from whitted.geometry.sphere import Sphere
from whitted.geometry.plane import Plane
from whitted.geometry.mesh import Mesh, parse_obj
from whitted.materials.presets import ColorPresets, MaterialPresets
from whitted.scene.animation import SimpleAnimation
from whitted.scene.scene import PointLight, Scene, SceneOptions

CUBE_OBJ = """\
# unit cube
v -0.5 -0.5 -0.5
v  0.5 -0.5 -0.5
v  0.5  0.5 -0.5
v -0.5  0.5 -0.5
v -0.5 -0.5  0.5
v  0.5 -0.5  0.5
v  0.5  0.5  0.5
v -0.5  0.5  0.5
f 1 4 3 2
f 5 6 7 8
f 1 2 6 5
f 3 4 8 7
f 2 3 7 6
f 1 5 8 4
"""

def create_cube(transform: Transform, material) -> Mesh:
    data = parse_obj(CUBE_OBJ.splitlines())
    return Mesh(transform.apply_points(data.positions), data.faces, material)

def create_world(options: SceneOptions = None) -> Scene:
    scene = Scene(options)
    scene.set_camera(Camera(position=Vector3(0, 1, -4), fov=math.radians(60)))
    scene.set_ambient_light_color(Vector3(1.0, 1.0, 1.0))

    print("\n=== Creating World ===")
    scene.add_entity(Plane(Vector3(0, -1, 0), Vector3(0, 1, 0), MaterialPresets.matte(ColorPresets.GRAY)))
    scene.add_entity(Plane(Vector3(0, 0, 8), Vector3(0, 0, -1), MaterialPresets.matte(ColorPresets.BLUE)))
    scene.add_entity(Sphere(Vector3(-1.5, 0, 3), 1.0, MaterialPresets.mirror()))
    scene.add_entity(Sphere(Vector3(1.5, 0, 2.5), 1.0, MaterialPresets.glass()))

    cube = create_cube(Transform(position=Vector3(0, -0.4, 5), scale=1.2),
                       MaterialPresets.plastic(ColorPresets.RED))
    scene.add_entity(cube)
    scene.add_animation(SimpleAnimation(
        cube, Vector3(0, 0.05, 0), Quaternion.from_axis_angle(Vector3(0, 1, 0), math.radians(10))))

    scene.add_point_light(PointLight(Vector3(-2, 4, -1), Vector3(0.8, 0.8, 0.8)))
    scene.add_point_light(PointLight(Vector3(3, 3, 0), Vector3(0.4, 0.4, 0.5)))
    print(f"Added {len(scene.entities)} entities, {len(scene.lights)} lights, "
          f"{len(scene.animations)} animations")
    return scene

def main(frames: int = 3, width: int = 320, height: int = 240):
    scene = create_world(SceneOptions(aa_multiplier=2, debug_mode=True))
    for i, image in enumerate(scene.render_frames(frames, width, height)):
        filename = f"frame_{i:03d}.png"
        image.save(filename, gamma=2.2)
        print(f"Saved {filename}")

if __name__ == "__main__":
    main()
