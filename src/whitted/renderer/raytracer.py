# renderer/raytracer.py
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Tuple
import numpy as np

from whitted.core.vector import Vector3
from whitted.renderer.integrator import trace
from whitted.renderer.sampler import row_generator, stratified_offsets
from whitted.renderer.image import Image

# Scene shared with pool workers, set once per process by _init_worker
_worker_scene = None

def _init_worker(scene):
    global _worker_scene
    _worker_scene = scene

def _render_rows_in_worker(rows: List[int], width: int, height: int) -> List[Tuple[int, np.ndarray]]:
    renderer = Renderer(_worker_scene.options)
    return [(row, renderer.render_row(_worker_scene, row, width, height)) for row in rows]

class Renderer:
    """
    Drives the pixel loop: for every pixel, aa x aa primary rays are traced
    and averaged. Each row draws from its own generator, so the image does
    not depend on how rows are distributed over workers.
    """
    def __init__(self, options):
        self.options = options
        self.aa = max(1, int(options.aa_multiplier))
        self.workers = max(1, int(options.workers))
        self.debug_mode = options.debug_mode

    def pixel_color(self, scene, x: int, y: int, width: int, height: int, rng) -> Vector3:
        camera = scene.camera
        color = Vector3(0.0, 0.0, 0.0)
        for u, v in stratified_offsets(self.aa, rng):
            ray = camera.get_ray(x + u, y + v, width, height, rng,
                                 focal_length=self.options.focal_length,
                                 aperture_radius=self.options.aperture_radius)
            color = color + trace(scene, ray, 0)
        return color * (1.0 / (self.aa * self.aa))

    def render_row(self, scene, row: int, width: int, height: int) -> np.ndarray:
        rng = row_generator(self.options.seed, row)
        out = np.empty((width, 3), dtype=np.float64)
        for x in range(width):
            c = self.pixel_color(scene, x, row, width, height, rng)
            out[x] = (c.x, c.y, c.z)
        return out

    def render(self, scene, image: Image):
        """
        Render every pixel of `image`. The frame is built in a scratch buffer
        and committed only once all rows are done; an exception leaves the
        image untouched.
        """
        width, height = image.width, image.height
        start = time.perf_counter()
        buffer = np.zeros((height, width, 3), dtype=np.float64)

        if self.workers == 1:
            for y in range(height):
                buffer[y] = self.render_row(scene, y, width, height)
        else:
            chunks = [list(range(y, height, self.workers)) for y in range(self.workers)]
            with ProcessPoolExecutor(max_workers=self.workers,
                                     initializer=_init_worker, initargs=(scene,)) as pool:
                futures = [pool.submit(_render_rows_in_worker, rows, width, height)
                           for rows in chunks if rows]
                for future in futures:
                    for row, values in future.result():
                        buffer[row] = values

        image.commit(buffer)

        if self.debug_mode:
            elapsed = time.perf_counter() - start
            print(f"Rendered {width}x{height} ({self.aa * self.aa} spp, "
                  f"{len(scene.entities)} entities, {len(scene.lights)} lights) "
                  f"in {elapsed:.2f}s with {self.workers} worker(s)")
