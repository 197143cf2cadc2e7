# renderer/raytracer.py
import logging
import math
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Optional, Tuple

import numpy as np

from spheretracer.camera.camera import Camera
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Color
from spheretracer.geometry.hittable import Hittable
from spheretracer.renderer.pixel_buffer import PixelBuffer
from spheretracer.renderer.settings import RenderSettings
from spheretracer.renderer.tone_mapping import format_pixels, gamma_quantize

logger = logging.getLogger(__name__)

MAX_DEPTH = 50
T_MIN = 0.0
INFINITY = math.inf

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)
BLACK = Color(0.0, 0.0, 0.0)


def background(ray: Ray) -> Color:
    """Vertical white-to-blue sky gradient."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, world: Hittable, depth: int = MAX_DEPTH, rng=random) -> Color:
    """
    Follow `ray` through the world and return the light it carries back.

    Each bounce multiplies in the material's attenuation. Rays that escape
    pick up the sky gradient; rays that are absorbed or run out of depth
    contribute black.
    """
    # If we've exceeded the ray bounce limit, no more light is gathered.
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, INFINITY)
    if rec is None:
        return background(ray)

    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return BLACK
    scattered_ray, attenuation = scattered
    return attenuation * ray_color(scattered_ray, world, depth - 1, rng)


def sample_pixel(world: Hittable, camera: Camera, row: int, col: int,
                 width: int, height: int, samples: int, max_depth: int,
                 rng=random) -> Color:
    """
    Sum of `samples` jittered radiance samples for one pixel.

    Row 0 is the top of the image, so the vertical image-plane coordinate
    counts up from the bottom row.
    """
    line = height - 1 - row
    pixel_color = Color(0.0, 0.0, 0.0)
    for _ in range(samples):
        u = (col + rng.random()) / max(1, width - 1)
        v = (line + rng.random()) / max(1, height - 1)
        r = camera.get_ray(u, v, rng)
        pixel_color = pixel_color + ray_color(r, world, max_depth, rng)
    return pixel_color


class ChunkJob:
    """One contiguous pixel range plus everything needed to render it in another process."""
    __slots__ = ("index", "start", "end", "world", "camera", "width", "height",
                 "samples", "max_depth", "seed")

    def __init__(self, index: int, start: int, end: int, world: Hittable, camera: Camera,
                 width: int, height: int, samples: int, max_depth: int,
                 seed: np.random.SeedSequence):
        self.index = index
        self.start = start
        self.end = end
        self.world = world
        self.camera = camera
        self.width = width
        self.height = height
        self.samples = samples
        self.max_depth = max_depth
        self.seed = seed

    def render(self) -> List[str]:
        rng = np.random.default_rng(self.seed)
        accumulated = np.zeros((self.end - self.start, 3), dtype=np.float64)
        for offset, pixel_index in enumerate(range(self.start, self.end)):
            row, col = divmod(pixel_index, self.width)
            c = sample_pixel(self.world, self.camera, row, col, self.width, self.height,
                             self.samples, self.max_depth, rng)
            accumulated[offset] = (c.x, c.y, c.z)
        return format_pixels(gamma_quantize(accumulated, self.samples))


def render_chunk(job: ChunkJob) -> Tuple[int, int, List[str]]:
    """Worker entry point; module level so process pools can pickle it."""
    return job.index, job.start, job.render()


class Renderer:
    """
    Renders a world through a camera into a PixelBuffer.

    The image is cut into `chunk_count` row bands. Each band is rendered by a
    separate job with its own random stream and written back into its own
    slice of the buffer, so no two jobs ever touch the same pixel.
    """
    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings or RenderSettings()
        self.width = self.settings.image_width
        self.height = self.settings.image_height
        self.last_render_seconds = 0.0

    def make_jobs(self, world: Hittable, camera: Camera, buffer: PixelBuffer) -> List[ChunkJob]:
        ranges = buffer.chunk_ranges(self.settings.chunk_count)
        seeds = np.random.SeedSequence(self.settings.seed).spawn(len(ranges))
        return [
            ChunkJob(index, start, end, world, camera, self.width, self.height,
                     self.settings.samples_per_pixel, self.settings.max_depth, seed)
            for index, ((start, end), seed) in enumerate(zip(ranges, seeds))
        ]

    def render(self, world: Hittable, camera: Camera,
               buffer: Optional[PixelBuffer] = None) -> PixelBuffer:
        if buffer is None:
            buffer = PixelBuffer(self.width, self.height)
        elif (buffer.width, buffer.height) != (self.width, self.height):
            raise ValueError(
                f"Buffer is {buffer.width}x{buffer.height}, settings need {self.width}x{self.height}"
            )

        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d chunks on %d worker(s)",
                    self.width, self.height, self.settings.samples_per_pixel,
                    self.settings.max_depth, self.settings.chunk_count, self.settings.workers)

        start_time = time.perf_counter()
        with buffer.acquire():
            jobs = self.make_jobs(world, camera, buffer)
            if self.settings.workers <= 1 or len(jobs) == 1:
                self._render_serial(jobs, buffer)
            else:
                self._render_parallel(jobs, buffer)
        self.last_render_seconds = time.perf_counter() - start_time
        logger.info("Render took %.2fs", self.last_render_seconds)
        return buffer

    def _render_serial(self, jobs: List[ChunkJob], buffer: PixelBuffer):
        for job in jobs:
            index, start, pixels = render_chunk(job)
            buffer.write(start, pixels)
            self._log_chunk(index, start, len(pixels), index + 1, len(jobs))

    def _render_parallel(self, jobs: List[ChunkJob], buffer: PixelBuffer):
        with ProcessPoolExecutor(max_workers=self.settings.workers) as executor:
            futures = {executor.submit(render_chunk, job): job for job in jobs}
            done = 0
            for future in as_completed(futures):
                job = futures[future]
                try:
                    index, start, pixels = future.result()
                except Exception:
                    logger.error("Chunk %d [%d, %d) failed; aborting render",
                                 job.index, job.start, job.end)
                    executor.shutdown(wait=False, cancel_futures=True)
                    raise
                buffer.write(start, pixels)
                done += 1
                self._log_chunk(index, start, len(pixels), done, len(jobs))

    def _log_chunk(self, index: int, start: int, count: int, done: int, total: int):
        logger.debug("Chunk %d: pixels [%d, %d)", index, start, start + count)
        logger.info("Chunks finished: %d/%d", done, total)
