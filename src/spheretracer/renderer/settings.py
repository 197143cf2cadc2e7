# renderer/settings.py
import os
from typing import Optional

# Named quality levels: samples per pixel and maximum bounce depth.
QUALITY_LEVELS = {
    "interactive": {"samples": 1, "bounces": 2},
    "balanced": {"samples": 4, "bounces": 4},
    "high_quality": {"samples": 8, "bounces": 6},
    "final": {"samples": 100, "bounces": 50},
}

DEFAULT_CHUNK_COUNT = 10


class RenderSettings:
    """
    Everything the renderer needs besides the world and the camera.

    The image height is derived from the width and the aspect ratio. Values
    are validated on construction so a bad configuration fails before any
    worker starts.
    """
    def __init__(self, image_width: int = 400, aspect_ratio: float = 16.0 / 9.0,
                 samples_per_pixel: int = 100, max_depth: int = 50,
                 chunk_count: int = DEFAULT_CHUNK_COUNT, workers: Optional[int] = None,
                 seed: Optional[int] = None):
        if image_width < 1:
            raise ValueError(f"image_width must be positive, got {image_width}")
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        if chunk_count < 1:
            raise ValueError(f"chunk_count must be at least 1, got {chunk_count}")
        if workers is None:
            workers = os.cpu_count() or 1
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")

        self.image_width = image_width
        self.aspect_ratio = aspect_ratio
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.chunk_count = chunk_count
        self.workers = workers
        self.seed = seed

    @property
    def image_height(self) -> int:
        return max(1, int(self.image_width / self.aspect_ratio))

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        """Build settings from a named quality level; keyword overrides win."""
        try:
            quality = QUALITY_LEVELS[name]
        except KeyError:
            raise ValueError(
                f"Unknown quality level {name!r}; expected one of {sorted(QUALITY_LEVELS)}"
            ) from None
        params = {"samples_per_pixel": quality["samples"], "max_depth": quality["bounces"]}
        params.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**params)

    def __repr__(self) -> str:
        return (f"RenderSettings({self.image_width}x{self.image_height}, "
                f"samples={self.samples_per_pixel}, max_depth={self.max_depth}, "
                f"chunks={self.chunk_count}, workers={self.workers}, seed={self.seed})")
