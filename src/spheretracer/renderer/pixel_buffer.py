# renderer/pixel_buffer.py
import logging
import sys
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import List, Sequence, TextIO, Tuple, Union

logger = logging.getLogger(__name__)


class PixelBuffer:
    """
    Pre-sized, row-major buffer of formatted "R G B" pixel strings.

    Pixel (row, col) lives at index row * width + col, with row 0 at the top
    of the image. During a render the buffer is split into disjoint index
    ranges (see chunk_ranges), each filled by exactly one worker.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels: List[str] = [""] * (width * height)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self.pixels)

    @contextmanager
    def acquire(self):
        """Exclusive ownership of the buffer for the duration of one render."""
        with self._lock:
            yield self

    def chunk_ranges(self, chunk_count: int) -> List[Tuple[int, int]]:
        """
        Contiguous [start, end) ranges that cover every pixel exactly once.

        Rows are spread evenly, so there are exactly min(chunk_count, height)
        chunks of whole rows whatever the resolution.
        """
        count = min(chunk_count, self.height)
        bounds = [i * self.height // count for i in range(count + 1)]
        return [(top * self.width, bottom * self.width)
                for top, bottom in zip(bounds, bounds[1:])]

    def write(self, start: int, pixels: Sequence[str]):
        """Store a finished chunk starting at pixel index `start`."""
        end = start + len(pixels)
        if start < 0 or end > len(self.pixels):
            raise ValueError(
                f"Chunk [{start}, {end}) does not fit in a buffer of {len(self.pixels)} pixels"
            )
        self.pixels[start:end] = pixels

    def write_ppm(self, stream: TextIO):
        """Write the buffer as a plain-text (P3) PPM image."""
        stream.write(f"P3\n{self.width} {self.height}\n255\n")
        for pixel in self.pixels:
            stream.write(pixel)
            stream.write("\n")

    def save(self, path: Union[str, Path]):
        """Write a PPM file to `path`, or to stdout when path is "-"."""
        if str(path) == "-":
            self.write_ppm(sys.stdout)
            sys.stdout.flush()
            return
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="ascii") as f:
            self.write_ppm(f)
        logger.info("Image written to %s (%dx%d)", path, self.width, self.height)
