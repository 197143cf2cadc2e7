# renderer/tone_mapping.py
from typing import List
import numpy as np

def gamma_quantize(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Turn summed linear radiance into 8-bit channel values.

    `accumulated` has shape (n, 3) and holds the sum of `samples_per_pixel`
    samples per pixel. The average is gamma corrected with gamma=2 (square
    root), clamped to [0, 0.999] and mapped to [0, 255] with floor(256 * c).
    NaN and negative values become 0 and +inf saturates to 255, so numeric
    trouble degrades a pixel instead of failing the render.
    """
    scale = 1.0 / samples_per_pixel
    with np.errstate(invalid="ignore", over="ignore"):
        averaged = np.asarray(accumulated, dtype=np.float64) * scale
        averaged = np.nan_to_num(averaged, nan=0.0, posinf=1.0, neginf=0.0)
        corrected = np.sqrt(np.clip(averaged, 0.0, None))
    corrected = np.clip(corrected, 0.0, 0.999)
    return np.floor(256.0 * corrected).astype(np.int64)

def format_pixels(quantized: np.ndarray) -> List[str]:
    """Format each (r, g, b) row as an "R G B" string."""
    return [f"{r} {g} {b}" for r, g, b in quantized.tolist()]
