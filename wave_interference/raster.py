"""
Grid sampler and rasterizer.

The field is evaluated on a coarse grid (one sample per N x N pixel block,
taken at the block's top-left pixel) and each sample is replicated over its
block in the full resolution RGBA buffer. This keeps the number of cosine
evaluations per frame at roughly width*height/N^2 per source.
"""

import logging
from dataclasses import dataclass

import numpy as np

from .config import RESOLUTION, WAVE_SPEED
from .field import superpose

logger = logging.getLogger(__name__)

BACKGROUND = (0, 0, 0, 255)


@dataclass(frozen=True)
class GridSpec:
    width: int
    height: int
    resolution: int

    @property
    def cols(self):
        return self.width // self.resolution

    @property
    def rows(self):
        return self.height // self.resolution

    def sample_points(self):
        """Pixel coordinates of the grid samples as broadcastable (xs, ys)."""
        xs = np.arange(self.cols, dtype=float) * self.resolution
        ys = np.arange(self.rows, dtype=float) * self.resolution
        return xs[np.newaxis, :], ys[:, np.newaxis]


class PixelBuffer:
    """Flat RGBA8 buffer, row major, 4 bytes per pixel."""

    def __init__(self, width, height):
        self.width = int(width)
        self.height = int(height)
        self.data = np.zeros(self.width * self.height * 4, dtype=np.uint8)

    def image(self):
        """(height, width, 4) view on the same memory."""
        return self.data.reshape(self.height, self.width, 4)

    def pixel(self, x, y):
        i = (x + y * self.width) * 4
        return tuple(int(v) for v in self.data[i:i + 4])


@dataclass(frozen=True)
class FrameStats:
    time: float
    cols: int
    rows: int
    contributing: int
    skipped: tuple
    min_value: float
    max_value: float


def to_intensity(normalized):
    """Map normalized displacement in [-1, 1] to gray levels 0..255."""
    levels = np.floor((np.asarray(normalized) + 1.0) * 127.5)
    return np.clip(levels, 0, 255).astype(np.uint8)


def block_fill(buffer, intensity, n):
    """
    Replicate each grid value over an n x n block of the buffer. Pixels not
    covered by a whole block (right and bottom strips) get the background.
    """
    img = buffer.image()
    block = np.repeat(np.repeat(intensity, n, axis=0), n, axis=1)
    h = min(block.shape[0], buffer.height)
    w = min(block.shape[1], buffer.width)

    img[:h, :w, 0] = block[:h, :w]
    img[:h, :w, 1] = block[:h, :w]
    img[:h, :w, 2] = block[:h, :w]
    img[:h, :w, 3] = 255

    img[h:, :, :] = BACKGROUND
    img[:h, w:, :] = BACKGROUND


class Rasterizer:
    def __init__(self, resolution=RESOLUTION, wave_speed=WAVE_SPEED):
        if int(resolution) != resolution or resolution < 1:
            raise ValueError(f"resolution must be an integer >= 1, got {resolution!r}")
        self.resolution = int(resolution)
        self.wave_speed = float(wave_speed)

        self.size = (0, 0)
        self.grid = None
        self.buffer = None
        self._xs = None
        self._ys = None

    @property
    def ready(self):
        return self.grid is not None

    def resize(self, width, height):
        """Recompute the grid for a new surface size. Returns True if it changed."""
        size = (int(width), int(height))
        if size == self.size:
            return False
        self.size = size

        if size[0] <= 0 or size[1] <= 0:
            self.grid = None
            self.buffer = None
            self._xs = self._ys = None
            logger.info("Surface size %dx%d, rendering suspended", *size)
            return True

        self.grid = GridSpec(size[0], size[1], self.resolution)
        self.buffer = PixelBuffer(*size)
        self._xs, self._ys = self.grid.sample_points()
        logger.info(
            "Surface resized to %dx%d, grid %d cols x %d rows",
            size[0], size[1], self.grid.cols, self.grid.rows,
        )
        return True

    def sample(self, t, sources):
        """Normalized field on the grid, shape (rows, cols), plus skipped ids."""
        total, total_amp, skipped = superpose(self._xs, self._ys, t, sources, self.wave_speed)
        divisor = total_amp if total_amp > 0.0 else 1.0
        return total / divisor, skipped

    def render(self, t, sources):
        """
        Overwrite the pixel buffer with the field at time t.

        Returns FrameStats, or None when the surface has no area yet.
        """
        if self.grid is None:
            return None

        normalized, skipped = self.sample(t, sources)
        block_fill(self.buffer, to_intensity(normalized), self.resolution)

        if normalized.size:
            vmin, vmax = float(normalized.min()), float(normalized.max())
        else:
            vmin = vmax = 0.0
        contributing = sum(1 for s in sources if s.active) - len(skipped)
        return FrameStats(
            time=float(t),
            cols=self.grid.cols,
            rows=self.grid.rows,
            contributing=contributing,
            skipped=skipped,
            min_value=vmin,
            max_value=vmax,
        )
