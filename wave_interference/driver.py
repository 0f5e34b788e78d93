"""
Frame driver.

Owns the simulation clock and turns host ticks into rendered frames. The host
(a Tk `after` loop, a test, anything periodic) calls `tick(elapsed)` with the
real time since its previous call; the driver limits itself to the target
frame rate, advances the clock unless paused, rasterizes the field and draws
the source markers on the render surface.
"""

import enum
import logging
import math
import time

import numpy as np

from .config import FRAME_RATE
from .sources import marker_style

logger = logging.getLogger(__name__)

MARKER_DIAMETER = 10.0
MARKER_PULSE = 2.0
MARKER_PULSE_RATE = 0.1
LABEL_OFFSET = (10.0, -10.0)
LABEL_SIZE = 12


class SurfaceUnavailableError(RuntimeError):
    """The host render surface is gone and will not come back."""


class RenderSurface:
    """
    What the driver needs from a host surface. Implementations raise
    SurfaceUnavailableError from any method once the surface is destroyed.
    """

    def size(self):
        """Current (width, height) in pixels."""
        raise NotImplementedError

    def commit(self, buffer):
        """Take the frame's PixelBuffer."""
        raise NotImplementedError

    def draw_ring(self, x, y, radius, style):
        raise NotImplementedError

    def draw_label(self, x, y, text, style, size=LABEL_SIZE):
        raise NotImplementedError

    def present(self):
        """Show the committed buffer and the markers drawn since."""

    def close(self):
        """Release whatever the surface holds for the driver."""


class DriverState(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


class SimulationClock:
    def __init__(self):
        self.time = 0.0

    def advance(self, dt):
        if dt > 0.0:
            self.time += dt

    def reset(self):
        self.time = 0.0


class FrameDriver:
    def __init__(self, bridge, rasterizer, surface, frame_rate=FRAME_RATE):
        if not frame_rate > 0.0:
            raise ValueError(f"frame_rate must be positive, got {frame_rate!r}")
        self.bridge = bridge
        self.rasterizer = rasterizer
        self.surface = surface
        self.frame_interval = 1.0 / frame_rate

        self.clock = SimulationClock()
        self.frame_count = 0
        self.last_stats = None
        self.stopped = False

        self._budget = 0.0
        self._skipped = ()
        self._surface_empty = False

    @property
    def state(self):
        if self.stopped:
            return DriverState.STOPPED
        return DriverState.PAUSED if self.bridge.paused else DriverState.RUNNING

    @property
    def time(self):
        return self.clock.time

    def pause(self):
        self.bridge.set_paused(True)

    def resume(self):
        self.bridge.set_paused(False)

    def toggle_pause(self):
        return self.bridge.toggle_paused()

    def reset(self):
        self.bridge.reset()
        self.clock.reset()
        self._budget = 0.0

    def tick(self, elapsed):
        """
        Handle one host callback. Returns True when a frame was rendered.
        """
        if self.stopped:
            return False

        elapsed = float(elapsed)
        if not (math.isfinite(elapsed) and elapsed > 0.0):
            elapsed = 0.0

        snapshot = self.bridge.snapshot()
        if not snapshot.paused:
            self.clock.advance(elapsed)

        self._budget += elapsed
        if self._budget < self.frame_interval:
            return False
        # keep the phase of the frame grid but never bank more than one frame
        self._budget = math.fmod(self._budget - self.frame_interval, self.frame_interval)

        try:
            return self._render(snapshot)
        except SurfaceUnavailableError as e:
            logger.error("Render surface unavailable: %s", e)
            self.stop()
            return False

    def stop(self):
        if self.stopped:
            return
        self.stopped = True
        logger.info("Frame driver stopped after %d frames", self.frame_count)
        try:
            self.surface.close()
        except SurfaceUnavailableError:
            logger.debug("Surface already released")

    def _render(self, snapshot):
        width, height = self.surface.size()
        self.rasterizer.resize(width, height)

        started = time.perf_counter()
        stats = self.rasterizer.render(self.clock.time, snapshot.sources)
        if stats is None:
            if not self._surface_empty:
                logger.warning("Render surface is %dx%d, skipping frames", width, height)
                self._surface_empty = True
            return False
        self._surface_empty = False

        self.surface.commit(self.rasterizer.buffer)
        self._draw_markers(snapshot.sources)
        self.surface.present()

        spent = time.perf_counter() - started
        if spent > self.frame_interval:
            logger.debug("Frame %d took %.1f ms", self.frame_count, spent * 1000.0)

        self.frame_count += 1
        self.last_stats = stats
        self._report_skipped(stats.skipped)
        return True

    def _draw_markers(self, sources):
        diameter = MARKER_DIAMETER + MARKER_PULSE * np.sin(self.frame_count * MARKER_PULSE_RATE)
        for index, s in enumerate(sources):
            if not s.active:
                continue
            style = marker_style(index)
            self.surface.draw_ring(s.x, s.y, diameter / 2.0, style)
            self.surface.draw_label(
                s.x + LABEL_OFFSET[0], s.y + LABEL_OFFSET[1], f"S{s.id}", style
            )

    def _report_skipped(self, skipped):
        if skipped == self._skipped:
            return
        if skipped:
            logger.warning("Skipping sources with invalid parameters: %s", list(skipped))
        else:
            logger.info("All active sources contributing again")
        self._skipped = skipped
