"""
Simulation configuration.

Global constants of the interference sandbox: wave speed, physics grid
downsampling, frame rate and the initial canvas size.
"""

from dataclasses import dataclass, replace


WAVE_SPEED = 100.0      # pixels per simulation second
RESOLUTION = 4          # physics grid cell edge, in pixels
FRAME_RATE = 30.0       # target ticks per second
CANVAS_WIDTH = 600
CANVAS_HEIGHT = 600


@dataclass(frozen=True)
class SimulationConfig:
    wave_speed: float = WAVE_SPEED
    resolution: int = RESOLUTION
    frame_rate: float = FRAME_RATE
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT

    @property
    def frame_interval(self):
        return 1.0 / self.frame_rate

    def validate(self):
        if not self.wave_speed > 0.0:
            raise ValueError(f"wave_speed must be positive, got {self.wave_speed!r}")
        if int(self.resolution) != self.resolution or self.resolution < 1:
            raise ValueError(f"resolution must be an integer >= 1, got {self.resolution!r}")
        if not self.frame_rate > 0.0:
            raise ValueError(f"frame_rate must be positive, got {self.frame_rate!r}")
        return self

    def with_overrides(self, **changes):
        """Return a validated copy, ignoring overrides that are None."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes).validate()
