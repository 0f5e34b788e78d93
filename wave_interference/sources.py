"""
Point wave sources and their marker styling.

A WaveSource is an immutable record. Editors publish changes by building a
new record (dataclasses.replace) and handing it to the ParameterBridge, so a
frame never sees a half-edited source.
"""

from dataclasses import dataclass, replace

import numpy as np


DEFAULT_AMPLITUDE = 5.0
DEFAULT_FREQUENCY = 1.5
DEFAULT_PHASE = 0.0

# editor ranges (min, max, step)
AMPLITUDE_RANGE = (0.0, 10.0, 0.1)
FREQUENCY_RANGE = (0.5, 5.0, 0.1)
PHASE_RANGE = (0.0, 2.0 * np.pi, np.pi / 16.0)


@dataclass(frozen=True)
class WaveSource:
    id: int
    x: float
    y: float
    amplitude: float = DEFAULT_AMPLITUDE
    frequency: float = DEFAULT_FREQUENCY
    phase: float = DEFAULT_PHASE
    active: bool = True

    @property
    def position(self):
        return (self.x, self.y)

    def with_defaults(self):
        """Same source at the same position, with default wave parameters."""
        return replace(
            self,
            amplitude=DEFAULT_AMPLITUDE,
            frequency=DEFAULT_FREQUENCY,
            phase=DEFAULT_PHASE,
            active=True,
        )


def default_sources(width=600, height=600):
    """The two sources of a fresh session, a third of the way in from each side."""
    return (
        WaveSource(id=1, x=width / 3.0, y=height / 2.0),
        WaveSource(id=2, x=2.0 * width / 3.0, y=height / 2.0),
    )


def wrap_phase(phase):
    return float(np.mod(phase, 2.0 * np.pi))


def format_phase(phase):
    """Phase in units of pi, as the editor shows it."""
    return f"{phase / np.pi:.2f}π"


def snap_to_step(value, vmin, vmax, step):
    """Round a slider value onto its step grid, inside [vmin, vmax]."""
    value = vmin + round((value - vmin) / step) * step
    return float(np.clip(value, vmin, vmax))


@dataclass(frozen=True)
class MarkerStyle:
    name: str
    rgb: tuple

    @property
    def hex(self):
        return "#{:02x}{:02x}{:02x}".format(*self.rgb)

    @property
    def rgb_float(self):
        return tuple(c / 255.0 for c in self.rgb)


# first two entries are the classic two-source look; the rest only show up
# with more than two sources and cycle in order
MARKER_STYLES = (
    MarkerStyle("sky", (56, 189, 248)),
    MarkerStyle("indigo", (129, 140, 248)),
    MarkerStyle("emerald", (52, 211, 153)),
    MarkerStyle("amber", (251, 191, 36)),
    MarkerStyle("rose", (251, 113, 133)),
    MarkerStyle("violet", (167, 139, 250)),
)


def marker_style(index):
    if index < 0:
        raise IndexError(f"source index must be non-negative, got {index}")
    return MARKER_STYLES[index % len(MARKER_STYLES)]
