"""
Closed-form wave field of idealized point sources.

Each active source contributes

    d(P, t) = A * cos(k*r - w*t + phi)

with r the distance from P to the source, k = 2*pi / (c / f) and w = 2*pi*f.
The functions here are pure; they accept scalars or numpy arrays for the
sample coordinates.
"""

import numpy as np

from .config import WAVE_SPEED


def wave_numbers(frequency, wave_speed=WAVE_SPEED):
    """Return (k, omega) for a source frequency."""
    wavelength = wave_speed / frequency
    k = 2.0 * np.pi / wavelength
    omega = 2.0 * np.pi * frequency
    return k, omega


def displacement(x, y, t, source, wave_speed=WAVE_SPEED):
    """Displacement of a single source at point(s) (x, y) and time t."""
    k, omega = wave_numbers(source.frequency, wave_speed)
    dx = np.subtract(x, source.x)
    dy = np.subtract(y, source.y)
    r = np.sqrt(dx * dx + dy * dy)
    return source.amplitude * np.cos(k * r - omega * t + source.phase)


def is_valid_source(source):
    values = (source.x, source.y, source.amplitude, source.frequency, source.phase)
    if not all(np.isfinite(v) for v in values):
        return False
    return source.frequency > 0.0 and source.amplitude >= 0.0


def contributing_sources(sources):
    """
    Split sources into the ones that contribute to a frame and the ids of
    active sources skipped for bad parameters. Inactive sources are neither.
    """
    contributing = []
    skipped = []
    for s in sources:
        if not s.active:
            continue
        if is_valid_source(s):
            contributing.append(s)
        else:
            skipped.append(s.id)
    return tuple(contributing), tuple(skipped)


def superpose(x, y, t, sources, wave_speed=WAVE_SPEED):
    """
    Sum the displacement of all contributing sources.

    Returns (total_displacement, total_amplitude, skipped_ids). The total
    amplitude is the largest magnitude the sum can reach.
    """
    contributing, skipped = contributing_sources(sources)
    shape = np.broadcast(np.asarray(x), np.asarray(y)).shape
    total = np.zeros(shape, dtype=float)
    total_amp = 0.0
    for s in contributing:
        total += displacement(x, y, t, s, wave_speed)
        total_amp += s.amplitude
    return total, total_amp, skipped


def normalized_field(x, y, t, sources, wave_speed=WAVE_SPEED):
    """Superposed displacement scaled into [-1, 1]."""
    total, total_amp, _ = superpose(x, y, t, sources, wave_speed)
    divisor = total_amp if total_amp > 0.0 else 1.0
    return total / divisor
