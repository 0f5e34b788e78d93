"""
Real-time two-source wave interference.

Main exports:
- WaveSource: point source record
- displacement, superpose: closed-form field
- Rasterizer, PixelBuffer: grid sampling into an RGBA buffer
- ParameterBridge: shared editor/driver state
- FrameDriver, RenderSurface: per-tick clock and drawing
"""

from .bridge import BridgeSnapshot, ParameterBridge
from .config import SimulationConfig
from .driver import DriverState, FrameDriver, RenderSurface, SimulationClock, SurfaceUnavailableError
from .field import contributing_sources, displacement, normalized_field, superpose
from .raster import FrameStats, GridSpec, PixelBuffer, Rasterizer, to_intensity
from .sources import MARKER_STYLES, MarkerStyle, WaveSource, default_sources, marker_style

__version__ = "0.1.0"

__all__ = [
    "BridgeSnapshot",
    "ParameterBridge",
    "SimulationConfig",
    "DriverState",
    "FrameDriver",
    "RenderSurface",
    "SimulationClock",
    "SurfaceUnavailableError",
    "contributing_sources",
    "displacement",
    "normalized_field",
    "superpose",
    "FrameStats",
    "GridSpec",
    "PixelBuffer",
    "Rasterizer",
    "to_intensity",
    "MARKER_STYLES",
    "MarkerStyle",
    "WaveSource",
    "default_sources",
    "marker_style",
]
