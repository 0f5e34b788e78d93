"""Shared fixtures: an in-memory render surface and a small two-source scene."""

import pytest

from wave_interference import (
    FrameDriver,
    ParameterBridge,
    Rasterizer,
    RenderSurface,
    SurfaceUnavailableError,
    WaveSource,
)


class FakeSurface(RenderSurface):
    def __init__(self, width=64, height=48):
        self.width = width
        self.height = height
        self.gone = False
        self.closed = False
        self.size_calls = 0
        self.frames = []
        self.rings = []
        self.labels = []
        self.presented = 0

    def size(self):
        self.size_calls += 1
        if self.gone:
            raise SurfaceUnavailableError("window closed")
        return self.width, self.height

    def commit(self, buffer):
        self.frames.append(buffer.data.copy())
        self.rings = []
        self.labels = []

    def draw_ring(self, x, y, radius, style):
        self.rings.append((x, y, radius, style))

    def draw_label(self, x, y, text, style, size=12):
        self.labels.append((x, y, text, style))

    def present(self):
        self.presented += 1

    def close(self):
        self.closed = True


@pytest.fixture
def sources():
    return (
        WaveSource(id=1, x=16.0, y=24.0),
        WaveSource(id=2, x=48.0, y=24.0),
    )


@pytest.fixture
def bridge(sources):
    return ParameterBridge(sources)


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def driver(bridge, surface):
    return FrameDriver(bridge, Rasterizer(resolution=4), surface, frame_rate=30.0)
