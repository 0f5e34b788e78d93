"""Tests for the shared editor/driver parameter state."""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from wave_interference import ParameterBridge, WaveSource, default_sources, marker_style
from wave_interference.sources import (
    AMPLITUDE_RANGE,
    FREQUENCY_RANGE,
    MARKER_STYLES,
    PHASE_RANGE,
    format_phase,
    snap_to_step,
    wrap_phase,
)


def test_default_session():
    bridge = ParameterBridge()
    s1, s2 = bridge.sources
    assert (s1.id, s1.x, s1.y) == (1, 200.0, 300.0)
    assert (s2.id, s2.x, s2.y) == (2, 400.0, 300.0)
    for s in bridge.sources:
        assert (s.amplitude, s.frequency, s.phase, s.active) == (5.0, 1.5, 0.0, True)
    assert not bridge.paused


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        ParameterBridge([WaveSource(id=1, x=0.0, y=0.0), WaveSource(id=1, x=5.0, y=5.0)])


def test_sources_are_immutable():
    s = WaveSource(id=1, x=0.0, y=0.0)
    with pytest.raises(FrozenInstanceError):
        s.amplitude = 3.0


def test_replace_source(bridge):
    new = WaveSource(id=2, x=48.0, y=24.0, amplitude=9.0, frequency=4.0, phase=1.0, active=False)
    bridge.replace_source(new)
    assert bridge.source(2) is new
    assert bridge.sources[1] is new
    assert bridge.source(1).amplitude == 5.0


def test_replace_unknown_source(bridge):
    with pytest.raises(KeyError):
        bridge.replace_source(WaveSource(id=99, x=0.0, y=0.0))


def test_replace_requires_wave_source(bridge):
    with pytest.raises(TypeError):
        bridge.replace_source({"id": 1})


def test_update_source(bridge):
    updated = bridge.update_source(1, amplitude=2.5, phase=np.pi)
    assert updated.amplitude == 2.5
    assert bridge.source(1).phase == pytest.approx(np.pi)
    assert bridge.source(1).position == (16.0, 24.0)


def test_snapshot_is_not_affected_by_later_edits(bridge):
    snap = bridge.snapshot()
    bridge.update_source(1, amplitude=0.0)
    bridge.set_paused(True)
    assert snap.sources[0].amplitude == 5.0
    assert not snap.paused
    assert bridge.snapshot().paused


def test_snapshot_active_sources(bridge):
    bridge.update_source(2, active=False)
    assert [s.id for s in bridge.snapshot().active_sources] == [1]


def test_toggle_paused(bridge):
    assert bridge.toggle_paused() is True
    assert bridge.paused
    assert bridge.toggle_paused() is False


def test_reset_restores_defaults_and_keeps_positions(bridge):
    bridge.update_source(1, amplitude=9.9, frequency=4.4, phase=3.0, active=False)
    bridge.update_source(2, amplitude=0.1, frequency=0.5, phase=6.0)
    bridge.set_paused(True)
    before = [s.position for s in bridge.sources]

    bridge.reset()

    assert [s.position for s in bridge.sources] == before
    for s in bridge.sources:
        assert (s.amplitude, s.frequency, s.phase, s.active) == (5.0, 1.5, 0.0, True)
    assert not bridge.paused


def test_default_sources_follow_canvas_size():
    a, b = default_sources(900, 300)
    assert a.position == (300.0, 150.0)
    assert b.position == (600.0, 150.0)


def test_wrap_phase():
    assert wrap_phase(2.5 * np.pi) == pytest.approx(0.5 * np.pi)
    assert wrap_phase(-0.5 * np.pi) == pytest.approx(1.5 * np.pi)



def test_format_phase():
    assert format_phase(0.0) == "0.00π"
    assert format_phase(np.pi / 2.0) == "0.50π"
    assert format_phase(2.0 * np.pi) == "2.00π"


class TestSnapToStep:
    def test_rounds_to_step(self):
        assert snap_to_step(3.14, *AMPLITUDE_RANGE) == pytest.approx(3.1)
        assert snap_to_step(0.56, *FREQUENCY_RANGE) == pytest.approx(0.6)
        assert snap_to_step(0.2, *PHASE_RANGE) == pytest.approx(np.pi / 16.0)

    def test_clips_to_range(self):
        assert snap_to_step(12.0, *AMPLITUDE_RANGE) == 10.0
        assert snap_to_step(-1.0, *AMPLITUDE_RANGE) == 0.0
        assert snap_to_step(0.1, *FREQUENCY_RANGE) == 0.5
        assert snap_to_step(2.0 * np.pi + 0.5, *PHASE_RANGE) == pytest.approx(2.0 * np.pi)

class TestMarkerStyle:
    def test_first_two_colors(self):
        assert marker_style(0).rgb == (56, 189, 248)
        assert marker_style(1).rgb == (129, 140, 248)
        assert marker_style(0).hex == "#38bdf8"

    def test_cycles_for_more_sources(self):
        n = len(MARKER_STYLES)
        assert marker_style(n) == marker_style(0)
        assert marker_style(n + 3) == marker_style(3)
        assert len({marker_style(i).rgb for i in range(n)}) == n

    def test_negative_index(self):
        with pytest.raises(IndexError):
            marker_style(-1)
