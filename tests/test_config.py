"""Tests for configuration and the launcher."""

import sys
import types

import pytest
from click.testing import CliRunner

from wave_interference import SimulationConfig, __version__
from wave_interference import __main__ as launcher


def test_defaults():
    cfg = SimulationConfig().validate()
    assert cfg.wave_speed == 100.0
    assert cfg.resolution == 4
    assert cfg.frame_interval == pytest.approx(1.0 / 30.0)
    assert (cfg.width, cfg.height) == (600, 600)


@pytest.mark.parametrize(
    "changes",
    [
        {"wave_speed": 0.0},
        {"wave_speed": -10.0},
        {"resolution": 0},
        {"resolution": 1.5},
        {"frame_rate": 0.0},
    ],
)
def test_validate_rejects(changes):
    with pytest.raises(ValueError):
        SimulationConfig().with_overrides(**changes)


def test_overrides_ignore_none():
    cfg = SimulationConfig().with_overrides(resolution=2, frame_rate=None)
    assert cfg.resolution == 2
    assert cfg.frame_rate == 30.0


@pytest.fixture
def fake_app(monkeypatch):
    launched = []
    module = types.ModuleType("wave_interference.app")
    module.main = launched.append
    monkeypatch.setitem(sys.modules, "wave_interference.app", module)
    monkeypatch.setattr(launcher, "setup_logging", lambda *args, **kwargs: None)
    return launched


def test_cli_version():
    result = CliRunner().invoke(launcher.main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_passes_config(fake_app):
    result = CliRunner().invoke(launcher.main, ["-n", "8", "--frame-rate", "24", "--width", "320"])
    assert result.exit_code == 0, result.output
    (cfg,) = fake_app
    assert (cfg.resolution, cfg.frame_rate, cfg.width, cfg.height) == (8, 24.0, 320, 600)


def test_cli_rejects_bad_resolution(fake_app):
    result = CliRunner().invoke(launcher.main, ["--resolution", "0"])
    assert result.exit_code == 2
    assert "resolution" in result.output
    assert fake_app == []
