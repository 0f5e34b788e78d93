"""Launcher: python -m wave_interference"""

import click

from . import __version__
from .config import SimulationConfig
from .logging_config import setup_logging


@click.command()
@click.option("--resolution", "-n", type=int, help="Physics grid cell edge in pixels (default: 4)")
@click.option("--frame-rate", type=float, help="Target frames per second (default: 30)")
@click.option("--wave-speed", type=float, help="Wave speed in pixels per second (default: 100)")
@click.option("--width", type=int, help="Initial canvas width in pixels")
@click.option("--height", type=int, help="Initial canvas height in pixels")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Logging level (default: INFO)",
)
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write the log to this file")
@click.version_option(version=__version__, prog_name="wave-interference")
def main(resolution, frame_rate, wave_speed, width, height, log_level, log_file):
    """Open the two-source wave interference sandbox."""
    setup_logging(log_level, log_file)

    try:
        config = SimulationConfig().with_overrides(
            resolution=resolution,
            frame_rate=frame_rate,
            wave_speed=wave_speed,
            width=width,
            height=height,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    # imported late so --help and --version work without a display
    from .app import main as run_app
    run_app(config)


if __name__ == "__main__":
    main()
