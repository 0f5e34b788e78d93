"""
Wave interference sandbox

Interactive 2D interference of two point sources. Each source has an
amplitude, frequency and phase slider plus an on/off switch; the field is
drawn in grayscale (white crest, black trough) and animated in real time.

Author: maxseg2021
License: MIT
"""

import logging
import time

import tkinter as tk
from tkinter import ttk

import matplotlib
matplotlib.use("TkAgg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.patches import Circle

from .bridge import ParameterBridge
from .config import SimulationConfig
from .driver import FrameDriver, RenderSurface, SurfaceUnavailableError
from .raster import Rasterizer
from .sources import (
    AMPLITUDE_RANGE,
    FREQUENCY_RANGE,
    PHASE_RANGE,
    default_sources,
    format_phase,
    marker_style,
    snap_to_step,
    wrap_phase,
)

logger = logging.getLogger(__name__)

PHYSICS_NOTES = (
    "λ = v/f: higher frequency = shorter waves.",
    "Phase shift moves the interference pattern.",
    "Rings mark source locations.",
)


class TkRenderSurface(RenderSurface):
    """Matplotlib axes embedded in a Tk widget, one image pixel per screen pixel."""

    def __init__(self, master):
        self.fig = plt.Figure(dpi=100, facecolor="black")
        self.ax = self.fig.add_axes([0.0, 0.0, 1.0, 1.0])
        self.ax.set_axis_off()

        self.canvas = FigureCanvasTkAgg(self.fig, master=master)
        self.widget = self.canvas.get_tk_widget()
        self.widget.configure(background="black", highlightthickness=0)

        self._image = None
        self._artists = []
        self._closed = False
        self._size = (0, 0)
        # FigureCanvasTkAgg resizes the figure on the same event
        self.widget.bind("<Configure>", self._on_configure, add="+")

    def _check(self):
        if self._closed:
            raise SurfaceUnavailableError("surface closed")
        try:
            alive = bool(self.widget.winfo_exists())
        except tk.TclError as e:
            raise SurfaceUnavailableError(str(e)) from e
        if not alive:
            raise SurfaceUnavailableError("canvas widget destroyed")

    def _on_configure(self, event):
        # an unmapped widget reports 1x1
        if event.width <= 1 or event.height <= 1:
            self._size = (0, 0)
        else:
            self._size = (event.width, event.height)

    def size(self):
        self._check()
        return self._size

    def commit(self, buffer):
        self._check()
        for artist in self._artists:
            artist.remove()
        self._artists = []

        img = buffer.image()
        extent = (0, buffer.width, buffer.height, 0)
        if self._image is None or self._image.get_array().shape != img.shape:
            if self._image is not None:
                self._image.remove()
            self._image = self.ax.imshow(img, extent=extent, interpolation="nearest")
            self.ax.set_xlim(0, buffer.width)
            self.ax.set_ylim(buffer.height, 0)
        else:
            self._image.set_data(img)

    def draw_ring(self, x, y, radius, style):
        ring = Circle((x, y), radius, fill=False, linewidth=2.0, edgecolor=style.rgb_float)
        self.ax.add_patch(ring)
        self._artists.append(ring)

    def draw_label(self, x, y, text, style, size=12):
        label = self.ax.text(x, y, text, color=style.rgb_float, fontsize=size, ha="left", va="bottom")
        self._artists.append(label)

    def present(self):
        self._check()
        try:
            self.canvas.draw_idle()
        except tk.TclError as e:
            raise SurfaceUnavailableError(str(e)) from e

    def close(self):
        self._closed = True
        self._artists = []
        self._image = None
        plt.close(self.fig)


class SourcePanel(ttk.LabelFrame):
    """Controls for one source. Every edit publishes a whole new record."""

    def __init__(self, parent, bridge, source_id, index):
        super().__init__(parent, text=f"Source {index + 1}")
        self.bridge = bridge
        self.source_id = source_id
        self.style = marker_style(index)

        s = bridge.source(source_id)
        self.var_active = tk.BooleanVar(value=s.active)
        self.var_amp = tk.DoubleVar(value=s.amplitude)
        self.var_freq = tk.DoubleVar(value=s.frequency)
        self.var_phase = tk.DoubleVar(value=s.phase)

        swatch = tk.Label(self, text="●", foreground=self.style.hex)
        swatch.grid(row=0, column=0, sticky="w", padx=4)
        ttk.Checkbutton(self, text="active", variable=self.var_active, command=self._publish).grid(
            row=0, column=1, sticky="w", padx=4
        )

        self._add_slider(1, "amplitude", self.var_amp, AMPLITUDE_RANGE, fmt="{:.1f}")
        self._add_slider(2, "frequency (Hz)", self.var_freq, FREQUENCY_RANGE, fmt="{:.1f} Hz")
        self._add_slider(3, "phase", self.var_phase, PHASE_RANGE, fmt=None)

    def _add_slider(self, row, label, var, limits, fmt):
        vmin, vmax, step = limits
        frame = ttk.Frame(self)
        frame.grid(row=row, column=0, columnspan=2, sticky="ew", padx=6, pady=2)

        ttk.Label(frame, text=label).pack(anchor="w")

        def on_move(_v):
            var.set(snap_to_step(var.get(), vmin, vmax, step))
            self._publish()

        s = ttk.Scale(
            frame,
            from_=vmin,
            to=vmax,
            orient=tk.HORIZONTAL,
            variable=var,
            length=220,
            command=on_move,
        )
        s.pack(side=tk.LEFT)

        val_label = ttk.Label(frame, width=9)
        val_label.pack(side=tk.LEFT, padx=6)

        def update_label(*_):
            value = var.get()
            val_label.config(text=format_phase(value) if fmt is None else fmt.format(value))

        var.trace_add("write", update_label)
        update_label()

    def _publish(self):
        self.bridge.update_source(
            self.source_id,
            active=bool(self.var_active.get()),
            amplitude=float(self.var_amp.get()),
            frequency=float(self.var_freq.get()),
            phase=wrap_phase(self.var_phase.get()),
        )

    def refresh(self):
        """Pull values back from the bridge (after a reset)."""
        s = self.bridge.source(self.source_id)
        self.var_active.set(s.active)
        self.var_amp.set(s.amplitude)
        self.var_freq.set(s.frequency)
        self.var_phase.set(s.phase)


class App(tk.Tk):
    def __init__(self, config=None):
        super().__init__()
        self.sim_config = (config or SimulationConfig()).validate()
        cfg = self.sim_config

        self.title("Wave Interference Simulator")
        self.geometry(f"{cfg.width + 360}x{max(cfg.height, 640)}")

        self.bridge = ParameterBridge(default_sources(cfg.width, cfg.height))
        self.rasterizer = Rasterizer(resolution=cfg.resolution, wave_speed=cfg.wave_speed)

        self._job = None
        self._last_tick = None
        self.panels = []

        self._build_ui()
        self.driver = FrameDriver(self.bridge, self.rasterizer, self.surface, frame_rate=cfg.frame_rate)

        self.protocol("WM_DELETE_WINDOW", self.close)
        logger.info(
            "Frame driver started: N=%d, %.0f fps, wave speed %.1f",
            cfg.resolution, cfg.frame_rate, cfg.wave_speed,
        )
        self._tick()

    def _build_ui(self):
        sidebar = ttk.Frame(self)
        sidebar.pack(side=tk.LEFT, fill=tk.Y, padx=10, pady=8)

        buttons = ttk.Frame(sidebar)
        buttons.pack(side=tk.TOP, fill=tk.X, pady=6)
        self.pause_button = ttk.Button(buttons, text="pause", command=self.toggle_pause)
        self.pause_button.pack(side=tk.LEFT, padx=6)
        ttk.Button(buttons, text="reset", command=self.reset).pack(side=tk.LEFT, padx=6)

        for index, s in enumerate(self.bridge.sources):
            panel = SourcePanel(sidebar, self.bridge, s.id, index)
            panel.pack(side=tk.TOP, fill=tk.X, pady=6)
            self.panels.append(panel)

        notes = ttk.LabelFrame(sidebar, text="physics notes")
        notes.pack(side=tk.TOP, fill=tk.X, pady=8)
        for line in PHYSICS_NOTES:
            ttk.Label(notes, text="• " + line, wraplength=300).pack(anchor="w", padx=6)

        legend = ttk.Frame(sidebar)
        legend.pack(side=tk.TOP, fill=tk.X, pady=4)
        ttk.Label(legend, text="white: crest (+A)   black: trough (-A)").pack(anchor="w", padx=6)

        self.info_label = ttk.Label(sidebar, text="")
        self.info_label.pack(side=tk.TOP, anchor="w", padx=6, pady=4)

        self.surface = TkRenderSurface(self)
        self.surface.widget.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=10, pady=10)

    def toggle_pause(self):
        paused = self.driver.toggle_pause()
        self.pause_button.configure(text="resume" if paused else "pause")

    def reset(self):
        self.driver.reset()
        for panel in self.panels:
            panel.refresh()
        self.pause_button.configure(text="pause")

    def _tick(self):
        now = time.perf_counter()
        elapsed = 0.0 if self._last_tick is None else now - self._last_tick
        self._last_tick = now

        if self.driver.tick(elapsed):
            stats = self.driver.last_stats
            self.info_label.configure(
                text=f"t = {stats.time:.2f} s   grid {stats.cols}x{stats.rows}   sources {stats.contributing}"
            )
        if self.driver.stopped:
            self._job = None
            return
        self._job = self.after(max(1, int(self.driver.frame_interval * 1000.0)), self._tick)

    def close(self):
        if self._job is not None:
            self.after_cancel(self._job)
            self._job = None
        self.driver.stop()
        self.destroy()


def main(config=None):
    App(config).mainloop()

