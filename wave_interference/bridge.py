"""
Shared parameter state between the control panel and the frame driver.

The editor writes, the driver reads. Writes replace whole records (sources
are frozen dataclasses held in a tuple that is swapped in one assignment),
so a snapshot taken at the start of a tick is never torn.
"""

import logging
from dataclasses import dataclass, replace

from .sources import WaveSource, default_sources

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BridgeSnapshot:
    sources: tuple
    paused: bool

    @property
    def active_sources(self):
        return tuple(s for s in self.sources if s.active)


class ParameterBridge:
    def __init__(self, sources=None, paused=False):
        if sources is None:
            sources = default_sources()
        self._sources = tuple(sources)
        self._paused = bool(paused)

        ids = [s.id for s in self._sources]
        if len(set(ids)) != len(ids):
            raise ValueError(f"source ids must be unique, got {ids}")

    @property
    def sources(self):
        return self._sources

    @property
    def paused(self):
        return self._paused

    def snapshot(self):
        return BridgeSnapshot(self._sources, self._paused)

    def source(self, source_id):
        for s in self._sources:
            if s.id == source_id:
                return s
        raise KeyError(source_id)

    def replace_source(self, source):
        if not isinstance(source, WaveSource):
            raise TypeError(f"expected WaveSource, got {type(source).__name__}")
        index = self._index_of(source.id)
        sources = list(self._sources)
        sources[index] = source
        self._sources = tuple(sources)

    def update_source(self, source_id, **changes):
        """Publish a copy of source `source_id` with some fields changed."""
        updated = replace(self.source(source_id), **changes)
        self.replace_source(updated)
        return updated

    def set_paused(self, paused):
        paused = bool(paused)
        if paused != self._paused:
            logger.info("Simulation %s", "paused" if paused else "resumed")
        self._paused = paused

    def toggle_paused(self):
        self.set_paused(not self._paused)
        return self._paused

    def reset(self):
        """Default wave parameters on every source, positions kept, unpaused."""
        self._sources = tuple(s.with_defaults() for s in self._sources)
        self._paused = False
        logger.info("Source parameters reset to defaults")

    def _index_of(self, source_id):
        for i, s in enumerate(self._sources):
            if s.id == source_id:
                return i
        raise KeyError(source_id)
