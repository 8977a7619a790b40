"""Stats view: recompute and redisplay on host triggers.

Three triggers each run exactly one recompute-and-redisplay cycle:

1. **File open**: the active document changed (switched or edited).
2. **Layout change**: the display was rearranged; same document.
3. **Settings change**: the layer order changed.

The view never keeps a record between cycles. Every cycle reads the
document again and builds a fresh :class:`PageStats`.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable

from pagestats.render import render_panel
from pagestats.stats import PageStats, Settings, compute_stats

log = logging.getLogger(__name__)

# Receives the rendered panel text.
DisplayCallback = Callable[[str], None]


def read_document(path: Path) -> str:
    """Read a document as UTF-8 text with newlines normalised to ``\\n``."""
    return Path(path).read_text(encoding="utf-8")


class StatsView:
    """Holds the active document and settings, and redraws on demand.

    Parameters
    ----------
    settings:
        Current display settings.
    display:
        Called with the rendered panel after every cycle.
    document:
        Active document path, or None when nothing is open.
    """

    def __init__(
        self,
        settings: Settings,
        display: DisplayCallback,
        document: Path | None = None,
    ) -> None:
        self._settings = settings
        self._display = display
        self._document = Path(document) if document else None
        self._lock = threading.Lock()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def document(self) -> Path | None:
        return self._document

    def page_stats(self) -> PageStats:
        """Stats for the active document; all zeros when there is none."""
        if self._document is None:
            return PageStats()
        log.debug("Loading file content: %s", self._document)
        return compute_stats(read_document(self._document))

    def refresh(self) -> PageStats:
        """Run one recompute-and-redisplay cycle."""
        with self._lock:
            stats = self.page_stats()
            self._display(render_panel(stats, self._settings, self._document))
            return stats

    def on_file_open(self, path: Path | None) -> PageStats:
        log.info("file-open triggered: %s", path)
        self._document = Path(path) if path else None
        return self.refresh()

    def on_layout_change(self) -> PageStats:
        log.info("layout-change triggered")
        return self.refresh()

    def on_settings_change(self, settings: Settings) -> PageStats:
        log.info("settings-change triggered (order=%s)", settings.order)
        self._settings = settings
        return self.refresh()
