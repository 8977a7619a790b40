"""Filesystem watcher that drives a :class:`StatsView`.

Two event sources, both from one ``watchdog`` observer:

1. **Document**: create/modify/move onto the watched document
   triggers a file-open cycle.
2. **Settings**: changes to ``.pagestats/config.yaml`` reload the
   settings and trigger a settings-change cycle.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from pagestats.config import ConfigError, config_path, load_settings
from pagestats.view import StatsView

log = logging.getLogger(__name__)


class _StatsEventHandler(FileSystemEventHandler):
    """Watchdog handler that routes document and settings events to a view."""

    def __init__(self, view: StatsView, document: Path, project_root: Path) -> None:
        super().__init__()
        self._view = view
        self._document = Path(document).resolve()
        self._project_root = Path(project_root)
        self._settings_path = config_path(project_root).resolve()

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._handle(event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._handle(event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        # Editors that save atomically rename a temp file over the target.
        if not event.is_directory:
            self._handle(event.dest_path)

    def _handle(self, raw_path: str | bytes) -> None:
        path = Path(os.fsdecode(raw_path)).resolve()
        try:
            if path == self._document:
                self._view.on_file_open(self._document)
            elif path == self._settings_path:
                self._view.on_settings_change(load_settings(self._project_root))
        except ConfigError as exc:
            log.warning("Ignoring settings change: %s", exc)
        except Exception:
            log.exception("Error refreshing stats for %s", path)


class DocumentWatcher:
    """Watchdog-based watcher for one document and its settings file.

    Parameters
    ----------
    view:
        View to refresh on events.
    document:
        The document being displayed.
    project_root:
        Directory holding ``.pagestats/``.
    """

    def __init__(self, view: StatsView, document: Path, project_root: Path) -> None:
        self._view = view
        self._document = Path(document)
        self._project_root = Path(project_root)
        self._observer: Observer | None = None

    def start(self) -> None:
        """Start the filesystem observer."""
        watch_dirs = [self._document.resolve().parent]
        settings_dir = config_path(self._project_root).parent.resolve()
        if settings_dir.exists() and settings_dir not in watch_dirs:
            watch_dirs.append(settings_dir)
        elif not settings_dir.exists():
            log.warning("No settings directory at %s; settings changes not watched", settings_dir)

        handler = _StatsEventHandler(self._view, self._document, self._project_root)
        self._observer = Observer()
        for d in watch_dirs:
            self._observer.schedule(handler, str(d), recursive=False)
            log.info("Watching: %s", d)

        self._observer.daemon = True
        self._observer.start()

    def stop(self) -> None:
        """Stop the filesystem observer."""
        if self._observer:
            self._observer.stop()
            self._observer.join(timeout=5)
            self._observer = None
