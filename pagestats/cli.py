"""CLI entry point for pagestats."""

from __future__ import annotations

import json
from pathlib import Path

import click

from pagestats.config import ConfigError, config_path, load_settings, save_settings
from pagestats.stats import ORDERS, Settings


# Default config template
CONFIG_TEMPLATE = """\
# Which markup is Layer 2 of the progressive summarization.
#   default: Layer 2 is **bold**, Layer 3 is ==highlighted==
#   reverse: Layer 2 is ==highlighted==, Layer 3 is **bold**
order: default
"""

_project_root_option = click.option(
    "--project-root",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    default=".",
    help="Directory holding .pagestats/ (default: cwd).",
)


def _settings_or_fail(root: Path) -> Settings:
    try:
        return load_settings(root)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
def cli() -> None:
    """Pagestats: progressive-summarization stats for markdown notes."""


@cli.command()
@_project_root_option
def init(project_root: str) -> None:
    """Create .pagestats/config.yaml with default settings."""
    root = Path(project_root)
    settings_dir = root / ".pagestats"

    if settings_dir.exists():
        click.echo(f".pagestats/ already exists at {settings_dir}")
        raise SystemExit(1)

    settings_dir.mkdir(parents=True)
    path = config_path(root)
    path.write_text(CONFIG_TEMPLATE)
    click.echo(f"Created {path}")


@cli.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_project_root_option
@click.option("--json", "as_json", is_flag=True, help="Print raw counts as JSON.")
def stats(document: Path, project_root: str, as_json: bool) -> None:
    """Show layer statistics for DOCUMENT."""
    from pagestats.render import panel_data, render_panel
    from pagestats.stats import compute_stats
    from pagestats.view import read_document

    settings = _settings_or_fail(Path(project_root))
    try:
        text = read_document(document)
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Could not read {document}: {exc}") from exc

    page_stats = compute_stats(text)
    if as_json:
        click.echo(json.dumps(panel_data(page_stats, settings, document), indent=2))
    else:
        click.echo(render_panel(page_stats, settings, document), nl=False)


@cli.command()
@click.argument("value", required=False, type=click.Choice(ORDERS))
@_project_root_option
def order(value: str | None, project_root: str) -> None:
    """Show or set which markup is Layer 2 (default: bold, reverse: highlight)."""
    from pagestats.stats import resolve_layer_symbol

    root = Path(project_root)
    settings = _settings_or_fail(root)

    if value is not None and value != settings.order:
        settings = Settings(order=value)
        try:
            path = save_settings(root, settings)
        except ConfigError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(f"Saved {path}")

    click.echo(f"Order: {settings.order}")
    click.echo(f"  Layer 2: {resolve_layer_symbol(2, settings)}")
    click.echo(f"  Layer 3: {resolve_layer_symbol(3, settings)}")


@cli.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_project_root_option
def watch(document: Path, project_root: str) -> None:
    """Re-render stats for DOCUMENT whenever it or the settings change."""
    import logging
    import signal
    import time

    from pagestats.view import StatsView
    from pagestats.watcher import DocumentWatcher

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    log = logging.getLogger(__name__)

    root = Path(project_root)
    settings = _settings_or_fail(root)

    def display(panel: str) -> None:
        click.clear()
        click.echo(panel, nl=False)

    view = StatsView(settings, display)
    view.on_file_open(document)

    watcher = DocumentWatcher(view, document, root)
    watcher.start()

    running = True

    def _shutdown(signum: int, frame: object) -> None:
        nonlocal running
        log.info("Received signal %d, shutting down...", signum)
        running = False

    def _on_resize(signum: int, frame: object) -> None:
        try:
            view.on_layout_change()
        except Exception:
            log.exception("Error refreshing stats after resize")

    handled = [signal.SIGINT, signal.SIGTERM]
    if hasattr(signal, "SIGWINCH"):
        handled.append(signal.SIGWINCH)
    previous = {signum: signal.getsignal(signum) for signum in handled}

    try:
        signal.signal(signal.SIGINT, _shutdown)
        signal.signal(signal.SIGTERM, _shutdown)
        if hasattr(signal, "SIGWINCH"):
            signal.signal(signal.SIGWINCH, _on_resize)

        while running:
            time.sleep(1)
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
        watcher.stop()

    click.echo("\nStopped watching.")

