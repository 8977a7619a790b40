"""Jinja2 rendering for the stats panel."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from pagestats.stats import PageStats, Settings, format_layer_value, resolve_layer_symbol

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _basename(value: str) -> str:
    """Jinja2 filter: extract basename from a path string."""
    return os.path.basename(value)


def _get_env() -> Environment:
    """Create a Jinja2 environment loading from pagestats/templates/."""
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["basename"] = _basename
    return env


def layer_rows(stats: PageStats, settings: Settings) -> list[tuple[str, str]]:
    """Return the panel rows as ``(label, value)`` in display order."""
    rows = [
        ("Highlights", str(stats.num_blocks_cite)),
        ("Comments", str(stats.num_comments)),
        ("Layer 1", str(stats.num_words_cite)),
    ]
    for level in (2, 3):
        symbol = resolve_layer_symbol(level, settings)
        rows.append((f"Layer {level} ({symbol})", format_layer_value(stats, symbol)))
    return rows


def render_panel(
    stats: PageStats,
    settings: Settings,
    document: str | Path | None = None,
) -> str:
    """Render the stats panel as plain text."""
    template = _get_env().get_template("panel.txt")
    return template.render(
        rows=layer_rows(stats, settings),
        document=str(document) if document else None,
    )


def panel_data(
    stats: PageStats,
    settings: Settings,
    document: str | Path | None = None,
) -> dict[str, Any]:
    """JSON-friendly form of the panel: raw counts plus display rows."""
    return {
        "document": str(document) if document else None,
        "order": settings.order,
        "stats": stats.as_dict(),
        "layers": {label: value for label, value in layer_rows(stats, settings)},
    }
