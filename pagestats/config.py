"""Load, validate and persist .pagestats/config.yaml."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from pagestats.stats import ORDERS, Settings

log = logging.getLogger(__name__)


# Default config values
DEFAULTS: dict[str, Any] = {
    "order": "default",
}


class ConfigError(Exception):
    """Raised when config is invalid or unreadable."""


def _validate(config: dict) -> None:
    """Validate required fields in config."""
    order = config.get("order")
    if order not in ORDERS:
        raise ConfigError(
            f"Unsupported order '{order}'. Expected one of: {', '.join(ORDERS)}."
        )


def config_path(project_root: Path) -> Path:
    return Path(project_root) / ".pagestats" / "config.yaml"


def load_config(project_root: Path | None = None) -> dict:
    """Load config from .pagestats/config.yaml under project_root.

    Falls back to cwd if project_root is None. A missing file yields
    DEFAULTS, so callers always get a full config dict.
    """
    root = Path(project_root) if project_root else Path.cwd()
    path = config_path(root)

    if not path.exists():
        log.debug("No config at %s, using defaults", path)
        return dict(DEFAULTS)

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config is not valid YAML: {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config must be a YAML mapping, got {type(raw).__name__}")

    config = {**DEFAULTS, **raw}
    _validate(config)
    return config


def load_settings(project_root: Path | None = None) -> Settings:
    """Load settings, merged over DEFAULTS."""
    log.info("Loading settings")
    config = load_config(project_root)
    return Settings(order=config["order"])


def save_settings(project_root: Path, settings: Settings) -> Path:
    """Persist settings to .pagestats/config.yaml, keeping unknown keys."""
    log.info("Saving settings (order=%s)", settings.order)
    _validate({"order": settings.order})

    path = config_path(project_root)
    existing: dict = {}
    if path.exists():
        existing = load_config(project_root)
    config = {**existing, "order": settings.order}

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(config, sort_keys=False))
    return path
