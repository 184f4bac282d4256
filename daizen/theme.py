"""The active theme: layouts, root layout and theme configuration."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from daizen.model import Layout, RootLayout, ThemeInfo
from daizen.utils import file_exists

THEME = ThemeInfo()


class ConfigNotFoundError(FileNotFoundError):
    """Raised when none of the recognised configuration files exists."""


def _load_toml(data: bytes) -> Any:
    return tomllib.loads(data.decode("utf-8"))


_CONFIG_FILES: tuple[tuple[str, Callable[[bytes], Any]], ...] = (
    ("_cfg.yml", yaml.safe_load),
    ("_cfg.yaml", yaml.safe_load),
    ("_cfg.json", json.loads),
    ("_cfg.toml", _load_toml),
)


def read_config_file(directory: str = ".") -> dict[str, Any]:
    """Parse the first of _cfg.yml, _cfg.yaml, _cfg.json, _cfg.toml in ``directory``."""
    base = Path(directory)
    for name, parse in _CONFIG_FILES:
        candidate = base / name
        if file_exists(candidate):
            data = parse(candidate.read_bytes())
            if data is None:
                return {}
            if not isinstance(data, dict):
                raise ValueError(f"{candidate}: configuration must be a mapping")
            return data
    raise ConfigNotFoundError(f"no configuration file found in {directory}")


def register_layout(name: str, func: Layout) -> None:
    """Register the layout function used for pages with layout ``name``."""
    THEME.layouts[name] = func


def get_layout(name: str) -> Layout | None:
    """Return the layout registered as ``name``, if any."""
    return THEME.layouts.get(name)


def set_theme(name: str, version: int) -> None:
    """Record the theme's name and version."""
    THEME.name = name
    THEME.version = version


def load_config(directory: str = ".") -> None:
    """Merge the configuration file in ``directory`` into the theme config."""
    try:
        data = read_config_file(directory)
    except ConfigNotFoundError:
        raise ConfigNotFoundError("can't find theme config file") from None
    THEME.cfg.update(data)


def register_root_layout(func: RootLayout | None) -> None:
    """Set the layout that wraps every rendered page body."""
    THEME.root_layout = func


def get_root_layout() -> RootLayout | None:
    """Return the root layout, if one is set."""
    return THEME.root_layout