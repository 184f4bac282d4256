"""Core data types shared across the site generator."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


class Config(dict):
    """A configuration mapping with dotted-path lookups."""

    def lookup(self, path: str) -> Any:
        """Return the value at a dotted ``path``, or None if a step is missing."""
        head, sep, rest = path.partition(".")
        if not sep:
            return self.get(path)
        nested = self.get(head)
        if nested is None:
            return None
        if not isinstance(nested, Mapping):
            raise TypeError(f"config value {head!r} is not a mapping")
        return Config(nested).lookup(rest)

    def get_string(self, path: str, default: str = "") -> str:
        """Return the string at ``path`` or ``default``."""
        value = self.lookup(path)
        return value if isinstance(value, str) else default

    def get_int(self, path: str, default: int = 0) -> int:
        """Return the integer at ``path`` or ``default``."""
        value = self.lookup(path)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return default

    def get_list(self, path: str, default: list[Any] | None = None) -> list[Any]:
        """Return the list at ``path`` or ``default`` (an empty list if not given)."""
        value = self.lookup(path)
        if isinstance(value, list):
            return value
        return [] if default is None else default

    def get_bool(self, path: str, default: bool = False) -> bool:
        """Return the boolean at ``path`` or ``default``."""
        value = self.lookup(path)
        return value if isinstance(value, bool) else default


@dataclass
class Router:
    """Source and destination locations of one input file."""

    src: str = ""
    dest: str = ""
    layout: str = ""
    path: str = ""
    file_path: str = ""


@dataclass
class Page:
    """A page with its route, raw and rendered content and front matter."""

    router: Router = field(default_factory=Router)
    content: str = ""
    raw_content: str = ""
    meta: Config | None = None


Layout = Callable[["SiteInfo", Page], str]
RootLayout = Callable[["SiteInfo", Page, str], str]


@dataclass
class ThemeInfo:
    """The active theme: its layouts, root layout and configuration."""

    name: str = ""
    version: int = 0
    layouts: dict[str, Layout] = field(default_factory=dict)
    cfg: Config = field(default_factory=Config)
    root_layout: RootLayout | None = None


@dataclass
class SiteInfo:
    """Everything known about the site being generated."""

    cfg: Config = field(default_factory=Config)
    theme: ThemeInfo = field(default_factory=ThemeInfo)
    pages: list[Page] = field(default_factory=list)
    posts: list[Page] = field(default_factory=list)
    wd: str = ""


@dataclass
class CacheEntry:
    """Cached render result for one source file."""

    time: int = 0
    content: bytes = b""
    raw_content: bytes = b""
    meta: Config | None = None