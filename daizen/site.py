"""The site being generated and the loading of its configuration."""

from __future__ import annotations

import os

from daizen import theme
from daizen.cache import DEFAULT_CACHE_PATH, load_cache
from daizen.model import CacheEntry, SiteInfo
from daizen.theme import ConfigNotFoundError, read_config_file

SITE = SiteInfo(theme=theme.THEME)
CACHE: dict[str, CacheEntry] = {}


def load_config(directory: str = ".") -> SiteInfo:
    """Load site configuration, the page cache and theme configuration."""
    SITE.wd = os.path.abspath(directory).replace("\\", "/")
    try:
        data = read_config_file(directory)
    except ConfigNotFoundError:
        raise ConfigNotFoundError("can't find site config file") from None
    SITE.cfg.update(data)
    CACHE.clear()
    CACHE.update(load_cache(os.path.join(directory, DEFAULT_CACHE_PATH)))
    theme.load_config(directory)
    return SITE