"""Mapping of source file paths to their output locations."""

from __future__ import annotations

import dataclasses
import os

from daizen.model import Config, Router, SiteInfo
from daizen.renderers import get_dest_ext
from daizen.utils import path_join


def _ext(path: str) -> str:
    name = path.rpartition("/")[2]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _setting(cfg: Config, key: str, default: str) -> str:
    value = cfg.get(key)
    return default if value is None else str(value)


def replace_sep(path: str) -> str:
    """Return ``path`` with backslashes turned into forward slashes."""
    return path.replace("\\", "/")


def process(router: Router, site_info: SiteInfo, wd: str | None = None) -> Router:
    """Fill in the destination and site-relative paths of ``router``.

    ``wd`` defaults to the site's working directory, then the current one.
    """
    if wd is None:
        wd = site_info.wd or os.getcwd()
    wd = replace_sep(wd)
    source_dir = _setting(site_info.cfg, "source_dir", "source")
    public_dir = _setting(site_info.cfg, "public_dir", "public")
    src = replace_sep(router.src)
    src_ext = _ext(src)
    dest = path_join(wd, public_dir, src[len(path_join(wd, source_dir)):])
    dest_ext = get_dest_ext(src_ext) or src_ext
    dest = dest[: len(dest) - len(src_ext)] + dest_ext
    relative = dest[len(wd) + len(public_dir) + 1:]
    return dataclasses.replace(
        router, src=src, dest=dest, path=relative, file_path=relative
    )