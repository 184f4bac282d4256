"""Generation of the whole site from its source directory."""

from __future__ import annotations

import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from termcolor import colored

from daizen import site
from daizen.cache import DEFAULT_CACHE_PATH, save_cache
from daizen.markdown_renderer import init_plugin
from daizen.model import CacheEntry, Config, Page, Router, SiteInfo
from daizen.page import render_front_matter, render_page, render_post
from daizen.renderers import RenderError, find_renderer
from daizen.router import process
from daizen.utils import LogLevel, get_mod_time, log, path_join, walk_files, write_file

_SUCCESS_LOG_LIMIT = 1500
_CACHE_MIN_PAGES = 500
_CACHE_MAX_PAGES = 5000


def _setting(cfg: Config, key: str, default: str) -> str:
    value = cfg.get(key)
    return default if value is None else str(value)


def _load_source(
    path: str,
    site_info: SiteInfo,
    cache: dict[str, CacheEntry],
    lock: threading.Lock,
) -> Page | None:
    """Read one source file, using the cache when it is still fresh."""
    router = process(Router(src=path), site_info)
    page = Page(router=router)
    with lock:
        entry = cache.get(router.file_path)
    try:
        mtime = get_mod_time(router.src)
        fresh = entry is not None and mtime == entry.time
    except OSError as exc:
        log(LogLevel.ERROR, exc, "on", path)
        mtime, fresh = 0, False

    if fresh:
        if entry.raw_content and not entry.content:
            try:
                write_file(router.dest, entry.raw_content)
            except OSError as exc:
                log(LogLevel.ERROR, exc, "on", path)
            return None
        if entry.meta:
            page.raw_content = entry.raw_content.decode("utf-8", errors="replace")
            page.content = entry.content.decode("utf-8", errors="replace")
            page.meta = entry.meta
            layout = entry.meta.get("layout")
            if layout is not None:
                router.layout = str(layout)
            return page

    try:
        render_front_matter(page)
    except (OSError, ValueError, RenderError) as exc:
        log(LogLevel.ERROR, exc, "on", path)

    result = None
    if page.meta is not None:
        try:
            render_post(page)
        except (ValueError, RenderError) as exc:
            log(LogLevel.ERROR, exc, "on", path)
        result = page

    with lock:
        cache[router.file_path] = CacheEntry(
            time=mtime,
            raw_content=page.raw_content.encode("utf-8"),
            content=page.content.encode("utf-8"),
            meta=page.meta,
        )
    return result


def render_site(site_info: SiteInfo) -> list[Page]:
    """Render every file of the source directory into the public directory.

    Problems with single files are logged and skipped; the last error met
    is raised once all work is done. Returns the rendered pages.
    """
    if find_renderer(".md", ".html") is None:
        init_plugin()
    start = time.perf_counter()
    source_dir = path_join(site_info.wd, _setting(site_info.cfg, "source_dir", "source"))
    cache = site.CACHE
    lock = threading.Lock()
    errors: list[Exception] = []

    try:
        sources = list(walk_files(source_dir))
    except OSError as exc:
        errors.append(exc)
        sources = []

    def render(indexed: tuple[int, Page]) -> Exception | None:
        index, page = indexed
        try:
            render_page(page, site_info)
        except OSError as exc:
            log(LogLevel.ERROR, exc, "on", page.router.src)
            return exc
        if index < _SUCCESS_LOG_LIMIT:
            log(LogLevel.SUCCESS, page.router.src, "->", page.router.dest)
        return None

    with ThreadPoolExecutor(max_workers=os.cpu_count() or 1) as pool:
        loaded = pool.map(lambda path: _load_source(path, site_info, cache, lock), sources)
        site_info.pages = [page for page in loaded if page is not None]
        errors.extend(
            exc for exc in pool.map(render, enumerate(site_info.pages)) if exc is not None
        )

    count = len(site_info.pages)
    elapsed_ms = (time.perf_counter() - start) * 1e3
    log(LogLevel.INFO, "Generated", count, "pages in", elapsed_ms, "ms")
    if _CACHE_MIN_PAGES < count < _CACHE_MAX_PAGES:
        log(LogLevel.INFO, f'Saving cache to "{DEFAULT_CACHE_PATH}"...')
        cache_path = Path(site_info.wd or ".", DEFAULT_CACHE_PATH)
        try:
            cache_path.parent.mkdir(parents=True, exist_ok=True)
            save_cache(cache, str(cache_path))
        except OSError as exc:
            log(LogLevel.ERROR, exc)
    print(colored("Bye!", "blue"))
    if errors:
        raise errors[-1]
    return site_info.pages