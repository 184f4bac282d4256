"""Front matter parsing, content rendering and layout application for pages."""

from __future__ import annotations

from pathlib import Path

from daizen.frontmatter import front_matter
from daizen.model import Page, SiteInfo
from daizen.renderers import render_text
from daizen.utils import write_file


def _write(dest: str, data: bytes) -> None:
    Path(dest).parent.mkdir(parents=True, exist_ok=True)
    write_file(dest, data)


def render_post(page: Page) -> None:
    """Render the page's raw content to HTML and store it as its content."""
    rendered = render_text(page.router.src, ".html", page.raw_content.encode("utf-8"))
    page.content = rendered.decode("utf-8", errors="replace")


def render_page(page: Page, site_info: SiteInfo) -> None:
    """Apply the page's layout (or the 'page' layout) and write the result.

    Without any matching layout the rendered content is written as it is.
    """
    layouts = site_info.theme.layouts
    layout = layouts.get(page.router.layout) or layouts.get("page")
    if layout is None:
        body = page.content
    else:
        body = layout(site_info, page)
        root = site_info.theme.root_layout
        if root is not None:
            body = root(site_info, page, body)
    _write(page.router.dest, body.encode("utf-8"))


def render_front_matter(page: Page) -> None:
    """Read the page's source and split off its front matter.

    A file without front matter is rendered straight to its destination and
    the page's metadata stays None.
    """
    meta, content = front_matter(page.router.src)
    if meta is None:
        _write(page.router.dest, render_text(page.router.src, page.router.dest, content))
        return
    layout = meta.get("layout")
    if layout is not None:
        page.router.layout = str(layout)
    else:
        page.router.layout = "page"
        meta["layout"] = "page"
    meta.setdefault("title", "")
    if meta["title"] is None:
        meta["title"] = ""
    meta.setdefault("author", "")
    if meta["author"] is None:
        meta["author"] = ""
    page.meta = meta
    page.raw_content = content.decode("utf-8", errors="replace")