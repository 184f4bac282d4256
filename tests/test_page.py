from pathlib import Path

import pytest

from daizen.markdown_renderer import init_plugin
from daizen.model import Page, Router, SiteInfo, ThemeInfo
from daizen.page import render_front_matter, render_page, render_post
from daizen.renderers import RenderError


@pytest.fixture(autouse=True)
def _markdown():
    init_plugin()


def _page(src: Path, dest: Path, **kwargs) -> Page:
    return Page(router=Router(src=src.as_posix(), dest=dest.as_posix()), **kwargs)


def test_render_post_markdown(tmp_path):
    page = _page(tmp_path / "post.md", tmp_path / "post.html", raw_content="# Title\n")
    render_post(page)
    assert "<h1" in page.content
    assert "Title" in page.content


def test_render_post_html_passes_through(tmp_path):
    page = _page(tmp_path / "a.html", tmp_path / "b.html", raw_content="<b>x</b>")
    render_post(page)
    assert page.content == "<b>x</b>"


def test_render_post_unknown_extension(tmp_path):
    page = _page(tmp_path / "a.unknownext", tmp_path / "a.html", raw_content="x")
    with pytest.raises(RenderError):
        render_post(page)


def test_front_matter_defaults(tmp_path):
    text = "---\ntitle: Hello\n---\nbody text\n"
    src = tmp_path / "p.md"
    src.write_text(text)
    page = _page(src, tmp_path / "p.html")
    render_front_matter(page)
    assert page.router.layout == "page"
    assert page.meta["layout"] == "page"
    assert page.meta["title"] == "Hello"
    assert page.meta["author"] == ""
    assert page.raw_content == text


def test_front_matter_explicit_layout(tmp_path):
    src = tmp_path / "p.md"
    src.write_text("---\nlayout: post\nauthor: someone\n---\nbody\n")
    page = _page(src, tmp_path / "p.html")
    render_front_matter(page)
    assert page.router.layout == "post"
    assert page.meta["author"] == "someone"
    assert page.meta["title"] == ""


def test_no_front_matter_is_written_directly(tmp_path):
    src = tmp_path / "note.txt"
    src.write_bytes(b"plain content here")
    dest = tmp_path / "out" / "deep" / "note.txt"
    page = _page(src, dest)
    render_front_matter(page)
    assert page.meta is None
    assert dest.read_bytes() == b"plain content here"


def test_render_page_with_layout_and_root(tmp_path):
    theme = ThemeInfo(
        layouts={"post": lambda site, page: "<article>" + page.content + "</article>"},
        root_layout=lambda site, page, body: "<html>" + body + "</html>",
    )
    dest = tmp_path / "public" / "x" / "index.html"
    page = _page(tmp_path / "x.md", dest, content="hi")
    page.router.layout = "post"
    render_page(page, SiteInfo(theme=theme))
    assert dest.read_text() == "<html><article>hi</article></html>"


def test_render_page_falls_back_to_page_layout(tmp_path):
    theme = ThemeInfo(layouts={"page": lambda site, page: "[" + page.content + "]"})
    dest = tmp_path / "out.html"
    page = _page(tmp_path / "x.md", dest, content="body")
    page.router.layout = "missing"
    render_page(page, SiteInfo(theme=theme))
    assert dest.read_text() == "[body]"


def test_render_page_without_layouts_writes_content(tmp_path):
    dest = tmp_path / "a" / "b.html"
    page = _page(tmp_path / "x.md", dest, content="<p>raw</p>")
    render_page(page, SiteInfo(theme=ThemeInfo()))
    assert dest.read_text() == "<p>raw</p>"