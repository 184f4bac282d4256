"""Markdown to HTML rendering with GitHub-flavoured extensions."""

from __future__ import annotations

from typing import Any

from markdown_it import MarkdownIt

from daizen.renderers import Renderer, register_renderer

_SPACES = " \t\n\r\v\f"


def _heading_id(text: str) -> str:
    """Build a heading identifier from ASCII letters, digits and separators."""
    parts = []
    for char in text:
        if ord(char) >= 128:
            continue
        if char.isalnum():
            parts.append(char.lower())
        elif char in _SPACES or char in "-_":
            parts.append("-")
    return "".join(parts) or "heading"


def _add_heading_ids(state: Any) -> None:
    used: set[str] = set()
    tokens = state.tokens
    for opening, inline in zip(tokens, tokens[1:]):
        if opening.type != "heading_open" or opening.attrGet("id"):
            continue
        base = _heading_id(inline.content.strip())
        candidate = base
        suffix = 1
        while candidate in used:
            candidate = f"{base}-{suffix}"
            suffix += 1
        used.add(candidate)
        opening.attrSet("id", candidate)


class MarkdownRenderer(Renderer):
    """Renders Markdown with tables, strikethrough, hard wraps and heading ids."""

    def __init__(self) -> None:
        self._md = MarkdownIt(
            "commonmark", {"breaks": True, "xhtmlOut": True, "html": False}
        ).enable(["table", "strikethrough"])
        self._md.core.ruler.push("heading_ids", _add_heading_ids)

    def render(self, src: str, dest: str, content: bytes) -> bytes:
        """Convert Markdown ``content`` into HTML."""
        return self._md.render(content.decode("utf-8")).encode("utf-8")


def init_plugin() -> MarkdownRenderer:
    """Register the Markdown renderer for '.md' to '.html' and return it."""
    renderer = MarkdownRenderer()
    register_renderer(".md", ".html", renderer)
    return renderer