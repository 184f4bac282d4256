"""Registry of content renderers keyed by source and destination extension."""

from __future__ import annotations

import abc
from pathlib import Path

from daizen.utils import write_file


class RenderError(Exception):
    """Raised when no renderer converts between two file extensions."""


class Renderer(abc.ABC):
    """Converts file content from one format into another."""

    @abc.abstractmethod
    def render(self, src: str, dest: str, content: bytes) -> bytes:
        """Convert ``content`` read from ``src`` into the format of ``dest``."""


_RENDERERS: dict[tuple[str, str], Renderer] = {}


def _ext(path: str) -> str:
    """Return the extension of the last slash-separated element, dot included."""
    name = path.rpartition("/")[2]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def register_renderer(src: str, dest: str, renderer: Renderer) -> None:
    """Register ``renderer`` for converting ``src`` extensions to ``dest`` ones."""
    _RENDERERS[(src, dest)] = renderer


def find_renderer(src: str, dest: str) -> Renderer | None:
    """Return the renderer registered for the extension pair, if any."""
    return _RENDERERS.get((src, dest))


def render_text(src: str, dest: str, content: bytes) -> bytes:
    """Render ``content`` from the extension of ``src`` to that of ``dest``.

    Content passes through unchanged when both extensions match and no
    renderer is registered for them.
    """
    src_ext, dest_ext = _ext(src), _ext(dest)
    renderer = _RENDERERS.get((src_ext, dest_ext))
    if renderer is None:
        if src_ext == dest_ext:
            return content
        raise RenderError(
            f"need renderer who can render file from {src_ext} to {dest_ext}"
        )
    return renderer.render(src, dest, content)


def render_file(src: str, dest: str, need_write: bool = False) -> bytes:
    """Read ``src``, render it for ``dest`` and optionally write the result."""
    text = render_text(src, dest, Path(src).read_bytes())
    if need_write:
        write_file(dest, text)
    return text


def get_dest_ext(ext: str) -> str:
    """Return the destination extension registered for ``ext``, or ''."""
    return next((dest for src, dest in _RENDERERS if src == ext), "")