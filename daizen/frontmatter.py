"""Splitting of YAML, TOML or JSON front matter from page files."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml

from daizen.model import Config

_CLOSER = b"\n---"


class FrontMatterError(ValueError):
    """Raised when a front matter block cannot be parsed."""


def _brace_block(content: bytes) -> bytes:
    depth = 1
    for index, byte in enumerate(content):
        if byte == ord("{"):
            depth += 1
        elif byte == ord("}"):
            depth -= 1
        if depth == 0:
            return content[:index]
    return content


def _block(content: bytes) -> bytes | None:
    parts = content[3:].split(_CLOSER)
    return parts[0] if len(parts) >= 2 else None


def _parse_yaml(block: bytes) -> Any:
    return yaml.safe_load(block)


def _parse_toml(block: bytes) -> Any:
    return tomllib.loads(block.decode("utf-8"))


def _parse_json(block: bytes) -> Any:
    return json.loads(block)


_PARSERS = {b"---": _parse_yaml, b"+++": _parse_toml, b";;;": _parse_json}


def _parse(parser: Any, block: bytes, src: str) -> dict[str, Any]:
    try:
        data = parser(block)
    except (yaml.YAMLError, ValueError) as exc:
        raise FrontMatterError(f"invalid front matter in {src}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontMatterError(f"front matter in {src} is not a mapping")
    return data


def front_matter(src: str) -> tuple[Config | None, bytes]:
    """Read ``src`` and return its front matter and content.

    The metadata is None when the file has no recognised front matter. The
    content returned alongside metadata is the whole file as read.
    """
    raw = Path(src).read_bytes()
    content = raw.lstrip(b" \n\r\t")
    if len(content) < 2:
        return None, raw
    if content.startswith(b"{"):
        _parse(_parse_json, _brace_block(content), src)
    if len(content) < 6:
        return None, raw
    parser = _PARSERS.get(content[:3])
    if parser is None:
        return None, raw
    block = _block(content)
    if block is None:
        return None, b""
    return Config(_parse(parser, block, src)), raw