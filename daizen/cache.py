"""Line-oriented on-disk cache of rendered pages."""

from __future__ import annotations

import datetime
import json
import re
from pathlib import Path
from typing import Any

from daizen.model import CacheEntry, Config
from daizen.utils import count_byte, split_byte, write_file

DEFAULT_CACHE_PATH = ".daizen/.cache"

_ESCAPE = re.compile(rb"\\[n/]")
_MASK64 = (1 << 64) - 1


def encode(raw: bytes) -> bytes:
    """Escape newlines as '\\n' and pipes as '\\/'."""
    return raw.replace(b"\n", b"\\n").replace(b"|", b"\\/")


def decode(raw: bytes) -> bytes:
    """Reverse :func:`encode`."""
    return _ESCAPE.sub(lambda m: b"\n" if m.group(0) == b"\\n" else b"|", raw)


def encode_count(raw: bytes) -> int:
    """Return the length of ``encode(raw)`` without building it."""
    return len(raw) + count_byte(raw, b"\n") + count_byte(raw, b"|")


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def load_cache(path: str = DEFAULT_CACHE_PATH) -> dict[str, CacheEntry]:
    """Read the cache file; a missing or unreadable file gives an empty cache."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        return {}
    entries: dict[str, CacheEntry] = {}
    for line in split_byte(data, b"\n"):
        fields = split_byte(line, b"|")
        if len(fields) < 5:
            continue
        fpath = decode(fields[0]).decode("utf-8", errors="surrogateescape")
        stamp = decode(fields[1])
        if len(stamp) < 8:
            entries.pop(fpath, None)
            continue
        try:
            meta = json.loads(decode(fields[2]))
        except ValueError:
            meta = None
        entries[fpath] = CacheEntry(
            time=int.from_bytes(stamp[:8], "big", signed=True),
            meta=Config(meta) if isinstance(meta, dict) else Config(),
            raw_content=decode(fields[3]),
            content=decode(fields[4]),
        )
    return entries


def save_cache(entries: dict[str, CacheEntry], path: str = DEFAULT_CACHE_PATH) -> None:
    """Write ``entries`` to the cache file, one escaped record per line."""
    lines = []
    for fpath, entry in entries.items():
        meta = json.dumps(
            entry.meta, sort_keys=True, separators=(",", ":"), default=_json_default
        ).encode("utf-8")
        record = b"|".join(
            (
                encode(fpath.encode("utf-8", errors="surrogateescape")),
                encode((entry.time & _MASK64).to_bytes(8, "big")),
                encode(meta),
                encode(entry.raw_content),
                encode(entry.content),
            )
        )
        lines.append(record + b"\n")
    write_file(path, b"".join(lines))