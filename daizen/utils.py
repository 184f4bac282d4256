"""Filesystem, path, logging and process helpers."""

from __future__ import annotations

import enum
import os
import posixpath
import subprocess
import sys
from collections.abc import Iterator
from pathlib import Path

from termcolor import colored


class LogLevel(enum.IntEnum):
    """Severity labels used by :func:`log`."""

    WARNING = 0
    INFO = 1
    ERROR = 2
    DEBUG = 3
    SUCCESS = 4


_LABELS = {
    LogLevel.WARNING: ("Warning", "yellow"),
    LogLevel.INFO: ("Info", "blue"),
    LogLevel.ERROR: ("Error", "red"),
    LogLevel.DEBUG: ("Debug", "cyan"),
    LogLevel.SUCCESS: ("Success", "green"),
}


def count_byte(data: bytes, sep: bytes) -> int:
    """Return how many times the single byte ``sep`` occurs in ``data``."""
    return data.count(sep)


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` can be stat'ed."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def slice_str(text: str, start: int, end: int) -> str:
    """Slice ``text``; a negative ``end`` counts from the end, a large one is clamped."""
    if end < 0:
        end = len(text) + end
    if end > len(text):
        end = len(text)
    if start < 0 or end < 0 or start > end:
        raise IndexError(f"slice bounds out of range [{start}:{end}]")
    return text[start:end]


def write_file(path: str | os.PathLike[str], data: bytes) -> None:
    """Replace the contents of ``path`` with ``data``, creating the file if needed."""
    Path(path).write_bytes(data)


def _clean(path: str) -> str:
    """Lexically normalise a slash-separated path."""
    if not path:
        return "."
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def path_join(*args: str) -> str:
    """Join path elements with '/' and clean the result; all-empty input gives ''."""
    if sum(len(element) for element in args) == 0:
        return ""
    joined = ""
    for element in args:
        if joined or element:
            if joined:
                joined += "/"
            joined += element
    return _clean(joined)


def walk_files(directory: str) -> Iterator[str]:
    """Yield every file below ``directory``, depth first, in name order."""
    with os.scandir(directory) as scan:
        entries = sorted(scan, key=lambda entry: entry.name)
    for entry in entries:
        sub = path_join(directory, entry.name)
        if entry.is_dir(follow_symlinks=False):
            yield from walk_files(sub)
        else:
            yield sub


def file_count(directory: str) -> int:
    """Return the number of immediate subdirectories, or 0 if unreadable."""
    try:
        with os.scandir(directory) as scan:
            return sum(1 for entry in scan if entry.is_dir(follow_symlinks=False))
    except OSError:
        return 0


def split_byte(data: bytes, sep: bytes) -> list[bytes]:
    """Split ``data`` on every ``sep``; empty input gives an empty list."""
    if not data:
        return []
    return data.split(sep)


def log(level: int, *args: object) -> None:
    """Print a coloured severity label followed by ``args`` to standard error."""
    try:
        text, color = _LABELS[LogLevel(level)]
        label = colored(text, color) + ":"
    except ValueError:
        label = ""
    print(label, *args, file=sys.stderr)


def run_command(name: str, *args: str) -> None:
    """Run a program with inherited output; raise on a non-zero exit."""
    subprocess.run([name, *args], check=True)


def get_mod_time(path: str | os.PathLike[str]) -> int:
    """Return the modification time of ``path`` in nanoseconds."""
    return os.stat(path).st_mtime_ns