"""Plugin installation through a generated launcher script."""

from __future__ import annotations

import keyword
import shutil
import subprocess
import sys
from pathlib import Path

from daizen.utils import LogLevel, log, run_command

PLUGINS: list[str] = []
DAIZEN_DIR = Path(".daizen")
TEMP_DIR = DAIZEN_DIR / "tmp"


def exec_ext() -> str:
    """Return the executable suffix of the current platform."""
    return ".exe" if sys.platform.startswith("win") else ""


def _launcher_path() -> Path:
    return DAIZEN_DIR / ("Daizen" + exec_ext())


def _check_name(name: str) -> None:
    parts = name.split(".")
    if not all(part.isidentifier() and not keyword.iskeyword(part) for part in parts):
        raise ValueError(f"invalid plugin module name: {name!r}")


def _launcher_source(names: list[str]) -> str:
    imports = "".join(f"import {name}\n" for name in names)
    return (
        "import sys\n\n"
        f"{imports}"
        "from daizen import cli, plugins\n\n"
        f"plugins.PLUGINS.extend({names!r})\n"
        "sys.exit(cli._dispatch(sys.argv[1:], delegate=False))\n"
    )


def generate_temp() -> Path:
    """Create the temporary build directory and return it."""
    log(LogLevel.INFO, "Generate temp files")
    TEMP_DIR.mkdir(parents=True, exist_ok=True)
    return TEMP_DIR


def rebuild(plugins: list[str] | None = None) -> Path | None:
    """Write a launcher that loads ``plugins`` before running the commands.

    Returns the launcher's path, or None after logging why it failed.
    """
    names = list(PLUGINS if plugins is None else plugins)
    try:
        for name in names:
            _check_name(name)
        temp = generate_temp()
        log(LogLevel.INFO, "Generate launcher")
        script = temp / "main.py"
        script.write_text(_launcher_source(names), encoding="utf-8")
        run_command(sys.executable, "-m", "py_compile", str(script))
        target = _launcher_path()
        shutil.copyfile(script, target)
    except (OSError, ValueError, subprocess.CalledProcessError) as exc:
        log(LogLevel.ERROR, "Rebuild error:", exc)
        return None
    finally:
        shutil.rmtree(TEMP_DIR, ignore_errors=True)
    log(LogLevel.SUCCESS, "Generate success")
    return target


def install_plugin(name: str, plugins: list[str] | None = None) -> Path | None:
    """Add ``name`` to the plugin list and rebuild the launcher."""
    if not name:
        return None
    plugins = PLUGINS if plugins is None else plugins
    if name in plugins:
        log(LogLevel.ERROR, "Plugin", name, "already exists")
        return None
    plugins.append(name)
    return rebuild(plugins)


def uninstall_plugin(name: str, plugins: list[str] | None = None) -> Path | None:
    """Remove ``name`` from the plugin list and rebuild the launcher."""
    if not name:
        return None
    plugins = PLUGINS if plugins is None else plugins
    plugins[:] = [plugin for plugin in plugins if plugin != name]
    return rebuild(plugins)