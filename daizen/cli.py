"""Command line interface of the site generator."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from collections.abc import Sequence

import yaml

from daizen import generator, plugins, site
from daizen.renderers import RenderError
from daizen.utils import LogLevel, file_exists, log, run_command


def generate() -> None:
    """Load the configuration in the current directory and build the site."""
    os.makedirs(".daizen", exist_ok=True)
    generator.render_site(site.load_config("."))


def _cmd_generate(args: argparse.Namespace) -> int:
    try:
        generate()
    except (OSError, ValueError, RenderError, yaml.YAMLError) as exc:
        log(LogLevel.ERROR, exc)
        return 1
    return 0


def _cmd_install(args: argparse.Namespace) -> int:
    if not args.name:
        print("Please input the plugin name")
        return 0
    plugins.install_plugin(args.name)
    return 0


def _cmd_uninstall(args: argparse.Namespace) -> int:
    if not args.name:
        print("Please input the plugin name")
        return 0
    plugins.uninstall_plugin(args.name)
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    for plugin in plugins.PLUGINS:
        print(plugin)
    return 0


def _cmd_rebuild(args: argparse.Namespace) -> int:
    plugins.rebuild()
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="daizen", description="A static site generator")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser(
        "generate", aliases=["g"], help="Generate the site"
    ).set_defaults(handler=_cmd_generate)
    install = commands.add_parser("install", aliases=["i"], help="Install the plugin")
    install.add_argument("name", nargs="?")
    install.set_defaults(handler=_cmd_install)
    uninstall = commands.add_parser("uninstall", aliases=["uni"], help="Uninstall the plugin")
    uninstall.add_argument("name", nargs="?")
    uninstall.set_defaults(handler=_cmd_uninstall)
    commands.add_parser("list", aliases=["l"], help="List the plugins").set_defaults(
        handler=_cmd_list
    )
    commands.add_parser("reset", help="Reset the Daizen").set_defaults(handler=_cmd_rebuild)
    commands.add_parser("rebuild", help="Rebuild the Daizen").set_defaults(
        handler=_cmd_rebuild
    )
    return parser


def _dispatch(argv: list[str], delegate: bool) -> int:
    """Run a command, handing it to an installed launcher when one exists."""
    if delegate and argv:
        launcher = plugins.DAIZEN_DIR / ("Daizen" + plugins.exec_ext())
        if file_exists(launcher) and argv[0] != "reset":
            try:
                run_command(sys.executable, str(launcher), *argv)
            except subprocess.CalledProcessError as exc:
                return exc.returncode
            return 0
    parser = _build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``daizen`` command."""
    return _dispatch(list(sys.argv[1:] if argv is None else argv), delegate=True)


if __name__ == "__main__":
    sys.exit(main())