"""Command-line entry point: a demo of the menu toolkit."""

from __future__ import annotations

import argparse
import sys

from . import __version__, config
from .exceptions import ConfigurationError
from .menu import Menu, QuickMenu, Runnable, SubMenu, SubQuickMenu
from .prompt import Prompt, max_length
from .terminal import get_terminal
from .themes import PALETTES, current_palette, set_palette

NAME_LIMIT = 16


def build_demo(quick: bool = False) -> Runnable:
    """Build the demo hierarchy: a root menu, a palette submenu and a name prompt."""
    terminal = get_terminal()
    root_class, sub_class = (QuickMenu, SubQuickMenu) if quick else (Menu, SubMenu)
    names: list[str] = []

    name_prompt = Prompt(f"Enter your name (max {NAME_LIMIT} characters):", max_length(NAME_LIMIT))
    root = root_class("simple-ui demo")

    def say_hello() -> None:
        names.append(name_prompt.get())
        terminal.write(f"Hello, {names[-1]}!\n\n")

    def show_last_choice() -> None:
        terminal.write(f"Last choice in this menu: {root.recall_option()}\n\n")

    def status() -> None:
        last = names[-1] if names else "nobody yet"
        terminal.write(f"Palette: {current_palette().name} | Last name: {last}")

    palettes = sub_class("Palettes")
    for name in PALETTES:
        palettes.option(name, lambda name=name: set_palette(name))

    return (
        root.header(status)
        .option("Say hello", say_hello)
        .option("Show last choice", show_last_choice)
        .submenu("Palettes", palettes)
    )


def cmd_demo(args: argparse.Namespace) -> None:
    if args.palette:
        set_palette(args.palette)
    build_demo(quick=args.quick).run()


def cmd_palettes(args: argparse.Namespace) -> None:
    terminal = get_terminal()
    for palette in PALETTES.values():
        terminal.write(f"{palette.name:<10} ")
        terminal.write_colored("options ", palette.primary)
        terminal.write_colored("exit ", palette.reserved)
        terminal.write_colored("header ", palette.attention)
        terminal.write_colored("error\n", palette.error)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="simple-ui",
        description="simple-ui: numbered terminal menus and prompts",
    )
    parser.add_argument("--version", action="version", version=f"simple-ui {__version__}")
    parser.add_argument("--debug", action="store_true", help="Write a debug log")

    subparsers = parser.add_subparsers(dest="command")

    demo_p = subparsers.add_parser("demo", help="Run the interactive demo menu")
    demo_p.add_argument("--quick", action="store_true", help="Use single-keystroke menus")
    demo_p.add_argument("--palette", choices=list(PALETTES), help="Color palette")
    demo_p.set_defaults(func=cmd_demo)

    palettes_p = subparsers.add_parser("palettes", help="List color palettes")
    palettes_p.set_defaults(func=cmd_palettes)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = config.load_config()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    config.configure_logging(args.debug or cfg["debug"])
    set_palette(cfg["palette"])

    if not hasattr(args, "func"):
        parser.print_help()
        return

    try:
        args.func(args)
    except EOFError:
        print()
    except KeyboardInterrupt:
        print()
        sys.exit(130)
