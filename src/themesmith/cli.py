"""Command line interface for inspecting and managing persisted themes."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Sequence

from .events import EventBus
from .services.settings import font_size, load_settings, set_font_size
from .theme import TOKEN_ORDER, AppearanceMode, Color, Theme, ThemeEditorSession, ThemeError, ThemeRegistry
from .utils import logging as logging_utils

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themesmith",
        description="List, create, import and export editor themes.",
    )
    parser.add_argument(
        "--settings-path",
        metavar="PATH",
        help="Override the default ~/.themesmith/store.json path.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List built-in and user themes in registry order.")

    show = commands.add_parser("show", help="Print the colors of a theme.")
    show.add_argument("name", nargs="?", help="Theme name; defaults to the active theme.")

    use = commands.add_parser("use", help="Make a theme the active theme.")
    use.add_argument("name")

    create = commands.add_parser("create", help="Create a user theme from the active theme.")
    create.add_argument("name")
    create.add_argument("--appearance", choices=[mode.value for mode in AppearanceMode])
    create.add_argument("--background", metavar="HEX")
    create.add_argument("--tint", metavar="HEX")
    create.add_argument(
        "--color",
        dest="colors",
        metavar="KIND=HEX",
        action="append",
        default=[],
        help="Token color override, e.g. keyword=#ff0000 (repeatable).",
    )

    export = commands.add_parser("export", help="Write a theme record to a file.")
    export.add_argument("name")
    export.add_argument("path", type=Path)

    import_cmd = commands.add_parser("import", help="Append a theme record file to the user themes.")
    import_cmd.add_argument("path", type=Path)
    import_cmd.add_argument("--activate", action="store_true")

    remove = commands.add_parser("remove", help="Delete the user theme at INDEX.")
    remove.add_argument("index", type=int)

    size = commands.add_parser("font-size", help="Print or change the editor font size.")
    size.add_argument("size", nargs="?", type=int)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides: Dict[str, Any] = {"store_path": args.settings_path}
    if args.debug:
        overrides["debug_logging"] = True
    settings = load_settings(overrides)
    log_path = logging_utils.configure_logging(settings)
    _LOGGER.debug("Logging to %s", log_path)

    bus: EventBus = EventBus()
    store = settings.open_store()
    registry = ThemeRegistry(store, bus=bus, default_tint=settings.tint_color())
    try:
        return _dispatch(args, registry, bus)
    except (ThemeError, ValueError, OSError) as exc:
        _LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


def _dispatch(args: argparse.Namespace, registry: ThemeRegistry, bus: EventBus) -> int:
    command = args.command
    if command == "list":
        builtin_count = len(registry.builtins)
        for position, entry in enumerate(registry.list_all()):
            label = "built-in" if position < builtin_count else f"user {position - builtin_count}"
            print(f"{entry.name or '(unnamed)'}\t{entry.value.appearance.value}\t{label}")
        return 0
    if command == "show":
        theme = _require(registry, args.name) if args.name else registry.active_theme()
        _print_theme(theme, registry)
        return 0
    if command == "use":
        registry.choose(_require(registry, args.name))
        return 0
    if command == "create":
        session = ThemeEditorSession.new_theme(registry)
        session.name = args.name
        if args.appearance:
            session.appearance = AppearanceMode(args.appearance)
        if args.background:
            session.background = Color.from_hex(args.background)
        if args.tint:
            session.tint = Color.from_hex(args.tint)
        for item in args.colors:
            kind, _, value = item.partition("=")
            if not value:
                raise ValueError(f"Color override '{item}' must use KIND=HEX syntax.")
            session.set_color(kind.strip().lower(), value.strip())
        session.commit()
        print(f"created user theme {session.index}: {args.name}")
        return 0
    if command == "export":
        path = registry.export_theme(_require(registry, args.name), args.path)
        print(path)
        return 0
    if command == "import":
        theme = registry.import_theme(args.path, activate=args.activate)
        print(f"imported {theme.display_name or '(unnamed)'}")
        return 0
    if command == "remove":
        removed = registry.remove_theme_at(args.index)
        print(f"removed {removed.display_name or '(unnamed)'}")
        return 0
    if command == "font-size":
        store = registry.store
        if args.size is None:
            print(font_size(store))
        else:
            print(set_font_size(store, args.size, bus=bus))
        return 0
    raise ValueError(f"Unknown command '{command}'")  # pragma: no cover - argparse guards this


def _require(registry: ThemeRegistry, name: str) -> Theme:
    theme = registry.find(name)
    if theme is None:
        raise ValueError(f"Unknown theme '{name}'")
    return theme


def _print_theme(theme: Theme, registry: ThemeRegistry) -> None:
    print(f"name\t{theme.display_name}")
    print(f"appearance\t{theme.appearance.value}")
    print(f"tint\t{theme.resolved_tint(registry.default_tint).to_hex()}")
    for kind in TOKEN_ORDER:
        print(f"{kind.value}\t{theme.token_colors[kind].to_hex()}")
    print(f"background\t{theme.background_color.to_hex()}")


if __name__ == "__main__":  # pragma: no cover - manual invocation
    sys.exit(main())
