"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from iconkit import __version__
from iconkit.config import load_config, resolve_path
from iconkit.icons.loader import SvgParseError
from iconkit.options import ConfigurationError
from iconkit.preview.raster import ExternalToolError


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _log_level(verbose: bool, quiet: bool, configured: str | None) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return getattr(logging, (configured or "INFO").upper(), logging.INFO)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the "iconkit" logger once per process.

    Level comes from -v/-q, else the config's logging.level. Records go to
    stderr, and also to logging.file when one is configured.
    """
    log_cfg = load_config(None).get("logging") or {}
    logger = logging.getLogger("iconkit")
    logger.setLevel(_log_level(verbose, quiet, log_cfg.get("level")))
    if logger.handlers:
        return
    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file = log_cfg.get("file")
    if log_file:
        try:
            handlers.append(logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8"))
        except OSError as e:
            print(f"Warning: cannot open log file {log_file}: {e}", file=sys.stderr)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--dry-run", action="store_true", help="Report what would be done without writing files.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")


def _add_hidden_flags(parser: argparse.ArgumentParser) -> None:
    # No mutually exclusive group here: argparse cannot format usage for a group of
    # suppressed arguments. SUPPRESS defaults keep a flag given before the subcommand.
    for flags in (["--dry-run"], ["-v", "--verbose"], ["-q", "--quiet"]):
        parser.add_argument(*flags, action="store_true", help=argparse.SUPPRESS, default=argparse.SUPPRESS)


def _parse_rename(value: str) -> tuple[str, str]:
    old, sep, new = value.partition(":")
    if not sep or not old or not new:
        raise argparse.ArgumentTypeError(f"expected OLD:NEW, got {value!r}")
    return old, new


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iconkit",
        description="Build helpers for an SVG icon set: path optimization, previews, changelogs.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_common_flags(parser)

    # Repeated on every subparser so "iconkit optimize . --dry-run" works
    global_flags = argparse.ArgumentParser(add_help=False)
    _add_hidden_flags(global_flags)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # preview
    p_preview = subparsers.add_parser("preview", help="Build a sprite sheet preview of the icons.", parents=[global_flags])
    p_preview.add_argument("path", type=Path, nargs="?", default=Path("."), help="Icon project root (default: .).")
    p_preview.add_argument("--output", "-o", type=Path, help="Destination SVG (default: <root>/preview.svg).")
    p_preview.add_argument("--columns", type=int, help="Icons per row (default from config: 19).")
    p_preview.add_argument("--padding", type=int, help="Outer padding in px (default from config: 7).")
    p_preview.add_argument("--color", type=str, help="Icon color (default from config: #354052).")
    p_preview.add_argument("--background", type=str, help="Background fill (default from config: #fff).")
    p_preview.add_argument("--stroke", type=str, help="Stroke width (default: compile options, then config).")
    p_preview.add_argument("--png", dest="png", action="store_true", default=None, help="Also render PNG.")
    p_preview.add_argument("--no-png", dest="png", action="store_false", help="Skip PNG rendering.")
    p_preview.add_argument("--retina", dest="retina", action="store_true", default=None, help="Also render @2x PNG.")
    p_preview.add_argument("--no-retina", dest="retina", action="store_false", help="Skip @2x PNG rendering.")
    p_preview.set_defaults(run="preview")

    # optimize
    p_optimize = subparsers.add_parser("optimize", help="Optimize icon SVG sources in place.", parents=[global_flags])
    p_optimize.add_argument("path", type=Path, nargs="?", default=Path("."), help="Icon project root (default: .).")
    p_optimize.set_defaults(run="optimize")

    # path
    p_path = subparsers.add_parser("path", help="Print optimized path data.", parents=[global_flags])
    p_path.add_argument("data", nargs="+", help="Path data strings (one result line per argument).")
    p_path.set_defaults(run="path")

    # export
    p_export = subparsers.add_parser("export", help="Export icons as JSON (inner markup or nodes).", parents=[global_flags])
    p_export.add_argument("path", type=Path, nargs="?", default=Path("."), help="Icon project root (default: .).")
    p_export.add_argument("--nodes", action="store_true", help="Export [tag, attributes] nodes with optimized path data.")
    p_export.set_defaults(run="export")

    # aliases
    p_aliases = subparsers.add_parser("aliases", help="Show aliases that resolve to existing icons.", parents=[global_flags])
    p_aliases.add_argument("path", type=Path, nargs="?", default=Path("."), help="Icon project root (default: .).")
    p_aliases.add_argument("--strict", action="store_true", default=None, help="Fail on aliases whose target is missing.")
    p_aliases.set_defaults(run="aliases")

    # options
    p_options = subparsers.add_parser("options", help="Show resolved compile options.", parents=[global_flags])
    p_options.add_argument("path", type=Path, nargs="?", default=Path("."), help="Icon project root (default: .).")
    p_options.set_defaults(run="options")

    # changelog
    p_changelog = subparsers.add_parser("changelog", help="Print changelog text for a release.", parents=[global_flags])
    p_changelog.add_argument("--new", nargs="*", default=[], metavar="NAME", help="New icon names.")
    p_changelog.add_argument("--modified", nargs="*", default=[], metavar="NAME", help="Fixed icon names.")
    p_changelog.add_argument("--renamed", nargs="*", default=[], type=_parse_rename, metavar="OLD:NEW", help="Renamed icons.")
    p_changelog.add_argument("--pretty", action="store_true", help="Markdown headings and one bullet per icon.")
    p_changelog.set_defaults(run="changelog")

    # config
    p_config = subparsers.add_parser("config", help="Show, query or edit configuration.", parents=[global_flags])
    p_config.add_argument("path", type=Path, nargs="?", default=Path("."), help="Project path for project-local config (default: .).")
    p_config.add_argument("--show", action="store_true", help="Display current settings.")
    p_config.add_argument("--get", dest="get_key", metavar="KEY", help="Print one value (dotted key) as JSON.")
    p_config.add_argument("--set", dest="set_key", metavar="KEY=VALUE", help="Set a configuration value (dotted key).")
    p_config.add_argument("--global", dest="global_", action="store_true", help="With --set: write to global config.")
    p_config.set_defaults(run="config")

    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    if getattr(args, "verbose", False) and getattr(args, "quiet", False):
        parser.error("argument -q/--quiet: not allowed with argument -v/--verbose")
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
    )
    run = getattr(args, "run", None)

    if hasattr(args, "path"):
        args.path = resolve_path(args.path)

    if run == "preview":
        from iconkit.commands.preview import run as cmd_run
    elif run == "optimize":
        from iconkit.commands.optimize import run as cmd_run
    elif run == "path":
        from iconkit.commands.path_cmd import run as cmd_run
    elif run == "export":
        from iconkit.commands.export import run as cmd_run
    elif run == "aliases":
        from iconkit.commands.aliases import run as cmd_run
    elif run == "options":
        from iconkit.commands.options_cmd import run as cmd_run
    elif run == "changelog":
        from iconkit.commands.changelog import run as cmd_run
    elif run == "config":
        from iconkit.commands.config_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    try:
        cmd_run(args)
    except (ConfigurationError, SvgParseError, ExternalToolError, OSError, ValueError) as e:
        logging.getLogger("iconkit").debug("Command %s failed", run, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
