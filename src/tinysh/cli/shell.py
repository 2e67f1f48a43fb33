#!/usr/bin/env python3
"""
CLI entry point for the interactive shell (tinysh command).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from tinysh import __version__
from tinysh.cli.prompt import clear_screen
from tinysh.commands import load_user_commands
from tinysh.config import DEFAULTS, Config, get_config, get_config_manager, parse_value
from tinysh.core.datamodels import LoopState
from tinysh.core.exceptions import FatalShellError
from tinysh.core.helpers import report_error
from tinysh.core.reader import StreamLineReader
from tinysh.engine import ShellLoop
from tinysh.utils.logging import close_logging, configure_logging

logger = logging.getLogger(__name__)


def print_config():
    """Print current configuration."""
    cfg_mgr = get_config_manager()
    settings = cfg_mgr.list_settings()

    print(f"Config file: {cfg_mgr.CONFIG_FILE}")

    if settings:
        print("\nCustom settings:")
        for key, value in settings.items():
            print(f"  {key}: {value}")

    print("\nDefaults (used when not set):")
    for key, value in DEFAULTS.items():
        if key not in settings:
            print(f"  {key}: {value}")

    print("\nSet with: tinysh --set-config key=value")
    print(f"Available keys: {', '.join(Config.model_fields)}")
    print()


def build_parser() -> argparse.ArgumentParser:
    """Build the tinysh argument parser."""
    parser = argparse.ArgumentParser(
        prog="tinysh",
        description="A tiny interactive shell",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Type program names and arguments, and hit enter.
Builtins: cd, help, plus, exit (type help inside the shell).

Examples:
    tinysh                               # Interactive shell
    tinysh --simple                      # readline instead of prompt_toolkit
    echo "plus 2 3" | tinysh             # Read commands from a pipe
    tinysh --set-config clear_screen=false
        """,
    )
    parser.add_argument("--simple", action="store_true", default=None,
                        help="Use simple REPL (no prompt_toolkit features)")
    parser.add_argument("--no-clear", action="store_true",
                        help="Do not clear the screen at startup")
    parser.add_argument("--no-color", action="store_true",
                        help="Plain prompt without ANSI colors")
    parser.add_argument("--debug", action="store_true",
                        help="Write debug records to the log file")

    # Config management
    parser.add_argument("--config", action="store_true",
                        help="Show current configuration")
    parser.add_argument("--set-config", metavar="KEY=VALUE",
                        help=f"Set a config value. Keys: {', '.join(Config.model_fields)}")
    parser.add_argument("--unset-config", metavar="KEY",
                        help="Unset a config value (reset to default)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_shell(args: argparse.Namespace, cfg: Config) -> LoopState:
    """Pick a line reader and run the loop until it stops."""
    if not sys.stdin.isatty():
        # Commands from a pipe or file: no prompt, no screen handling
        return ShellLoop(StreamLineReader(sys.stdin)).run()

    color = cfg.get("color_prompt") and not args.no_color
    if cfg.get("clear_screen") and not args.no_clear:
        clear_screen()

    use_simple = args.simple if args.simple is not None else cfg.get("simple")
    if use_simple:
        from tinysh.cli._simple_repl import repl
        return repl(color_prompt=color, history_size=cfg.get("history_size"))

    from tinysh.cli._repl import repl
    return repl(color_prompt=color)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the tinysh CLI.

    Returns:
        Process exit status: 0 when the loop stops normally.
    """
    cfg_mgr = get_config_manager()
    args = build_parser().parse_args(argv)

    # Handle --config
    if args.config:
        print_config()
        return 0

    # Handle --set-config
    if args.set_config:
        try:
            key, value = args.set_config.split("=", 1)
            key = key.strip()
            parsed = parse_value(key, value.strip())
            cfg_mgr.set(key, parsed)
            print(f"Set {key} = {parsed}")
            print(f"Saved to {cfg_mgr.CONFIG_FILE}")
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        return 0

    # Handle --unset-config
    if args.unset_config:
        try:
            cfg_mgr.unset(args.unset_config)
            print(f"Unset {args.unset_config}")
            print(f"Saved to {cfg_mgr.CONFIG_FILE}")
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        return 0

    cfg = get_config()

    try:
        configure_logging("DEBUG" if args.debug else cfg.get("log_level"))
    except OSError as e:
        print(f"Warning: logging disabled ({e})", file=sys.stderr)

    if cfg.get("user_commands"):
        load_user_commands()

    try:
        state = run_shell(args, cfg)
        logger.debug(f"Shell loop finished in state {state.name}")
    except FatalShellError as e:
        logger.critical(f"Fatal error: {e}")
        report_error(str(e))
        return e.exit_code
    finally:
        close_logging()

    return 0


if __name__ == "__main__":
    sys.exit(main())
