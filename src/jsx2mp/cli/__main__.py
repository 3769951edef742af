"""
Main Entry Point for the jsx2mp CLI.

Parses arguments and dispatches to the handlers in `jsx2mp.cli.commands`.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from jsx2mp import __version__
from jsx2mp.cli import commands
from jsx2mp.config import parse_cli_key_values
from jsx2mp.platforms import available_platforms


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="jsx2mp: component transformation core")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: STYLE ---
  cmd_style = subparsers.add_parser("style", help="Convert a parsed CSS AST (JSON) to style objects")
  cmd_style.add_argument("path", type=Path, help="JSON file with the css parser output")
  cmd_style.add_argument("--theme", action="store_true", help="Resolve var(--x) references to theme bindings")
  cmd_style.add_argument("--log", action="store_true", help="Reject invalid selectors and report invalid values")
  cmd_style.add_argument(
    "--descendant",
    action="store_true",
    help="Accept compound and descendant selectors",
  )
  cmd_style.add_argument("--out", type=Path, default=None, help="Write the result to a file instead of stdout")

  # --- Command: DEPS ---
  cmd_deps = subparsers.add_parser("deps", help="Generate the import graph for a compiler result (JSON)")
  cmd_deps.add_argument("path", type=Path, help="JSON file with the compiler transformation result")
  cmd_deps.add_argument("--resource", required=True, help="Absolute path of the component the result belongs to")
  cmd_deps.add_argument("--root", type=Path, default=None, help="Project root (default: current directory)")
  cmd_deps.add_argument("--platform", choices=available_platforms(), default=None, help="Target platform")
  cmd_deps.add_argument("--constant-dir", nargs="*", default=None, help="Native component directories")
  cmd_deps.add_argument(
    "--config",
    nargs="*",
    help="Extra loader options in key=value format (e.g. usage_policy=exclusive)",
  )

  args = parser.parse_args(argv)

  if args.command == "style":
    return commands.handle_style(args.path, args.theme, args.log, args.descendant, args.out)

  elif args.command == "deps":
    try:
      overrides = parse_cli_key_values(args.config)
    except ValueError as e:
      parser.error(str(e))
    return commands.handle_deps(
      args.path,
      args.resource,
      args.root or Path.cwd(),
      args.platform,
      args.constant_dir,
      overrides,
    )

  return 0
