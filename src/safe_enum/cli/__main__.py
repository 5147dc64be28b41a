"""
Main Entry Point for safe-enum CLI.

This module handles argument parsing and dispatches to the command handlers
defined in `safe_enum.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from safe_enum.cli import commands
from safe_enum.utils.console import enable_console_logging
from safe_enum import __version__


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="safe-enum: Closed, immutable enum sets")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CHECK ---
  cmd_check = subparsers.add_parser("check", help="Validate a JSON enum definition")
  cmd_check.add_argument("path", type=Path, help="Definition file (JSON object or array)")
  cmd_check.add_argument("--type-tag", default=None, help="Enum family name (default: file stem)")

  # --- Command: SHOW ---
  cmd_show = subparsers.add_parser("show", help="Print the members of a JSON enum definition")
  cmd_show.add_argument("path", type=Path, help="Definition file (JSON object or array)")
  cmd_show.add_argument("--type-tag", default=None, help="Enum family name (default: file stem)")
  cmd_show.add_argument("--json", action="store_true", help="Print the enum as JSON instead of a table")

  args = parser.parse_args(argv)
  enable_console_logging()

  if args.command == "check":
    return commands.handle_check(args.path, args.type_tag)

  elif args.command == "show":
    return commands.handle_show(args.path, args.type_tag, args.json)

  return 1


if __name__ == "__main__":
  sys.exit(main())
