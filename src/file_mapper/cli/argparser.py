"""Command-line argument parsing for file-mapper.

This module defines the command-line interface for file-mapper,
handling argument parsing and validation.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from file_mapper import __version__
from file_mapper.config import FileMapperConfig
from file_mapper.console_colors import ConsoleColors
from file_mapper.types import SortBy, SortDirection


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with file-mapper's options.
    """
    description = """
    file-mapper: print a colorized tree of a directory.

    Walks the directory, skips entries matching ignore patterns (plain substrings of
    the entry name) as well as hidden entries, optionally totals the size of every
    directory, and prints the result as a tree followed by a summary.

    Default ignore patterns are read from ~/.file_mapper_config.json (created on
    first run). Patterns given with -i/--ignore are added to them.
    """

    epilog = """
    Examples:
      # Show the current directory
      file-mapper

      # Show directory tree with file sizes
      file-mapper --size

      # Show directory tree with max depth of 2
      file-mapper --level 2 /path/to/project

      # Ignore node_modules and .git directories
      file-mapper --ignore node_modules --ignore .git

      # Largest entries first
      file-mapper -s --sort-by size --sort-direction desc

      # Write the tree to a file, without colors
      file-mapper -o tree.txt /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="file-mapper",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"file-mapper {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=Path("."),
        help="The directory to map (default: the current directory).",
    )
    parser.add_argument(
        "-s",
        "--size",
        action="store_true",
        help="Show file and directory sizes.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        action="append",
        default=[],
        help=(
            "Exclude entries whose name contains PATTERN. Can be specified multiple times; "
            "patterns are added to the ones from the configuration file."
        ),
    )
    parser.add_argument(
        "--sort-by",
        choices=[s.value for s in SortBy],
        default=SortBy.NAME.value,
        help="Sort entries by name or by size (default: name).",
    )
    parser.add_argument(
        "--sort-direction",
        choices=[d.value for d in SortDirection],
        default=SortDirection.ASCENDING.value,
        help="Sort direction (default: asc).",
    )
    parser.add_argument(
        "-l",
        "--level",
        metavar="N",
        help="Maximum directory depth to display. Invalid or negative values mean unlimited.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links. By default, symlinks are listed without following them.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not report unreadable files and directories; they are still shown truncated.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output. Color is also disabled when output is not a terminal or NO_COLOR is set.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="FILE",
        help="Configuration file to use instead of ~/.file_mapper_config.json.",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        help="Do not read the configuration file; only -i/--ignore patterns apply.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.config is not None and args.no_config:
        raise ValueError("--config and --no-config cannot be used together")


def parse_level(value: Optional[str], colors: Optional[ConsoleColors] = None) -> Optional[int]:
    """Convert the -l/--level value to a depth cap.

    Invalid and negative values do not abort the run: a warning is printed to
    stderr and the depth is unlimited.

    Args:
        value: The raw option value, or None if the option was not given.
        colors: Styling for the warning.

    Returns:
        The non-negative depth cap, or None for unlimited depth.
    """
    if value is None:
        return None
    colors = colors if colors is not None else ConsoleColors(enabled=False)
    try:
        level = int(value)
    except ValueError:
        print(colors.warning("Warning: Invalid level value. Using unlimited depth."), file=sys.stderr)
        return None
    if level < 0:
        print(colors.warning("Warning: Level must be non-negative. Using unlimited depth."), file=sys.stderr)
        return None
    return level


def collect_ignore_patterns(config: Optional[FileMapperConfig], cli_patterns: List[str]) -> List[str]:
    """Concatenate configured and command-line patterns, configured ones first.

    Example:
        >>> collect_ignore_patterns(FileMapperConfig(["build"]), ["tmp"])
        ['build', 'tmp']
        >>> collect_ignore_patterns(None, ["tmp"])
        ['tmp']
    """
    configured = config.ignore_patterns if config is not None else []
    return [*configured, *cli_patterns]
