"""Command-line interface for file-mapper.

This module wires the pieces together: it parses options, loads the persisted
ignore patterns, builds, sorts and renders the tree, and maps failures to exit
codes. The tree is fully built before anything is written, so a fatal error at
the root produces no partial output.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied on the root directory
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Map the current directory with sizes, two levels deep
    $ file-mapper -s -l 2
"""

import os
import sys
from typing import Iterator, List, Optional

from file_mapper.cli.argparser import collect_ignore_patterns, create_parser, parse_level, validate_args
from file_mapper.cli.logging_setup import configure_logging
from file_mapper.cli.safe_writer import SafeWriter
from file_mapper.cli.signal_handler import setup_signal_handling, signal_handler
from file_mapper.config import ConfigManager
from file_mapper.console_colors import ConsoleColors
from file_mapper.exceptions import RootDirectoryError
from file_mapper.exclusion_rules.ignore_pattern_rules import IgnorePatternRules
from file_mapper.file_system_tree.file_system_node import FileSystemNode
from file_mapper.file_system_tree.tree_builder import build_tree
from file_mapper.file_system_tree.tree_sorter import sort_tree
from file_mapper.tree_renderer import TreeRenderer
from file_mapper.types import SortBy, SortDirection


def should_use_color(no_color: bool, to_terminal: bool) -> bool:
    """Decide whether to emit ANSI colors.

    Example:
        >>> should_use_color(no_color=True, to_terminal=True)
        False
    """
    if no_color or "NO_COLOR" in os.environ:
        return False
    return to_terminal


def generate_report(
    root: FileSystemNode, renderer: TreeRenderer, max_level: Optional[int] = None
) -> Iterator[str]:
    """Yield every output line: header, optional depth notice, tree, summary."""
    colors = renderer.colors
    yield f"{colors.heading('Directory:')} {root.entry_path}"
    yield ""
    if max_level is not None:
        yield colors.info(f"Displaying directory structure with maximum depth: {max_level}.")
        if renderer.show_sizes:
            yield colors.info("Directory sizes might not be accurate as we count to the specified depth only.")
        yield ""
    yield from renderer.render_lines(root)
    yield from renderer.summary_lines(renderer.summarize(root))


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the file-mapper command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].
    """
    setup_signal_handling()

    parser = create_parser()
    args = parser.parse_args(argv)

    to_terminal = args.output is None and sys.stdout.isatty()
    colors = ConsoleColors(enabled=should_use_color(args.no_color, to_terminal))

    try:
        validate_args(args)
        configure_logging(quiet=args.quiet, use_color=colors.enabled and sys.stderr.isatty())

        max_level = parse_level(args.level, colors)

        config = None if args.no_config else ConfigManager(args.config).load_config()
        exclusion_rules = IgnorePatternRules(collect_ignore_patterns(config, args.ignore))

        root = build_tree(
            args.directory,
            exclusion_rules=exclusion_rules,
            max_depth=max_level,
            follow_symlinks=args.follow_symlinks,
        )
        sort_tree(root, SortBy(args.sort_by), SortDirection(args.sort_direction))
        renderer = TreeRenderer(show_sizes=args.size, colors=colors)

        output = args.output if args.output else sys.stdout.fileno()
        sys.stdout.flush()
        with SafeWriter(output) as writer:
            try:
                writer.write_lines(generate_report(root, renderer, max_level))
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except RootDirectoryError as e:
        print(colors.error(f"Error: {e}"), file=sys.stderr)
        sys.exit(126 if e.is_permission_error else 1)
    except Exception as e:
        print(colors.error(f"Error: {e}"), file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
