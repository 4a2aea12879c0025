"""Command-line argument parsing for pretty_print.

This module defines the command-line interface for pretty_print, handling argument
parsing. Semantic validation (conflicting filters, value ranges) happens when the
immutable configuration is built from the parsed arguments.
"""

import argparse
from typing import Any, List, Optional, Sequence, Union

from pretty_print import __version__
from pretty_print.exclusion_rules.line_count_rules import DEFAULT_MAX_LINES

# Status used when usage is printed, either on request or after an invalid configuration
USAGE_EXIT_CODE = 1


class HelpAction(argparse.Action):
    """Print the full help text to stdout and exit with the usage status.

    argparse's built-in help exits with status 0; this tool reports usage with a
    non-zero status, the same as after a configuration error.
    """

    def __init__(self, option_strings: List[str], dest: str = argparse.SUPPRESS, **kwargs: Any) -> None:
        super().__init__(option_strings, dest=dest, default=argparse.SUPPRESS, nargs=0, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        parser.print_help()
        parser.exit(USAGE_EXIT_CODE)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with pretty_print's options. Use
        ``parse_intermixed_args`` so paths and options may appear in any order.
    """
    description = """
    pretty-print: print a directory structure and file contents in one document.

    The output starts with a tree of the accepted files and continues with the content
    of each file in a fenced code block, ready to paste into documentation or an LLM
    prompt. Files are filtered by exclusion patterns, hidden status, binary extensions,
    an extension whitelist or blacklist, and a maximum line count. Files named directly
    on the command line only have to pass the exclusion patterns.
    """

    epilog = """
    Examples:
      pretty-print .                                     # Process current directory
      pretty-print file1.py dir1 dir2/file.js            # Process specific files and directories
      pretty-print . --exclude=node_modules,build,*.log  # Exclude specific paths
      pretty-print . --whitelist=py,js,md                # Only include specific extensions
      pretty-print . --blacklist=json,svg,png            # Exclude specific extensions
      pretty-print . --no-hidden                         # Exclude hidden files/folders
      pretty-print . --max-lines=2000                    # Set maximum allowed lines
      pretty-print . --print-full-structure              # Print full file structure
      pretty-print . --no-structure                      # Don't print file structure
      pretty-print . --whitelist=py,js | clip.exe        # Copy to the Windows clipboard from WSL
    """

    parser = argparse.ArgumentParser(
        prog="pretty-print",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument("--help", action=HelpAction, help="Display this help message and exit")
    parser.add_argument(
        "--version", action="version", version=f"pretty-print {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        metavar="PATH",
        help="Files and directories to process (default: current directory).",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATH1,PATH2,...",
        help=(
            "Exclude specific paths (files or directories). Accepts directory paths ending with / "
            "(tab-completion friendly) and glob patterns with * and ?. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "--whitelist",
        action="append",
        default=[],
        metavar="EXT1,EXT2,...",
        help="Only include files with the specified extensions.",
    )
    parser.add_argument(
        "--blacklist",
        action="append",
        default=[],
        metavar="EXT1,EXT2,...",
        help="Exclude files with the specified extensions.",
    )
    parser.add_argument("--no-hidden", action="store_true", help="Exclude hidden files and directories.")
    parser.add_argument(
        "--include-binary", action="store_true", help="Include binary files (excluded by default)."
    )
    parser.add_argument(
        "--max-lines",
        type=int,
        default=DEFAULT_MAX_LINES,
        metavar="NUM",
        help=f"Set maximum allowed lines per file (default: {DEFAULT_MAX_LINES}).",
    )
    parser.add_argument("--print-full-structure", action="store_true", help="Print the entire file structure.")
    parser.add_argument("--no-structure", action="store_true", help="Don't print the file structure at all.")
    parser.add_argument(
        "--utf8", action="store_true", help="Use UTF-8 characters in the tree structure (default: ASCII)."
    )
    parser.add_argument("--debug", action="store_true", help="Show debug information on stderr.")

    return parser
