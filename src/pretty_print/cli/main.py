"""Command-line interface for pretty_print.

This module provides the ``pretty-print`` command. It parses the command line, builds
the immutable configuration, and streams the document to stdout. Diagnostics (warnings
and, with --debug, the filtering trace) go to stderr.

Exit Codes:
    0: Successful completion, including runs with warnings or no matching files
    1: Invalid configuration (e.g. both --whitelist and --blacklist), --help, or a
       runtime error
    2: Command-line syntax error (unknown option, missing value)
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (output closed early, e.g. piping to `head`)

Example:
    # Process the current directory, skipping dependencies and logs
    $ pretty-print . --exclude=node_modules,*.log

    # Only Python and Markdown files, copied to the clipboard from WSL
    $ pretty-print src docs --whitelist=py,md | clip.exe
"""

import sys
from typing import Optional, Sequence

from pretty_print.cli.argparser import USAGE_EXIT_CODE, create_parser
from pretty_print.cli.safe_writer import SafeWriter, silence_stdout, stdout_target
from pretty_print.config import PrintConfig
from pretty_print.exceptions import ConfigurationError
from pretty_print.log import configure_logging
from pretty_print.pretty_print import StreamingPrettyPrint

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the pretty-print command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.
    """
    parser = create_parser()
    args = parser.parse_intermixed_args(argv)
    configure_logging(args.debug)

    # Validate everything before touching the filesystem
    try:
        config = PrintConfig.from_args(args)
    except ConfigurationError as e:
        parser.print_usage(sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(USAGE_EXIT_CODE)

    try:
        printer = StreamingPrettyPrint(config)
        with SafeWriter(stdout_target()) as writer:
            for chunk in printer.stream_document():
                writer.write(chunk)
    except BrokenPipeError:
        silence_stdout()
        sys.exit(EXIT_SIGPIPE)
    except KeyboardInterrupt:
        sys.exit(EXIT_SIGINT)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
