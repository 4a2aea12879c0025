"""File content printer with streaming support.

This module emits one formatted block per accepted file. Files are read in fixed-size
chunks so even large explicit files are streamed with constant memory usage.
"""

import logging
from typing import Iterable, Iterator, Optional, Tuple, Union

from .file_system_tree.classifier import get_extension
from .output_strategies.base_strategy import OutputStrategy
from .output_strategies.markdown_strategy import MarkdownOutputStrategy

logger = logging.getLogger(__name__)

# Undecodable bytes survive the round trip through str unchanged
ENCODING = "utf-8"
ERRORS = "surrogateescape"


class FileContentPrinter:
    """Streams the content of accepted files with consistent formatting.

    Each file produces a start wrapper tagged with the file's extension, its raw
    content, and an end wrapper. Line endings and undecodable bytes are preserved. If
    the content does not end with a newline, one is added before the end wrapper so the
    closing fence always sits on its own line. A file that cannot be read gets an inline
    error notice instead of (or after) its content; the remaining files are still
    printed.

    Attributes:
        files (Tuple[str, ...]): Accepted file paths, in output order.
        output_strategy (OutputStrategy): Strategy for formatting each block.
        chunk_size (int): Number of characters read at a time.

    Example:
        >>> printer = FileContentPrinter(["src/main.py"])  # doctest: +SKIP
        >>> for path, content in printer.yield_file_contents():  # doctest: +SKIP
        ...     for chunk in content:
        ...         print(chunk, end="")
        ==================
        Path: src/main.py
        ```py
        print("hello")
        ```
        ==================
    """

    def __init__(
        self,
        files: Iterable[str],
        output_format: Union[str, OutputStrategy] = "markdown",
        chunk_size: int = 65536,
    ) -> None:
        """Initialize the FileContentPrinter.

        Args:
            files: Accepted file paths in the order they should be printed.
            output_format: Either "markdown" or an OutputStrategy instance.
            chunk_size: Number of characters read per chunk. Must be positive.

        Raises:
            ValueError: If output_format is an unknown name or chunk_size is not positive.
            TypeError: If output_format is neither a string nor an OutputStrategy.
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        self.files = tuple(files)
        self.chunk_size = chunk_size

        if isinstance(output_format, str):
            if output_format.lower() != "markdown":
                raise ValueError(f"Unsupported output format: {output_format}. Must be: markdown")
            self.output_strategy: OutputStrategy = MarkdownOutputStrategy()
        elif isinstance(output_format, OutputStrategy):
            self.output_strategy = output_format
        else:
            raise TypeError("output_format must be either 'markdown' or an OutputStrategy instance")

    def _read_chunks(self, path: str) -> Iterator[str]:
        with open(path, "r", encoding=ENCODING, errors=ERRORS, newline="") as file:
            while True:
                chunk = file.read(self.chunk_size)
                if not chunk:
                    break
                yield chunk

    def _yield_wrapped_content(self, path: str) -> Iterator[str]:
        """Stream a single file's block.

        Args:
            path: Path of the file, used both to open it and as its label.

        Yields:
            str: Chunks of the formatted block.
        """
        strategy = self.output_strategy
        yield strategy.format_start(path, get_extension(path))

        last_chunk: Optional[str] = None
        try:
            for chunk in self._read_chunks(path):
                last_chunk = chunk
                yield strategy.format_content(chunk)
        except OSError as e:
            logger.warning("Unable to read file %s: %s", path, e)
            if last_chunk is not None and not last_chunk.endswith("\n"):
                yield "\n"
            yield strategy.format_error(path)
        else:
            if last_chunk is not None and not last_chunk.endswith("\n"):
                yield "\n"

        yield strategy.format_end()

    def yield_file_contents(self) -> Iterator[Tuple[str, Iterator[str]]]:
        """Stream every file's block.

        Yields:
            Tuples of (path, content_iterator), where content_iterator yields the
            formatted chunks of that file's block.
        """
        for path in self.files:
            yield path, self._yield_wrapped_content(path)
