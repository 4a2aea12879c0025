"""Document assembly with streaming support.

This module ties file collection, structure rendering and content printing together.
It provides a streaming implementation used by the command line and an eager one that
keeps the whole document in memory for library use.
"""

import logging
from typing import Iterator, List

from pretty_print.config import PrintConfig
from pretty_print.file_collector import FileCollector
from pretty_print.file_content_printer import FileContentPrinter
from pretty_print.file_system_tree.file_system_tree import FileSystemTree

logger = logging.getLogger(__name__)

NO_MATCH_MESSAGE = "No files matched the specified criteria"
STRUCTURE_ROOT = "."


class StreamingPrettyPrint:
    """Streaming document generator for one run.

    Files are collected once, at construction, so the accepted-file list (and its
    order) is identical for the structure and content sections. The document is then
    produced in two parts:

    - the structure section: a ``# File Structure`` heading, the tree drawn from the
      current directory, and a ``---`` divider followed by the ``# File Contents``
      heading; or a ``# No files matched ...`` notice when nothing was accepted;
    - the contents section: one block per accepted file; or, when the structure
      section is disabled and nothing was accepted, a plain no-match notice.

    Streaming properties:
    - Each streaming operation (structure, contents) can only be performed once
    - Every yielded piece of text ends with a newline

    Attributes:
        config (PrintConfig): The run configuration.

    Example:
        >>> printer = StreamingPrettyPrint(PrintConfig(targets=("a.py",)))  # doctest: +SKIP
        >>> for chunk in printer.stream_document():  # doctest: +SKIP
        ...     print(chunk, end="")
        # File Structure
        <BLANKLINE>
        Project Structure
        `-- - a.py
        ...
    """

    def __init__(self, config: PrintConfig) -> None:
        """Collect the accepted files for ``config``.

        Args:
            config: The validated run configuration.
        """
        self.config = config

        for line in config.describe():
            logger.debug(line)

        self._accepted_files: List[str] = FileCollector(config).collect()

        logger.debug("Files to process:")
        for path in self._accepted_files:
            logger.debug("  %s", path)
        logger.debug("Found %d files matching criteria", len(self._accepted_files))
        if not self._accepted_files:
            logger.debug("No files matched the criteria. Check your filters and paths.")

        self._content_printer = FileContentPrinter(self._accepted_files)

        self._structure_complete = False
        self._contents_complete = False

    @property
    def accepted_files(self) -> List[str]:
        """Sorted relative paths of the accepted files (a copy)."""
        return list(self._accepted_files)

    @property
    def file_count(self) -> int:
        return len(self._accepted_files)

    @property
    def streaming_complete(self) -> bool:
        return self._structure_complete and self._contents_complete

    def create_tree(self) -> FileSystemTree:
        """Build the structure renderer for the accepted files."""
        return FileSystemTree(
            STRUCTURE_ROOT,
            self._accepted_files,
            exclusion_rules=self.config.structure_rules(),
            full_structure=self.config.print_full_structure,
            glyphs=self.config.glyphs,
        )

    def stream_structure(self) -> Iterator[str]:
        """Stream the structure section line by line.

        Raises:
            RuntimeError: If the structure has already been streamed.
        """
        if self._structure_complete:
            raise RuntimeError("Structure has already been streamed")

        if not self._accepted_files:
            yield f"# {NO_MATCH_MESSAGE}\n"
        else:
            yield "# File Structure\n"
            yield "\n"
            for line in self.create_tree().stream_tree_representation():
                yield line + "\n"
            yield "\n"
            yield "---\n"
            yield "\n"
            yield "# File Contents\n"
            yield "\n"

        self._structure_complete = True

    def stream_contents(self) -> Iterator[str]:
        """Stream the contents section chunk by chunk.

        Raises:
            RuntimeError: If the contents have already been streamed.
        """
        if self._contents_complete:
            raise RuntimeError("Contents have already been streamed")

        if not self._accepted_files and not self.config.print_structure:
            yield f"{NO_MATCH_MESSAGE}\n"

        for _path, content_iter in self._content_printer.yield_file_contents():
            yield from content_iter

        self._contents_complete = True

    def stream_document(self) -> Iterator[str]:
        """Stream the complete document according to the configuration."""
        if self.config.print_structure:
            yield from self.stream_structure()
        else:
            self._structure_complete = True
        yield from self.stream_contents()


class PrettyPrint(StreamingPrettyPrint):
    """Document generator that builds everything during initialization.

    Memory Usage Note:
        This class stores the complete document, including every file's content, in
        memory. Use StreamingPrettyPrint for large trees.

    Example:
        >>> result = PrettyPrint(PrintConfig(targets=("src",), whitelist={"py"}))  # doctest: +SKIP
        >>> print(result.document)  # doctest: +SKIP
    """

    def __init__(self, config: PrintConfig) -> None:
        super().__init__(config)
        self._structure_string = "".join(self.stream_structure()) if config.print_structure else ""
        self._structure_complete = True
        self._content_string = "".join(self.stream_contents())

    @property
    def structure_string(self) -> str:
        """The structure section (empty when structure output is disabled)."""
        return self._structure_string

    @property
    def content_string(self) -> str:
        """The contents section."""
        return self._content_string

    @property
    def document(self) -> str:
        """The complete document, exactly as the command line prints it."""
        return self._structure_string + self._content_string
