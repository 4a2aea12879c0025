"""Output strategy base class defining the interface for file content formatting.

This module provides the abstract base class that defines how each accepted file is
wrapped in the contents section of the document.
"""

from abc import ABC, abstractmethod
from typing import Optional


class OutputStrategy(ABC):
    """Abstract base class defining the interface for file content output formatting strategies.

    The output of one file is divided into three phases:
    1. Start - outputs the opening wrapper with the file's path and language tag
    2. Content - passes the file content through, chunk by chunk
    3. End - outputs the closing wrapper

    A file that cannot be read is reported with :meth:`format_error` in place of its
    content, between the start and end wrappers.

    Example:
        >>> class PlainStrategy(OutputStrategy):
        ...     def format_start(self, relative_path, language=None):
        ...         return f"--- {relative_path}\\n"
        ...
        ...     def format_content(self, content):
        ...         return content
        ...
        ...     def format_end(self):
        ...         return "---\\n"
        ...
        ...     def format_error(self, relative_path):
        ...         return f"unreadable: {relative_path}\\n"
        >>> PlainStrategy().format_start("a.py")
        '--- a.py\\n'
    """

    @abstractmethod
    def format_start(self, relative_path: str, language: Optional[str] = None) -> str:
        """Format the opening wrapper for a file's content.

        Args:
            relative_path: The path of the file as listed in the structure section.
            language: Tag for the content block (the file's extension), if any.

        Returns:
            The formatted opening wrapper string.
        """
        pass

    @abstractmethod
    def format_content(self, content: str) -> str:
        """Format a chunk of file content.

        Args:
            content: A chunk of file content.

        Returns:
            The formatted content string.
        """
        pass

    @abstractmethod
    def format_end(self) -> str:
        """Format the closing wrapper for a file's content."""
        pass

    @abstractmethod
    def format_error(self, relative_path: str) -> str:
        """Format the inline notice emitted when a file cannot be read.

        Args:
            relative_path: The path of the unreadable file.
        """
        pass
