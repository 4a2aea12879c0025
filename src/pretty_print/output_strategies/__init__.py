"""Output strategies for formatting file content blocks."""

from .base_strategy import OutputStrategy
from .markdown_strategy import MarkdownOutputStrategy

__all__ = ["MarkdownOutputStrategy", "OutputStrategy"]
