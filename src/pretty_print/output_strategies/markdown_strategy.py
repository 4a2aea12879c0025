"""Markdown code-fence output strategy."""

from typing import Optional

from .base_strategy import OutputStrategy

DELIMITER = "=================="
FENCE = "```"


class MarkdownOutputStrategy(OutputStrategy):
    """Wraps each file in a delimited, fenced Markdown code block.

    Example:
        >>> strategy = MarkdownOutputStrategy()
        >>> print(strategy.format_start("src/main.py", "py"), end="")
        ==================
        Path: src/main.py
        ```py
        >>> print(strategy.format_end(), end="")
        ```
        ==================
        <BLANKLINE>
        <BLANKLINE>
        <BLANKLINE>
    """

    def format_start(self, relative_path: str, language: Optional[str] = None) -> str:
        return f"{DELIMITER}\nPath: {relative_path}\n{FENCE}{language or ''}\n"

    def format_content(self, content: str) -> str:
        return content

    def format_end(self) -> str:
        return f"{FENCE}\n{DELIMITER}\n\n\n\n"

    def format_error(self, relative_path: str) -> str:
        return f"Error: Unable to read file {relative_path}\n"
