"""Line-count exclusion rules for filtering out overly long files."""

from pathlib import Path

from .base_rules import BaseExclusionRules

DEFAULT_MAX_LINES = 1000


def count_lines(path: str, chunk_size: int = 65536) -> int:
    """Count newline characters in a file, like ``wc -l``.

    A final line without a trailing newline is not counted. Files that cannot be read
    count as 0 lines.

    Args:
        path: File to scan.
        chunk_size: Number of bytes read at a time.

    Returns:
        Number of newline characters in the file.
    """
    count = 0
    try:
        with open(path, "rb") as file:
            while True:
                chunk = file.read(chunk_size)
                if not chunk:
                    break
                count += chunk.count(b"\n")
    except OSError:
        return 0
    return count


class LineCountExclusionRules(BaseExclusionRules):
    """Exclusion rules based on a maximum number of lines per file.

    Files with more lines than ``max_lines`` are excluded. Directories, missing files and
    unreadable files are never excluded by this rule.

    Attributes:
        max_lines (int): Maximum allowed number of lines.

    Example:
        >>> rules = LineCountExclusionRules(2000)
        >>> rules.max_lines
        2000
        >>> rules.exclude("does/not/exist.py")
        False
    """

    def __init__(self, max_lines: int = DEFAULT_MAX_LINES):
        """Initialize line-count rules.

        Args:
            max_lines: Maximum number of lines a file may have.

        Raises:
            ValueError: If max_lines is negative or not an integer.
        """
        if not isinstance(max_lines, int) or isinstance(max_lines, bool):
            raise ValueError(f"max_lines must be an int, got {type(max_lines)}")
        if max_lines < 0:
            raise ValueError("max_lines cannot be negative")
        self.max_lines = max_lines

    def exclude(self, path: str) -> bool:
        """Check if a file has more lines than allowed.

        Args:
            path: File path to check (relative or absolute).

        Returns:
            True if the file exceeds the line limit.
        """
        if not Path(path).is_file():
            return False
        return count_lines(path) > self.max_lines

    def describe(self, path: str) -> str:
        return f"exceeds max lines ({count_lines(path)} > {self.max_lines})"
