"""Filtered directory snapshots for documentation and LLM prompts.

This package renders a directory-structure diagram followed by the concatenated
contents of every file that survives the configured filters.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("pretty-print")
except PackageNotFoundError:
    __version__ = "unknown"

from .config import PrintConfig  # noqa: E402
from .pretty_print import PrettyPrint, StreamingPrettyPrint  # noqa: E402

__all__ = ["PrettyPrint", "PrintConfig", "StreamingPrettyPrint", "__version__"]
