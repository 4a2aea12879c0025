"""Glyph sets used to draw the directory structure.

The plain ASCII set is portable and clipboard-safe. The UTF-8 set uses box-drawing
characters, a folder pictogram and per-extension file pictograms. Both produce exactly
the same entries in the same order; only the decoration differs.
"""

from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Optional, Sequence, Tuple

# Ordered (patterns, icon) pairs; the first group with a matching pattern wins.
FILE_ICONS: Sequence[Tuple[Tuple[str, ...], str]] = (
    (("*.sh", "*.bash", "*.zsh", "*.fish"), "📜"),
    (("*.py",), "🐍"),
    (("*.js", "*.jsx", "*.ts", "*.tsx"), "📊"),
    (("*.html", "*.htm"), "🌐"),
    (("*.css", "*.scss", "*.sass", "*.less"), "🎨"),
    (("*.json", "*.xml", "*.yaml", "*.yml"), "🔧"),
    (("*.md", "*.markdown", "*.txt"), "📝"),
    (("*.c", "*.cpp", "*.h", "*.hpp", "*.go", "*.rs", "*.java"), "🔨"),
    (("*.git*", ".gitignore"), "🔄"),
)
DEFAULT_FILE_ICON = "📄"
FOLDER_ICON = "📁"


def file_icon(name: str) -> str:
    """Pick the pictogram for a file name.

    Example:
        >>> file_icon("setup.py")
        '🐍'
        >>> file_icon(".gitignore")
        '🔄'
        >>> file_icon("Makefile")
        '📄'
    """
    for patterns, icon in FILE_ICONS:
        if any(fnmatchcase(name, pattern) for pattern in patterns):
            return icon
    return DEFAULT_FILE_ICON


@dataclass(frozen=True)
class GlyphSet:
    """Characters used to draw one tree.

    Attributes:
        branch: Connector for an entry that has later siblings.
        last_branch: Connector for the last entry among its siblings.
        vertical: Continuation prefix below an entry that has later siblings.
        blank: Continuation prefix below the last entry.
        decorated: Whether directory and file names get pictograms and emphasis.
    """

    branch: str
    last_branch: str
    vertical: str
    blank: str
    decorated: bool = False

    def connector(self, is_last: bool) -> str:
        return self.last_branch if is_last else self.branch

    def continuation(self, is_last: bool) -> str:
        return self.blank if is_last else self.vertical

    def format_header(self) -> str:
        """Header line drawn for the current-directory root."""
        if self.decorated:
            return f"{FOLDER_ICON} **Project Structure**"
        return "Project Structure"

    def format_directory(self, name: str) -> str:
        if self.decorated:
            return f"{FOLDER_ICON} **{name}/**"
        return f"{name}/"

    def format_file(self, name: str) -> str:
        icon = file_icon(name) if self.decorated else "-"
        return f"{icon} {name}"


ASCII_GLYPHS = GlyphSet(branch="|-- ", last_branch="`-- ", vertical="|   ", blank="    ")
UTF8_GLYPHS = GlyphSet(branch="├── ", last_branch="└── ", vertical="│   ", blank="    ", decorated=True)


def get_glyph_set(use_utf8: Optional[bool] = False) -> GlyphSet:
    """Return the UTF-8 glyph set when requested, the ASCII set otherwise."""
    return UTF8_GLYPHS if use_utf8 else ASCII_GLYPHS
