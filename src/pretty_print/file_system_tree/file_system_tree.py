"""Directory structure rendering pruned to the accepted files.

This module provides the FileSystemTree class, which walks a directory depth-first,
keeps only the branches that lead to accepted files (or every branch in full-structure
mode) and draws the result with a configurable glyph set.
"""

import logging
import os
from typing import Iterable, Iterator, Optional, Set, Tuple

from pretty_print.exclusion_rules.base_rules import BaseExclusionRules
from pretty_print.exclusion_rules.pattern_rules import normalize_path
from pretty_print.file_system_tree.file_system_node import FileSystemNode
from pretty_print.file_system_tree.glyphs import ASCII_GLYPHS, GlyphSet
from pretty_print.types import PathType

logger = logging.getLogger(__name__)

CURRENT_DIRECTORY = "."


def join_relative(parent: str, name: str) -> str:
    """Join an entry name onto a relative path, treating ``""`` and ``.`` as the start.

    Example:
        >>> join_relative("", "src")
        'src'
        >>> join_relative("src", "main.py")
        'src/main.py'
    """
    if parent in ("", CURRENT_DIRECTORY):
        return name
    if parent.endswith("/"):
        return parent + name
    return f"{parent}/{name}"


def ancestor_directories(paths: Iterable[str]) -> Set[str]:
    """Collect every directory prefix of the given relative paths.

    Example:
        >>> sorted(ancestor_directories(["src/app/main.py", "README.md"]))
        ['src', 'src/app']
    """
    ancestors: Set[str] = set()
    for path in paths:
        parts = path.split("/")
        for i in range(1, len(parts)):
            ancestors.add("/".join(parts[:i]))
    ancestors.discard("")
    return ancestors


class FileSystemTree:
    """A pruned tree representation of a directory structure.

    The tree starts at ``root_path`` and contains:

    - every directory and file, when ``full_structure`` is True;
    - otherwise only accepted files and the directories that (transitively) contain
      at least one of them. A directory left without any included child is omitted.

    Entries rejected by ``exclusion_rules`` (typically exclusion patterns plus hidden
    entries) are skipped together with their entire subtree in both modes. Symbolic
    links are never followed; in full-structure mode a link to a directory is drawn as
    an empty directory and any other link as a plain file entry.

    Directories are listed before files and each group is sorted by name, independent
    of the order in which the operating system enumerates entries.

    Attributes:
        root_path (str): Normalized path of the directory to render.
        accepted_files (frozenset): Relative paths of the accepted files.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for skipping entries.
        full_structure (bool): Whether to render every entry.
        glyphs (GlyphSet): Characters used to draw branches and names.

    Example:
        >>> tree = FileSystemTree(".", ["src/main.py"])  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        Project Structure
        `-- src/
            `-- - main.py
    """

    def __init__(
        self,
        root_path: PathType = CURRENT_DIRECTORY,
        accepted_files: Iterable[str] = (),
        exclusion_rules: Optional[BaseExclusionRules] = None,
        full_structure: bool = False,
        glyphs: GlyphSet = ASCII_GLYPHS,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Directory to render. Defaults to the current directory.
            accepted_files: Relative paths of the files that passed all filters.
            exclusion_rules: Rules for skipping entries and their subtrees.
            full_structure: Render every entry instead of only accepted branches.
            glyphs: Glyph set used for drawing.
        """
        self.root_path = normalize_path(os.fspath(root_path)) or CURRENT_DIRECTORY
        self.accepted_files = frozenset(normalize_path(path) for path in accepted_files)
        self.exclusion_rules = exclusion_rules
        self.full_structure = full_structure
        self.glyphs = glyphs
        self._ancestors = ancestor_directories(self.accepted_files)
        self._tree: Optional[FileSystemNode] = None
        self._built = False

    @property
    def is_current_directory(self) -> bool:
        return self.root_path == CURRENT_DIRECTORY

    def get_tree(self) -> Optional[FileSystemNode]:
        """Get the root node of the pruned tree, building it on first access.

        Returns:
            The root node, or None if nothing is to be rendered (the root is missing,
            skipped, or has no included entries outside full-structure mode).
        """
        if not self._built:
            self._build_tree()
        return self._tree

    def _is_skipped(self, relative_path: str) -> bool:
        if self.exclusion_rules is None or not self.exclusion_rules.exclude(relative_path):
            return False
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Skipping in structure: %s (%s)", relative_path, self.exclusion_rules.describe(relative_path))
        return True

    def _build_tree(self) -> None:
        self._built = True
        self._tree = None

        if not os.path.isdir(self.root_path):
            logger.debug("Structure root is not a readable directory: %s", self.root_path)
            return

        root_relative = "" if self.is_current_directory else self.root_path
        if root_relative and self._is_skipped(root_relative):
            return

        name = os.path.basename(self.root_path) or self.root_path
        root = FileSystemNode(name, is_dir=True, relative_path=root_relative)
        self._add_children(root, self.root_path)

        if self.full_structure or root.children:
            self._tree = root

    def _list_directory(self, node: FileSystemNode, path: str) -> Tuple[list, list]:
        """Split the included entries of a directory into directories and files."""
        try:
            names = sorted(os.listdir(path))
        except OSError as e:
            logger.debug("Cannot list directory %s: %s", path, e)
            return [], []

        directories = []
        files = []
        for name in names:
            child_path = os.path.join(path, name)
            relative_path = join_relative(node.relative_path, name)
            if self._is_skipped(relative_path):
                continue
            if os.path.isdir(child_path):
                if os.path.islink(child_path):
                    # Drawn as an empty directory, never descended into
                    if self.full_structure:
                        directories.append((name, None, relative_path))
                elif self.full_structure or relative_path in self._ancestors:
                    directories.append((name, child_path, relative_path))
            elif self.full_structure or relative_path in self.accepted_files:
                files.append((name, relative_path))
        return directories, files

    def _add_children(self, node: FileSystemNode, path: str) -> None:
        """Recursively attach included children to ``node``."""
        directories, files = self._list_directory(node, path)

        for name, child_path, relative_path in directories:
            child = FileSystemNode(name, parent=node, is_dir=True, relative_path=relative_path)
            if child_path is None:
                continue
            self._add_children(child, child_path)
            if not self.full_structure and not child.children:
                # Accepted files below it were all hidden or excluded from the drawing
                child.parent = None

        for name, relative_path in files:
            FileSystemNode(name, parent=node, is_dir=False, relative_path=relative_path)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree representation one line at a time.

        The current-directory root is drawn as a header line without a branch glyph and
        its children start at indentation level zero. Any other root is drawn as a
        directory entry.

        Yields:
            Lines of the tree representation, without trailing newlines.

        Example:
            >>> tree = FileSystemTree(".", ["src/main.py", "README.md"])  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            Project Structure
            |-- src/
            |   `-- - main.py
            `-- - README.md
        """
        root = self.get_tree()
        if root is None:
            return

        glyphs = self.glyphs

        def write_node(
            node: FileSystemNode, prefix: str = "", is_last: bool = True, is_root: bool = False
        ) -> Iterator[str]:
            if is_root:
                if self.is_current_directory:
                    yield glyphs.format_header()
                else:
                    yield glyphs.format_directory(node.name)
            else:
                label = glyphs.format_directory(node.name) if node.is_dir else glyphs.format_file(node.name)
                yield f"{prefix}{glyphs.connector(is_last)}{label}"

            children = node.children
            for i, child in enumerate(children):
                is_last_child = i == len(children) - 1
                # Direct children of the root start at indentation level zero
                new_prefix = "" if is_root else prefix + glyphs.continuation(is_last)
                yield from write_node(child, new_prefix, is_last_child)

        yield from write_node(root, is_root=True)

    def get_tree_representation(self) -> str:
        """Get the complete tree representation as a string."""
        return "\n".join(self.stream_tree_representation())

    def get_file_count(self) -> int:
        """Number of file entries drawn in the tree."""
        root = self.get_tree()
        if root is None:
            return 0
        return sum(1 for node in root.descendants if not node.is_dir)

    def get_directory_count(self) -> int:
        """Number of directory entries drawn in the tree (excluding the root)."""
        root = self.get_tree()
        if root is None:
            return 0
        return sum(1 for node in root.descendants if node.is_dir)
