"""Collection of the files that pass all configured filters.

The collector processes each target in turn. Files named directly on the command line
are explicit and only have to survive the exclusion patterns; files discovered inside
directory targets go through the full rule chain. The result is the sorted list of
accepted relative paths shared by the structure and content sections.
"""

import logging
import os
from typing import Iterator, List

from pretty_print.config import PrintConfig
from pretty_print.exclusion_rules.composite_rules import CompositeExclusionRules
from pretty_print.exclusion_rules.pattern_rules import PatternExclusionRules, normalize_path
from pretty_print.file_system_tree.file_system_tree import join_relative

logger = logging.getLogger(__name__)


def display_path(path: str) -> str:
    """Strip leading ``./`` so paths look like the ones users type.

    Example:
        >>> display_path("./src/main.py")
        'src/main.py'
    """
    while path.startswith("./"):
        path = path[2:]
    return path


def is_readable_file(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.R_OK)


class FileCollector:
    """Walks the configured targets and returns the accepted files.

    Discovered files are checked in this order: readability, exclusion patterns, hidden
    entries (when enabled), binary classification (unless binary files are included),
    extension whitelist/blacklist, and finally the line-count ceiling. Excluded and
    hidden directories are pruned with their whole subtree. Symbolic links are never
    followed nor collected.

    Missing or unreadable targets produce a warning and are skipped; collection never
    aborts the run.

    Attributes:
        config (PrintConfig): The run configuration.

    Example:
        >>> collector = FileCollector(PrintConfig(targets=("src",), whitelist={"py"}))  # doctest: +SKIP
        >>> collector.collect()  # doctest: +SKIP
        ['src/__init__.py', 'src/main.py']
    """

    def __init__(self, config: PrintConfig) -> None:
        self.config = config
        self._pattern_rules: PatternExclusionRules = config.pattern_rules()
        self._directory_rules: CompositeExclusionRules = config.structure_rules()
        self._file_rules: CompositeExclusionRules = config.file_rules()

    def collect(self) -> List[str]:
        """Collect the accepted files of every target.

        Returns:
            Accepted relative paths sorted lexicographically. Paths reached through
            several targets appear once per target.
        """
        accepted: List[str] = []
        for target in self.config.targets:
            logger.debug("Processing target: %s", target)
            accepted.extend(self._collect_target(target))
        return sorted(accepted)

    def _collect_target(self, target: str) -> Iterator[str]:
        if os.path.isfile(target):
            if self._accept_explicit(target):
                yield display_path(target)
        elif os.path.isdir(target):
            if not os.access(target, os.R_OK | os.X_OK):
                logger.warning("Cannot read directory %s (permission denied)", target)
                return
            logger.debug("Recursively processing directory: %s", target)
            root = normalize_path(target)
            yield from self._walk(root, "" if root == "." else root)
        else:
            logger.warning("Target not found: %s", target)

    def _accept_explicit(self, path: str) -> bool:
        relative_path = display_path(path)
        if not is_readable_file(path):
            logger.warning("Cannot read file %s (permission denied)", path)
            return False
        pattern = self._pattern_rules.matching_pattern(relative_path)
        if pattern is not None:
            logger.debug("Excluding due to pattern match: %s matches %s", relative_path, pattern)
            return False
        logger.debug("Including explicit file: %s", relative_path)
        return True

    def _accept_discovered(self, path: str, relative_path: str) -> bool:
        if not is_readable_file(path):
            logger.debug("Skipping unreadable file: %s", relative_path)
            return False
        rule = self._file_rules.first_exclusion(relative_path)
        if rule is not None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Skipping %s: %s", relative_path, rule.describe(relative_path))
            return False
        logger.debug("Including file: %s", relative_path)
        return True

    def _walk(self, path: str, relative_path: str) -> Iterator[str]:
        """Recursively yield accepted files below ``path`` in sorted order."""
        try:
            names = sorted(os.listdir(path))
        except OSError as e:
            logger.debug("Cannot list directory %s: %s", path, e)
            return

        for name in names:
            child_path = os.path.join(path, name)
            child_relative = display_path(join_relative(relative_path, name))

            if os.path.islink(child_path):
                logger.debug("Skipping symbolic link: %s", child_relative)
            elif os.path.isdir(child_path):
                rule = self._directory_rules.first_exclusion(child_relative)
                if rule is not None:
                    if logger.isEnabledFor(logging.DEBUG):
                        logger.debug("Skipping directory %s: %s", child_relative, rule.describe(child_relative))
                    continue
                yield from self._walk(child_path, child_relative)
            elif self._accept_discovered(child_path, child_relative):
                yield child_relative
