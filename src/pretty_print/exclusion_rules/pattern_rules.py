"""Exclusion rules built from user-supplied path patterns.

A pattern excludes a path when it names the path itself or one of its parent
directories (``build`` excludes ``build`` and ``build/out/app.js``). Patterns
containing ``*`` or ``?`` are globs that may match at any path-segment boundary, so
``*.log`` excludes ``server.log`` as well as ``logs/2024/server.log``.
"""

import re
from typing import Iterable, List, Optional, Tuple

from pathspec.pattern import RegexPattern

from .base_rules import BaseExclusionRules

GLOB_CHARACTERS = ("*", "?")

# Bare directory names that are excluded wherever they occur in the tree, not only
# relative to the starting directory.
ANYWHERE_PATTERNS = frozenset({"__pycache__"})


def normalize_path(path: str) -> str:
    """Strip trailing slashes (except for the filesystem root) and leading ``./``.

    Example:
        >>> normalize_path("./node_modules/")
        'node_modules'
        >>> normalize_path("/")
        '/'
    """
    if path != "/":
        path = path.rstrip("/") or "/"
    while path.startswith("./"):
        path = path[2:]
    return path


def glob_to_regex(pattern: str) -> str:
    """Translate a glob into a regular expression body (without anchors).

    Only ``*`` (any sequence, including ``/``) and ``?`` (any single character) are
    special; every other character is matched literally.

    Example:
        >>> glob_to_regex("*.log")
        '.*\\\\.log'
    """
    parts = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return "".join(parts)


def compile_pattern(pattern: str) -> List[RegexPattern]:
    """Compile one exclusion pattern into the regex patterns that implement it.

    Args:
        pattern: A normalized exclusion pattern.

    Returns:
        The pathspec regex patterns; the path is excluded if any of them matches.
    """
    regexes = [rf"(?s)^{re.escape(pattern)}(?:/.*)?$"]
    if any(char in pattern for char in GLOB_CHARACTERS):
        # Whole path, leading segments, trailing segments or segments in the middle
        regexes.append(rf"(?s)^(?:.*/)?{glob_to_regex(pattern)}(?:/.*)?$")
    if pattern in ANYWHERE_PATTERNS:
        name = re.escape(pattern)
        regexes.append(rf"(?s)^(?:{name}(?:/.*)?|.*/{name}.*)$")
    return [RegexPattern(regex) for regex in regexes]


def path_matches_pattern(path: str, pattern: str) -> bool:
    """Check whether ``path`` matches a single exclusion pattern.

    Both arguments are normalized first. The path matches when it equals the pattern,
    is nested under it, or (for globs) when the glob matches the whole path or any run
    of complete path segments.

    Example:
        >>> path_matches_pattern("foo/bar.py", "foo/")
        True
        >>> path_matches_pattern("src/foo/bar.py", "foo")
        False
        >>> path_matches_pattern("src/logs/app.log", "*.log")
        True
    """
    normalized = normalize_path(path)
    return any(regex.match_file(normalized) is not None for regex in compile_pattern(normalize_path(pattern)))


class PatternExclusionRules(BaseExclusionRules):
    """Exclusion rules for exact, prefix and glob path patterns.

    Patterns are normalized and compiled once, when they are added. Matching is done
    with :class:`pathspec.pattern.RegexPattern` objects against normalized paths.

    Attributes:
        patterns (List[str]): The normalized patterns, in the order they were added.

    Example:
        >>> rules = PatternExclusionRules(["node_modules/", "*.min.js"])
        >>> rules.exclude("./node_modules/react/index.js")
        True
        >>> rules.exclude("dist/app.min.js")
        True
        >>> rules.matching_pattern("src/app.js") is None
        True
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        """Initialize the rules, optionally with an initial set of patterns.

        Args:
            patterns: Exclusion patterns to add. Empty strings are ignored.
        """
        self.patterns: List[str] = []
        self._compiled: List[Tuple[str, List[RegexPattern]]] = []
        for pattern in patterns or ():
            self.add_rule(pattern)

    def add_rule(self, rule: str) -> None:
        """Add a single exclusion pattern.

        Args:
            rule: Pattern such as ``build``, ``docs/`` or ``*.log``.
        """
        if not rule:
            return
        pattern = normalize_path(rule)
        self.patterns.append(pattern)
        self._compiled.append((pattern, compile_pattern(pattern)))

    def matching_pattern(self, path: str) -> Optional[str]:
        """Return the first pattern that excludes ``path``, or None."""
        normalized = normalize_path(path)
        for pattern, regexes in self._compiled:
            if any(regex.match_file(normalized) is not None for regex in regexes):
                return pattern
        return None

    def exclude(self, path: str) -> bool:
        return self.matching_pattern(path) is not None

    def describe(self, path: str) -> str:
        return f"matches exclusion pattern {self.matching_pattern(path)}"

    def has_rules(self) -> bool:
        """Check whether any pattern has been added."""
        return bool(self._compiled)
