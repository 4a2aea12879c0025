"""Exclusion rules wrapping the path classifier predicates."""

from typing import AbstractSet, Iterable, Optional

from pretty_print.exceptions import ConfigurationError
from pretty_print.file_system_tree.classifier import (
    BINARY_EXTENSIONS,
    get_extension,
    is_binary,
    is_hidden,
    passes_extension_filter,
)
from pretty_print.types import ExtensionSet

from .base_rules import BaseExclusionRules


def normalize_extensions(extensions: Optional[Iterable[str]]) -> ExtensionSet:
    """Lowercase extensions and drop a leading dot and blank entries.

    Example:
        >>> sorted(normalize_extensions(["PY", ".md", " "]))
        ['md', 'py']
    """
    result = set()
    for extension in extensions or ():
        extension = extension.strip().lower()
        if extension.startswith("."):
            extension = extension[1:]
        if extension:
            result.add(extension)
    return frozenset(result)


class HiddenExclusionRules(BaseExclusionRules):
    """Exclude dotfiles, dot-directories and ``__``-prefixed entries (and their contents).

    Example:
        >>> rules = HiddenExclusionRules()
        >>> rules.exclude(".git/config")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    def exclude(self, path: str) -> bool:
        return is_hidden(path)

    def describe(self, path: str) -> str:
        return "hidden"


class BinaryExclusionRules(BaseExclusionRules):
    """Exclude files classified as binary by name.

    Files without an extension count as binary, as do files whose lowercase extension is
    listed in ``binary_extensions``.

    Attributes:
        binary_extensions (frozenset): Lowercase extensions considered binary.

    Example:
        >>> rules = BinaryExclusionRules()
        >>> rules.exclude("assets/logo.png")
        True
        >>> rules.exclude("README.md")
        False
    """

    def __init__(self, binary_extensions: AbstractSet[str] = BINARY_EXTENSIONS):
        self.binary_extensions = frozenset(binary_extensions)

    def exclude(self, path: str) -> bool:
        return is_binary(path, self.binary_extensions)

    def describe(self, path: str) -> str:
        extension = get_extension(path)
        if extension is None:
            return "binary (no extension)"
        return f"binary extension ({extension.lower()})"


class ExtensionExclusionRules(BaseExclusionRules):
    """Exclude files by extension, in either whitelist or blacklist mode.

    Attributes:
        whitelist (frozenset): Extensions that are allowed; empty when not used.
        blacklist (frozenset): Extensions that are rejected; empty when not used.

    Example:
        >>> rules = ExtensionExclusionRules(whitelist=["py", "md"])
        >>> rules.exclude("main.PY")
        False
        >>> rules.exclude("data.json")
        True
        >>> ExtensionExclusionRules(whitelist=["py"], blacklist=["js"])
        Traceback (most recent call last):
        ...
        pretty_print.exceptions.ConfigurationError: Cannot specify both whitelist and blacklist
    """

    def __init__(self, whitelist: Optional[Iterable[str]] = None, blacklist: Optional[Iterable[str]] = None):
        """Initialize extension rules.

        Args:
            whitelist: Extensions to allow exclusively.
            blacklist: Extensions to reject.

        Raises:
            ConfigurationError: If both a whitelist and a blacklist are given.
        """
        self.whitelist = normalize_extensions(whitelist)
        self.blacklist = normalize_extensions(blacklist)
        if self.whitelist and self.blacklist:
            raise ConfigurationError("Cannot specify both whitelist and blacklist")

    def exclude(self, path: str) -> bool:
        return not passes_extension_filter(path, self.whitelist, self.blacklist)

    def describe(self, path: str) -> str:
        extension = get_extension(path)
        if self.whitelist:
            if extension is None:
                return "no extension, fails whitelist"
            return f"failed whitelist ({extension.lower()} not in [{' '.join(sorted(self.whitelist))}])"
        return f"failed blacklist ({(extension or '').lower()} is in [{' '.join(sorted(self.blacklist))}])"

    def has_rules(self) -> bool:
        return bool(self.whitelist or self.blacklist)
