"""Immutable run configuration.

A PrintConfig is built once from the parsed command line (or directly by library
users), validated before any filesystem work begins, and then passed explicitly to the
collector, the tree renderer and the output assembler.
"""

import argparse
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from pretty_print.exceptions import ConfigurationError
from pretty_print.exclusion_rules.base_rules import BaseExclusionRules
from pretty_print.exclusion_rules.composite_rules import CompositeExclusionRules
from pretty_print.exclusion_rules.filter_rules import (
    BinaryExclusionRules,
    ExtensionExclusionRules,
    HiddenExclusionRules,
    normalize_extensions,
)
from pretty_print.exclusion_rules.line_count_rules import DEFAULT_MAX_LINES, LineCountExclusionRules
from pretty_print.exclusion_rules.pattern_rules import PatternExclusionRules
from pretty_print.file_system_tree.classifier import BINARY_EXTENSIONS
from pretty_print.file_system_tree.glyphs import GlyphSet, get_glyph_set
from pretty_print.types import ExtensionSet


def split_csv(values: Iterable[str]) -> Tuple[str, ...]:
    """Split comma-separated values into a flat tuple, dropping blank items.

    Example:
        >>> split_csv(["node_modules,build", ",*.log,"])
        ('node_modules', 'build', '*.log')
    """
    items: List[str] = []
    for value in values:
        items.extend(item for item in value.split(",") if item.strip())
    return tuple(items)


@dataclass(frozen=True)
class PrintConfig:
    """All options of a single run.

    Sequences passed in are converted to tuples and frozensets, and extensions are
    normalized to lowercase without a leading dot, so an instance never changes after
    construction.

    Attributes:
        targets: Files and directories to process; defaults to the current directory.
        exclusions: Exclusion patterns (exact, prefix or glob).
        whitelist: Only files with these extensions pass.
        blacklist: Files with these extensions are rejected.
        exclude_hidden: Reject hidden entries (dotfiles and ``__``-prefixed names).
        include_binary: Keep files classified as binary.
        max_lines: Files with more lines than this are rejected.
        print_structure: Emit the structure section.
        print_full_structure: Draw every entry instead of only accepted branches.
        use_utf8: Draw with the decorated UTF-8 glyph set.
        debug: Emit the diagnostic trace on stderr.
        binary_extensions: Extensions classified as binary.

    Raises:
        ConfigurationError: If both a whitelist and a blacklist are configured, or if
            max_lines is not a non-negative integer.

    Example:
        >>> config = PrintConfig(whitelist=["PY", ".md"])
        >>> sorted(config.whitelist)
        ['md', 'py']
        >>> config.targets
        ('.',)
    """

    targets: Tuple[str, ...] = (".",)
    exclusions: Tuple[str, ...] = ()
    whitelist: ExtensionSet = frozenset()
    blacklist: ExtensionSet = frozenset()
    exclude_hidden: bool = False
    include_binary: bool = False
    max_lines: int = DEFAULT_MAX_LINES
    print_structure: bool = True
    print_full_structure: bool = False
    use_utf8: bool = False
    debug: bool = False
    binary_extensions: ExtensionSet = field(default=BINARY_EXTENSIONS)

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "targets", tuple(self.targets) or (".",))
        object.__setattr__(self, "exclusions", tuple(pattern for pattern in self.exclusions if pattern))
        object.__setattr__(self, "whitelist", normalize_extensions(self.whitelist))
        object.__setattr__(self, "blacklist", normalize_extensions(self.blacklist))
        object.__setattr__(self, "binary_extensions", normalize_extensions(self.binary_extensions))

        if self.whitelist and self.blacklist:
            raise ConfigurationError("Cannot specify both whitelist and blacklist")
        if not isinstance(self.max_lines, int) or isinstance(self.max_lines, bool) or self.max_lines < 0:
            raise ConfigurationError(f"Invalid value for --max-lines: {self.max_lines!r} (expected an integer >= 0)")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "PrintConfig":
        """Build a configuration from parsed command-line arguments.

        Args:
            args: Namespace produced by :func:`pretty_print.cli.argparser.create_parser`.

        Returns:
            The validated configuration.

        Raises:
            ConfigurationError: If the options conflict or are invalid.
        """
        return cls(
            targets=tuple(args.paths),
            exclusions=split_csv(args.exclude),
            whitelist=frozenset(split_csv(args.whitelist)),
            blacklist=frozenset(split_csv(args.blacklist)),
            exclude_hidden=args.no_hidden,
            include_binary=args.include_binary,
            max_lines=args.max_lines,
            print_structure=not args.no_structure,
            print_full_structure=args.print_full_structure,
            use_utf8=args.utf8,
            debug=args.debug,
        )

    @property
    def glyphs(self) -> GlyphSet:
        return get_glyph_set(self.use_utf8)

    def pattern_rules(self) -> PatternExclusionRules:
        """Exclusion-pattern rules, applied to every path including explicit files."""
        return PatternExclusionRules(self.exclusions)

    def structure_rules(self) -> CompositeExclusionRules:
        """Rules for skipping entries while drawing the structure."""
        rules: List[BaseExclusionRules] = [self.pattern_rules()]
        if self.exclude_hidden:
            rules.append(HiddenExclusionRules())
        return CompositeExclusionRules(rules)

    def file_rules(self) -> CompositeExclusionRules:
        """Rules for files discovered inside directory targets, in evaluation order.

        The binary check runs before the extension filter, so a whitelisted extension
        that is also classified as binary is still rejected unless binary files are
        included.
        """
        rules: List[BaseExclusionRules] = [self.pattern_rules()]
        if self.exclude_hidden:
            rules.append(HiddenExclusionRules())
        if not self.include_binary:
            rules.append(BinaryExclusionRules(self.binary_extensions))
        rules.append(ExtensionExclusionRules(self.whitelist, self.blacklist))
        rules.append(LineCountExclusionRules(self.max_lines))
        return CompositeExclusionRules(rules)

    def describe(self) -> List[str]:
        """Human-readable dump of the effective configuration for the debug trace."""
        return [
            f"Targets: {' '.join(self.targets)}",
            f"Exclusions: {' '.join(self.exclusions)}",
            f"Whitelist: {' '.join(sorted(self.whitelist))}",
            f"Blacklist: {' '.join(sorted(self.blacklist))}",
            f"Exclude hidden: {self.exclude_hidden}",
            f"Include binary: {self.include_binary}",
            f"Print structure: {self.print_structure}",
            f"Print full structure: {self.print_full_structure}",
            f"Use UTF-8: {self.use_utf8}",
            f"Max line count: {self.max_lines}",
            f"Binary extensions: {' '.join(sorted(self.binary_extensions))}",
        ]
