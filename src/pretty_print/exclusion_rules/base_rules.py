from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    This class serves as a contract for the individual filters applied while collecting
    files (path patterns, hidden entries, binary files, extension lists, line counts).
    Every implementation answers one question, whether a given path should be excluded,
    and can describe why it excluded a path so the collector can report each rejection
    in debug mode.

    Example:
        >>> from pretty_print.exclusion_rules.pattern_rules import PatternExclusionRules
        >>> rules = PatternExclusionRules(["build", "*.log"])
        >>> rules.exclude("build/out.js")
        True
        >>> rules.exclude("src/main.py")
        False
        >>> rules.describe("logs/server.log")
        'matches exclusion pattern *.log'
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The file or directory path to check, relative to the directory
                the tool was started from (or as given by the user).

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def describe(self, path: str) -> str:
        """
        Explain why ``path`` is excluded by this rule.

        Subclasses override this to give a more specific reason. The result is only
        meaningful for paths for which :meth:`exclude` returned True.

        Args:
            path (str): A path rejected by this rule.

        Returns:
            str: A short human-readable reason used in debug messages.
        """
        return f"excluded by {self.__class__.__name__}"

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that are configured entirely through their constructor (hidden,
        binary, extension, line-count rules) use this default implementation.

        Args:
            rule (str): The exclusion rule to add, e.g. a path pattern like "*.log".

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
