"""Composite exclusion rules that evaluate several rules in a fixed order."""

from typing import List, Optional, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Ordered combination of exclusion rules.

    A path is excluded if ANY of the constituent rules excludes it. Rules are evaluated
    in the order given and evaluation stops at the first rule that excludes the path, so
    cheap name-based checks should come before rules that read file contents (such as
    line counting). The first excluding rule is also what :meth:`describe` reports.

    Attributes:
        rules (List[BaseExclusionRules]): Constituent rules in evaluation order.

    Example:
        >>> from pretty_print.exclusion_rules.filter_rules import BinaryExclusionRules, HiddenExclusionRules
        >>> composite = CompositeExclusionRules([HiddenExclusionRules(), BinaryExclusionRules()])
        >>> composite.describe(".cache/logo.png")
        'hidden'
        >>> composite.describe("logo.png")
        'binary extension (png)'
        >>> composite.exclude("main.py")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Rules to combine, in evaluation order. May be empty, in which case
                nothing is excluded.

        Raises:
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def first_exclusion(self, path: str) -> Optional[BaseExclusionRules]:
        """Return the first constituent rule that excludes ``path``, or None."""
        for rule in self.rules:
            if rule.exclude(path):
                return rule
        return None

    def exclude(self, path: str) -> bool:
        return self.first_exclusion(path) is not None

    def describe(self, path: str) -> str:
        rule = self.first_exclusion(path)
        if rule is None:
            return "not excluded"
        return rule.describe(path)

    def get_rules(self) -> List[BaseExclusionRules]:
        """Get a copy of the constituent rules list."""
        return list(self.rules)
