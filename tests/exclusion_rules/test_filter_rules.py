"""Unit tests for hidden, binary and extension exclusion rules."""

import pytest

from pretty_print.exceptions import ConfigurationError
from pretty_print.exclusion_rules.filter_rules import (
    BinaryExclusionRules,
    ExtensionExclusionRules,
    HiddenExclusionRules,
    normalize_extensions,
)


def test_normalize_extensions():
    assert normalize_extensions(["PY", ".Md", "", "  ", "js "]) == frozenset({"py", "md", "js"})
    assert normalize_extensions(None) == frozenset()


class TestHiddenExclusionRules:
    def test_exclude(self):
        rules = HiddenExclusionRules()
        assert rules.exclude(".env")
        assert rules.exclude("src/.cache/tmp.txt")
        assert rules.exclude("src/__pycache__/a.pyc")
        assert not rules.exclude("src/main.py")

    def test_describe(self):
        assert HiddenExclusionRules().describe(".env") == "hidden"

    def test_add_rule_not_supported(self):
        with pytest.raises(NotImplementedError, match="doesn't support adding individual rules"):
            HiddenExclusionRules().add_rule("*.py")


class TestBinaryExclusionRules:
    def test_default_table(self):
        rules = BinaryExclusionRules()
        assert rules.exclude("logo.png")
        assert rules.exclude("LOGO.PNG")
        assert rules.exclude("Makefile")
        assert not rules.exclude("main.py")

    def test_custom_table(self):
        rules = BinaryExclusionRules({"dat"})
        assert rules.exclude("data.dat")
        assert not rules.exclude("logo.png")

    def test_describe(self):
        rules = BinaryExclusionRules()
        assert rules.describe("Makefile") == "binary (no extension)"
        assert rules.describe("a.PNG") == "binary extension (png)"


class TestExtensionExclusionRules:
    def test_no_lists_pass_everything(self):
        rules = ExtensionExclusionRules()
        assert not rules.has_rules()
        assert not rules.exclude("anything.xyz")
        assert not rules.exclude("Makefile")

    def test_whitelist(self):
        rules = ExtensionExclusionRules(whitelist=["py", ".MD"])
        assert not rules.exclude("main.py")
        assert not rules.exclude("README.md")
        assert rules.exclude("util.js")
        assert rules.exclude("Makefile")

    def test_blacklist(self):
        rules = ExtensionExclusionRules(blacklist=["json"])
        assert rules.exclude("package.JSON")
        assert not rules.exclude("main.py")
        assert not rules.exclude("Makefile")

    def test_both_lists_rejected(self):
        with pytest.raises(ConfigurationError, match="Cannot specify both whitelist and blacklist"):
            ExtensionExclusionRules(whitelist=["py"], blacklist=["js"])

    def test_describe(self):
        assert ExtensionExclusionRules(whitelist=["py"]).describe("Makefile") == "no extension, fails whitelist"
        assert ExtensionExclusionRules(whitelist=["py", "md"]).describe("a.js") == "failed whitelist (js not in [md py])"
        assert ExtensionExclusionRules(blacklist=["js"]).describe("a.JS") == "failed blacklist (js is in [js])"
