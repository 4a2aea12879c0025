"""Unit tests for the run configuration."""

import pytest

from pretty_print.cli.argparser import create_parser
from pretty_print.config import PrintConfig, split_csv
from pretty_print.exceptions import ConfigurationError, PrettyPrintError
from pretty_print.exclusion_rules.filter_rules import (
    BinaryExclusionRules,
    ExtensionExclusionRules,
    HiddenExclusionRules,
)
from pretty_print.exclusion_rules.line_count_rules import LineCountExclusionRules
from pretty_print.exclusion_rules.pattern_rules import PatternExclusionRules
from pretty_print.file_system_tree.glyphs import ASCII_GLYPHS, UTF8_GLYPHS


def parse(*argv):
    return create_parser().parse_intermixed_args(list(argv))


def test_split_csv():
    assert split_csv(["a,b", "c"]) == ("a", "b", "c")
    assert split_csv([",a,,b,"]) == ("a", "b")
    assert split_csv([]) == ()


def test_defaults():
    config = PrintConfig()
    assert config.targets == (".",)
    assert config.exclusions == ()
    assert config.whitelist == frozenset()
    assert config.blacklist == frozenset()
    assert not config.exclude_hidden
    assert not config.include_binary
    assert config.max_lines == 1000
    assert config.print_structure
    assert not config.print_full_structure
    assert config.glyphs is ASCII_GLYPHS


def test_normalization():
    config = PrintConfig(targets=[], exclusions=["build", ""], whitelist=[".PY", "md"])
    assert config.targets == (".",)
    assert config.exclusions == ("build",)
    assert config.whitelist == frozenset({"py", "md"})
    assert isinstance(config.whitelist, frozenset)
    assert isinstance(config.binary_extensions, frozenset)


def test_immutable():
    config = PrintConfig()
    with pytest.raises(AttributeError):
        config.max_lines = 5


def test_whitelist_and_blacklist_conflict():
    with pytest.raises(ConfigurationError, match="Cannot specify both whitelist and blacklist"):
        PrintConfig(whitelist={"py"}, blacklist={"js"})


@pytest.mark.parametrize("value", [-1, "10", 1.5, True])
def test_invalid_max_lines(value):
    with pytest.raises(ConfigurationError, match="Invalid value for --max-lines"):
        PrintConfig(max_lines=value)


def test_configuration_error_hierarchy():
    assert issubclass(ConfigurationError, PrettyPrintError)
    assert issubclass(ConfigurationError, ValueError)


def test_from_args():
    args = parse(
        "src",
        "--exclude=build,*.log",
        "README.md",
        "--exclude",
        "dist/",
        "--whitelist=py,md",
        "--no-hidden",
        "--max-lines=50",
        "--utf8",
        "--print-full-structure",
    )
    config = PrintConfig.from_args(args)
    assert config.targets == ("src", "README.md")
    assert config.exclusions == ("build", "*.log", "dist/")
    assert config.whitelist == frozenset({"py", "md"})
    assert config.exclude_hidden
    assert config.max_lines == 50
    assert config.print_full_structure
    assert config.glyphs is UTF8_GLYPHS


def test_from_args_defaults():
    config = PrintConfig.from_args(parse())
    assert config == PrintConfig()


def test_from_args_no_structure():
    assert not PrintConfig.from_args(parse("--no-structure")).print_structure


def test_from_args_conflict():
    with pytest.raises(ConfigurationError):
        PrintConfig.from_args(parse("--whitelist=py", "--blacklist=js"))


def test_rule_chains():
    config = PrintConfig(exclusions=("build",), exclude_hidden=True, max_lines=10)
    assert [type(rule) for rule in config.file_rules().get_rules()] == [
        PatternExclusionRules,
        HiddenExclusionRules,
        BinaryExclusionRules,
        ExtensionExclusionRules,
        LineCountExclusionRules,
    ]
    assert [type(rule) for rule in config.structure_rules().get_rules()] == [
        PatternExclusionRules,
        HiddenExclusionRules,
    ]


def test_rule_chains_minimal():
    config = PrintConfig(include_binary=True)
    assert [type(rule) for rule in config.file_rules().get_rules()] == [
        PatternExclusionRules,
        ExtensionExclusionRules,
        LineCountExclusionRules,
    ]
    assert [type(rule) for rule in config.structure_rules().get_rules()] == [PatternExclusionRules]


def test_describe():
    lines = PrintConfig(targets=("src", "docs"), whitelist={"py"}).describe()
    assert "Targets: src docs" in lines
    assert "Whitelist: py" in lines
    assert "Max line count: 1000" in lines
