"""Unit tests for IgnorePatternRules."""

import pytest

from file_mapper.exclusion_rules.base_rules import BaseExclusionRules
from file_mapper.exclusion_rules.ignore_pattern_rules import IgnorePatternRules


@pytest.mark.parametrize(
    "name, excluded",
    [
        ("node_modules", True),
        ("my_node_modules_backup", True),
        ("build", True),
        ("prebuild.sh", True),
        ("Build", False),
        ("src", False),
        ("README.md", False),
    ],
)
def test_substring_matching(name, excluded):
    rules = IgnorePatternRules(["node_modules", "build"])
    assert rules.exclude(name) is excluded


def test_patterns_are_not_globs():
    rules = IgnorePatternRules(["*.pyc"])
    assert not rules.exclude("module.pyc")
    assert rules.exclude("weird*.pyc.txt")


def test_hidden_names_excluded_by_default():
    rules = IgnorePatternRules()
    assert rules.exclude(".git")
    assert rules.exclude(".env")
    assert not rules.exclude("visible.txt")
    assert not rules.exclude("file.with.dots")


def test_hidden_names_can_be_kept():
    rules = IgnorePatternRules(["tmp"], ignore_hidden=False)
    assert not rules.exclude(".env")
    assert rules.exclude(".tmpfile")


def test_add_rule():
    rules = IgnorePatternRules()
    assert not rules.exclude("target")
    rules.add_rule("target")
    assert rules.exclude("target")
    assert rules.patterns == ["target"]


def test_empty_patterns_are_dropped():
    rules = IgnorePatternRules(["", "log"])
    rules.add_rule("")
    assert rules.patterns == ["log"]
    assert not rules.exclude("main.py")


def test_base_rules_add_rule_not_implemented():
    class NeverExclude(BaseExclusionRules):
        def exclude(self, name):
            return False

    with pytest.raises(NotImplementedError):
        NeverExclude().add_rule("x")


def test_base_rules_is_abstract():
    with pytest.raises(TypeError):
        BaseExclusionRules()
