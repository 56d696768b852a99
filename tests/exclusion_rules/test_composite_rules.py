"""Unit tests for composite exclusion rules."""

import pytest

from dirr.exclusion_rules.base_rules import BaseExclusionRules
from dirr.exclusion_rules.composite_rules import CompositeExclusionRules
from dirr.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirr.exclusion_rules.name_rules import NameExclusionRules


class MockExclusionRules(BaseExclusionRules):
    """Mock exclusion rules for testing."""

    def __init__(self, exclude_patterns=None, has_rules_result=True):
        self.exclude_patterns = exclude_patterns or []
        self.has_rules_result = has_rules_result
        self.calls = []

    def exclude(self, path: str) -> bool:
        self.calls.append(path)
        return path in self.exclude_patterns

    def has_rules(self) -> bool:
        return self.has_rules_result


class TestCompositeExclusionRules:
    """Test the CompositeExclusionRules class."""

    def test_init_with_multiple_rules(self):
        rule1 = MockExclusionRules()
        rule2 = MockExclusionRules()
        composite = CompositeExclusionRules([rule1, rule2])

        assert composite.get_rules() == [rule1, rule2]

    def test_init_with_empty_rules(self):
        with pytest.raises(ValueError, match="At least one exclusion rule must be provided"):
            CompositeExclusionRules([])

    def test_init_with_invalid_rule_type(self):
        with pytest.raises(TypeError, match="Rule at index 0 must implement BaseExclusionRules"):
            CompositeExclusionRules(["not a rule"])

        with pytest.raises(TypeError, match="Rule at index 1 must implement BaseExclusionRules"):
            CompositeExclusionRules([MockExclusionRules(), "invalid"])

    def test_exclude_any_match(self):
        rule1 = MockExclusionRules(exclude_patterns=["a.txt"])
        rule2 = MockExclusionRules(exclude_patterns=["b.txt"])
        composite = CompositeExclusionRules([rule1, rule2])

        assert composite.exclude("a.txt")
        assert composite.exclude("b.txt")
        assert not composite.exclude("c.txt")

    def test_exclude_short_circuits(self):
        rule1 = MockExclusionRules(exclude_patterns=["a.txt"])
        rule2 = MockExclusionRules()
        composite = CompositeExclusionRules([rule1, rule2])

        composite.exclude("a.txt")

        assert rule2.calls == []

    def test_has_rules(self):
        empty = CompositeExclusionRules([MockExclusionRules(has_rules_result=False)])
        assert not empty.has_rules()

        mixed = CompositeExclusionRules(
            [MockExclusionRules(has_rules_result=False), MockExclusionRules(has_rules_result=True)]
        )
        assert mixed.has_rules()

    def test_add_rule_object(self):
        composite = CompositeExclusionRules([MockExclusionRules()])
        extra = MockExclusionRules(exclude_patterns=["x/"])
        composite.add_rule_object(extra)

        assert composite.exclude("x/")
        with pytest.raises(TypeError, match="Rule must implement BaseExclusionRules"):
            composite.add_rule_object("nope")

    def test_get_rules_returns_copy(self):
        composite = CompositeExclusionRules([MockExclusionRules()])
        composite.get_rules().clear()
        assert len(composite.get_rules()) == 1

    def test_names_and_patterns_together(self):
        names = NameExclusionRules(["build"])
        patterns = GitIgnoreExclusionRules()
        patterns.add_rule("*.pyc")
        composite = CompositeExclusionRules([names, patterns])

        assert composite.exclude("build/")
        assert composite.exclude("src/main.pyc")
        assert not composite.exclude("build")
        assert not composite.exclude("src/main.py")
