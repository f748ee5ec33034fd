"""Tests for the naming convention rule."""

from dataclasses import replace

import pytest

from clean_code_conventions.domain.rules.catalogue import RuleCatalogue
from clean_code_conventions.domain.rules.naming import (
    Casing,
    NamingConventionRule,
    is_camel_case,
    is_pascal_case,
)
from tests.declaration_factories import field, method, prop


def rule_ids(violations) -> list[str]:
    return sorted(v.rule_id for v in violations)


class TestCasingPredicates:
    @pytest.mark.parametrize("name", ["x", "count", "itemCount2", "aB"])
    def test_camel_case_accepts(self, name: str) -> None:
        assert is_camel_case(name)

    @pytest.mark.parametrize("name", ["", "X", "Count", "my_count", "2count", "cöunt", "count!"])
    def test_camel_case_rejects(self, name: str) -> None:
        assert not is_camel_case(name)

    @pytest.mark.parametrize("name", ["X", "Run", "MaxSize", "Http2"])
    def test_pascal_case_accepts(self, name: str) -> None:
        assert is_pascal_case(name)

    @pytest.mark.parametrize("name", ["", "x", "run", "Max_Size", "_Run", "9Lives"])
    def test_pascal_case_rejects(self, name: str) -> None:
        assert not is_pascal_case(name)

    def test_trailing_newline_is_not_accepted(self) -> None:
        assert not Casing.PASCAL.matches("Run\n")


class TestExpectedCasing:
    def test_const_field_is_pascal_regardless_of_visibility(self) -> None:
        assert NamingConventionRule.expected_casing(field("MaxSize", "private", "const")) is Casing.PASCAL
        assert NamingConventionRule.expected_casing(field("MaxSize", "const")) is Casing.PASCAL

    def test_private_field_is_camel(self) -> None:
        assert NamingConventionRule.expected_casing(field("count")) is Casing.CAMEL
        assert NamingConventionRule.expected_casing(field("count", "private")) is Casing.CAMEL

    @pytest.mark.parametrize("keyword", ["public", "internal", "protected"])
    def test_non_private_field_is_pascal(self, keyword: str) -> None:
        assert NamingConventionRule.expected_casing(field("Count", keyword)) is Casing.PASCAL

    @pytest.mark.parametrize("keywords", [(), ("private",), ("public",), ("protected", "static")])
    def test_method_is_always_pascal(self, keywords) -> None:
        assert NamingConventionRule.expected_casing(method("Run", *keywords)) is Casing.PASCAL

    def test_private_property_is_unchecked(self) -> None:
        assert NamingConventionRule.expected_casing(prop("anything")) is None
        assert NamingConventionRule.expected_casing(prop("anything", "private")) is None

    def test_public_property_is_pascal(self) -> None:
        assert NamingConventionRule.expected_casing(prop("Name", "public")) is Casing.PASCAL


class TestNamingConventionRule:
    def setup_method(self) -> None:
        self.rule = NamingConventionRule()

    def test_unmarked_camel_field_passes(self) -> None:
        assert self.rule.evaluate(field("count")) == []

    def test_public_camel_field_needs_pascal(self) -> None:
        violations = self.rule.evaluate(field("count", "public"))
        assert rule_ids(violations) == ["PublicPascalCase"]
        assert violations[0].code == "CC0003"
        assert violations[0].message == "The member 'count' should be written in PascalCase"

    def test_private_field_with_underscore_gets_both(self) -> None:
        assert rule_ids(self.rule.evaluate(field("my_count", "private"))) == [
            "NoUnderscore",
            "PrivateCamelCase",
        ]

    def test_pascal_method_passes(self) -> None:
        assert self.rule.evaluate(method("Run")) == []
        assert self.rule.evaluate(method("Run", "public")) == []

    def test_camel_method_fails(self) -> None:
        assert rule_ids(self.rule.evaluate(method("run", "private"))) == ["PublicPascalCase"]

    def test_private_const_field_pascal_passes(self) -> None:
        assert self.rule.evaluate(field("MaxSize", "private", "const")) == []

    def test_const_field_camel_fails(self) -> None:
        assert rule_ids(self.rule.evaluate(field("maxSize", "const"))) == ["PublicPascalCase"]

    def test_explicit_is_const_flag_is_honoured(self) -> None:
        assert rule_ids(self.rule.evaluate(field("maxSize", is_const=True))) == ["PublicPascalCase"]

    @pytest.mark.parametrize("name", ["any_thing", "Any_Thing", "_x"])
    def test_private_property_only_gets_underscore_check(self, name: str) -> None:
        assert rule_ids(self.rule.evaluate(prop(name))) == ["NoUnderscore"]
        assert self.rule.evaluate(prop(name.replace("_", ""))) == []

    def test_underscore_with_otherwise_valid_pascal_casing(self) -> None:
        # 'My_Value' fails PascalCase too because '_' is outside [a-zA-Z0-9]
        assert rule_ids(self.rule.evaluate(method("My_Value"))) == ["NoUnderscore", "PublicPascalCase"]

    def test_underscore_rule_applies_to_every_kind(self) -> None:
        for decl in (
            field("a_b"),
            field("A_B", "public"),
            field("A_B", "const"),
            method("Do_It"),
            prop("X_Y", "public"),
            prop("x_y"),
        ):
            assert "NoUnderscore" in rule_ids(self.rule.evaluate(decl))

    def test_one_character_names(self) -> None:
        assert self.rule.evaluate(field("x")) == []
        assert self.rule.evaluate(field("X", "public")) == []
        assert rule_ids(self.rule.evaluate(field("X"))) == ["PrivateCamelCase"]

    def test_only_first_identifier_of_field_is_checked(self) -> None:
        decl = replace(field("count"), identifiers=("count", "Bad_Name"))
        assert self.rule.evaluate(decl) == []

    def test_violations_point_at_identifier(self) -> None:
        decl = field("my_count", "private")
        for v in self.rule.evaluate(decl):
            assert v.location == decl.identifier_location
            assert v.declaration is decl
            assert v.category == "Naming"
            assert not v.fixable

    def test_never_more_than_two_violations(self) -> None:
        for decl in (field("a_B", "public"), method("a_b"), prop("a_b", "internal")):
            assert len(self.rule.evaluate(decl)) <= 2

    def test_check_matches_evaluate(self) -> None:
        decl = field("Bad_name")
        assert self.rule.check(decl) == self.rule.evaluate(decl)

    def test_no_fix_offered(self) -> None:
        violation = self.rule.evaluate(field("count", "public"))[0]
        assert self.rule.fix(violation) is None
        assert "uppercase" in self.rule.get_fix_instructions(violation)


class TestNamingRuleWithDisabledRules:
    def test_disabled_underscore_rule(self) -> None:
        rule = NamingConventionRule(RuleCatalogue(disabled=["NoUnderscore"]))
        assert rule_ids(rule.evaluate(field("my_count"))) == ["PrivateCamelCase"]

    def test_disabled_by_code(self) -> None:
        rule = NamingConventionRule(RuleCatalogue(disabled=["CC0002"]))
        assert rule_ids(rule.evaluate(field("my_count"))) == ["NoUnderscore"]

    def test_enable_list_limits_rules(self) -> None:
        rule = NamingConventionRule(RuleCatalogue(enabled=["PublicPascalCase"]))
        assert rule_ids(rule.evaluate(field("my_count", "public"))) == ["PublicPascalCase"]
        assert rule.evaluate(field("my_count")) == []
