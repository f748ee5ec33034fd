"""Unit tests for DeclarationFixerGateway."""

import pytest

from clean_code_conventions.domain.declarations import (
    Declaration,
    DeclarationKind,
    Location,
    Modifier,
    ModifierKind,
    ModifierSet,
)
from clean_code_conventions.domain.entities import TransformationPlan, TransformationType
from clean_code_conventions.domain.rules.modifiers import NoPrivateModifierRule
from clean_code_conventions.infrastructure.gateways.declaration_fixer_gateway import (
    DeclarationFixerGateway,
)
from tests.declaration_factories import field, loc, method


def plans_for(declarations: list[Declaration]) -> list[TransformationPlan]:
    rule = NoPrivateModifierRule()
    plans = []
    for decl in declarations:
        violation = rule.evaluate(decl)
        if violation:
            plans.append(rule.fix(violation))
    return plans


class TestDeclarationFixerGateway:
    def setup_method(self) -> None:
        self.gateway = DeclarationFixerGateway()

    def test_batch_fix_edits_each_flagged_declaration(self) -> None:
        declarations = [
            field("total", "private", line=1),
            field("Count", "public", line=2),
            method("Run", "private", "static", line=3),
        ]
        result = self.gateway.apply_fixes(declarations, plans_for(declarations))

        assert result.modified_count == 2
        assert result.unmatched == []
        assert [e.original for e in result.edits] == [declarations[0], declarations[2]]
        assert result.edits[0].new_declaration.modifiers.kinds == ()
        assert result.edits[1].new_declaration.modifiers.kinds == (ModifierKind.STATIC,)

    def test_plan_order_does_not_matter(self) -> None:
        declarations = [field(f"value{i}", "private", line=i + 1) for i in range(5)]
        plans = plans_for(declarations)
        forward = self.gateway.apply_fixes(declarations, plans)
        backward = self.gateway.apply_fixes(declarations, list(reversed(plans)))
        assert forward == backward

    def test_duplicate_plans_collapse_into_one_edit(self) -> None:
        declarations = [field("total", "private")]
        plans = plans_for(declarations) * 2
        result = self.gateway.apply_fixes(declarations, plans)
        assert result.modified_count == 1

    def test_unmatched_plan_is_reported(self) -> None:
        declarations = [field("total", "private", line=1)]
        stray = TransformationPlan.remove_modifier(ModifierKind.PRIVATE, loc(40, 1))
        result = self.gateway.apply_fixes(declarations, [stray])
        assert result.edits == []
        assert result.unmatched == [stray]

    def test_falls_back_to_plan_declaration_without_locations(self) -> None:
        decl = Declaration(DeclarationKind.FIELD, "total", ModifierSet.of(ModifierKind.PRIVATE))
        plan = TransformationPlan.remove_modifier(ModifierKind.PRIVATE, None, declaration=decl)
        result = self.gateway.apply_fixes([decl], [plan])
        assert result.edits[0].new_declaration.modifiers.kinds == ()

    def test_innermost_declaration_wins(self) -> None:
        outer = Declaration(
            DeclarationKind.PROPERTY,
            "Items",
            ModifierSet.of(ModifierKind.PUBLIC),
            location=Location("src/Sample.cs", 1, 1, 10, 1),
        )
        inner = field("items", "private", line=5)
        target = inner.modifiers.first(ModifierKind.PRIVATE).location
        assert DeclarationFixerGateway.find_target([outer, inner], plans_for([inner])[0]) == 1
        assert outer.contains(target)

    def test_plan_for_declaration_without_modifier_is_reported(self) -> None:
        decl = field("Count", "public")
        plan = TransformationPlan.remove_modifier(ModifierKind.PRIVATE, decl.location)
        result = self.gateway.apply_fixes([decl], [plan])
        assert result.edits == []
        assert result.unmatched == [plan]

    def test_point_location_before_private_still_fixes(self) -> None:
        decl = Declaration(
            DeclarationKind.FIELD,
            "total",
            ModifierSet(
                (
                    Modifier(ModifierKind.STATIC, location=Location("src/Sample.cs", 3, 5)),
                    Modifier(ModifierKind.PRIVATE, location=Location("src/Sample.cs", 3, 12)),
                )
            ),
            location=Location("src/Sample.cs", 3, 5),
        )
        plans = plans_for([decl])
        assert not decl.contains(plans[0].target)

        result = self.gateway.apply_fixes([decl], plans)

        assert result.unmatched == []
        assert result.modified_count == 1
        assert result.edits[0].new_declaration.modifiers.kinds == (ModifierKind.STATIC,)

    def test_every_plan_is_applied_or_reported(self) -> None:
        declarations = [
            field("total", "private", line=1),
            field("Count", "public", line=2),
        ]
        plans = plans_for(declarations) + [
            TransformationPlan.remove_modifier(ModifierKind.PRIVATE, declarations[1].location),
            TransformationPlan.remove_modifier(ModifierKind.PRIVATE, loc(40, 1)),
        ]
        result = self.gateway.apply_fixes(declarations, plans)
        assert result.modified_count + len(result.unmatched) == len(plans)

    def test_none_entries_are_skipped(self) -> None:
        assert self.gateway.apply_fixes([field("a")], [None]).edits == []  # type: ignore[list-item]

    def test_unknown_transformation_type_raises(self) -> None:
        bogus = TransformationPlan(transformation_type="rename")  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="Unknown transformation type"):
            self.gateway._plan_to_transformer(bogus)

    def test_plan_type(self) -> None:
        assert plans_for([field("x", "private")])[0].transformation_type is TransformationType.REMOVE_MODIFIER
