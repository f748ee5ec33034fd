"""Modifier Restriction Rule - the 'private' keyword is not allowed."""

from typing import Optional

from clean_code_conventions.domain.constants import (
    NO_PRIVATE_MODIFIER,
    REMOVE_PRIVATE_EQUIVALENCE_KEY,
    REMOVE_PRIVATE_TITLE,
)
from clean_code_conventions.domain.declarations import Declaration, ModifierKind
from clean_code_conventions.domain.entities import TransformationPlan
from clean_code_conventions.domain.rules import Violation
from clean_code_conventions.domain.rules.catalogue import RuleCatalogue


class NoPrivateModifierRule:
    """
    Rule CC0001: members must not spell out `private`.

    Members without an access modifier are already private, so the keyword is
    noise. The violation points at the modifier token, not the name, and is
    independent of whether the name itself is well formed.
    """

    codes: tuple[str, ...] = ("CC0001",)
    description: str = "The 'private' access modifier is redundant and must be removed."
    modifier: ModifierKind = ModifierKind.PRIVATE

    def __init__(self, catalogue: Optional[RuleCatalogue] = None) -> None:
        self.catalogue = catalogue or RuleCatalogue()

    def evaluate(self, declaration: Declaration) -> Optional[Violation]:
        if not self.catalogue.is_enabled(NO_PRIVATE_MODIFIER):
            return None
        token = declaration.modifiers.first(self.modifier)
        if token is None:
            return None
        location = token.location or declaration.location
        return self.catalogue.violation(NO_PRIVATE_MODIFIER, declaration, location)

    def check(self, declaration: Declaration) -> list[Violation]:
        violation = self.evaluate(declaration)
        return [violation] if violation else []

    def fix(self, violation: Violation) -> Optional[TransformationPlan]:
        """Return a plan that removes `private` from the flagged declaration."""
        if violation.rule_id != NO_PRIVATE_MODIFIER:
            return None
        return TransformationPlan.remove_modifier(
            self.modifier,
            violation.location,
            declaration=violation.declaration,
            title=REMOVE_PRIVATE_TITLE,
            equivalence_key=REMOVE_PRIVATE_EQUIVALENCE_KEY,
        )

    def get_fix_instructions(self, violation: Violation) -> str:
        return self.catalogue.manual_instructions(violation.rule_id)
