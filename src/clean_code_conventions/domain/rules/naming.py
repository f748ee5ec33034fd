"""Naming Convention Rules - underscore ban and kind/visibility dependent casing."""

import re
from enum import Enum
from typing import Optional

from clean_code_conventions.domain.constants import (
    CAMEL_CASE_PATTERN,
    NO_UNDERSCORE,
    PASCAL_CASE_PATTERN,
    PRIVATE_CAMEL_CASE,
    PUBLIC_PASCAL_CASE,
)
from clean_code_conventions.domain.declarations import Declaration, DeclarationKind
from clean_code_conventions.domain.entities import TransformationPlan
from clean_code_conventions.domain.rules import Violation
from clean_code_conventions.domain.rules.catalogue import RuleCatalogue
from clean_code_conventions.domain.visibility import VisibilityClassifier

_CAMEL_CASE = re.compile(CAMEL_CASE_PATTERN)
_PASCAL_CASE = re.compile(PASCAL_CASE_PATTERN)


class Casing(Enum):
    CAMEL = "camelCase"
    PASCAL = "PascalCase"

    def matches(self, name: str) -> bool:
        pattern = _CAMEL_CASE if self is Casing.CAMEL else _PASCAL_CASE
        return pattern.fullmatch(name) is not None


def is_camel_case(name: str) -> bool:
    return Casing.CAMEL.matches(name)


def is_pascal_case(name: str) -> bool:
    return Casing.PASCAL.matches(name)


class NamingConventionRule:
    """
    Rules CC0002-CC0004: member names.

    Every name is checked for underscores. On top of that exactly one casing
    expectation applies, picked from the declaration's kind, const-ness and
    visibility:

    - const fields: PascalCase
    - other private fields: camelCase
    - other fields, methods, non-private properties: PascalCase
    - private properties: not checked
    """

    codes: tuple[str, ...] = ("CC0002", "CC0003", "CC0004")
    description: str = "Members follow camelCase/PascalCase naming and contain no underscores."

    def __init__(self, catalogue: Optional[RuleCatalogue] = None) -> None:
        self.catalogue = catalogue or RuleCatalogue()

    @staticmethod
    def expected_casing(declaration: Declaration) -> Optional[Casing]:
        """Return the casing the declaration's name must follow, or None when unchecked."""
        is_private = VisibilityClassifier.is_private(declaration.modifiers)
        kind = declaration.kind
        if kind is DeclarationKind.FIELD:
            if declaration.is_const:
                return Casing.PASCAL
            return Casing.CAMEL if is_private else Casing.PASCAL
        if kind is DeclarationKind.METHOD:
            return Casing.PASCAL
        if kind is DeclarationKind.PROPERTY:
            return None if is_private else Casing.PASCAL
        return None

    def evaluate(self, declaration: Declaration) -> list[Violation]:
        """Return zero, one or two naming violations for the declaration."""
        violations: list[Violation] = []
        name = declaration.identifier
        location = declaration.name_location

        if "_" in name and self.catalogue.is_enabled(NO_UNDERSCORE):
            violations.append(
                self.catalogue.violation(NO_UNDERSCORE, declaration, location, name)
            )

        casing = self.expected_casing(declaration)
        if casing is None or casing.matches(name):
            return violations

        rule_id = PRIVATE_CAMEL_CASE if casing is Casing.CAMEL else PUBLIC_PASCAL_CASE
        if self.catalogue.is_enabled(rule_id):
            violations.append(self.catalogue.violation(rule_id, declaration, location, name))
        return violations

    def check(self, declaration: Declaration) -> list[Violation]:
        return self.evaluate(declaration)

    def fix(self, violation: Violation) -> Optional[TransformationPlan]:
        # Renames need symbol resolution across files.
        return None

    def get_fix_instructions(self, violation: Violation) -> str:
        return self.catalogue.manual_instructions(violation.rule_id)
