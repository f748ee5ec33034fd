from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from clean_code_conventions.domain.declarations import Declaration, Location, ModifierKind

if TYPE_CHECKING:
    from clean_code_conventions.domain.rules import Violation


class TransformationType(Enum):
    """Types of declaration transformations the fixer can apply."""
    REMOVE_MODIFIER = "remove_modifier"


@dataclass(frozen=True)
class TransformationPlan:
    """
    Pure data structure describing a declaration transformation.

    Rules return plans instead of transformers. The fixer gateway interprets
    the plan and applies the matching transformer to the targeted declaration.
    """
    transformation_type: TransformationType
    params: dict[str, Any] = field(default_factory=dict)
    title: str = ""
    equivalence_key: str = ""

    @classmethod
    def remove_modifier(
        cls,
        modifier: ModifierKind,
        target: Optional[Location],
        declaration: Optional[Declaration] = None,
        title: str = "",
        equivalence_key: str = "",
    ) -> "TransformationPlan":
        """Create plan to drop every occurrence of a modifier from the declaration at `target`."""
        return cls(
            transformation_type=TransformationType.REMOVE_MODIFIER,
            params={"modifier": modifier, "target": target, "declaration": declaration},
            title=title,
            equivalence_key=equivalence_key,
        )

    @property
    def target(self) -> Optional[Location]:
        return self.params.get("target")

    @property
    def declaration(self) -> Optional[Declaration]:
        return self.params.get("declaration")


@dataclass(frozen=True)
class Edit:
    """Replacement for one declaration. The host splices `new_declaration` into its tree."""
    original: Declaration
    new_declaration: Declaration

    @property
    def changed(self) -> bool:
        return self.original != self.new_declaration


@dataclass(frozen=True)
class CheckResult:
    """Diagnostics gathered for a batch of declarations."""
    violations: list["Violation"] = field(default_factory=list)
    declarations_checked: int = 0

    def has_violations(self) -> bool:
        return bool(self.violations)

    def counts_by_rule(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for v in self.violations:
            counts[v.rule_id] = counts.get(v.rule_id, 0) + 1
        return counts

    def fixable(self) -> list["Violation"]:
        return [v for v in self.violations if v.fixable]


@dataclass(frozen=True)
class FixResult:
    """Edits produced by a batch fix, plus plans that matched no declaration."""
    edits: list[Edit] = field(default_factory=list)
    unmatched: list[TransformationPlan] = field(default_factory=list)

    @property
    def modified_count(self) -> int:
        return len(self.edits)
