"""Domain models for rules and violations."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol

from clean_code_conventions.domain.declarations import Declaration, Location

if TYPE_CHECKING:
    from clean_code_conventions.domain.entities import TransformationPlan


@dataclass(frozen=True)
class Violation:
    """A rule violation with code, rule id, message, location, and fixability."""

    code: str
    rule_id: str
    message: str
    location: Optional[Location]
    declaration: Declaration
    category: str = ""
    severity: str = "warning"
    fixable: bool = False

    @property
    def location_str(self) -> str:
        return str(self.location) if self.location else "N/A"


# Host-facing name for a reported violation.
Diagnostic = Violation


class BaseRule(Protocol):
    """A pure check over a single declaration."""

    codes: tuple[str, ...]
    description: str

    def check(self, declaration: Declaration) -> list[Violation]:
        """Return every violation of this rule on the declaration."""
        ...

    def fix(self, violation: Violation) -> Optional["TransformationPlan"]:
        """
        Return a plan ONLY if the resolution is deterministic.

        Rules without an automatic fix return None.
        """
        ...

    def get_fix_instructions(self, violation: Violation) -> str:
        """Provide human instructions for a manual fix."""
        ...
