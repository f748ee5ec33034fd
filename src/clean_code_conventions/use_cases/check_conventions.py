"""Use Case: Check Conventions - run every active rule over a batch of declarations."""

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Optional

from clean_code_conventions.domain.declarations import Declaration
from clean_code_conventions.domain.entities import CheckResult
from clean_code_conventions.domain.rules import BaseRule, Violation
from clean_code_conventions.domain.rules.catalogue import RuleCatalogue
from clean_code_conventions.domain.rules.modifiers import NoPrivateModifierRule
from clean_code_conventions.domain.rules.naming import NamingConventionRule

if TYPE_CHECKING:
    from clean_code_conventions.domain.protocols import TelemetryPort


class CheckConventionsUseCase:
    """
    Evaluate declarations against the naming and modifier rules.

    Rules are pure and share no state, so declarations may be spread over a
    thread pool. Violations come back in input order either way.
    """

    def __init__(
        self,
        rules: Optional[list[BaseRule]] = None,
        catalogue: Optional[RuleCatalogue] = None,
        telemetry: Optional["TelemetryPort"] = None,
        jobs: int = 1,
    ) -> None:
        self.catalogue = catalogue or RuleCatalogue()
        self.rules: list[BaseRule] = rules if rules is not None else [
            NoPrivateModifierRule(self.catalogue),
            NamingConventionRule(self.catalogue),
        ]
        self.telemetry = telemetry
        self.jobs = max(1, jobs)

    def check_declaration(self, declaration: Declaration) -> list[Violation]:
        violations: list[Violation] = []
        for rule in self.rules:
            violations.extend(rule.check(declaration))
        return violations

    def execute(self, declarations: list[Declaration]) -> CheckResult:
        if self.telemetry:
            self.telemetry.step(f"Checking {len(declarations)} declaration(s)...")

        if self.jobs > 1 and len(declarations) > 1:
            with ThreadPoolExecutor(max_workers=self.jobs) as pool:
                per_declaration = list(pool.map(self.check_declaration, declarations))
        else:
            per_declaration = [self.check_declaration(d) for d in declarations]

        violations = [v for batch in per_declaration for v in batch]
        if self.telemetry:
            self.telemetry.step(f"Found {len(violations)} violation(s).")
        return CheckResult(violations=violations, declarations_checked=len(declarations))
