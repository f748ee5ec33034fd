"""Use Case: Apply Fixes - turn fixable violations into declaration edits."""

import logging
from typing import TYPE_CHECKING, Optional

from clean_code_conventions.domain.declarations import Declaration
from clean_code_conventions.domain.entities import FixResult, TransformationPlan
from clean_code_conventions.domain.protocols import FixerGatewayProtocol
from clean_code_conventions.domain.rules import BaseRule, Violation
from clean_code_conventions.use_cases.check_conventions import CheckConventionsUseCase

if TYPE_CHECKING:
    from clean_code_conventions.domain.protocols import TelemetryPort

logger = logging.getLogger(__name__)


class ApplyFixesUseCase:
    """
    Batch fixer.

    Each violation is offered to the rule that owns its code; rules that can
    fix it deterministically return a TransformationPlan. All plans go to the
    fixer gateway in one batch.
    """

    def __init__(
        self,
        fixer_gateway: FixerGatewayProtocol,
        check_use_case: Optional[CheckConventionsUseCase] = None,
        telemetry: Optional["TelemetryPort"] = None,
    ) -> None:
        self.fixer_gateway = fixer_gateway
        self.check_use_case = check_use_case or CheckConventionsUseCase()
        self.telemetry = telemetry

    def _rule_for(self, violation: Violation) -> Optional[BaseRule]:
        for rule in self.check_use_case.rules:
            if violation.code in rule.codes:
                return rule
        return None

    def plan_fixes(self, violations: list[Violation]) -> list[TransformationPlan]:
        plans: list[TransformationPlan] = []
        for violation in violations:
            if not violation.fixable:
                continue
            rule = self._rule_for(violation)
            if rule is None:
                logger.debug("No rule registered for %s", violation.code)
                continue
            plan = rule.fix(violation)
            if plan is not None:
                plans.append(plan)
        return plans

    def execute(
        self,
        declarations: list[Declaration],
        violations: Optional[list[Violation]] = None,
    ) -> FixResult:
        """
        Fix the given violations, or everything fixable in `declarations` when
        no violations are passed in.
        """
        if violations is None:
            violations = self.check_use_case.execute(declarations).fixable()

        plans = self.plan_fixes(violations)
        if self.telemetry:
            self.telemetry.step(f"Applying {len(plans)} fix(es)...")

        result = self.fixer_gateway.apply_fixes(declarations, plans)
        if result.unmatched and self.telemetry:
            self.telemetry.warning(
                f"{len(result.unmatched)} fix(es) did not match any declaration."
            )
        return result
