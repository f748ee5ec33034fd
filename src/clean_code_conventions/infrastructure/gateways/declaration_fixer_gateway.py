"""Declaration based Fixer Gateway."""

import logging
from typing import Optional

from clean_code_conventions.domain.declarations import Declaration
from clean_code_conventions.domain.entities import (
    Edit,
    FixResult,
    TransformationPlan,
    TransformationType,
)
from clean_code_conventions.domain.protocols import FixerGatewayProtocol
from clean_code_conventions.infrastructure.gateways.transformers import (
    DeclarationTransformer,
    RemoveModifierTransformer,
)

logger = logging.getLogger(__name__)


class DeclarationFixerGateway(FixerGatewayProtocol):
    """Gateway for applying transformation plans to host declarations."""

    def _plan_to_transformer(self, plan: TransformationPlan) -> DeclarationTransformer:
        """Convert a TransformationPlan to a transformer."""
        if plan.transformation_type == TransformationType.REMOVE_MODIFIER:
            return RemoveModifierTransformer(plan.params)
        raise ValueError(f"Unknown transformation type: {plan.transformation_type}")

    @staticmethod
    def find_target(declarations: list[Declaration], plan: TransformationPlan) -> Optional[int]:
        """
        Index of the declaration a plan targets.

        The declaration whose span contains the plan's target location wins; the
        innermost one if spans nest. When no span contains the target (no
        location, or a point location without an end) the plan's own
        declaration is looked up by value.
        """
        target = plan.target
        best: Optional[int] = None
        if target is not None:
            for i, declaration in enumerate(declarations):
                if not declaration.contains(target):
                    continue
                if best is None or declarations[best].contains(declaration.location):
                    best = i
        if best is None and plan.declaration is not None:
            for i, declaration in enumerate(declarations):
                if declaration == plan.declaration:
                    return i
        return best

    def apply_fixes(
        self, declarations: list[Declaration], plans: list[TransformationPlan]
    ) -> FixResult:
        """
        Apply a batch of plans.

        Each plan is scoped to one declaration, so plans never interfere with each
        other; several plans hitting the same declaration are folded into one edit.
        A plan is either applied or reported: plans that match no declaration, or
        whose declaration does not carry the modifier, end up in `unmatched`.

        Returns:
            FixResult with one Edit per modified declaration, in input order, and
            the plans that could not be applied.
        """
        updated: dict[int, Declaration] = {}
        unmatched: list[TransformationPlan] = []

        for plan in plans:
            if plan is None:
                continue
            index = self.find_target(declarations, plan)
            if index is None:
                logger.debug("No declaration found for fix targeting %s", plan.target)
                unmatched.append(plan)
                continue
            original = declarations[index]
            if plan.params.get("modifier") not in original.modifiers:
                logger.debug("Declaration %r has nothing to fix for %s", original.identifier, plan.target)
                unmatched.append(plan)
                continue
            current = updated.get(index, original)
            transformer = self._plan_to_transformer(plan)
            updated[index] = transformer.leave_Declaration(original, current)

        edits = [
            edit
            for edit in (Edit(original=declarations[i], new_declaration=updated[i]) for i in sorted(updated))
            if edit.changed
        ]
        logger.debug("Applied %d plan(s): %d edit(s), %d unmatched", len(plans), len(edits), len(unmatched))
        return FixResult(edits=edits, unmatched=unmatched)
