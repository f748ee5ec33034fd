"""Active rule catalogue: which rules run and how their violations are worded."""

from collections.abc import Iterable, Mapping
from typing import Optional

from clean_code_conventions.domain.declarations import Declaration, Location
from clean_code_conventions.domain.registry_types import RuleRegistryEntry
from clean_code_conventions.domain.rule_msgs import RuleMsgBuilder
from clean_code_conventions.domain.rules import Violation


class RuleCatalogue:
    """
    Merged view of the built-in rules, the registry file and the user's config.

    Immutable after construction, so rules holding it can run on any thread.
    """

    def __init__(
        self,
        registry: Optional[Mapping[str, RuleRegistryEntry]] = None,
        disabled: Iterable[str] = (),
        enabled: Optional[Iterable[str]] = None,
        severity_overrides: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._entries = RuleMsgBuilder.merged(registry or {})
        self._disabled = frozenset(self._codes(disabled))
        self._enabled = frozenset(self._codes(enabled)) if enabled is not None else None
        self._severity = {
            code: severity
            for name, severity in (severity_overrides or {}).items()
            if (code := RuleMsgBuilder.normalize_code(self._entries, name)) is not None
        }

    def _codes(self, names: Iterable[str]) -> list[str]:
        codes = []
        for name in names:
            code = RuleMsgBuilder.normalize_code(self._entries, name)
            if code is not None:
                codes.append(code)
        return codes

    @property
    def entries(self) -> dict[str, RuleRegistryEntry]:
        return dict(self._entries)

    def code_for(self, rule_id: str) -> str:
        return RuleMsgBuilder.normalize_code(self._entries, rule_id) or rule_id

    def is_enabled(self, rule_id: str) -> bool:
        code = self.code_for(rule_id)
        if code in self._disabled:
            return False
        return self._enabled is None or code in self._enabled

    def violation(
        self,
        rule_id: str,
        declaration: Declaration,
        location: Optional[Location],
        *args: object,
    ) -> Violation:
        """Build a violation for `rule_id`, filling the message template with `args`."""
        code = self.code_for(rule_id)
        entry = self._entries.get(code, {})
        template = entry.get("message_template", rule_id)
        return Violation(
            code=code,
            rule_id=entry.get("symbol", rule_id),
            message=RuleMsgBuilder.format_message(template, *args),
            location=location,
            declaration=declaration,
            category=entry.get("category", ""),
            severity=self._severity.get(code, entry.get("severity", "warning")),
            fixable=bool(entry.get("fixable", False)),
        )

    def manual_instructions(self, rule_id: str) -> str:
        entry = self._entries.get(self.code_for(rule_id), {})
        return entry.get("manual_instructions", "Review and fix the violation manually.")
