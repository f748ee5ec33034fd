"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

from collections.abc import Mapping
from typing import Optional, cast

from clean_code_conventions.domain.constants import DEFAULT_RULES, RULE_PREFIX
from clean_code_conventions.domain.registry_types import RuleRegistryEntry


class RuleMsgBuilder:
    """Resolves rule entries by code or symbol and renders their messages."""

    @staticmethod
    def normalize_code(registry: Mapping[str, RuleRegistryEntry], rule_code: str) -> Optional[str]:
        """Map a code or symbol to the bare rule code ('CC0001'), or None if unknown."""
        for rid, e in registry.items():
            code = rid[len(RULE_PREFIX):] if rid.startswith(RULE_PREFIX) else rid
            if rule_code in (code, rid) or (isinstance(e, dict) and e.get("symbol") == rule_code):
                return code
        return None

    @staticmethod
    def merged(registry: Mapping[str, RuleRegistryEntry]) -> dict[str, RuleRegistryEntry]:
        """Overlay registry entries on the built-in catalogue, keyed by bare code."""
        result: dict[str, RuleRegistryEntry] = {
            code: cast(RuleRegistryEntry, dict(entry)) for code, entry in DEFAULT_RULES.items()
        }
        for rid, entry in registry.items():
            if not isinstance(entry, dict):
                continue
            code = rid[len(RULE_PREFIX):] if rid.startswith(RULE_PREFIX) else rid
            base = result.get(code, {})
            result[code] = cast(RuleRegistryEntry, {**base, **entry})
        return result

    @staticmethod
    def format_message(template: str, *args: object) -> str:
        """Fill '{0}'-style placeholders; templates without placeholders are returned as-is."""
        return template.format(*args) if args else template
