"""Configuration for rule selection. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging
from typing import Optional

from clean_code_conventions.domain.constants import SEVERITIES
from clean_code_conventions.domain.registry_types import RuleRegistryEntry
from clean_code_conventions.domain.rule_msgs import RuleMsgBuilder
from clean_code_conventions.domain.rules.catalogue import RuleCatalogue

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration for the convention checker.

    Created by Infrastructure from the tool's config table. Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.

    Recognised keys of [tool.clean-code-conventions]:
      disable  - rule ids or codes to switch off
      enable   - when set, only these rules run
      jobs     - worker threads used for evaluation
      severity - table of rule -> "info" | "warning" | "error"
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        self._config = config_dict
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about settings that will be ignored."""
        known = RuleMsgBuilder.merged({})
        for key in ("disable", "enable"):
            raw = config.get(key, [])
            if not isinstance(raw, list):
                logger.warning("Configuration Warning: '%s' must be a list of rule ids.", key)
                continue
            for name in raw:
                if not isinstance(name, str) or RuleMsgBuilder.normalize_code(known, name) is None:
                    logger.warning("Configuration Warning: unknown rule %r in '%s'.", name, key)

        jobs = config.get("jobs")
        if jobs is not None and (not isinstance(jobs, int) or jobs < 1):
            logger.warning("Configuration Warning: 'jobs' must be a positive integer, got %r.", jobs)

        severity = config.get("severity", {})
        if isinstance(severity, dict):
            for name, level in severity.items():
                if level not in SEVERITIES:
                    logger.warning(
                        "Configuration Warning: severity %r for rule %r is not one of %s.",
                        level, name, sorted(SEVERITIES),
                    )

    @property
    def disabled_rules(self) -> list[str]:
        raw = self._config.get("disable", [])
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []

    @property
    def enabled_rules(self) -> Optional[list[str]]:
        """Rules explicitly enabled, or None when every rule runs."""
        raw = self._config.get("enable")
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return None

    @property
    def jobs(self) -> int:
        raw = self._config.get("jobs", 1)
        if isinstance(raw, int) and raw >= 1:
            return raw
        return 1

    @property
    def severity_overrides(self) -> dict[str, str]:
        raw = self._config.get("severity", {})
        if not isinstance(raw, dict):
            return {}
        return {str(k): str(v) for k, v in raw.items() if v in SEVERITIES}

    def build_catalogue(
        self,
        registry: Optional[dict[str, RuleRegistryEntry]] = None,
        extra_disabled: tuple[str, ...] = (),
    ) -> RuleCatalogue:
        """Build the rule catalogue that reflects this configuration."""
        return RuleCatalogue(
            registry=registry,
            disabled=[*self.disabled_rules, *extra_disabled],
            enabled=self.enabled_rules,
            severity_overrides=self.severity_overrides,
        )
