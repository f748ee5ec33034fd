from typing import TYPE_CHECKING, Protocol

from clean_code_conventions.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    from clean_code_conventions.domain.declarations import Declaration
    from clean_code_conventions.domain.entities import CheckResult, FixResult, TransformationPlan


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class DeclarationSourceProtocol(Protocol):
    """Protocol for reading host-exported declarations and writing fixed ones back."""

    def load(self, path: str) -> list["Declaration"]:
        """Read every declaration stored at path."""
        ...

    def dump_edits(self, result: "FixResult") -> str:
        """Serialise the edits of a fix run."""
        ...


class FixerGatewayProtocol(Protocol):
    """Protocol for applying transformation plans to declarations."""

    def apply_fixes(
        self, declarations: list["Declaration"], plans: list["TransformationPlan"]
    ) -> "FixResult":
        """Apply plans to the declarations they target. Returns one edit per changed declaration."""
        ...


class GuidanceServiceProtocol(Protocol):
    """Protocol for the rule registry."""

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        ...


class ReporterProtocol(Protocol):
    """Protocol for reporting check results."""

    def report(self, result: "CheckResult") -> None:
        ...
