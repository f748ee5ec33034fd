from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, cast

from clean_code_conventions.domain.config import ConfigurationLoader
from clean_code_conventions.infrastructure.config_file_loader import ConfigFileLoader
from clean_code_conventions.infrastructure.gateways.declaration_fixer_gateway import (
    DeclarationFixerGateway,
)
from clean_code_conventions.infrastructure.gateways.declaration_gateway import DeclarationGateway
from clean_code_conventions.infrastructure.services.guidance_service import GuidanceService
from clean_code_conventions.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from clean_code_conventions.domain.protocols import (
        DeclarationSourceProtocol,
        FixerGatewayProtocol,
        GuidanceServiceProtocol,
        TelemetryPort,
    )


class ConventionsContainer:
    """Dependency Injection Container for the convention checker."""

    def __init__(self, start: Optional[Path] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(start)

    def _register_defaults(self, start: Optional[Path]) -> None:
        """Register default implementations for protocols."""
        config_dict = ConfigFileLoader.load_config_from_fs(start)
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config_dict))
        self.register_singleton("TelemetryPort", ProjectTelemetry())
        self.register_singleton("GuidanceService", GuidanceService())
        self.register_singleton("DeclarationGateway", DeclarationGateway())
        self.register_singleton("DeclarationFixerGateway", DeclarationFixerGateway())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_guidance_service(self) -> "GuidanceServiceProtocol":
        return cast("GuidanceServiceProtocol", self.get("GuidanceService"))

    def get_declaration_source(self) -> "DeclarationSourceProtocol":
        return cast("DeclarationSourceProtocol", self.get("DeclarationGateway"))

    def get_fixer_gateway(self) -> "FixerGatewayProtocol":
        return cast("FixerGatewayProtocol", self.get("DeclarationFixerGateway"))
