"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from clean_code_conventions.infrastructure.di.container import ConventionsContainer
from clean_code_conventions.interface.cli import CLIDependencies, create_app


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = ConventionsContainer()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        guidance_service=container.get_guidance_service(),
        declaration_source=container.get_declaration_source(),
        fixer_gateway=container.get_fixer_gateway(),
    )

    app = create_app(deps)
    app()


if __name__ == "__main__":
    main()
