"""CLI entry points - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from clean_code_conventions.domain.config import ConfigurationLoader
from clean_code_conventions.domain.constants import TOOL_NAME
from clean_code_conventions.domain.protocols import (
    DeclarationSourceProtocol,
    FixerGatewayProtocol,
    GuidanceServiceProtocol,
    TelemetryPort,
)
from clean_code_conventions.domain.rules.catalogue import RuleCatalogue
from clean_code_conventions.interface.reporters import ReporterFactory
from clean_code_conventions.use_cases.apply_fixes import ApplyFixesUseCase
from clean_code_conventions.use_cases.check_conventions import CheckConventionsUseCase

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_USAGE = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    guidance_service: GuidanceServiceProtocol
    declaration_source: DeclarationSourceProtocol
    fixer_gateway: FixerGatewayProtocol


def _build_check_use_case(
    deps: CLIDependencies, disable: list[str], jobs: Optional[int]
) -> CheckConventionsUseCase:
    catalogue = deps.config_loader.build_catalogue(
        registry=deps.guidance_service.get_registry(),
        extra_disabled=tuple(disable),
    )
    return CheckConventionsUseCase(
        catalogue=catalogue,
        telemetry=deps.telemetry,
        jobs=jobs if jobs is not None else deps.config_loader.jobs,
    )


def create_app(deps: CLIDependencies) -> typer.Typer:
    """Create the Typer app with explicitly injected dependencies."""
    app = typer.Typer(
        name=TOOL_NAME,
        help="Check member declarations against naming and modifier conventions.",
        add_completion=False,
    )

    @app.callback()
    def main(
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    ) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    @app.command()
    def check(
        path: Path = typer.Argument(..., help="JSON file with the declarations to check"),
        fmt: str = typer.Option("table", "--format", "-f", help="Output format: table or json"),
        jobs: Optional[int] = typer.Option(None, "--jobs", "-j", min=1, help="Worker threads"),
        disable: list[str] = typer.Option([], "--disable", "-d", help="Rule id or code to skip"),
    ) -> None:
        """Report convention violations. Exits 1 when any are found."""
        try:
            reporter = ReporterFactory.create(fmt)
            declarations = deps.declaration_source.load(str(path))
        except (ValueError, OSError) as e:
            deps.telemetry.error(str(e))
            raise typer.Exit(code=EXIT_USAGE) from e

        if fmt == "table":
            deps.telemetry.handshake()
        result = _build_check_use_case(deps, disable, jobs).execute(declarations)
        reporter.report(result)
        raise typer.Exit(code=EXIT_VIOLATIONS if result.has_violations() else EXIT_OK)

    @app.command()
    def fix(
        path: Path = typer.Argument(..., help="JSON file with the declarations to fix"),
        output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write edits here instead of stdout"),
        disable: list[str] = typer.Option([], "--disable", "-d", help="Rule id or code to skip"),
    ) -> None:
        """Compute replacement declarations for every automatically fixable violation."""
        try:
            declarations = deps.declaration_source.load(str(path))
        except (ValueError, OSError) as e:
            deps.telemetry.error(str(e))
            raise typer.Exit(code=EXIT_USAGE) from e

        use_case = ApplyFixesUseCase(
            fixer_gateway=deps.fixer_gateway,
            check_use_case=_build_check_use_case(deps, disable, None),
            telemetry=deps.telemetry,
        )
        result = use_case.execute(declarations)
        payload = deps.declaration_source.dump_edits(result)
        if output is None:
            typer.echo(payload)
        else:
            output.write_text(payload + "\n", encoding="utf-8")
            deps.telemetry.step(f"Wrote {result.modified_count} edit(s) to {output}")

    @app.command()
    def rules() -> None:
        """List the rule catalogue and whether each rule is active."""
        catalogue: RuleCatalogue = deps.config_loader.build_catalogue(
            registry=deps.guidance_service.get_registry()
        )
        table = Table(title="Rules", header_style="bold #007BFF")
        table.add_column("Code", style="#00EEFF")
        table.add_column("Rule")
        table.add_column("Category")
        table.add_column("Fixable")
        table.add_column("Active")
        for code, entry in sorted(catalogue.entries.items()):
            table.add_row(
                code,
                entry.get("symbol", code),
                entry.get("category", ""),
                "yes" if entry.get("fixable") else "no",
                "yes" if catalogue.is_enabled(code) else "no",
            )
        Console().print(table)

    return app
