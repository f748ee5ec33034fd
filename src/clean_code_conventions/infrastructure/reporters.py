"""Reporters for check results: rich tables for terminals, JSON for tools."""

import json
from collections import defaultdict
from typing import IO, Any, Optional

from rich.console import Console
from rich.table import Table

from clean_code_conventions.domain.entities import CheckResult
from clean_code_conventions.domain.rules import Violation


class TerminalReporter:
    """Summary table grouped by rule, followed by every violation."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def report(self, result: CheckResult) -> None:
        if not result.has_violations():
            self.console.print(
                f"[bold green]No convention violations in {result.declarations_checked} declaration(s).[/]"
            )
            return

        self.console.print(self._summary_table(result))
        self.console.print(self._detail_table(result.violations))

    def _summary_table(self, result: CheckResult) -> Table:
        grouped: dict[tuple[str, str], list[Violation]] = defaultdict(list)
        for v in result.violations:
            grouped[(v.code, v.rule_id)].append(v)

        table = Table(title="Convention Audit", header_style="bold #007BFF")
        table.add_column("Code", style="#00EEFF")
        table.add_column("Rule")
        table.add_column("Category")
        table.add_column("Count", justify="right", style="bold")
        table.add_column("Fix?")
        for (code, rule_id), items in sorted(grouped.items()):
            table.add_row(
                code,
                rule_id,
                items[0].category,
                str(len(items)),
                "yes" if items[0].fixable else "manual",
            )
        return table

    def _detail_table(self, violations: list[Violation]) -> Table:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Location")
        table.add_column("Severity")
        table.add_column("Code")
        table.add_column("Message")
        for v in violations:
            table.add_row(v.location_str, v.severity, v.code, v.message)
        return table


class JsonReporter:
    """Machine readable violations."""

    def __init__(self, out: Optional[IO[str]] = None) -> None:
        self.out = out

    @staticmethod
    def violation_to_dict(v: Violation) -> dict[str, Any]:
        return {
            "code": v.code,
            "rule_id": v.rule_id,
            "message": v.message,
            "location": v.location_str,
            "category": v.category,
            "severity": v.severity,
            "fixable": v.fixable,
            "identifier": v.declaration.identifier,
        }

    def render(self, result: CheckResult) -> str:
        return json.dumps(
            {
                "declarations_checked": result.declarations_checked,
                "counts": result.counts_by_rule(),
                "violations": [self.violation_to_dict(v) for v in result.violations],
            },
            indent=2,
        )

    def report(self, result: CheckResult) -> None:
        print(self.render(result), file=self.out)
