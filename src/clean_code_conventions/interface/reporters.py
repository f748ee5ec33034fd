"""Interface for check reporting."""

from clean_code_conventions.domain.protocols import ReporterProtocol
from clean_code_conventions.infrastructure.reporters import JsonReporter, TerminalReporter

REPORT_FORMATS: tuple[str, ...] = ("table", "json")


class ReporterFactory:
    """Picks a reporter for the --format option."""

    @staticmethod
    def create(fmt: str) -> ReporterProtocol:
        if fmt == "json":
            return JsonReporter()
        if fmt == "table":
            return TerminalReporter()
        raise ValueError(f"Unknown report format {fmt!r}; expected one of {', '.join(REPORT_FORMATS)}")
