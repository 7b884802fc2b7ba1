"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.table import Table

from license_auditor.analysis.normalizer import normalize_license_name
from license_auditor.analysis.policy import PolicyStore
from license_auditor.analysis.resolver import resolve_category
from license_auditor.constants import LEGAL_DISCLAIMER
from license_auditor.models.compliance import ComplianceResult
from license_auditor.models.policy import LicenseCategory

CATEGORY_STYLES = {
    LicenseCategory.ALLOWED: "[green]A[/green]",
    LicenseCategory.RESTRICTED: "[yellow]B[/yellow]",
    LicenseCategory.PROHIBITED: "[red]X[/red]",
}


class TerminalFormatter:
    """Format compliance results for terminal display using Rich."""

    def __init__(
        self,
        console: Optional[Console] = None,
        quiet: bool = False,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            quiet: Only print the status line and issue reasons.
        """
        self._console = console if console is not None else Console()
        self._quiet = quiet

    def format_compliance_result(
        self, result: ComplianceResult, total_dependencies: int
    ) -> None:
        """Display a compliance result.

        Args:
            result: The compliance result to display.
            total_dependencies: Number of dependencies that were checked.
        """
        self._print_status(result, total_dependencies)

        if self._quiet:
            for issue in result.issues:
                dep = issue.dependency
                self._console.print(
                    f"  - {dep.name}@{dep.version}: [red]{issue.reason}[/red]"
                )
            return

        if result.issues:
            table = Table(title="License Compliance Issues")
            table.add_column("Dependency", style="cyan", no_wrap=True)
            table.add_column("Version", style="magenta")
            table.add_column("License")
            table.add_column("Category", justify="center")
            table.add_column("Reason")

            for issue in result.issues:
                table.add_row(
                    issue.dependency.name,
                    issue.dependency.version,
                    issue.license or "[yellow]None[/yellow]",
                    CATEGORY_STYLES[issue.category]
                    if issue.category
                    else "[yellow]?[/yellow]",
                    issue.reason,
                )
            self._console.print(table)

        self._console.print(f"\n[dim]{LEGAL_DISCLAIMER}[/dim]")

    def format_license_lookups(
        self, licenses: list[str], store: PolicyStore
    ) -> None:
        """Display the normalized name and category of raw license strings.

        Args:
            licenses: Raw license strings.
            store: Policy store used for normalization and lookup.
        """
        table = Table(title="License Normalization")
        table.add_column("Raw", style="cyan")
        table.add_column("Normalized", style="green")
        table.add_column("Category", justify="center")

        for raw in licenses:
            category = resolve_category(raw, store)
            table.add_row(
                raw,
                normalize_license_name(raw, store) or "[yellow](empty)[/yellow]",
                CATEGORY_STYLES[category] if category else "[yellow]unknown[/yellow]",
            )
        self._console.print(table)

    def _print_status(self, result: ComplianceResult, total_dependencies: int) -> None:
        if not result.input_valid:
            self._console.print("[red]NOT COMPLIANT[/red] - invalid audit input")
        elif result.compliant:
            self._console.print(
                f"[green]COMPLIANT[/green] - {total_dependencies} "
                "dependencies checked, no issues"
            )
        else:
            self._console.print(
                f"[red]NOT COMPLIANT[/red] - {len(result.issues)} issue(s) in "
                f"{total_dependencies} dependencies require attention"
            )
