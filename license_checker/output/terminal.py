"""Terminal output formatter using Rich."""
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from license_checker.models.license import LicenseStatus
from license_checker.models.scan import FileCheckResult, ScanSummary, Verbosity


class TerminalFormatter:
    """Format license check results for terminal display using Rich.

    Per-file lines are printed as results arrive; the summary panel is
    printed once the scan finished.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity

    def format_scan_start(self, root: Path) -> None:
        """Print the scan header."""
        if self._verbosity == Verbosity.QUIET:
            return
        self._console.print(f"Checking licenses in: [cyan]{escape(str(root))}[/cyan]")

    def format_file_result(self, entry: FileCheckResult, root: Path) -> None:
        """Print one file result.

        Quiet mode only prints failures.

        Args:
            entry: Result of checking one file.
            root: Scan root, used to shorten the displayed path.
        """
        if self._verbosity == Verbosity.QUIET and not entry.is_error:
            return
        self._console.print(self.render_file_result(entry, root))

    def render_file_result(self, entry: FileCheckResult, root: Path) -> str:
        """Build the Rich markup line for one file result."""
        line = f"  » [bright_black]{escape(entry.display_path(root))}[/bright_black] – "

        result = entry.result
        if result is None:
            return line + f"[red]error[/red] [yellow]>[/yellow] {escape(entry.error or '')}"

        prepended = " ([green]prepended license[/green])" if result.prepended else ""
        if result.status is LicenseStatus.FOUND:
            line += "[green]found[/green]"
        elif result.status is LicenseStatus.PARTIALLY_FOUND:
            line += (
                f"[yellow]partially found ([cyan]{result.percent}[/cyan])[/yellow]"
                f"{prepended}"
            )
        else:
            line += f"[red]not found[/red]{prepended}"

        if entry.error is not None:
            line += f" [red]error[/red] [yellow]>[/yellow] {escape(entry.error)}"
        return line

    def format_summary(self, summary: ScanSummary) -> None:
        """Print the scan summary.

        Args:
            summary: The finished scan summary.
        """
        if self._verbosity == Verbosity.QUIET:
            self._print_quiet_summary(summary)
            return

        if summary.total_files == 0 and summary.errors == 0:
            self._console.print("[yellow]No matching files found[/yellow]")
            return

        if summary.has_issues:
            status, status_color = "ISSUES FOUND", "red"
        else:
            status, status_color = "PASS", "green"

        lines = [
            f"Checked {summary.total_files} files "
            f"([green]{summary.found}[/green]/"
            f"[yellow]{summary.partially_found}[/yellow]/"
            f"[red]{summary.not_found}[/red])",
            f"Found: {summary.found}",
            f"Partially found: {summary.partially_found}",
            f"Not found: {summary.not_found}",
        ]
        if summary.prepended:
            lines.append(f"License prepended: {summary.prepended}")
        if summary.errors:
            lines.append(f"Errors: {summary.errors}")
        lines.extend(
            [
                f"It took {summary.elapsed_ms}ms",
                "",
                f"Status: [{status_color}]{status}[/{status_color}]",
            ]
        )

        self._console.print(
            Panel(
                "\n".join(lines),
                title="[bold]SUMMARY[/bold]",
                border_style=status_color,
            )
        )

    def _print_quiet_summary(self, summary: ScanSummary) -> None:
        if summary.has_issues:
            missing = summary.partially_found + summary.not_found - summary.prepended
            self._console.print(
                f"[red]ISSUES FOUND[/red] - {missing} file(s) missing the license, "
                f"{summary.errors} error(s)"
            )
        else:
            self._console.print(
                f"[green]PASS[/green] - All {summary.total_files} files carry the license"
            )
