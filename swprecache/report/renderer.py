"""Rich terminal renderer for precache size reports.

Color scheme
------------
- green  : added to the manifest
- yellow : skipped, over the size budget
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from swprecache.models.manifest import BuildResult, SizeReport


class ReportRenderer:
    """Renders ``BuildResult`` and ``SizeReport`` as Rich terminal output.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # ------------------------------------------------------------------
    # Renderables
    # ------------------------------------------------------------------

    def render_report(self, report: SizeReport) -> Table:
        """One row per accept/skip decision, in processing order."""
        table = Table(title="Precache Size Report", expand=True)
        table.add_column("Status", justify="center", width=9)
        table.add_column("Path", style="cyan")
        table.add_column("Bytes", justify="right")
        table.add_column("Pattern", style="dim")

        for decision in report.decisions:
            status = (
                "[green]Added[/green]"
                if decision.accepted
                else "[yellow]Skipped[/yellow]"
            )
            table.add_row(
                status,
                decision.relative_path,
                f"{decision.size_bytes:,}",
                decision.pattern,
            )
        return table

    def render_result(self, result: BuildResult) -> Panel:
        """Report table plus a summary footer, wrapped in a Panel."""
        report = result.report
        summary = "  |  ".join([
            f"[bold]Entries:[/bold] {len(result.manifest)}",
            f"[bold]Skipped:[/bold] {len(report.skipped)}",
            f"[bold]Budget:[/bold] {report.budget_bytes:,} bytes",
            f"[bold]Total precache size:[/bold] {report.total_kb} KB",
        ])
        return Panel(
            Group(self.render_report(report), Text(""), Text.from_markup(summary)),
            title="[bold]swprecache[/bold]",
            border_style="green" if not report.skipped else "yellow",
            padding=(1, 2),
        )

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def print_result(self, result: BuildResult) -> None:
        self.console.print(self.render_result(result))

    def print_error(self, title: str, exc: BaseException) -> None:
        self.console.print(f"[bold red]{title}:[/bold red] {escape(str(exc))}")
