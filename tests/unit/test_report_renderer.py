"""Unit tests for the ReportRenderer — Rich table and summary panel."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from swprecache.core.builder import ManifestBuilder
from swprecache.models.config import ManifestConfig
from swprecache.report.renderer import ReportRenderer


def _render_text(renderable) -> str:
    console = Console(record=True, width=200, color_system=None)
    console.print(renderable)
    return console.export_text()


class TestReportRenderer:
    def test_table_has_row_per_decision(self, e2e_config: ManifestConfig):
        result = ManifestBuilder(e2e_config).build()
        table = ReportRenderer().render_report(result.report)
        assert isinstance(table, Table)
        assert table.row_count == 3

    def test_table_text(self, e2e_config: ManifestConfig):
        result = ManifestBuilder(e2e_config).build()
        text = _render_text(ReportRenderer().render_report(result.report))
        assert "Added" in text
        assert "Skipped" in text
        assert "images/b.png" in text
        assert "3,000,000" in text

    def test_result_panel_summary(self, e2e_config: ManifestConfig):
        result = ManifestBuilder(e2e_config).build()
        panel = ReportRenderer().render_result(result)
        assert isinstance(panel, Panel)
        text = _render_text(panel)
        assert "Entries: 2" in text
        assert "Skipped: 1" in text
        assert "Total precache size: 0 KB" in text

    def test_print_error(self):
        console = Console(record=True, width=200, color_system=None)
        ReportRenderer(console=console).print_error("Build failed", RuntimeError("boom"))
        assert "Build failed: boom" in console.export_text()
