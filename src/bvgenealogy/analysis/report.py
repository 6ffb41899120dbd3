"""Rich tables summarizing a genealogy run."""
from __future__ import annotations

from rich.console import Console
from rich.table import Table

from bvgenealogy.analysis.compare import CheckReport, ComparisonReport
from bvgenealogy.engine.pipeline import GenealogyResult


def summary_table(result: GenealogyResult) -> Table:
    table = Table(title="Genealogy summary", show_lines=True)
    table.add_column("metric")
    table.add_column("value")
    for key, value in result.summary().items():
        table.add_row(key, str(value))
    for record in result.records:
        table.add_row(f"{record['stage']} seconds", f"{record.get('seconds', 0.0):.4f}")
    return table


def comparison_table(report: ComparisonReport) -> Table:
    table = Table(title="Parent comparison", show_lines=True)
    table.add_column("metric")
    table.add_column("value")
    for key, value in report.as_dict().items():
        table.add_row(key, f"{value:.4f}" if isinstance(value, float) else str(value))
    return table


def check_table(report: CheckReport) -> Table:
    table = Table(title="Parent file check", show_lines=True)
    table.add_column("metric")
    table.add_column("value")
    table.add_row("scale", str(report.scale))
    table.add_row("lines", str(report.lines))
    table.add_row("roots", str(len(report.roots)))
    table.add_row("out_of_range", str(len(report.out_of_range)))
    table.add_row("ok", str(report.ok))
    return table


def print_table(table: Table, console: Console | None = None) -> None:
    (console or Console(stderr=True)).print(table)
