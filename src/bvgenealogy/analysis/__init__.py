"""Analysis utilities."""
from __future__ import annotations

from .compare import CheckReport, ComparisonReport, check_parents, compare_parents, read_parents
from .report import check_table, comparison_table, print_table, summary_table

__all__ = [
    "CheckReport",
    "ComparisonReport",
    "check_parents",
    "compare_parents",
    "read_parents",
    "check_table",
    "comparison_table",
    "print_table",
    "summary_table",
]
