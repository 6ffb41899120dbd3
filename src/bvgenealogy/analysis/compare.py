"""Compare inferred parent arrays against a known genealogy."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

import pandas as pd


@dataclass
class ComparisonReport:
    total: int
    identical: int
    expected_edges: int
    recovered_edges: int

    @property
    def identical_fraction(self) -> float:
        return self.identical / self.total if self.total else 1.0

    @property
    def edge_recall(self) -> float:
        return self.recovered_edges / self.expected_edges if self.expected_edges else 1.0

    def as_dict(self) -> dict:
        return {
            "total": self.total,
            "identical": self.identical,
            "identical_fraction": self.identical_fraction,
            "expected_edges": self.expected_edges,
            "recovered_edges": self.recovered_edges,
            "edge_recall": self.edge_recall,
        }


@dataclass
class CheckReport:
    scale: int
    lines: int
    roots: List[int] = field(default_factory=list)
    out_of_range: List[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.lines == self.scale and not self.out_of_range


def read_parents(path: Path) -> List[int]:
    """Read one integer per line."""
    try:
        df = pd.read_csv(path, header=None, dtype="int64", skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        return []
    return [int(v) for v in df.iloc[:, 0]]


def parent_edges(parents: Sequence[int]) -> set[frozenset]:
    return {frozenset((child, parent)) for child, parent in enumerate(parents) if parent != -1 and parent != child}


def compare_parents(predicted: Sequence[int], expected: Sequence[int]) -> ComparisonReport:
    if len(predicted) != len(expected):
        raise ValueError(f"parent arrays differ in length ({len(predicted)} != {len(expected)})")
    frame = pd.DataFrame({"predicted": list(predicted), "expected": list(expected)})
    identical = int((frame["predicted"] == frame["expected"]).sum())
    truth = parent_edges(expected)
    recovered = truth & parent_edges(predicted)
    return ComparisonReport(
        total=len(frame),
        identical=identical,
        expected_edges=len(truth),
        recovered_edges=len(recovered),
    )


def check_parents(parents: Sequence[int], scale: int) -> CheckReport:
    report = CheckReport(scale=scale, lines=len(parents))
    for child, parent in enumerate(parents):
        if parent == -1:
            report.roots.append(child)
        elif not 0 <= parent < scale:
            report.out_of_range.append(child)
    return report
