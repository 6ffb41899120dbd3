"""Stage metrics aggregation and output."""
from __future__ import annotations
from pathlib import Path
import pandas as pd

STAGE_COLUMNS = ["stage", "seconds", "count"]


def stage_frame(records: list[dict]) -> pd.DataFrame:
    """One row per pipeline stage plus a ``total`` row summing the timings."""
    df = pd.DataFrame(records, columns=STAGE_COLUMNS)
    if not df.empty:
        df.loc[len(df)] = ["total", df["seconds"].sum(), None]
    return df


def save_metrics(records: list[dict], path: Path) -> pd.DataFrame:
    df = stage_frame(records)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return df
