# src/quatkit/utils/io.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

from quatkit.core.quaternion import Quaternion

COLUMNS = ["a", "b", "c", "d"]


def save_quaternions(
    quaternions: Sequence[Quaternion],
    filepath: str | Path,
    labels: Iterable[str] | None = None,
) -> Path:
    """
    Saves a sequence of quaternions to a CSV file.

    Args:
        quaternions: Quaternions to write, one row each.
        filepath: Destination path (e.g., 'results/attitudes.csv').
        labels: Optional row labels; defaults to the row index.

    Returns:
        The path written.
    """
    if not quaternions:
        raise ValueError("Quaternion sequence is empty. Nothing to save.")

    path = Path(filepath)
    # Ensure the directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame([q.as_array() for q in quaternions], columns=COLUMNS)
    label_list = list(labels) if labels is not None else [str(i) for i in range(len(df))]
    if len(label_list) != len(df):
        raise ValueError(
            f"Got {len(label_list)} labels for {len(df)} quaternions."
        )
    df.insert(0, "label", label_list)
    df.to_csv(path, index=False, float_format="%.17g")
    return path


def load_quaternions(filepath: str | Path) -> list[Quaternion]:
    """
    Loads quaternions written by :func:`save_quaternions` (or any CSV with
    a, b, c, d columns).
    """
    df = pd.read_csv(filepath, float_precision="round_trip")
    missing = [col for col in COLUMNS if col not in df.columns]
    if missing:
        raise KeyError(f"Columns {missing} not found in CSV.")
    return [Quaternion(*row) for row in df[COLUMNS].itertuples(index=False, name=None)]
