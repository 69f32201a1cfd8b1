"""
CSV logging for quaternion sequences.

Buffers rows in memory and writes in batches to minimize I/O overhead.
Implements context manager protocol for safe resource handling.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, TextIO

from quatkit.core.quaternion import Quaternion


class CSVLogger:
    """
    Buffered CSV logger for quaternion snapshots (e.g. an attitude history).

    Parameters
    ----------
    filepath : str | Path
        Output CSV file path
    buffer_size : int
        Number of rows to buffer before writing.
    fields : list[str] | None
        Columns to log per row. Default: ["q", "norm", "unit"]
        Options: "q" (components a, b, c, d), "norm" (magnitude),
                 "unit" (1 if unit quaternion else 0)

    Notes
    -----
    Context manager (recommended):

    >>> with CSVLogger("attitude.csv") as logger:  # doctest: +SKIP
    ...     for step in range(num_steps):
    ...         q.multiply_in_place(dq)
    ...         logger.log(step, q)

    Manual management:

    >>> logger = CSVLogger("attitude.csv")  # doctest: +SKIP
    >>> logger.log(0, q)  # doctest: +SKIP
    >>> logger.close()  # doctest: +SKIP

    A closed logger cannot be reused; create a new one for a new file.
    """

    VALID_FIELDS = ("q", "norm", "unit")

    def __init__(
        self,
        filepath: str | Path,
        buffer_size: int = 1000,
        fields: list[str] | None = None
    ) -> None:
        self.filepath = Path(filepath)
        self.buffer_size = buffer_size
        self.fields = fields if fields is not None else list(self.VALID_FIELDS)

        invalid = set(self.fields) - set(self.VALID_FIELDS)
        if invalid:
            raise ValueError(
                f"Invalid fields: {invalid}. Valid options: {set(self.VALID_FIELDS)}"
            )

        self._buffer: list[list[str]] = []
        self._file: TextIO | None = None
        self._writer: Any = None  # csv.writer is a function, not a type
        self._header_written = False
        self._closed = False

        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def __enter__(self) -> CSVLogger:
        """Open file for writing."""
        if self._closed:
            raise ValueError("logger is closed")
        self._file = open(self.filepath, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close file, flushing any remaining data."""
        self.close()

    def _write_header(self) -> None:
        hdr = ["step"]
        for field in self.fields:
            if field == "q":
                hdr.extend(["a", "b", "c", "d"])
            else:
                hdr.append(field)

        self._writer.writerow(hdr)
        self._file.flush()
        self._header_written = True

    def log(self, step: int | float, q: Quaternion) -> None:
        """
        Log one quaternion snapshot to the buffer.

        Automatically opens the file on first call if not using the context
        manager. Writes to disk when the buffer is full.
        """
        if self._closed:
            raise ValueError("logger is closed")
        if self._file is None:
            self.__enter__()

        if not self._header_written:
            self._write_header()

        row = [str(step)]
        for field in self.fields:
            if field == "q":
                row.extend(f"{v:.10e}" for v in q)
            elif field == "norm":
                row.append(f"{q.norm():.10e}")
            elif field == "unit":
                row.append("1" if q.is_unit_quaternion() else "0")

        self._buffer.append(row)

        if len(self._buffer) >= self.buffer_size:
            self.flush()

    def flush(self) -> None:
        """Write buffered data to disk and clear buffer."""
        if self._writer and self._buffer:
            self._writer.writerows(self._buffer)
            if self._file:
                self._file.flush()
            self._buffer.clear()

    def close(self) -> None:
        """Flush remaining data and close file."""
        self.flush()
        if self._file:
            self._file.close()
            self._file = None
            self._writer = None
        self._closed = True
