# pipeline/staging/report_writer.py
#
# Read the document export and write audit reports.
#
# Design decisions:
#   - The rest of the audit never calls polars I/O directly, so the input and
#     report formats stay swappable.
#   - The export is read with every column as text. Inferring types would turn
#     "00123456000191" into an integer and lose the leading zeros.
#   - Report format follows the path suffix (.parquet or .csv).
from __future__ import annotations

from pathlib import Path

import polars as pl


def read_documents_csv(path: Path) -> pl.DataFrame:
    """Read a CSV export with all columns as strings.

    Raises:
        FileNotFoundError: if ``path`` does not exist (raised by Polars).
    """
    return pl.read_csv(path, infer_schema_length=0)


def write_report(df: pl.DataFrame, path: Path) -> Path:
    """Write *df* to *path*, creating parent directories as needed.

    Raises:
        ValueError: if the suffix is neither ``.parquet`` nor ``.csv``.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".parquet":
        df.write_parquet(path)
    elif path.suffix == ".csv":
        df.write_csv(path)
    else:
        raise ValueError(f"Formato de relatorio nao suportado: {path.suffix!r}")
    return path


def read_report(path: Path) -> pl.DataFrame:
    if path.suffix == ".csv":
        return pl.read_csv(path, infer_schema_length=0)
    return pl.read_parquet(path)
