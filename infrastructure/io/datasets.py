"""Tabular I/O for flattened taxonomies (CSV and Excel)."""

from pathlib import Path

import pandas as pd

EXCEL_SUFFIXES = (".xlsx", ".xls")


def read_table(path: Path) -> pd.DataFrame:
    """
    Load a flat taxonomy table, every cell as a string.

    Blank cells stay empty strings (not NaN) so that names like "NA" or "None"
    survive a round trip.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the suffix is neither CSV nor Excel
    """
    if not path.exists():
        raise FileNotFoundError(f"Table not found: {path}")

    suffix = path.suffix.lower()
    if suffix in EXCEL_SUFFIXES:
        return pd.read_excel(path, dtype=str, keep_default_na=False)
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    raise ValueError(f"Unsupported table format: {suffix}. Supported formats: .csv, .xlsx, .xls")


def write_table(df: pd.DataFrame, path: Path) -> Path:
    """Write ``df`` as CSV or Excel depending on the suffix of ``path``."""
    suffix = path.suffix.lower()
    path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".xlsx":
        df.to_excel(path, index=False)
    elif suffix == ".csv":
        df.to_csv(path, index=False, encoding="utf-8")
    else:
        raise ValueError(f"Unsupported table format: {suffix}. Supported formats: .csv, .xlsx")
    return path
