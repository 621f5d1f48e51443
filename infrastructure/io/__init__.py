"""Tabular import/export of flattened taxonomies."""

from infrastructure.io.datasets import read_table, write_table

__all__ = [
    "read_table",
    "write_table",
]
