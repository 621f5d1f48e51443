"""File source: raw taxonomy records stored as YAML/JSON or as a flat table."""

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd
import yaml

from infrastructure.config.models import RunConfig, SourceKind
from infrastructure.io import read_table

from .base import TaxonomySource, ensure_record_list
from .registry import register_source

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ("category", "subcategory", "item")
TABLE_SUFFIXES = (".csv", ".xlsx", ".xls")


def records_from_table(df: pd.DataFrame) -> list[dict[str, Any]]:
    """
    Group a flat (category, subcategory, item) table into nested raw records.

    Rows keep their order; an empty item cell declares the subcategory only, and an
    empty subcategory cell declares the category only.
    """
    missing = [c for c in TABLE_COLUMNS if c not in df.columns]
    if missing:
        raise KeyError(f"Required columns {missing} not found in table. Found: {list(df.columns)}")

    categories: dict[str, dict[str, list[str]]] = {}
    for row in df[list(TABLE_COLUMNS)].fillna("").itertuples(index=False):
        cat, sub, item = (str(v).strip() for v in row)
        if not cat:
            continue
        subs = categories.setdefault(cat, {})
        if not sub:
            continue
        items = subs.setdefault(sub, [])
        if item:
            items.append(item)

    return [
        {"nome": cat, "subcategorias": [{"nome": sub, "itens": items} for sub, items in subs.items()]}
        for cat, subs in categories.items()
    ]


class FileSource(TaxonomySource):
    """
    Read category records from a file.

    - ``.yaml``/``.yml``/``.json``: a list of raw records (or ``{"categorias": [...]}``)
    - ``.csv``/``.xlsx``/``.xls``: a flat table with category, subcategory and item columns
    """

    kind = SourceKind.FILE

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def from_cfg(cls, cfg: RunConfig) -> "FileSource":
        if cfg.file is None:
            raise ValueError("source=file but cfg.file is missing")
        return cls(cfg.file.path)

    @property
    def description(self) -> str:
        return f"file:{self.path}"

    def fetch_records(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            raise FileNotFoundError(f"Taxonomy file not found: {self.path}")

        suffix = self.path.suffix.lower()
        if suffix in TABLE_SUFFIXES:
            records = records_from_table(read_table(self.path))
            logger.debug("Read %d records from table %s", len(records), self.path)
            return records

        text = self.path.read_text(encoding="utf-8")
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        elif suffix == ".json":
            data = json.loads(text)
        else:
            raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .yaml, .yml, .json, .csv, .xlsx, .xls")

        if isinstance(data, dict) and "categorias" in data:
            data = data["categorias"]
        records = ensure_record_list(data, str(self.path))
        logger.debug("Read %d records from %s", len(records), self.path)
        return records


register_source(SourceKind.FILE, FileSource)
