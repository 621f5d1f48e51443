"""Taxonomy serialization: nested JSON and flattened tables."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pandas as pd

from application.constants import (
    CATEGORY_COL,
    CATEGORY_ID_COL,
    ITEM_COL,
    ITEM_ID_COL,
    SUBCATEGORY_COL,
    SUBCATEGORY_ID_COL,
    TABLE_COLUMNS,
)
from domain.schemas import Category
from infrastructure.config import ExportFormat
from infrastructure.io import write_table

logger = logging.getLogger(__name__)


def taxonomy_to_dict(categories: Sequence[Category]) -> list[dict[str, Any]]:
    """Plain JSON-ready structure (children as lists)."""
    return [cat.model_dump(mode="json") for cat in categories]


def flatten_taxonomy(categories: Sequence[Category]) -> list[dict[str, str]]:
    """
    One row per item, in tree order.

    Empty subcategories (and categories without subcategories) still get a row, with
    blank item (and subcategory) cells, so the table describes the whole tree.
    """
    rows: list[dict[str, str]] = []
    for cat in categories:
        if not cat.subcategories:
            rows.append(_row(cat.name, cat.id))
        for sub in cat.subcategories:
            if not sub.items:
                rows.append(_row(cat.name, cat.id, sub.name, sub.id))
            for item in sub.items:
                rows.append(_row(cat.name, cat.id, sub.name, sub.id, item.name, item.id))
    return rows


def _row(
    category: str,
    category_id: str,
    subcategory: str = "",
    subcategory_id: str = "",
    item: str = "",
    item_id: str = "",
) -> dict[str, str]:
    return {
        CATEGORY_COL: category,
        CATEGORY_ID_COL: category_id,
        SUBCATEGORY_COL: subcategory,
        SUBCATEGORY_ID_COL: subcategory_id,
        ITEM_COL: item,
        ITEM_ID_COL: item_id,
    }


def taxonomy_to_frame(categories: Sequence[Category]) -> pd.DataFrame:
    return pd.DataFrame(flatten_taxonomy(categories), columns=TABLE_COLUMNS)


def write_taxonomy_json(categories: Sequence[Category], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(taxonomy_to_dict(categories), f, ensure_ascii=False, indent=2)
    logger.info("Saved taxonomy JSON: %s", path)
    return path


def export_taxonomy_table(
    categories: Sequence[Category],
    output_dir: Path,
    basename: str,
    fmt: ExportFormat = ExportFormat.CSV,
) -> Path:
    """Write the flattened taxonomy as ``<basename>.<fmt>`` under ``output_dir``."""
    path = write_table(taxonomy_to_frame(categories), output_dir / f"{basename}.{fmt.value}")
    logger.info("Saved taxonomy table: %s", path)
    return path
