"""Human-readable summaries of a built taxonomy."""

import logging
from collections.abc import Sequence
from typing import Any

from domain.schemas import Category

logger = logging.getLogger(__name__)


def summarize_taxonomy(categories: Sequence[Category]) -> dict[str, Any]:
    """Node counts overall and per category."""
    per_category = {
        cat.name: {
            "subcategories": len(cat.subcategories),
            "items": sum(len(sub.items) for sub in cat.subcategories),
        }
        for cat in categories
    }
    return {
        "categories": len(categories),
        "subcategories": sum(v["subcategories"] for v in per_category.values()),
        "items": sum(v["items"] for v in per_category.values()),
        "per_category": per_category,
    }


def log_taxonomy_summary(summary: dict[str, Any], *, source: str, loading: bool) -> None:
    logger.info("=" * 60)
    logger.info("TAXONOMY (source=%s, loading=%s)", source, loading)
    logger.info(
        "Categories: %d | Subcategories: %d | Items: %d",
        summary["categories"],
        summary["subcategories"],
        summary["items"],
    )
    for name, counts in summary["per_category"].items():
        logger.info("  %-40s %3d subcategories %4d items", name, counts["subcategories"], counts["items"])
    logger.info("=" * 60)
