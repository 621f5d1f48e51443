"""Split compound categories into one independent category per target name."""

import logging
from collections.abc import Mapping, Sequence

from domain.schemas import Category
from domain.taxonomy.builders import make_category
from domain.taxonomy.dedupe import unique_by_id
from domain.taxonomy.rules import SPLIT_TABLE

logger = logging.getLogger(__name__)


def split_category(category: Category, targets: Sequence[str]) -> list[Category]:
    """Clone ``category``'s subtree under each target name."""
    return [
        make_category(name, (sub.model_copy(deep=True) for sub in category.subcategories))
        for name in targets
    ]


def split_categories(
    categories: Sequence[Category],
    split_table: Mapping[str, Sequence[str]] = SPLIT_TABLE,
) -> list[Category]:
    """
    Replace each compound category with its split targets.

    Categories whose id is not in ``split_table`` pass through unchanged. The result
    is deduplicated by category id, so a target that already exists earlier in the
    list keeps the earlier node.

    Args:
        categories: Canonical categories
        split_table: Source category id -> ordered target display names

    Returns:
        New list of categories
    """
    out: list[Category] = []
    for cat in categories:
        targets = split_table.get(cat.id)
        if not targets:
            out.append(cat)
            continue
        logger.debug("Splitting %r into %s", cat.name, list(targets))
        out.extend(split_category(cat, targets))
    return unique_by_id(out)
