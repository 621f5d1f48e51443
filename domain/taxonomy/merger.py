"""Deep merge of two canonical taxonomy trees, keyed by identifier."""

import logging
from collections.abc import Sequence

from domain.schemas import Category, Item, Subcategory

logger = logging.getLogger(__name__)


def _first_positions(nodes: Sequence[Subcategory] | Sequence[Category]) -> dict[str, int]:
    # Duplicates already in the base fold into their first occurrence
    index: dict[str, int] = {}
    for i, node in enumerate(nodes):
        index.setdefault(node.id, i)
    return index


def merge_items(base: Sequence[Item], additions: Sequence[Item]) -> tuple[Item, ...]:
    """Append the items whose id is not yet present."""
    seen = {it.id for it in base}
    out = list(base)
    for it in additions:
        if it.id not in seen:
            seen.add(it.id)
            out.append(it)
    return tuple(out)


def merge_subcategories(
    base: Sequence[Subcategory],
    additions: Sequence[Subcategory],
) -> tuple[Subcategory, ...]:
    """Union subcategories by id, merging the items of those present on both sides."""
    out = list(base)
    index = _first_positions(out)
    for sub in additions:
        pos = index.get(sub.id)
        if pos is None:
            index[sub.id] = len(out)
            out.append(sub)
        else:
            current = out[pos]
            out[pos] = current.model_copy(update={"items": merge_items(current.items, sub.items)})
    return tuple(out)


def merge_categories(base: Sequence[Category], additions: Sequence[Category]) -> list[Category]:
    """
    Union an additions tree into a base tree without duplicating or removing nodes.

    Matching is by identifier at every level (never by raw name), so case or accent
    variants of the same name collapse into the node that came first. Base order is
    kept; new nodes are appended in the order they appear in ``additions``.
    Merging the same additions twice is a no-op the second time.

    Args:
        base: Canonical base categories
        additions: Canonical categories to fold in

    Returns:
        New list of categories; inputs are left untouched
    """
    out = list(base)
    index = _first_positions(out)
    appended = 0
    for cat in additions:
        pos = index.get(cat.id)
        if pos is None:
            index[cat.id] = len(out)
            out.append(cat)
            appended += 1
        else:
            current = out[pos]
            out[pos] = current.model_copy(
                update={"subcategories": merge_subcategories(current.subcategories, cat.subcategories)}
            )
    logger.debug(
        "Merged %d addition categories into %d base categories (%d new)",
        len(additions),
        len(base),
        appended,
    )
    return out
