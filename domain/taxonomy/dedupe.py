"""Recursive first-occurrence-wins deduplication of a taxonomy tree."""

from collections.abc import Iterable
from typing import TypeVar

from domain.schemas import Category, Item, Subcategory

NodeT = TypeVar("NodeT", Item, Subcategory, Category)


def unique_by_id(nodes: Iterable[NodeT]) -> list[NodeT]:
    """Keep the first node of each id, preserving first-seen order."""
    seen: set[str] = set()
    out: list[NodeT] = []
    for node in nodes:
        k = node.id
        if k in seen:
            continue
        seen.add(k)
        out.append(node)
    return out


def dedupe_items(items: Iterable[Item]) -> tuple[Item, ...]:
    return tuple(unique_by_id(items))


def dedupe_subcategories(subs: Iterable[Subcategory]) -> tuple[Subcategory, ...]:
    return tuple(
        sub.model_copy(update={"items": dedupe_items(sub.items)}) for sub in unique_by_id(subs)
    )


def dedupe_categories(categories: Iterable[Category]) -> list[Category]:
    """
    Collapse sibling duplicates at every level of the tree.

    Order matters to consumers that render options in tree order, so the first
    occurrence of each id stays where it was and later ones are dropped.
    """
    return [
        cat.model_copy(update={"subcategories": dedupe_subcategories(cat.subcategories)})
        for cat in unique_by_id(categories)
    ]
