"""Shape normalization: heterogeneous raw records -> canonical Category tree.

Raw records come from several historical formats (Portuguese/English field names,
items nested under different keys, bare strings in place of objects). Each level
resolves its children through an explicit, ordered list of extraction strategies;
the first strategy that returns a value wins.
"""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from domain.schemas import Category, Item, Subcategory
from domain.taxonomy.builders import make_category, make_item, make_subcategory

logger = logging.getLogger(__name__)

# Field fallback orders. Legacy data depends on these exact sequences.
NAME_FIELDS: tuple[str, ...] = ("nome", "name")
CATEGORY_CHILD_FIELDS: tuple[str, ...] = ("subcategorias", "subs", "grupos", "itens")
SUBCATEGORY_ITEM_FIELDS: tuple[str, ...] = ("itens", "subitens", "items")
LEGACY_ITEM_FIELD = "subcategorias"

# Synthetic subcategory holding a category's children when they arrive as plain strings
DEFAULT_SUBCATEGORY_NAME = "Geral"

Strategy = Callable[[Any], Any | None]


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def array_field(field: str) -> Strategy:
    """Strategy: return ``record[field]`` as a list when it is an array, else None."""

    def extract(record: Any) -> list[Any] | None:
        if isinstance(record, Mapping):
            value = record.get(field)
            if _is_array(value):
                return list(value)
        return None

    extract.__name__ = f"array_field_{field}"
    return extract


def scalar_field(field: str) -> Strategy:
    """Strategy: return ``record[field]`` when present and not None."""

    def extract(record: Any) -> Any | None:
        if isinstance(record, Mapping):
            return record.get(field)
        return None

    extract.__name__ = f"scalar_field_{field}"
    return extract


def bare_scalar(record: Any) -> str | int | float | None:
    """Strategy: the record itself, when it is a plain string or number."""
    if isinstance(record, bool):
        return None
    return record if isinstance(record, (str, int, float)) else None


def first_match(strategies: Iterable[Strategy], record: Any) -> Any | None:
    """Run strategies in order and return the first non-None result."""
    for strategy in strategies:
        value = strategy(record)
        if value is not None:
            return value
    return None


NAME_STRATEGIES: tuple[Strategy, ...] = tuple(scalar_field(f) for f in NAME_FIELDS)
ITEM_NAME_STRATEGIES: tuple[Strategy, ...] = (*NAME_STRATEGIES, bare_scalar)
CATEGORY_CHILD_STRATEGIES: tuple[Strategy, ...] = tuple(array_field(f) for f in CATEGORY_CHILD_FIELDS)
SUBCATEGORY_ITEM_STRATEGIES: tuple[Strategy, ...] = tuple(array_field(f) for f in SUBCATEGORY_ITEM_FIELDS)


def _name_of(record: Any, strategies: Sequence[Strategy] = NAME_STRATEGIES) -> str:
    value = first_match(strategies, record)
    if value is None or isinstance(value, (Mapping, list, tuple)):
        return ""
    return str(value).strip()


def _to_items(raw: Iterable[Any]) -> list[Item]:
    items = (make_item(_name_of(v, ITEM_NAME_STRATEGIES)) for v in raw if v)
    return [it for it in items if it.id]


def normalize_item(raw: Any) -> Item | None:
    """Normalize a single item record (string or ``{nome|name}`` mapping)."""
    item = make_item(_name_of(raw, ITEM_NAME_STRATEGIES))
    return item if item.id else None


def normalize_subcategory(raw: Any) -> Subcategory | None:
    """
    Normalize one subcategory record.

    A bare string becomes a subcategory holding one item of the same name. For
    mappings, the first array among ``SUBCATEGORY_ITEM_FIELDS`` is the item source;
    when it is missing or empty, a legacy ``subcategorias`` array is used instead.
    """
    if isinstance(raw, str):
        item = normalize_item(raw)
        if item is None:
            return None
        return Subcategory(name=item.name, id=item.id, items=(item,))

    name = _name_of(raw)
    raw_items = first_match(SUBCATEGORY_ITEM_STRATEGIES, raw) or []
    if not raw_items:
        raw_items = array_field(LEGACY_ITEM_FIELD)(raw) or []

    sub = make_subcategory(name, _to_items(raw_items))
    return sub if sub.id else None


def normalize_category(raw: Any) -> Category | None:
    """
    Normalize one category record; returns None when it has no usable name.

    Children are looked up through ``CATEGORY_CHILD_FIELDS``. An array made only of
    strings is wrapped into a single ``"Geral"`` subcategory; so is a missing or empty
    one, which yields an empty ``"Geral"``.
    """
    name = _name_of(raw)
    raw_subs = first_match(CATEGORY_CHILD_STRATEGIES, raw) or []

    if all(isinstance(s, str) for s in raw_subs):
        subs = [make_subcategory(DEFAULT_SUBCATEGORY_NAME, _to_items(raw_subs))]
    else:
        subs = [s for s in (normalize_subcategory(r) for r in raw_subs if r) if s is not None]

    cat = make_category(name, subs)
    return cat if cat.id else None


def normalize_categories(records: Iterable[Any] | None) -> list[Category]:
    """
    Normalize raw category records into canonical Category nodes.

    Best-effort: unrecognized shapes yield empty child collections and nameless
    nodes are dropped. Never raises on bad data.

    Args:
        records: Raw records (mappings or strings); None is treated as empty

    Returns:
        Categories in input order (not deduplicated)
    """
    if records is None or isinstance(records, (str, Mapping)):
        return []
    try:
        raw = list(records)
    except TypeError:
        return []

    out = [c for c in (normalize_category(r) for r in raw) if c is not None]
    logger.debug("Normalized %d raw records into %d categories", len(raw), len(out))
    return out
