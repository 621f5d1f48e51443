"""Content-based re-partitioning of items between related categories.

Runs after the splitter: where the splitter blindly clones a compound category, a
specialization rule rebuilds one of the clones keeping only the items that belong
to it according to a name predicate.
"""

import logging
from collections.abc import Iterable, Sequence

from domain.schemas import Category, Item, Subcategory
from domain.taxonomy.builders import make_subcategory
from domain.taxonomy.merger import merge_items
from domain.taxonomy.rules import SPECIALIZATION_RULES, SpecializationRule
from domain.taxonomy.slug import slugify

logger = logging.getLogger(__name__)


def _first_by_id(subs: Iterable[Subcategory]) -> dict[str, Subcategory]:
    index: dict[str, Subcategory] = {}
    for sub in subs:
        index.setdefault(sub.id, sub)
    return index


def specialize_category(category: Category, rule: SpecializationRule) -> Category:
    """Rebuild ``category``'s subcategories according to ``rule``."""
    by_id = _first_by_id(category.subcategories)

    # target id -> (target name, kept items); several routes may feed one target
    routed: dict[str, tuple[str, tuple[Item, ...]]] = {}
    for route in rule.routes:
        source = by_id.get(slugify(route.source))
        if source is None:
            continue
        kept = [it for it in source.items if rule.keeps(it.name)]
        if not kept:
            continue
        target_id = slugify(route.target)
        name, items = routed.get(target_id, (route.target, ()))
        routed[target_id] = (name, merge_items(items, kept))

    subs = [make_subcategory(name, items) for name, items in routed.values()]
    subs.extend(by_id[slugify(name)] for name in rule.carry if slugify(name) in by_id)

    if rule.placeholder and not any(sub.items for sub in subs):
        subs = [make_subcategory(rule.placeholder)]

    return category.model_copy(update={"subcategories": tuple(subs)})


def specialize_categories(
    categories: Sequence[Category],
    rules: Iterable[SpecializationRule] = SPECIALIZATION_RULES,
) -> list[Category]:
    """
    Apply specialization rules to the categories they name.

    Categories without a rule are returned unchanged.

    Args:
        categories: Categories after splitting
        rules: Specialization rules, matched by category id

    Returns:
        New list of categories, same order as the input
    """
    by_category = {rule.category_id: rule for rule in rules}
    out: list[Category] = []
    for cat in categories:
        rule = by_category.get(cat.id)
        if rule is None:
            out.append(cat)
            continue
        specialized = specialize_category(cat, rule)
        logger.debug(
            "Specialized %r: %d -> %d subcategories",
            cat.name,
            len(cat.subcategories),
            len(specialized.subcategories),
        )
        out.append(specialized)
    return out
